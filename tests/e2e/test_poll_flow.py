"""End-to-end tests for creating, voting on and managing polls."""

import pytest
from fastapi.testclient import TestClient

from tests.harness import create_test_client, sign_up_and_login

POLL = {"question": "Tea or coffee?", "options": ["Tea", "Coffee"]}


@pytest.fixture
def client():
    """Create test client signed in as Alice."""
    client = create_test_client()
    sign_up_and_login(client)
    return client


@pytest.fixture
def other_client(client: TestClient):
    """Second client on the same app, signed in as Bob."""
    other = TestClient(client.app)
    sign_up_and_login(other, email="bob@example.com", name="Bob", ip="203.0.113.20")
    return other


def create_poll(client: TestClient, body: dict = POLL) -> dict:
    response = client.post("/polls", json=body)
    assert response.status_code == 201, response.json()
    return response.json()


class TestCreatePoll:
    """Poll creation through the API."""

    def test_create_and_fetch(self, client: TestClient):
        # Act
        response = client.post("/polls", json=POLL)
        created = response.json()
        fetched = client.get(f"/polls/{created['poll_id']}")

        # Assert
        assert fetched.status_code == 200
        assert fetched.json()["question"] == "Tea or coffee?"
        assert fetched.json()["votes"] == [0, 0]
        assert fetched.json()["is_owner"] is True
        assert response.status_code == 201
        assert response.headers["X-RateLimit-Limit"] == "3"
        assert response.headers["X-RateLimit-Remaining"] == "2"
        assert int(response.headers["X-RateLimit-Reset"]) > 0
        assert "rate_limit" not in created

    def test_markup_is_neutralized(self, client: TestClient):
        created = create_poll(
            client,
            {"question": "<script>alert(1)</script> ok?", "options": ["<b>A</b>", "B"]},
        )

        assert created["question"] == "alert(1) ok?"
        assert created["options"] == ["A", "B"]

    def test_validation_errors(self, client: TestClient):
        response = client.post("/polls", json={"question": "", "options": ["A", "A"]})

        assert response.status_code == 422
        assert response.json() == {
            "error": "Poll question is required",
            "errors": [
                "Poll question is required",
                "Duplicate options are not allowed",
            ],
        }

    def test_requires_session(self):
        anonymous = create_test_client()

        response = anonymous.post("/polls", json=POLL)

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    def test_fourth_poll_in_a_minute_is_rate_limited(self, client: TestClient):
        for _ in range(3):
            create_poll(client)

        response = client.post("/polls", json=POLL)

        assert response.status_code == 429
        assert response.headers["X-RateLimit-Limit"] == "3"
        assert response.json()["retryAfter"] > 0


class TestListPolls:
    """Listing polls through the API."""

    def test_list_carries_api_rate_limit_headers(self, client: TestClient):
        create_poll(client)

        response = client.get("/polls")

        assert response.status_code == 200
        assert response.json()["total"] == 1
        assert response.headers["X-RateLimit-Limit"] == "30"
        assert response.headers["X-RateLimit-Remaining"] == "29"


class TestVoting:
    """Voting through the API."""

    def test_vote_and_see_results(self, client: TestClient, other_client: TestClient):
        # Arrange
        poll_id = create_poll(client)["poll_id"]

        # Act
        mine = client.post(f"/polls/{poll_id}/vote", json={"option_index": 1})
        theirs = other_client.post(f"/polls/{poll_id}/vote", json={"option_index": 1})

        # Assert
        assert mine.status_code == 201
        assert theirs.status_code == 201
        assert client.get(f"/polls/{poll_id}").json()["votes"] == [0, 2]

    def test_second_vote_conflicts(self, client: TestClient):
        poll_id = create_poll(client)["poll_id"]
        client.post(f"/polls/{poll_id}/vote", json={"option_index": 0})

        response = client.post(f"/polls/{poll_id}/vote", json={"option_index": 1})

        assert response.status_code == 409
        assert response.json() == {"error": "You have already voted on this poll"}

    def test_invalid_option(self, client: TestClient):
        poll_id = create_poll(client)["poll_id"]

        response = client.post(f"/polls/{poll_id}/vote", json={"option_index": 5})

        assert response.status_code == 422
        assert response.json()["errors"] == ["Please select a valid option"]

    def test_missing_poll(self, client: TestClient):
        response = client.post(
            "/polls/00000000-0000-0000-0000-000000000000/vote",
            json={"option_index": 0},
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Poll not found"}


class TestOwnership:
    """Only the owner may change or delete a poll."""

    def test_non_owner_delete_is_forbidden(
        self, client: TestClient, other_client: TestClient
    ):
        # Arrange
        poll_id = create_poll(client)["poll_id"]

        # Act
        response = other_client.delete(f"/polls/{poll_id}")

        # Assert
        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden"}
        assert client.get(f"/polls/{poll_id}").status_code == 200

    def test_missing_poll_delete_looks_the_same(self, client: TestClient):
        response = client.delete("/polls/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden"}

    def test_non_owner_update_is_forbidden(
        self, client: TestClient, other_client: TestClient
    ):
        poll_id = create_poll(client)["poll_id"]

        response = other_client.patch(
            f"/polls/{poll_id}",
            json={"question": "Hijacked?", "options": ["Yes", "No"]},
        )

        assert response.status_code == 403
        assert client.get(f"/polls/{poll_id}").json()["question"] == "Tea or coffee?"

    def test_owner_updates_and_deletes(self, client: TestClient):
        # Arrange
        poll_id = create_poll(client)["poll_id"]

        # Act
        updated = client.patch(
            f"/polls/{poll_id}",
            json={"question": "Coffee or tea?", "options": ["Coffee", "Tea"]},
        )
        deleted = client.delete(f"/polls/{poll_id}")

        # Assert
        assert updated.status_code == 200
        assert updated.json()["question"] == "Coffee or tea?"
        assert deleted.status_code == 200
        assert deleted.json()["deleted"] is True
        assert client.get(f"/polls/{poll_id}").status_code == 404

    def test_invalid_updates_do_not_spend_api_budget(self, client: TestClient):
        # Arrange
        poll_id = create_poll(client)["poll_id"]
        invalid = {"question": "", "options": ["A"]}

        # Act
        statuses = [
            client.patch(f"/polls/{poll_id}", json=invalid).status_code
            for _ in range(31)
        ]
        valid = client.patch(
            f"/polls/{poll_id}",
            json={"question": "Coffee or tea?", "options": ["Coffee", "Tea"]},
        )

        # Assert
        assert statuses == [422] * 31
        assert valid.status_code == 200
        assert valid.headers["X-RateLimit-Remaining"] == "29"
