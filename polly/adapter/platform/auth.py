"""Auth platform client implementation.

Talks to the platform's REST auth API (``/auth/v1``) over httpx.
"""

from typing import Any
from uuid import uuid4

import httpx
import logfire

from polly.adapter.error import PlatformError
from polly.config import PlatformSettings
from polly.domain.service.auth_service import AuthClient
from polly.domain.value import PlatformSession, PlatformUser
from polly.util.jwt import create_token


class PlatformAuthClient(AuthClient):
    """Base class for auth platform clients.

    Provides type distinction for dependency injection.
    """

    pass


def _to_user(data: dict[str, Any]) -> PlatformUser:
    metadata = data.get("user_metadata") or {}
    return PlatformUser(
        id=str(data["id"]),
        email=data.get("email"),
        name=metadata.get("name"),
    )


class RealPlatformAuthClient(PlatformAuthClient):
    """Auth client for the managed platform."""

    def __init__(
        self,
        settings: PlatformSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize platform auth client.

        Args:
            settings: Platform URL, keys and timeout
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = settings.url.rstrip("/") + "/auth/v1"
        self.anon_key = settings.anon_key
        self.service_role_key = settings.service_role_key
        self.timeout = settings.timeout_seconds
        self.transport = transport

    def _headers(self, bearer: str | None = None) -> dict[str, str]:
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {bearer or self.anon_key}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send one request, converting every failure into ``PlatformError``."""
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.request(
                    method, url, headers=headers, params=params, json=json
                )
        except httpx.HTTPError as e:
            logfire.error("Platform request failed", path=path, error=str(e))
            raise PlatformError(f"Platform request failed: {e}") from e

        if response.status_code >= 400:
            logfire.warn(
                "Platform returned error",
                path=path,
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise PlatformError(
                f"Platform returned {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise PlatformError("Platform returned invalid JSON") from e

    async def sign_in_with_password(self, email: str, password: str) -> PlatformSession:
        data = await self._request(
            "POST",
            "/token",
            headers=self._headers(),
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )

        try:
            return PlatformSession(
                access_token=data["access_token"],
                refresh_token=data.get("refresh_token"),
                expires_in=data.get("expires_in"),
                user=_to_user(data["user"]),
            )
        except (KeyError, TypeError) as e:
            raise PlatformError(f"Unexpected sign-in response: missing {e}") from e

    async def sign_up(self, email: str, password: str, name: str) -> PlatformUser:
        data = await self._request(
            "POST",
            "/signup",
            headers=self._headers(),
            json={"email": email, "password": password, "data": {"name": name}},
        )

        # Depending on email confirmation settings the user is either the
        # top-level object or nested next to a session
        user_data = data.get("user") or data
        try:
            return _to_user(user_data)
        except (KeyError, TypeError) as e:
            raise PlatformError(f"Unexpected sign-up response: missing {e}") from e

    async def sign_out(self, access_token: str) -> None:
        await self._request("POST", "/logout", headers=self._headers(access_token))

    async def list_users(self) -> list[PlatformUser]:
        if not self.service_role_key:
            raise PlatformError("Service role key is not configured")

        headers = {
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {self.service_role_key}",
        }
        data = await self._request("GET", "/admin/users", headers=headers)

        try:
            return [_to_user(user) for user in data.get("users", [])]
        except (KeyError, TypeError) as e:
            raise PlatformError(f"Unexpected user list response: missing {e}") from e


class MockPlatformAuthClient(PlatformAuthClient):
    """Mock auth client for testing.

    Keeps accounts in memory and issues real signed tokens so the rest of
    the stack verifies them exactly as it would production ones.
    """

    def __init__(self, settings: PlatformSettings) -> None:
        """Initialize mock client without a real platform."""
        self.settings = settings
        self._accounts: dict[str, tuple[str, PlatformUser]] = {}
        self.signed_out: list[str] = []
        self.fail_next = False

    def _maybe_fail(self) -> None:
        if self.fail_next:
            self.fail_next = False
            raise PlatformError("Mock platform failure", status_code=500)

    async def sign_in_with_password(self, email: str, password: str) -> PlatformSession:
        self._maybe_fail()
        account = self._accounts.get(email)
        if account is None or account[0] != password:
            raise PlatformError("Invalid login credentials", status_code=400)

        user = account[1]
        return PlatformSession(
            access_token=create_token(user.id, user.email, user.name, self.settings),
            refresh_token=uuid4().hex,
            expires_in=3600,
            user=user,
        )

    async def sign_up(self, email: str, password: str, name: str) -> PlatformUser:
        self._maybe_fail()
        if email in self._accounts:
            raise PlatformError("User already registered", status_code=422)

        user = PlatformUser(id=str(uuid4()), email=email, name=name)
        self._accounts[email] = (password, user)
        return user

    async def sign_out(self, access_token: str) -> None:
        self._maybe_fail()
        self.signed_out.append(access_token)

    async def list_users(self) -> list[PlatformUser]:
        self._maybe_fail()
        return [user for _, user in self._accounts.values()]
