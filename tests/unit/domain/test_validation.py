"""Unit tests for input sanitization and validation."""

import pytest

from polly.domain.validation import (
    sanitize_html,
    sanitize_text,
    validate_email,
    validate_name,
    validate_password,
    validate_poll_options,
    validate_poll_question,
)

EVENT_HANDLER_PAYLOADS = [
    "<img src=x onerror=alert(1)>",
    "<svg onload=alert(1)>",
    "<body onload=\"alert('x')\">hi",
    "<a href=\"#\" onclick=\"steal()\">click</a>",
    "<<img src=x onerror=alert(1)>>",
]


class TestSanitizeHtml:
    """Tests for sanitize_html."""

    def test_escapes_all_special_characters(self):
        assert sanitize_html("<script>alert(\"x\")</script>") == (
            "&lt;script&gt;alert(&quot;x&quot;)&lt;&#x2F;script&gt;"
        )

    def test_escapes_apostrophe_and_ampersand(self):
        assert sanitize_html("Tom & Jerry's") == "Tom &amp; Jerry&#x27;s"

    def test_non_string_input_yields_empty_string(self):
        assert sanitize_html(None) == ""
        assert sanitize_html(42) == ""
        assert sanitize_html(["<b>"]) == ""

    def test_output_has_no_raw_special_characters(self):
        result = sanitize_html("<a href='/x'>\"q\"</a>")
        for char in "<>\"'/":
            assert char not in result

    @pytest.mark.parametrize("payload", EVENT_HANDLER_PAYLOADS)
    def test_event_handler_markup_loses_angle_brackets(self, payload):
        result = sanitize_html(payload)

        assert "<" not in result
        assert ">" not in result

    def test_is_not_idempotent(self):
        """Escaping twice escapes the ampersands of the first pass."""
        once = sanitize_html("<")
        twice = sanitize_html(once)

        assert once == "&lt;"
        assert twice == "&amp;lt;"


class TestSanitizeText:
    """Tests for sanitize_text."""

    def test_strips_tags_before_escaping(self):
        assert sanitize_text("<b>Hello</b> world") == "Hello world"

    def test_script_tag_contents_survive_as_text(self):
        assert sanitize_text("<script>alert(1)</script>") == "alert(1)"

    @pytest.mark.parametrize("payload", EVENT_HANDLER_PAYLOADS)
    def test_event_handler_markup_loses_angle_brackets(self, payload):
        result = sanitize_text(payload)

        assert "<" not in result
        assert ">" not in result

    def test_keeps_forward_slash(self):
        assert sanitize_text("either/or") == "either/or"

    def test_lone_angle_bracket_is_escaped(self):
        assert sanitize_text("1 < 2") == "1 &lt; 2"

    def test_escapes_quotes_and_ampersand(self):
        assert sanitize_text("\"A\" & 'B'") == "&quot;A&quot; &amp; &#x27;B&#x27;"

    def test_non_string_input_yields_empty_string(self):
        assert sanitize_text(None) == ""


class TestValidatePollQuestion:
    """Tests for validate_poll_question."""

    def test_valid_question_is_trimmed(self):
        result = validate_poll_question("  What is your favourite colour?  ")

        assert result.is_valid
        assert result.sanitized == "What is your favourite colour?"

    def test_empty_question(self):
        result = validate_poll_question("   ")

        assert result.errors == ["Poll question is required"]

    def test_tags_only_question_is_empty(self):
        result = validate_poll_question("<b></b>")

        assert result.errors == ["Poll question is required"]

    def test_too_short(self):
        result = validate_poll_question("Why?")

        assert result.errors == ["Poll question must be at least 5 characters long"]

    def test_exactly_minimum_length_is_valid(self):
        assert validate_poll_question("Why??").is_valid

    def test_exactly_maximum_length_is_valid(self):
        assert validate_poll_question("a" * 500).is_valid

    def test_too_long(self):
        result = validate_poll_question("a" * 501)

        assert result.errors == ["Poll question must be less than 500 characters"]

    def test_length_is_measured_after_sanitizing(self):
        """Escaping can push a question over the limit."""
        result = validate_poll_question("&" * 101)

        assert result.sanitized == "&amp;" * 101
        assert result.errors == ["Poll question must be less than 500 characters"]

    def test_non_string_question(self):
        result = validate_poll_question(None)

        assert result.errors == ["Poll question is required"]


class TestValidatePollOptions:
    """Tests for validate_poll_options."""

    def test_valid_options(self):
        result = validate_poll_options([" Red ", "Green", "<i>Blue</i>"])

        assert result.is_valid
        assert result.sanitized == ["Red", "Green", "Blue"]

    def test_too_few_options_short_circuits(self):
        result = validate_poll_options(["Only"])

        assert result.errors == ["At least 2 options are required"]
        assert result.sanitized == []

    def test_non_list_counts_as_too_few(self):
        result = validate_poll_options("Red, Green")

        assert result.errors == ["At least 2 options are required"]

    def test_too_many_options_short_circuits(self):
        result = validate_poll_options([f"Option {i}" for i in range(11)])

        assert result.errors == ["Maximum 10 options allowed"]
        assert result.sanitized == []

    def test_ten_options_is_valid(self):
        assert validate_poll_options([f"Option {i}" for i in range(10)]).is_valid

    def test_empty_option_reports_one_based_position(self):
        result = validate_poll_options(["Red", "  ", "Blue"])

        assert result.errors == ["Option 2 cannot be empty"]
        assert result.sanitized == ["Red", "Blue"]

    def test_long_option_reports_position(self):
        result = validate_poll_options(["Red", "x" * 201])

        assert result.errors == ["Option 2 must be less than 200 characters"]

    def test_every_bad_option_is_reported(self):
        result = validate_poll_options(["", "x" * 201, "Blue"])

        assert result.errors == [
            "Option 1 cannot be empty",
            "Option 2 must be less than 200 characters",
        ]

    def test_duplicates_detected_after_sanitizing(self):
        result = validate_poll_options(["Yes", "<b>Yes</b>", "No"])

        assert result.errors == ["Duplicate options are not allowed"]

    def test_duplicate_error_follows_option_errors(self):
        result = validate_poll_options(["", "Same", "Same"])

        assert result.errors == [
            "Option 1 cannot be empty",
            "Duplicate options are not allowed",
        ]


class TestValidateEmail:
    """Tests for validate_email."""

    def test_normalizes_case_and_whitespace(self):
        result = validate_email("  Alice@Example.COM ")

        assert result.is_valid
        assert result.sanitized == "alice@example.com"

    def test_missing_email(self):
        assert validate_email("").errors == ["Email is required"]
        assert validate_email(None).errors == ["Email is required"]

    @pytest.mark.parametrize(
        "email", ["alice", "alice@example", "alice @example.com", "@example.com"]
    )
    def test_malformed_email(self, email):
        assert validate_email(email).errors == ["Please enter a valid email address"]

    def test_too_long(self):
        email = "a" * 250 + "@example.com"

        assert validate_email(email).errors == ["Email address is too long"]


class TestValidatePassword:
    """Tests for validate_password."""

    def test_valid_password_is_returned_unchanged(self):
        result = validate_password("Secr3t<Pass>")

        assert result.is_valid
        assert result.sanitized == "Secr3t<Pass>"

    @pytest.mark.parametrize(
        ("password", "error"),
        [
            ("", "Password is required"),
            ("Ab1", "Password must be at least 8 characters long"),
            ("Ab1" + "x" * 126, "Password is too long"),
            ("PASSWORD1", "Password must contain at least one lowercase letter"),
            ("password1", "Password must contain at least one uppercase letter"),
            ("Password", "Password must contain at least one number"),
        ],
    )
    def test_first_failing_rule_is_reported(self, password, error):
        assert validate_password(password).errors == [error]

    def test_only_first_error_is_reported(self):
        """A short all-lowercase password only mentions its length."""
        assert validate_password("abc").errors == [
            "Password must be at least 8 characters long"
        ]


class TestValidateName:
    """Tests for validate_name."""

    def test_valid_name(self):
        result = validate_name("  Mary-Jane Smith ")

        assert result.is_valid
        assert result.sanitized == "Mary-Jane Smith"

    def test_apostrophe_is_allowed(self):
        result = validate_name("O'Brien")

        assert result.is_valid
        assert result.sanitized == "O&#x27;Brien"

    def test_missing_name(self):
        assert validate_name("").errors == ["Name is required"]

    def test_too_short(self):
        assert validate_name("A").errors == ["Name must be at least 2 characters long"]

    def test_too_long(self):
        assert validate_name("a" * 101).errors == [
            "Name must be less than 100 characters"
        ]

    def test_length_ignores_entity_escaping(self):
        name = "O'" + "a" * 94  # 96 characters, escapes to 101

        result = validate_name(name)

        assert result.is_valid
        assert len(result.sanitized) == 101

    @pytest.mark.parametrize("name", ["Alice2", "Bob_Smith", "Al & Bo"])
    def test_disallowed_characters(self, name):
        assert validate_name(name).errors == [
            "Name can only contain letters, spaces, hyphens, and apostrophes"
        ]

    def test_tags_are_stripped_before_checking(self):
        result = validate_name("<b>Alice</b>")

        assert result.is_valid
        assert result.sanitized == "Alice"
