"""Input sanitization and validation.

Every function here is pure and total: it never raises, whatever it is given,
and always hands back a ``ValidationResult``. A result with errors must not be
persisted; callers check ``is_valid`` before trusting ``sanitized``.
"""

import re
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from polly.domain.model.poll import (
    MAX_OPTION_LENGTH,
    MAX_OPTIONS,
    MAX_QUESTION_LENGTH,
    MIN_OPTIONS,
    MIN_QUESTION_LENGTH,
)

T = TypeVar("T")

# Ampersand must come first so entities produced by later replacements are
# not escaped a second time.
_HTML_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
    ("/", "&#x2F;"),
)
_TEXT_ESCAPES = _HTML_ESCAPES[:-1]  # text keeps "/"

_TAG_PATTERN = re.compile(r"<[^>]*>")
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_NAME_PATTERN = re.compile(r"[a-zA-Z\s'-]+")

MAX_EMAIL_LENGTH = 254
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100


class ValidationResult(BaseModel, Generic[T]):
    """Sanitized value plus the ordered list of human-readable errors."""

    model_config = ConfigDict(frozen=True)

    sanitized: T
    errors: list[str] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _escape(value: str, table: tuple[tuple[str, str], ...]) -> str:
    for char, entity in table:
        value = value.replace(char, entity)
    return value


def _strip_tags(value: str) -> str:
    return _TAG_PATTERN.sub("", value)


def sanitize_html(value: Any) -> str:
    """Escape ``& < > " ' /`` to HTML entities.

    Not idempotent: a second pass escapes the ampersands of the first.
    Non-string input yields an empty string.
    """
    if not isinstance(value, str):
        return ""
    return _escape(value, _HTML_ESCAPES)


def sanitize_text(value: Any) -> str:
    """Remove tag-shaped ``<...>`` runs, then escape like ``sanitize_html`` minus ``/``."""
    if not isinstance(value, str):
        return ""
    return _escape(_strip_tags(value), _TEXT_ESCAPES)


def validate_poll_question(question: Any) -> ValidationResult[str]:
    """Validate and sanitize a poll question."""
    errors: list[str] = []
    sanitized = sanitize_text(question).strip()

    if not sanitized:
        errors.append("Poll question is required")
    elif len(sanitized) < MIN_QUESTION_LENGTH:
        errors.append(
            f"Poll question must be at least {MIN_QUESTION_LENGTH} characters long"
        )
    elif len(sanitized) > MAX_QUESTION_LENGTH:
        errors.append(
            f"Poll question must be less than {MAX_QUESTION_LENGTH} characters"
        )

    return ValidationResult[str](sanitized=sanitized, errors=errors)


def validate_poll_options(options: Any) -> ValidationResult[list[str]]:
    """Validate and sanitize a list of poll options.

    A wrong option count short-circuits with a single error and no sanitized
    options. Otherwise each empty or over-long option gets its own 1-based
    error and is left out of ``sanitized``; a single duplicate error is
    appended if any sanitized options collide.
    """
    if not isinstance(options, (list, tuple)) or len(options) < MIN_OPTIONS:
        return ValidationResult[list[str]](
            sanitized=[], errors=[f"At least {MIN_OPTIONS} options are required"]
        )

    if len(options) > MAX_OPTIONS:
        return ValidationResult[list[str]](
            sanitized=[], errors=[f"Maximum {MAX_OPTIONS} options allowed"]
        )

    errors: list[str] = []
    sanitized: list[str] = []

    for position, raw in enumerate(options, start=1):
        option = sanitize_text(raw).strip()

        if not option:
            errors.append(f"Option {position} cannot be empty")
        elif len(option) > MAX_OPTION_LENGTH:
            errors.append(
                f"Option {position} must be less than {MAX_OPTION_LENGTH} characters"
            )
        else:
            sanitized.append(option)

    if len(set(sanitized)) != len(sanitized):
        errors.append("Duplicate options are not allowed")

    return ValidationResult[list[str]](sanitized=sanitized, errors=errors)


def validate_email(email: Any) -> ValidationResult[str]:
    """Normalize (trim, lowercase) and validate an email address."""
    errors: list[str] = []
    sanitized = email.strip().lower() if isinstance(email, str) else ""

    if not sanitized:
        errors.append("Email is required")
    elif not _EMAIL_PATTERN.fullmatch(sanitized):
        errors.append("Please enter a valid email address")
    elif len(sanitized) > MAX_EMAIL_LENGTH:
        errors.append("Email address is too long")

    return ValidationResult[str](sanitized=sanitized, errors=errors)


def validate_password(password: Any) -> ValidationResult[str]:
    """Validate password strength.

    Passwords are not display values, so ``sanitized`` is the input unchanged.
    Rules are checked in order and only the first violation is reported.
    """
    errors: list[str] = []
    value = password if isinstance(password, str) else ""

    if not value:
        errors.append("Password is required")
    elif len(value) < MIN_PASSWORD_LENGTH:
        errors.append(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    elif len(value) > MAX_PASSWORD_LENGTH:
        errors.append("Password is too long")
    elif not re.search(r"[a-z]", value):
        errors.append("Password must contain at least one lowercase letter")
    elif not re.search(r"[A-Z]", value):
        errors.append("Password must contain at least one uppercase letter")
    elif not re.search(r"[0-9]", value):
        errors.append("Password must contain at least one number")

    return ValidationResult[str](sanitized=value, errors=errors)


def validate_name(name: Any) -> ValidationResult[str]:
    """Validate and sanitize a display name.

    Length and character checks run on the tag-stripped text, before entity
    escaping, so "O'Brien" is accepted and counts as seven characters.
    """
    errors: list[str] = []
    stripped = _strip_tags(name).strip() if isinstance(name, str) else ""
    sanitized = sanitize_text(name).strip()

    if not stripped:
        errors.append("Name is required")
    elif len(stripped) < MIN_NAME_LENGTH:
        errors.append(f"Name must be at least {MIN_NAME_LENGTH} characters long")
    elif len(stripped) > MAX_NAME_LENGTH:
        errors.append(f"Name must be less than {MAX_NAME_LENGTH} characters")
    elif not _NAME_PATTERN.fullmatch(stripped):
        errors.append(
            "Name can only contain letters, spaces, hyphens, and apostrophes"
        )

    return ValidationResult[str](sanitized=sanitized, errors=errors)
