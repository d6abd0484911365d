"""Platform configuration checks.

The platform URL and public key must be present and well-formed before the
process counts as configured. Problems are fatal in production and only
logged elsewhere.
"""

import logfire

from polly.config import Settings
from polly.util.error import ConfigurationError

PLATFORM_HOST_SUFFIX = ".supabase.co"


def check_platform_settings(settings: Settings) -> list[str]:
    """List everything wrong with the platform settings.

    Args:
        settings: Application settings

    Returns:
        Human-readable problems, empty when the configuration is usable
    """
    problems: list[str] = []
    url = settings.platform.url
    anon_key = settings.platform.anon_key

    if not url:
        problems.append("PLATFORM__URL is not set")
    elif not url.startswith("https://") or PLATFORM_HOST_SUFFIX not in url:
        problems.append(
            f"PLATFORM__URL must be a valid platform URL (https://*{PLATFORM_HOST_SUFFIX})"
        )

    if not anon_key:
        problems.append("PLATFORM__ANON_KEY is not set")
    elif len(anon_key.split(".")) != 3:
        problems.append("PLATFORM__ANON_KEY must be a valid JWT token")

    return problems


def ensure_platform_configured(settings: Settings) -> None:
    """Fail in production, warn elsewhere, when platform settings are unusable.

    Raises:
        ConfigurationError: In production, if any problem was found
    """
    problems = check_platform_settings(settings)
    if not problems:
        return

    if settings.environment == "production":
        logfire.error("Platform configuration invalid", problems=problems)
        raise ConfigurationError(
            "Invalid platform configuration: " + "; ".join(problems)
        )

    logfire.warn(
        "Platform configuration incomplete",
        environment=settings.environment,
        problems=problems,
    )
