"""Errors raised while loading configuration."""


class ConfigurationError(Exception):
    """Settings are missing or unusable for the current environment."""
