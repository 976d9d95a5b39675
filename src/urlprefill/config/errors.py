"""Errors raised while reading urlprefill settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a setting is present but cannot be used."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required settings are absent or blank."""
