"""Configuration errors."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when a matcher cannot be built from the given configuration."""
