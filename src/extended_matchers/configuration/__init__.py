"""Configuration domain exports."""

from .errors import ConfigurationError
from .runtime_settings import MatchOptions

__all__ = [
    "ConfigurationError",
    "MatchOptions",
]
