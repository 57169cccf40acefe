"""Failure matching domain exports."""

from .fails_with_matcher import FailsWith, fails_with
from .throwing_runnables import ThrowingRunnable

__all__ = [
    "FailsWith",
    "ThrowingRunnable",
    "fails_with",
]
