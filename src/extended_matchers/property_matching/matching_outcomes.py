"""Property matching outcome entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PropertyMatchResult:
    """Outcome of comparing one candidate with an expected object."""

    matched: bool
    mismatch: str | None
