"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchOptions:
    """Tolerances applied when comparing a candidate with an expected object."""

    ignore_type_mismatch: bool
    ignore_extra_properties: bool
    ignored_property_names: frozenset[str]
