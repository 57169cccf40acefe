"""Property matching domain exports."""

from .matching_outcomes import PropertyMatchResult
from .property_comparators import (
    ComparesEqualTo,
    NotANumber,
    PropertyComparator,
    compares_equal_to,
    value_matcher_for,
)
from .same_property_values import SamePropertyValuesAs

__all__ = [
    "ComparesEqualTo",
    "NotANumber",
    "PropertyComparator",
    "PropertyMatchResult",
    "SamePropertyValuesAs",
    "compares_equal_to",
    "value_matcher_for",
]
