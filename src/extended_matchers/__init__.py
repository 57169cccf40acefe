"""Reflective PyHamcrest matchers for property-by-property comparison."""

from .configuration import ConfigurationError, MatchOptions
from .failure_matching import FailsWith, ThrowingRunnable
from .matchers import fails_with, same_property_values_as, same_property_values_using
from .property_introspection import PropertyAccessError, PropertyNotFoundError
from .property_matching import PropertyMatchResult, SamePropertyValuesAs, compares_equal_to

__all__ = [
    "ConfigurationError",
    "FailsWith",
    "MatchOptions",
    "PropertyAccessError",
    "PropertyMatchResult",
    "PropertyNotFoundError",
    "SamePropertyValuesAs",
    "ThrowingRunnable",
    "compares_equal_to",
    "fails_with",
    "same_property_values_as",
    "same_property_values_using",
]
