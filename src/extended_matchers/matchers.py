"""Matcher factories with conventional defaults."""

from __future__ import annotations

from typing import TypeVar

from hamcrest.core.matcher import Matcher

from extended_matchers.configuration.runtime_settings import MatchOptions
from extended_matchers.failure_matching import fails_with
from extended_matchers.property_matching import SamePropertyValuesAs

T = TypeVar("T")

__all__ = [
    "fails_with",
    "same_property_values_as",
    "same_property_values_using",
]


def same_property_values_as(
    expected: T,
    *ignored_property_names: str,
    ignore_type_mismatch: bool = True,
    ignore_extra_properties: bool = True,
) -> Matcher[T]:
    """Match objects whose readable properties equal those of ``expected``.

    Args:
      expected: Object against which candidates are compared.
      *ignored_property_names: Properties of ``expected`` that are not compared.
      ignore_type_mismatch: Accept candidates that are not instances of
        ``type(expected)``.
      ignore_extra_properties: Accept candidates that have properties
        ``expected`` lacks.

    Example:
      ``assert_that(actual, same_property_values_as(expected, "id"))``
    """
    return SamePropertyValuesAs(
        expected,
        MatchOptions(
            ignore_type_mismatch=ignore_type_mismatch,
            ignore_extra_properties=ignore_extra_properties,
            ignored_property_names=frozenset(ignored_property_names),
        ),
    )


def same_property_values_using(expected: T, options: MatchOptions) -> Matcher[T]:
    """Match like ``same_property_values_as`` with an explicit options record."""
    return SamePropertyValuesAs(expected, options)
