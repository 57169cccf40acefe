"""Per-property value comparators."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any

from hamcrest import equal_to
from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher

_LOGGER = logging.getLogger("extended_matchers.property_matching")
_LOGGER.addHandler(logging.NullHandler())


class ComparesEqualTo(BaseMatcher[Decimal]):
    """Matches decimals equal in numeric value, regardless of their exponent."""

    def __init__(self, value: Decimal) -> None:
        self.value = value

    def _matches(self, item: Any) -> bool:
        if item is None:
            return False
        if self.value.is_nan() or _is_decimal_nan(item):
            # NaN only equals NaN
            return self.value.is_nan() and _is_decimal_nan(item)
        return self.value.compare(item) == 0

    def describe_to(self, description: Description) -> None:
        description.append_text("a value equal to ").append_description_of(self.value)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if item is None:
            super().describe_mismatch(item, mismatch_description)
            return
        if self.value.is_nan() or _is_decimal_nan(item):
            relation = "not comparable to"
        elif self.value.compare(item) < 0:
            relation = "greater than"
        else:
            relation = "less than"
        mismatch_description.append_description_of(item).append_text(
            f" was {relation} "
        ).append_description_of(self.value)


def compares_equal_to(value: Decimal) -> Matcher[Decimal]:
    """Match a decimal whose numeric value equals ``value``.

    ``Decimal("2.5")`` satisfies ``compares_equal_to(Decimal("2.50"))``.
    Comparing with a value ``Decimal`` cannot convert, such as a ``str``,
    raises ``TypeError``.
    """
    return ComparesEqualTo(value)


class NotANumber(BaseMatcher[float]):
    """Matches float NaN, which never equals itself under ``==``."""

    def _matches(self, item: Any) -> bool:
        return isinstance(item, float) and math.isnan(item)

    def describe_to(self, description: Description) -> None:
        description.append_text("NaN")


class PropertyComparator(BaseMatcher[Any]):
    """Compares one property value of a candidate with the frozen expected value."""

    def __init__(self, property_name: str, expected_value: object) -> None:
        self.property_name = property_name
        self.value_matcher = value_matcher_for(expected_value)

    def _matches(self, item: Any) -> bool:
        try:
            return self.value_matcher.matches(item)
        except TypeError:
            _LOGGER.error("TypeError occurred for read accessor: %s", self.property_name)
            raise

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        mismatch_description.append_text(f"{self.property_name} ")
        self.value_matcher.describe_mismatch(item, mismatch_description)

    def describe_to(self, description: Description) -> None:
        description.append_text(f"{self.property_name}: ").append_description_of(
            self.value_matcher
        )


def value_matcher_for(expected_value: object) -> Matcher[Any]:
    """Choose the matcher that decides equality for one expected value."""
    if isinstance(expected_value, Decimal):
        return compares_equal_to(expected_value)
    if isinstance(expected_value, float) and math.isnan(expected_value):
        return NotANumber()
    return equal_to(expected_value)


def _is_decimal_nan(value: object) -> bool:
    return isinstance(value, Decimal) and value.is_nan()
