"""Reflective property-by-property equality matcher."""

from __future__ import annotations

from typing import Any, TypeVar

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.string_description import StringDescription

from extended_matchers.configuration.errors import ConfigurationError
from extended_matchers.configuration.runtime_settings import MatchOptions
from extended_matchers.property_introspection import (
    PropertyNotFoundError,
    property_descriptors_for,
    property_names_for,
    read_property,
)

from .matching_outcomes import PropertyMatchResult
from .property_comparators import PropertyComparator

T = TypeVar("T")


class SamePropertyValuesAs(BaseMatcher[T]):
    """Matches objects whose readable properties equal those of an expected object.

    The expected object is introspected once, here. Each match then runs three
    stages and stops at the first failure: type compatibility, extra
    properties on the candidate, and the property values themselves.
    """

    def __init__(self, expected: T, options: MatchOptions) -> None:
        if expected is None:
            raise ConfigurationError(
                "Cannot build a property matcher from None: it has no properties."
            )
        descriptors = property_descriptors_for(expected)
        self.expected = expected
        self.options = options
        self.property_names = frozenset(descriptor.name for descriptor in descriptors)
        self.comparators = tuple(
            PropertyComparator(descriptor.name, _read_expected_value(descriptor.name, expected))
            for descriptor in descriptors
        )

    def matches(self, item: Any, mismatch_description: Description | None = None) -> bool:
        return self._evaluate(item, mismatch_description)

    def _matches(self, item: Any) -> bool:
        return self._evaluate(item, None)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        self._evaluate(item, mismatch_description)

    def describe_to(self, description: Description) -> None:
        description.append_text(
            f"same property values as {type(self.expected).__name__}"
        ).append_list(" [", ", ", "]", self.comparators)

    def evaluate(self, item: Any) -> PropertyMatchResult:
        """Match ``item`` and return the outcome with its mismatch text."""
        description = StringDescription()
        matched = self._evaluate(item, description)
        return PropertyMatchResult(matched=matched, mismatch=None if matched else str(description))

    def _evaluate(self, item: Any, mismatch_description: Description | None) -> bool:
        if item is None:
            if mismatch_description is not None:
                super().describe_mismatch(item, mismatch_description)
            return False
        if not self.options.ignore_type_mismatch and not self._is_compatible_type(
            item, mismatch_description
        ):
            return False
        if not self.options.ignore_extra_properties and not self._has_no_extra_properties(
            item, mismatch_description
        ):
            return False
        return self._has_matching_values(item, mismatch_description)

    def _is_compatible_type(self, item: Any, mismatch_description: Description | None) -> bool:
        if isinstance(item, type(self.expected)):
            return True
        if mismatch_description is not None:
            mismatch_description.append_text(f"is incompatible type: {type(item).__name__}")
        return False

    def _has_no_extra_properties(
        self, item: Any, mismatch_description: Description | None
    ) -> bool:
        extra_names = property_names_for(item) - self.property_names
        if not extra_names:
            return True
        if mismatch_description is not None:
            mismatch_description.append_text(
                f"has extra properties called [{', '.join(sorted(extra_names))}]"
            )
        return False

    def _has_matching_values(self, item: Any, mismatch_description: Description | None) -> bool:
        ignored = self.options.ignored_property_names
        for comparator in self.comparators:
            if comparator.property_name in ignored:
                continue
            try:
                actual_value = read_property(comparator.property_name, item)
            except PropertyNotFoundError:
                # candidates may be partially shaped
                continue
            if not comparator.matches(actual_value):
                if mismatch_description is not None:
                    comparator.describe_mismatch(actual_value, mismatch_description)
                return False
        return True


def _read_expected_value(name: str, expected: object) -> object:
    try:
        return read_property(name, expected)
    except PropertyNotFoundError:
        return None
