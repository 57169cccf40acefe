"""Exception-outcome matcher tests."""

from __future__ import annotations

import sys

import pytest
from extended_matchers.failure_matching import FailsWith, fails_with
from hamcrest import assert_that, contains_string, has_property, has_string, instance_of
from hamcrest.core.string_description import StringDescription


class InsufficientFundsError(Exception):
    def __init__(self, shortfall: int) -> None:
        super().__init__(f"short by {shortfall}")
        self.shortfall = shortfall


def _withdraw() -> None:
    raise InsufficientFundsError(5)


def _noop() -> None:
    return None


def _mismatch(matcher, item: object) -> str:
    description = StringDescription()
    matcher.describe_mismatch(item, description)
    return str(description)


def test_matches_operation_raising_expected_kind() -> None:
    assert fails_with(InsufficientFundsError).matches(_withdraw)
    assert fails_with(Exception).matches(_withdraw)
    assert fails_with(ValueError).matches(lambda: int("x"))


def test_refines_match_with_additional_matcher() -> None:
    assert fails_with(InsufficientFundsError, has_string(contains_string("by 5"))).matches(
        _withdraw
    )
    assert not fails_with(InsufficientFundsError, has_string(contains_string("by 7"))).matches(
        _withdraw
    )


def test_operation_completing_normally_does_not_match() -> None:
    matcher = fails_with(InsufficientFundsError)

    assert not matcher.matches(_noop)
    assert _mismatch(matcher, _noop) == "completed without raising"


def test_operation_raising_other_kind_does_not_match() -> None:
    matcher = fails_with(KeyError)

    assert not matcher.matches(_withdraw)
    assert _mismatch(matcher, _withdraw).startswith(
        "raised InsufficientFundsError('short by 5'): "
    )


def test_non_callable_item_does_not_match() -> None:
    matcher = FailsWith(instance_of(Exception))

    assert not matcher.matches(42)
    assert _mismatch(matcher, 42) == "was <42>, which is not callable"


def test_describes_expected_failure() -> None:
    description = StringDescription()

    fails_with(ValueError).describe_to(description)

    assert str(description) == "fails with an instance of ValueError"


def test_assert_that_reports_operation_without_failure() -> None:
    with pytest.raises(AssertionError, match="completed without raising"):
        assert_that(_noop, fails_with(ZeroDivisionError))

    assert_that(lambda: 1 / 0, fails_with(ZeroDivisionError))


def test_matches_operations_raising_system_exit_and_keyboard_interrupt() -> None:
    def _interrupt() -> None:
        raise KeyboardInterrupt

    assert fails_with(SystemExit).matches(lambda: sys.exit(2))
    assert fails_with(SystemExit, has_property("code", 2)).matches(lambda: sys.exit(2))
    assert fails_with(KeyboardInterrupt).matches(_interrupt)
    assert not fails_with(ValueError).matches(lambda: sys.exit(2))


def test_failed_assertion_runs_operation_once() -> None:
    calls: list[int] = []

    def _flaky() -> None:
        calls.append(1)
        if len(calls) == 1:
            raise KeyError("first")
        raise InsufficientFundsError(len(calls))

    with pytest.raises(AssertionError) as excinfo:
        assert_that(_flaky, fails_with(InsufficientFundsError))

    assert len(calls) == 1
    assert "raised KeyError('first'): " in str(excinfo.value)


def test_describes_mismatch_for_operation_not_yet_matched() -> None:
    matcher = fails_with(KeyError)

    assert not matcher.matches(_noop)
    assert _mismatch(matcher, _withdraw).startswith(
        "raised InsufficientFundsError('short by 5'): "
    )
