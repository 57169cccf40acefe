"""Matcher asserting that an operation raises a matching exception."""

from __future__ import annotations

from typing import Any

from hamcrest import all_of, instance_of
from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher

from .throwing_runnables import ThrowingRunnable


class FailsWith(BaseMatcher[ThrowingRunnable]):
    """Matches operations that raise an exception accepted by ``matcher``.

    The operation runs once per ``matches`` call. The outcome of the last run
    is kept so that describing the mismatch for the same operation does not
    run it again.
    """

    def __init__(self, matcher: Matcher[Any]) -> None:
        self.matcher = matcher
        self._last_runnable: object = None
        self._last_raised: BaseException | None = None

    def _matches(self, item: Any) -> bool:
        if not callable(item):
            return False
        raised = _run(item)
        self._last_runnable = item
        self._last_raised = raised
        if raised is None:
            return False
        return self.matcher.matches(raised)

    def describe_to(self, description: Description) -> None:
        description.append_text("fails with ").append_description_of(self.matcher)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if not callable(item):
            mismatch_description.append_text("was ").append_description_of(item).append_text(
                ", which is not callable"
            )
            return
        if item is self._last_runnable:
            raised = self._last_raised
        else:
            raised = _run(item)
        if raised is None:
            mismatch_description.append_text("completed without raising")
            return
        mismatch_description.append_text(f"raised {raised!r}: ")
        self.matcher.describe_mismatch(raised, mismatch_description)


def fails_with(
    exception_type: type[BaseException], matcher: Matcher[Any] | None = None
) -> Matcher[ThrowingRunnable]:
    """Match an operation that raises ``exception_type``.

    Args:
      exception_type: Exception class the raised failure must be an instance of.
      matcher: Optional further matcher applied to the raised exception.

    Example:
      ``assert_that(lambda: int("x"), fails_with(ValueError))``
    """
    if matcher is None:
        return FailsWith(instance_of(exception_type))
    return FailsWith(all_of(instance_of(exception_type), matcher))


def _run(runnable: ThrowingRunnable) -> BaseException | None:
    try:
        runnable()
    except BaseException as exc:  # pylint: disable=broad-exception-caught
        return exc
    return None
