"""Zero-argument operations expected to fail."""

from __future__ import annotations

from typing import Protocol


class ThrowingRunnable(Protocol):
    """Operation taking no arguments that may raise."""

    def __call__(self) -> object: ...
