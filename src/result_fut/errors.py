"""Exceptions raised when a Result is unwrapped as the wrong variant."""

from __future__ import annotations

from typing import Any

__all__ = ["UnwrapError"]


class UnwrapError(RuntimeError):
    """A Result was unwrapped as the variant it is not.

    Raised by ``Err.unwrap()``, ``Err.expect()``, ``Ok.unwrap_err()`` and
    ``Ok.expect_err()``.

    Attributes:
        result: The Ok or Err that was unwrapped.
    """

    def __init__(self, result: Any, message: str) -> None:
        self.result = result
        super().__init__(message)
