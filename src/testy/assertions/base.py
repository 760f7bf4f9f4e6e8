"""Base failure type for the assertion system."""

from __future__ import annotations


class TestFailure(AssertionError):
    """Raised by an assertion check whose condition does not hold.

    Attributes:
        message: Human-readable diagnostic, or None when the failure was
            raised without one. ``TestFailure()`` and ``TestFailure("")``
            are distinct: only the latter carries a message.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, message: str | None = None):
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"TestFailure({self.message!r})"
