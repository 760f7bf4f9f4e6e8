"""Assertion checks used inside test procedures.

Every check returns ``None`` when its condition holds and raises exactly one
:class:`~testy.assertions.base.TestFailure` otherwise. The ``message``
argument is optional; leaving it out is the same as passing ``""``.
"""

from __future__ import annotations

from typing import Any, NoReturn

from testy.assertions.base import TestFailure
from testy.comparator import (
    deep_equal,
    display,
    same_reference,
    tolerance_equal,
)


def _format_lines(message: str | None, lines: list[tuple[str, str]]) -> str:
    width = max(len(label) for label, _ in lines) + 3
    body = "\n".join(f"{label + ':':<{width}}{text}" for label, text in lines)
    if message:
        return f"{message}\n{body}"
    return body


def _comparison_failure(
    message: str | None,
    first_label: str,
    first: Any,
    second: Any,
    epsilon: float | None = None,
    render=display,
) -> TestFailure:
    lines = [(first_label, render(first)), ("actual", render(second))]
    if epsilon is not None:
        lines.append(("epsilon", str(epsilon)))
    return TestFailure(_format_lines(message, lines))


def _with_identity(value: Any) -> str:
    return f"{display(value)} (id {id(value):#x})"


def fail(message: str | None = "") -> NoReturn:
    """Fail unconditionally. ``fail(None)`` raises a failure with no message."""
    raise TestFailure(message)


def assert_true(condition: bool, message: str | None = "") -> None:
    if not condition:
        fail(message)


def assert_false(condition: bool, message: str | None = "") -> None:
    if condition:
        fail(message)


def assert_equals(
    expected: Any,
    actual: Any,
    message: str | None = "",
    epsilon: float | None = None,
) -> None:
    """Assert two values are equal.

    Without ``epsilon`` the values are compared with
    :func:`~testy.comparator.deep_equal`, which handles scalars, arbitrary
    objects and nested sequences (lists, tuples, numpy arrays) of any depth.
    With ``epsilon`` they are compared with
    :func:`~testy.comparator.tolerance_equal`; a negative epsilon raises
    ``ValueError``.
    """
    if epsilon is None:
        if deep_equal(expected, actual):
            return
    elif tolerance_equal(expected, actual, epsilon):
        return
    raise _comparison_failure(message, "expected", expected, actual, epsilon)


def assert_not_equals(
    unexpected: Any,
    actual: Any,
    message: str | None = "",
    epsilon: float | None = None,
) -> None:
    """Assert two values differ, using the same rules as :func:`assert_equals`."""
    if epsilon is None:
        if not deep_equal(unexpected, actual):
            return
    elif not tolerance_equal(unexpected, actual, epsilon):
        return
    raise _comparison_failure(message, "unexpected", unexpected, actual, epsilon)


def assert_same(expected: Any, actual: Any, message: str | None = "") -> None:
    """Assert both arguments are the very same object."""
    if not same_reference(expected, actual):
        raise _comparison_failure(
            message, "expected", expected, actual, render=_with_identity
        )


def assert_not_same(unexpected: Any, actual: Any, message: str | None = "") -> None:
    """Assert the arguments are distinct objects, even if they compare equal."""
    if same_reference(unexpected, actual):
        raise _comparison_failure(
            message, "unexpected", unexpected, actual, render=_with_identity
        )


def assert_none(value: Any, message: str | None = "") -> None:
    if value is None:
        return
    if message is None:
        raise TestFailure()
    detail = f"expected None, got {display(value)}"
    raise TestFailure(f"{message} : {detail}" if message else detail)


def assert_not_none(value: Any, message: str | None = "") -> None:
    if value is not None:
        return
    detail = "expected a value, got None"
    raise TestFailure(f"{message} : {detail}" if message else detail)
