"""Assertion checks for test procedures."""

from testy.assertions.base import TestFailure
from testy.assertions.checks import (
    assert_equals,
    assert_false,
    assert_none,
    assert_not_equals,
    assert_not_none,
    assert_not_same,
    assert_same,
    assert_true,
    fail,
)

__all__ = [
    "TestFailure",
    "assert_equals",
    "assert_false",
    "assert_none",
    "assert_not_equals",
    "assert_not_none",
    "assert_not_same",
    "assert_same",
    "assert_true",
    "fail",
]
