"""Tests for the assertion checks."""

import numpy as np
import pytest

from testy.assertions import (
    TestFailure,
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


# --- TestFailure ---


def test_failure_without_message():
    failure = TestFailure()
    assert failure.message is None
    assert str(failure) == ""
    assert isinstance(failure, AssertionError)


def test_failure_with_empty_message_is_distinct():
    assert TestFailure("").message == ""
    assert TestFailure(None).message is None


# --- fail / assert_true / assert_false ---


def test_fail_carries_message():
    with pytest.raises(TestFailure) as exc_info:
        fail("Fail 1")
    assert exc_info.value.message == "Fail 1"


def test_fail_none_has_no_message():
    with pytest.raises(TestFailure) as exc_info:
        fail(None)
    assert exc_info.value.message is None


def test_fail_default_message_is_empty():
    with pytest.raises(TestFailure) as exc_info:
        fail()
    assert exc_info.value.message == ""


def test_assert_true():
    assert_true(True)
    with pytest.raises(TestFailure) as exc_info:
        assert_true(False, "assert_true")
    assert exc_info.value.message == "assert_true"


def test_assert_false():
    assert_false(False)
    with pytest.raises(TestFailure, match="assert_false"):
        assert_false(True, "assert_false")


# --- assert_equals / assert_not_equals ---


def test_assert_equals_message_names_both_values():
    with pytest.raises(TestFailure) as exc_info:
        assert_equals(2, 3, "msg")
    message = exc_info.value.message
    assert "msg" in message
    assert "2" in message
    assert "3" in message


def test_assert_equals_message_layout():
    with pytest.raises(TestFailure) as exc_info:
        assert_equals([1, 1], [1, 0], "ints")
    assert exc_info.value.message == (
        "ints\nexpected:  [1, 1]\nactual:    [1, 0]"
    )


def test_assert_equals_without_message_omits_first_line():
    with pytest.raises(TestFailure) as exc_info:
        assert_equals("two", "one")
    assert exc_info.value.message == "expected:  'two'\nactual:    'one'"


def test_assert_equals_passes_on_equal_values():
    assert_equals("one", "".join(["o", "n", "e"]))
    assert_equals(None, None)
    assert_equals([[1, 2]], [[1, 2]])
    assert_equals(np.array([1, 2]), [1, 2])


def test_assert_equals_nested_sequence_mismatch():
    with pytest.raises(TestFailure) as exc_info:
        assert_equals([[1, 2]], [[3, 4]])
    assert "[[1, 2]]" in exc_info.value.message
    assert "[[3, 4]]" in exc_info.value.message


def test_assert_not_equals():
    assert_not_equals("one", "two")
    with pytest.raises(TestFailure) as exc_info:
        assert_not_equals("one", "".join(["o", "ne"]), "assert_not_equals")
    assert exc_info.value.message.startswith("assert_not_equals\nunexpected:")


def test_assert_equals_with_epsilon_passes_within_tolerance():
    assert_equals(1.30, 1.301, "msg", epsilon=0.01)


def test_assert_equals_with_epsilon_fails_outside_tolerance():
    with pytest.raises(TestFailure) as exc_info:
        assert_equals(1.30, 1.40, "msg", epsilon=0.01)
    message = exc_info.value.message
    assert "1.3" in message
    assert "1.4" in message
    assert "epsilon:   0.01" in message


def test_assert_equals_with_epsilon_on_matrices():
    assert_equals([[1.3, 1.3]], [[1.3, 1.301]], epsilon=0.01)
    with pytest.raises(TestFailure):
        assert_equals([[[[1.3, 1.3]]]], [[[[1.3, 1.5]]]], epsilon=0.01)


def test_assert_not_equals_with_epsilon():
    assert_not_equals(1.3, 1.4, epsilon=0.01)
    with pytest.raises(TestFailure):
        assert_not_equals([1.3, 1.3], [1.3, 1.3], epsilon=0.01)


def test_assert_equals_negative_epsilon_is_caller_error():
    with pytest.raises(ValueError):
        assert_equals(1.0, 1.0, epsilon=-1.0)
    with pytest.raises(ValueError):
        assert_not_equals([1.0], [2.0], epsilon=-1.0)


def test_assert_equals_and_not_equals_agree_on_nan():
    nan = float("nan")
    assert_equals(nan, float("nan"))
    assert_equals([nan], [float("nan")], epsilon=0.0)
    with pytest.raises(TestFailure):
        assert_not_equals([[nan]], [[float("nan")]], epsilon=0.1)


# --- assert_same / assert_not_same ---


def test_assert_same():
    value = [1, 2]
    assert_same(value, value)
    with pytest.raises(TestFailure) as exc_info:
        assert_same(value, list(value), "assert_same")
    message = exc_info.value.message
    assert message.startswith("assert_same\nexpected:")
    assert f"{id(value):#x}" in message


def test_assert_not_same():
    value = [1, 2]
    assert_not_same(value, list(value))
    with pytest.raises(TestFailure, match="unexpected"):
        assert_not_same(value, value)


# --- assert_none / assert_not_none ---


def test_assert_none():
    assert_none(None)
    with pytest.raises(TestFailure) as exc_info:
        assert_none("x", "assert_none")
    assert exc_info.value.message == "assert_none : expected None, got 'x'"


def test_assert_none_with_none_message_is_bare():
    with pytest.raises(TestFailure) as exc_info:
        assert_none("x", None)
    assert exc_info.value.message is None


def test_assert_not_none():
    assert_not_none("not null")
    assert_not_none(0)
    with pytest.raises(TestFailure) as exc_info:
        assert_not_none(None, "assert_not_none")
    assert exc_info.value.message == "assert_not_none : expected a value, got None"


def test_self_containing_value_still_gives_failure_message():
    items = [1]
    items.append(items)
    with pytest.raises(TestFailure) as exc:
        assert_equals([1], items, "cycle")
    assert exc.value.message == "cycle\nexpected:  [1]\nactual:    [1, [...]]"
