"""Structural and tolerance-based comparison of test values."""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from enum import Enum
from typing import Any

import numpy as np


class ValueKind(str, Enum):
    ABSENT = "absent"
    SEQUENCE = "sequence"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    OPAQUE = "opaque"


_REAL_KINDS = (ValueKind.INTEGER, ValueKind.FLOAT)


def _unwrap(value: Any) -> Any:
    # 0-d arrays behave like the scalar they hold
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value.item()
    return value


def classify(value: Any) -> ValueKind:
    """Return the kind the comparator uses to decide how to compare a value."""
    value = _unwrap(value)
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, np.ndarray):
        return ValueKind.SEQUENCE
    if isinstance(value, (str, bytes, bytearray)):
        return ValueKind.TEXT if isinstance(value, str) else ValueKind.OPAQUE
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, (float, np.floating)):
        return ValueKind.FLOAT
    return ValueKind.OPAQUE


def canonical_compare(a: float, b: float) -> int:
    """Compare two floats under a total order.

    Unlike ``==``, NaN compares equal to NaN (and above every other value),
    and ``-0.0`` sorts below ``0.0``. Returns -1, 0 or 1.
    """
    a = float(a)
    b = float(b)
    if a < b:
        return -1
    if a > b:
        return 1
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)
    sign_a = math.copysign(1.0, a)
    sign_b = math.copysign(1.0, b)
    return (sign_a > sign_b) - (sign_a < sign_b)


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality over scalars, opaque values and nested sequences.

    Sequences are equal when they have the same length and every pair of
    elements is ``deep_equal``; a sequence never equals a non-sequence.
    Floats are compared with :func:`canonical_compare`, so NaN equals itself.
    """
    if a is b:
        return True
    a = _unwrap(a)
    b = _unwrap(b)
    kind_a = classify(a)
    kind_b = classify(b)

    if kind_a is ValueKind.ABSENT or kind_b is ValueKind.ABSENT:
        return kind_a is kind_b
    if kind_a is ValueKind.SEQUENCE and kind_b is ValueKind.SEQUENCE:
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    if ValueKind.SEQUENCE in (kind_a, kind_b):
        return False
    if kind_a is ValueKind.FLOAT and kind_b is ValueKind.FLOAT:
        return canonical_compare(a, b) == 0
    if ValueKind.BOOLEAN in (kind_a, kind_b):
        return kind_a is kind_b and bool(a) == bool(b)
    return bool(a == b)


def same_reference(a: Any, b: Any) -> bool:
    """Identity comparison: True only if both names refer to one object."""
    return a is b


def validate_epsilon(epsilon: float) -> float:
    """Return epsilon as a float, rejecting negative or NaN tolerances."""
    value = float(epsilon)
    if not value >= 0.0:
        raise ValueError(f"epsilon must be a non-negative number, got {epsilon!r}")
    return value


def _is_real(value: Any, kind: ValueKind) -> bool:
    if kind in _REAL_KINDS:
        return True
    return kind is ValueKind.OPAQUE and isinstance(value, numbers.Real)


def _within(a: Any, b: Any, epsilon: float) -> bool:
    if a is b:
        return True
    a = _unwrap(a)
    b = _unwrap(b)
    kind_a = classify(a)
    kind_b = classify(b)

    if kind_a is ValueKind.ABSENT or kind_b is ValueKind.ABSENT:
        return kind_a is kind_b
    if kind_a is ValueKind.SEQUENCE and kind_b is ValueKind.SEQUENCE:
        if len(a) != len(b):
            return False
        return all(_within(x, y, epsilon) for x, y in zip(a, b))
    if ValueKind.SEQUENCE in (kind_a, kind_b):
        return False
    if not (_is_real(a, kind_a) and _is_real(b, kind_b)):
        raise TypeError(
            "tolerance comparison requires real numbers, got "
            f"{type(a).__name__} and {type(b).__name__}"
        )
    if kind_a is ValueKind.INTEGER and kind_b is ValueKind.INTEGER:
        # ints compare exactly at any magnitude
        x = int(a)
        y = int(b)
        return x == y or abs(x - y) <= epsilon
    x = float(a)
    y = float(b)
    if canonical_compare(x, y) == 0:
        return True
    return abs(x - y) <= epsilon


def tolerance_equal(a: Any, b: Any, epsilon: float) -> bool:
    """Float equality within ``epsilon``, applied element-wise at any rank.

    Two reals match if :func:`canonical_compare` says they are the same or
    their absolute difference is at most ``epsilon``. Sequences match when
    they have the same length and every pair of elements matches.

    Raises:
        ValueError: epsilon is negative or NaN.
        TypeError: a leaf is not a real number (booleans included).
    """
    return _within(a, b, validate_epsilon(epsilon))


def display(value: Any) -> str:
    """Render a value for a failure message; sequences become nested brackets.

    A sequence that contains itself renders the repeated part as ``[...]``.
    """
    return _render(value, set())


def _render(value: Any, active: set[int]) -> str:
    value = _unwrap(value)
    kind = classify(value)
    if kind is ValueKind.ABSENT:
        return "None"
    if kind is ValueKind.SEQUENCE:
        if id(value) in active:
            return "[...]"
        active.add(id(value))
        try:
            return "[" + ", ".join(_render(item, active) for item in value) + "]"
        finally:
            active.discard(id(value))
    if kind is ValueKind.BOOLEAN:
        return str(bool(value))
    if kind in _REAL_KINDS:
        return str(value)
    return repr(value)
