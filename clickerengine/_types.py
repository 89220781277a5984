from __future__ import annotations

import operator
from typing import Callable, NewType

HandId = NewType("HandId", int)
ClickerId = NewType("ClickerId", int)

U64_MAX = 2**64 - 1
U32_MAX = 2**32 - 1


def saturating_add(left: int, right: int, limit: int = U64_MAX) -> int:
    """Add two non-negative integers, clamping at *limit*."""
    return min(left + right, limit)


def saturating_mul(left: int, right: int, limit: int = U64_MAX) -> int:
    """Multiply two non-negative integers, clamping at *limit*."""
    return min(left * right, limit)


def saturating_pow(base: int, exponent: int, limit: int = U64_MAX) -> int:
    """Raise *base* to *exponent* without building numbers far past *limit*."""
    result = 1
    for _ in range(exponent):
        result *= base
        if result >= limit:
            return limit
    return result


def checked_sub(left: int, right: int) -> int | None:
    """Subtract, or return None if the result would be negative."""
    if right > left:
        return None
    return left - right


_OPS: dict[str, Callable[[float, float], bool]] = {
    ">=": operator.ge,
    "<=": operator.le,
    ">": operator.gt,
    "<": operator.lt,
    "==": operator.eq,
    "!=": operator.ne,
}


def compare(left: float, op: str, right: float) -> bool:
    """Compare two values using a string operator."""
    fn = _OPS.get(op)
    if fn is None:
        raise ValueError(f"Unknown operator: {op!r}. Expected one of {list(_OPS)}")
    return fn(left, right)
