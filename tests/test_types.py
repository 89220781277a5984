"""Tests for _types module."""
import pytest

from clickerengine._types import (
    U64_MAX,
    checked_sub,
    compare,
    saturating_add,
    saturating_mul,
    saturating_pow,
)


def test_saturating_add():
    assert saturating_add(2, 3) == 5
    assert saturating_add(U64_MAX - 1, 5) == U64_MAX
    assert saturating_add(U64_MAX, U64_MAX) == U64_MAX


def test_saturating_mul():
    assert saturating_mul(6, 7) == 42
    assert saturating_mul(2**40, 2**40) == U64_MAX
    assert saturating_mul(0, U64_MAX) == 0


def test_saturating_pow():
    assert saturating_pow(2, 0) == 1
    assert saturating_pow(2, 10) == 1024
    assert saturating_pow(10, 19) == 10**19
    assert saturating_pow(10, 20) == U64_MAX
    assert saturating_pow(10, 10_000) == U64_MAX


def test_checked_sub():
    assert checked_sub(10, 3) == 7
    assert checked_sub(10, 10) == 0
    assert checked_sub(3, 10) is None


def test_compare_operators():
    assert compare(5, ">=", 3)
    assert compare(3, ">=", 3)
    assert not compare(2, ">=", 3)

    assert compare(3, "<=", 5)
    assert not compare(4, "<=", 3)

    assert compare(5, ">", 3)
    assert not compare(3, ">", 3)

    assert compare(3, "<", 5)
    assert not compare(3, "<", 3)

    assert compare(3, "==", 3)
    assert compare(3, "!=", 4)


def test_compare_unknown_operator():
    with pytest.raises(ValueError, match="Unknown operator"):
        compare(1, "??", 2)
