"""Tests for type tags, string parsing and type resolution."""

from __future__ import annotations

from fractions import Fraction

import pytest

from parambox.types import (
    BOOL,
    F32,
    F64,
    I8,
    I32,
    I64,
    READABLE_TYPES,
    STR,
    U8,
    U64,
    U128,
    USIZE,
    format_value,
    get_type,
    resolve_type,
)


def test_readable_types_are_unique_and_ordered():
    names = [t.name for t in READABLE_TYPES]
    assert names[0] == "bool"
    assert names[-1] == "str"
    assert len(set(names)) == len(names)
    assert all(t.readable for t in READABLE_TYPES)


def test_get_type_is_case_insensitive_and_none_safe():
    assert get_type("i32") is I32
    assert get_type("  I32 ") is I32
    assert get_type("") is None
    assert get_type(None) is None  # type: ignore[arg-type]
    assert get_type("i256") is None


def test_resolve_type_forms():
    assert resolve_type(I32) is I32
    assert resolve_type("u8") is U8
    assert resolve_type(bool) is BOOL
    assert resolve_type(int) is I64
    assert resolve_type(float) is F64
    assert resolve_type(str) is STR

    with pytest.raises(ValueError, match="Unknown parameter type"):
        resolve_type("decimal")
    with pytest.raises(TypeError):
        resolve_type(3)  # type: ignore[arg-type]


def test_custom_class_gets_one_unreadable_tag():
    tag = resolve_type(Fraction)
    assert resolve_type(Fraction) is tag
    assert tag.name == "Fraction"
    assert not tag.readable
    assert tag.accepts(Fraction(1, 2))
    assert not tag.accepts(0.5)
    with pytest.raises(ValueError):
        tag.parse("1/2")


def test_integer_width_is_enforced():
    assert U8.accepts(0) and U8.accepts(255)
    assert not U8.accepts(256)
    assert not U8.accepts(-1)
    assert I8.accepts(-128) and not I8.accepts(128)
    assert U128.accepts(2**128 - 1)
    assert not I32.accepts(True)
    assert not I32.accepts(1.0)


def test_float_tags_accept_ints_and_coerce():
    assert F64.accepts(3)
    assert not F64.accepts(True)
    assert F64.coerce(3) == 3.0
    assert isinstance(F64.coerce(3), float)


@pytest.mark.parametrize(
    "tag,text,expected",
    [
        (BOOL, "true", True),
        (BOOL, "false", False),
        (I32, "-43", -43),
        (I32, "+7", 7),
        (U8, "255", 255),
        (F64, "5.66", 5.66),
        (F32, "1e3", 1000.0),
        (STR, "Apple", "Apple"),
    ],
)
def test_parse_valid_literals(tag, text, expected):
    assert tag.parse(text) == expected


@pytest.mark.parametrize(
    "tag,text",
    [
        (BOOL, "True"),
        (BOOL, "1"),
        (I32, "4.0"),
        (I32, "1_000"),
        (I32, "0x10"),
        (U8, "256"),
        (U8, "-1"),
        (U8, "-0"),
        (U64, "-5"),
        (USIZE, "-0"),
        (F64, "1_0.5"),
        (F64, "hello"),
    ],
)
def test_parse_rejects_invalid_literals(tag, text):
    with pytest.raises(ValueError):
        tag.parse(text)


def test_format_value():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(50) == "50"
    assert format_value(2.5) == "2.5"
    assert format_value(50.0) == "50"
    assert format_value(-3.0) == "-3"
    assert format_value(1e20) == "100000000000000000000"
    assert format_value("x") == "x"


def test_sign_prefixes_still_accepted():
    assert U8.parse("+5") == 5
    assert I8.parse("-0") == 0
