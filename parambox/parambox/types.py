"""
Type tags for parameter values.

A parameter box stores values of any type behind one interface. Each name is
bound to a ParamType when it is added; every later access is checked against
that tag by identity.

Only the tags in READABLE_TYPES know how to parse a string, so only they can
be populated from parameter files.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable


_INT_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"invalid bool literal: {text!r}")


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.match(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


def _parse_uint(text: str) -> int:
    if text.startswith("-"):
        raise ValueError(f"invalid unsigned literal: {text!r}")
    return _parse_int(text)


def _parse_float(text: str) -> float:
    if "_" in text:
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def _parse_str(text: str) -> str:
    return text


@dataclass(frozen=True, eq=False)
class ParamType:
    """Identity token for the type of a parameter value.

    Tags compare by identity; two tags with the same name are still different
    types.
    """

    name: str
    python_type: type
    bounds: tuple[int, int] | None = None
    parser: Callable[[str], Any] | None = None

    @property
    def readable(self) -> bool:
        """Whether values of this type can be read from parameter files."""
        return self.parser is not None

    def accepts(self, value: Any) -> bool:
        if self.python_type is bool:
            return isinstance(value, bool)
        if self.python_type is int:
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            if self.bounds is not None:
                lo, hi = self.bounds
                return lo <= value <= hi
            return True
        if self.python_type is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, self.python_type)

    def coerce(self, value: Any) -> Any:
        """Normalize an accepted value (ints become floats for float tags)."""
        if self.python_type is float:
            return float(value)
        return value

    def parse(self, text: str) -> Any:
        """Convert a string to a value of this type.

        Raises:
            ValueError: If the text is not a literal of this type, or the tag
                has no parser.
        """
        if self.parser is None:
            raise ValueError(f"{self.name} cannot be parsed from a string")
        value = self.parser(text)
        if not self.accepts(value):
            raise ValueError(f"{text!r} is out of range for {self.name}")
        return self.coerce(value)

    def __repr__(self) -> str:
        return f"ParamType({self.name})"


def _int_type(name: str, bits: int, signed: bool) -> ParamType:
    if signed:
        return ParamType(name, int, (-(1 << (bits - 1)), (1 << (bits - 1)) - 1), _parse_int)
    return ParamType(name, int, (0, (1 << bits) - 1), _parse_uint)


BOOL = ParamType("bool", bool, parser=_parse_bool)
U8 = _int_type("u8", 8, False)
U16 = _int_type("u16", 16, False)
U32 = _int_type("u32", 32, False)
U64 = _int_type("u64", 64, False)
U128 = _int_type("u128", 128, False)
USIZE = _int_type("usize", 64, False)
I8 = _int_type("i8", 8, True)
I16 = _int_type("i16", 16, True)
I32 = _int_type("i32", 32, True)
I64 = _int_type("i64", 64, True)
I128 = _int_type("i128", 128, True)
ISIZE = _int_type("isize", 64, True)
F32 = ParamType("f32", float, parser=_parse_float)
F64 = ParamType("f64", float, parser=_parse_float)
STR = ParamType("str", str, parser=_parse_str)

# Dispatch order used by parameter file ingestion.
READABLE_TYPES: tuple[ParamType, ...] = (
    BOOL,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    F32,
    F64,
    STR,
)

_BY_NAME: dict[str, ParamType] = {t.name: t for t in READABLE_TYPES}

_BUILTIN_CLASSES: dict[type, ParamType] = {
    bool: BOOL,
    int: I64,
    float: F64,
    str: STR,
}

# Custom classes get one tag each, created on first use.
_CUSTOM: dict[type, ParamType] = {}


def get_type(name: str) -> ParamType | None:
    """Look up a readable tag by name (case-insensitive, None-safe)."""
    return _BY_NAME.get((name or "").strip().lower())


def resolve_type(kind: ParamType | type | str) -> ParamType:
    """Turn a tag, a tag name, or a Python class into a tag.

    Raises:
        ValueError: If `kind` is a string naming no known tag.
        TypeError: If `kind` is none of the accepted forms.
    """
    if isinstance(kind, ParamType):
        return kind
    if isinstance(kind, str):
        found = get_type(kind)
        if found is None:
            known = ", ".join(t.name for t in READABLE_TYPES)
            raise ValueError(f"Unknown parameter type {kind!r} (known: {known})")
        return found
    if isinstance(kind, type):
        builtin = _BUILTIN_CLASSES.get(kind)
        if builtin is not None:
            return builtin
        tag = _CUSTOM.get(kind)
        if tag is None:
            tag = ParamType(kind.__qualname__, kind)
            _CUSTOM[kind] = tag
        return tag
    raise TypeError(f"Cannot use {kind!r} as a parameter type")


def format_value(value: Any) -> str:
    """Render a value the way reports and error messages show it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        # 50.0 -> "50"
        return format(value, ".0f")
    return str(value)
