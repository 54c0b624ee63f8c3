"""
Value holder and constraint checks for a single parameter.

A ParameterCore keeps one optional value, an independent lower and upper
bound, and at most one list condition. The check_* methods never mutate the
core; they only report whether the present value conforms. A core without a
value conforms to everything.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Generic, Iterable, Literal, TypeVar, Union

from .types import format_value


T = TypeVar("T")

ViolationKind = Literal["min", "max", "blacklist", "whitelist"]


@dataclass(frozen=True)
class Open(Generic[T]):
    """Bound that excludes its endpoint."""

    value: T


@dataclass(frozen=True)
class Close(Generic[T]):
    """Bound that includes its endpoint."""

    value: T


RangeBound = Union[Open, Close]


@dataclass(frozen=True)
class BlockList(Generic[T]):
    """The value must not be any of `items`."""

    items: tuple = ()

    label = "Blacklist"


@dataclass(frozen=True)
class AllowList(Generic[T]):
    """The value must be one of `items`."""

    items: tuple = ()

    label = "Whitelist"


ListCondition = Union[BlockList, AllowList]


@dataclass(frozen=True)
class Violation:
    """One failed comparison.

    `condition` reads as the requirement the value missed, e.g. ``"> 1"`` or
    ``"not in the list [1, 2]"``.
    """

    kind: ViolationKind
    condition: str


def format_items(items: Iterable[Any]) -> str:
    return "[" + ", ".join(format_value(item) for item in items) + "]"


def min_limit_label(bound: RangeBound) -> str:
    if isinstance(bound, Open):
        return f"{format_value(bound.value)} <"
    return f"{format_value(bound.value)} ≦"


def max_limit_label(bound: RangeBound) -> str:
    if isinstance(bound, Open):
        return f"< {format_value(bound.value)}"
    return f"≦ {format_value(bound.value)}"


@dataclass
class ParameterCore(Generic[T]):
    """Typed value plus its range and list conditions."""

    value: T | None = None
    min_limit: RangeBound | None = None
    max_limit: RangeBound | None = None
    list_condition: ListCondition | None = None

    @property
    def range(self) -> tuple[RangeBound | None, RangeBound | None]:
        return (self.min_limit, self.max_limit)

    def with_value(self, value: T) -> "ParameterCore[T]":
        return replace(self, value=value)

    def check_min_limit(self) -> Violation | None:
        if self.value is None or self.min_limit is None:
            return None
        bound = self.min_limit
        if isinstance(bound, Open):
            if self.value <= bound.value:
                return Violation("min", f"> {format_value(bound.value)}")
        elif self.value < bound.value:
            return Violation("min", f"≧ {format_value(bound.value)}")
        return None

    def check_max_limit(self) -> Violation | None:
        if self.value is None or self.max_limit is None:
            return None
        bound = self.max_limit
        if isinstance(bound, Open):
            if bound.value <= self.value:
                return Violation("max", f"< {format_value(bound.value)}")
        elif bound.value < self.value:
            return Violation("max", f"≦ {format_value(bound.value)}")
        return None

    def check_list_condition(self) -> Violation | None:
        if self.value is None or self.list_condition is None:
            return None
        cond = self.list_condition
        if isinstance(cond, BlockList):
            if self.value in cond.items:
                return Violation("blacklist", f"not in the list {format_items(cond.items)}")
        elif self.value not in cond.items:
            return Violation("whitelist", f"in the list {format_items(cond.items)}")
        return None

    def check_all(self) -> list[Violation]:
        """Run every check in min, max, list order and collect the failures."""
        found = [self.check_min_limit(), self.check_max_limit(), self.check_list_condition()]
        return [v for v in found if v is not None]
