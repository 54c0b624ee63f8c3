"""
ParameterBox: named, typed parameters with range and list conditions.

Each name is added once with a type and is never removed. Every mutation
re-runs the affected checks. A failing check is counted and raised, but the
new state is kept: conditions report, they do not block. That lets a later
condition change be judged against a value that is already set.
"""

from __future__ import annotations

import copy
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable, Iterator, TextIO

from .constraints import AllowList, BlockList, Close, Open, RangeBound, Violation
from .errors import (
    AlreadyAddedError,
    InvalidConditionError,
    InvalidParseError,
    NotAddedError,
    ParameterBoxError,
)
from .parameter import Parameter
from .types import ParamType, format_value, resolve_type

logger = logging.getLogger(__name__)

TypeSpec = ParamType | type | str


class ParameterBox:
    """Container of named parameters, each bound to one ParamType.

    Type mismatches between the caller and the declared type raise
    ParameterTypeError, which is not counted. Every other failure raises a
    ParameterBoxError subclass and increments `error_count`.
    """

    def __init__(self) -> None:
        self._parameters: dict[str, Parameter] = {}
        self._added_order: list[str] = []
        self._error_count = 0

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add(self, name: str, param_type: TypeSpec) -> None:
        """Register `name` with a fresh, valueless parameter of `param_type`.

        Raises:
            AlreadyAddedError: If `name` is already registered. The existing
                entry is left untouched.
        """
        if name in self._parameters:
            raise self._record(
                AlreadyAddedError(f"`{name}` has already been added to a parameter box.", name)
            )
        tag = resolve_type(param_type)
        self._parameters[name] = Parameter(param_type=tag)
        self._added_order.append(name)
        logger.debug("Added parameter %s (%s)", name, tag.name)

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def set_value(self, name: str, value: Any, value_type: TypeSpec | None = None) -> None:
        """Store `value` and check it against the min, max and list conditions.

        The value is stored even when a check fails.

        Raises:
            NotAddedError: If `name` is not registered.
            InvalidConditionError: If any condition is violated; the message
                has one line per violated condition.
            ParameterTypeError: If `value` (or `value_type`) does not match the
                declared type.
        """
        parameter = self._lookup(name)
        core = self._core_for(parameter, name, value_type)
        value = parameter.check_value_type(value, name)

        candidate = core.with_value(value)
        violations = candidate.check_all()
        parameter.core = candidate
        self._raise_if_violated(name, value, violations)

    def set_value_from_string(self, name: str, text: str) -> None:
        """Parse `text` as the declared type of `name`, then set_value.

        Raises:
            NotAddedError: If `name` is not registered.
            InvalidParseError: If `text` is not a literal of the declared type,
                or the type has no parser.
            InvalidConditionError: As for set_value.
        """
        parameter = self._lookup(name)
        tag = parameter.param_type
        try:
            value = tag.parse(text)
        except ValueError as err:
            raise self._record(
                InvalidParseError(f"`{text}` cannot be parsed as {tag.name} for `{name}`.", name)
            ) from err
        self.set_value(name, value)

    def get_value(self, name: str, value_type: TypeSpec | None = None) -> Any:
        """Return the stored value, or None if it has never been set.

        Raises:
            NotAddedError: If `name` is not registered.
            ParameterTypeError: If `value_type` is given and differs from the
                declared type.
        """
        parameter = self._lookup(name)
        return self._core_for(parameter, name, value_type).value

    def clone_value(self, name: str, value_type: TypeSpec | None = None) -> Any:
        """Like get_value, but returns a deep copy."""
        return copy.deepcopy(self.get_value(name, value_type))

    # ------------------------------------------------------------------
    # Range conditions
    # ------------------------------------------------------------------

    def set_range_open_open(self, name: str, range: tuple[Any, Any], value_type: TypeSpec | None = None) -> None:
        """Require lo < value < hi."""
        self._set_bounds(name, value_type, Open(range[0]), Open(range[1]))

    def set_range_open_close(self, name: str, range: tuple[Any, Any], value_type: TypeSpec | None = None) -> None:
        """Require lo < value <= hi."""
        self._set_bounds(name, value_type, Open(range[0]), Close(range[1]))

    def set_range_close_open(self, name: str, range: tuple[Any, Any], value_type: TypeSpec | None = None) -> None:
        """Require lo <= value < hi."""
        self._set_bounds(name, value_type, Close(range[0]), Open(range[1]))

    def set_range_close_close(self, name: str, range: tuple[Any, Any], value_type: TypeSpec | None = None) -> None:
        """Require lo <= value <= hi."""
        self._set_bounds(name, value_type, Close(range[0]), Close(range[1]))

    def set_min_limit_open(self, name: str, min_limit: Any, value_type: TypeSpec | None = None) -> None:
        self._set_bounds(name, value_type, min_limit=Open(min_limit))

    def set_min_limit_close(self, name: str, min_limit: Any, value_type: TypeSpec | None = None) -> None:
        self._set_bounds(name, value_type, min_limit=Close(min_limit))

    def set_max_limit_open(self, name: str, max_limit: Any, value_type: TypeSpec | None = None) -> None:
        self._set_bounds(name, value_type, max_limit=Open(max_limit))

    def set_max_limit_close(self, name: str, max_limit: Any, value_type: TypeSpec | None = None) -> None:
        self._set_bounds(name, value_type, max_limit=Close(max_limit))

    # ------------------------------------------------------------------
    # List conditions
    # ------------------------------------------------------------------

    def set_blacklist(self, name: str, items: Iterable[Any], value_type: TypeSpec | None = None) -> None:
        """Forbid every value in `items`. Replaces any previous list condition."""
        self._set_list_condition(name, BlockList, items, value_type)

    def set_whitelist(self, name: str, items: Iterable[Any], value_type: TypeSpec | None = None) -> None:
        """Allow only the values in `items`. Replaces any previous list condition."""
        self._set_list_condition(name, AllowList, items, value_type)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def set_explanation(self, name: str, explanation: str) -> None:
        self._lookup(name).explanation = explanation

    def set_invisible(self, name: str) -> None:
        """Exclude `name` from render output. Queries still work."""
        self._lookup(name).visible = False

    def get_explanation(self, name: str) -> str | None:
        return self._lookup(name).explanation

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def error_count(self) -> int:
        """Number of errors recorded so far. Never decreases."""
        return self._error_count

    def get_error_count(self) -> int:
        return self._error_count

    def names(self) -> list[str]:
        """Registered names in the order they were added."""
        return list(self._added_order)

    def parameter(self, name: str) -> Parameter:
        return self._lookup(name)

    def param_type(self, name: str) -> ParamType:
        return self._lookup(name).param_type

    def items(self) -> Iterator[tuple[str, Parameter]]:
        """(name, Parameter) pairs in the order they were added."""
        for name in self._added_order:
            yield name, self._parameters[name]

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __len__(self) -> int:
        return len(self._parameters)

    # ------------------------------------------------------------------
    # Files and output
    # ------------------------------------------------------------------

    def read_file(self, path: str | Path) -> None:
        """Populate values from a `<name> <value>` parameter file.

        See parambox.ingest.read_parameter_file.
        """
        from .ingest import read_parameter_file

        read_parameter_file(self, path)

    def render(self, sink: TextIO | None = None) -> None:
        """Write a human-readable block per visible parameter to `sink` (stdout by default)."""
        from .render import render_box

        render_box(self, sink if sink is not None else sys.stdout)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def record_error(self, count: int = 1) -> None:
        """Count errors detected by collaborators such as the file reader."""
        self._error_count += count

    def _record(self, error: ParameterBoxError, count: int = 1) -> ParameterBoxError:
        self._error_count += count
        logger.debug("%s: %s", type(error).__name__, error.message)
        return error

    def _lookup(self, name: str) -> Parameter:
        parameter = self._parameters.get(name)
        if parameter is None:
            raise self._record(NotAddedError(f"`{name}` has not been added to a parameter box.", name))
        return parameter

    def _core_for(self, parameter: Parameter, name: str, value_type: TypeSpec | None):
        if value_type is None:
            return parameter.core
        return parameter.downcast(resolve_type(value_type), name)

    def _set_bounds(
        self,
        name: str,
        value_type: TypeSpec | None,
        min_limit: RangeBound | None = None,
        max_limit: RangeBound | None = None,
    ) -> None:
        parameter = self._lookup(name)
        core = self._core_for(parameter, name, value_type)

        changes: dict[str, RangeBound] = {}
        if min_limit is not None:
            changes["min_limit"] = type(min_limit)(parameter.check_value_type(min_limit.value, name, "min limit"))
        if max_limit is not None:
            changes["max_limit"] = type(max_limit)(parameter.check_value_type(max_limit.value, name, "max limit"))
        candidate = replace(core, **changes)

        violations: list[Violation | None] = []
        if min_limit is not None:
            violations.append(candidate.check_min_limit())
        if max_limit is not None:
            violations.append(candidate.check_max_limit())
        parameter.core = candidate
        self._raise_if_violated(name, candidate.value, [v for v in violations if v is not None])

    def _set_list_condition(
        self,
        name: str,
        condition_cls: type[BlockList] | type[AllowList],
        items: Iterable[Any],
        value_type: TypeSpec | None,
    ) -> None:
        parameter = self._lookup(name)
        core = self._core_for(parameter, name, value_type)
        checked = tuple(parameter.check_value_type(item, name, "list item") for item in items)

        candidate = replace(core, list_condition=condition_cls(checked))
        violation = candidate.check_list_condition()
        parameter.core = candidate
        self._raise_if_violated(name, candidate.value, [violation] if violation is not None else [])

    def _raise_if_violated(self, name: str, value: Any, violations: list[Violation]) -> None:
        if not violations:
            return
        shown = format_value(value)
        message = "\n".join(
            f"`{name}` = {shown} does not satisfy the condition that `{name}` {v.condition}."
            for v in violations
        )
        raise self._record(InvalidConditionError(message, name, violations), count=len(violations))
