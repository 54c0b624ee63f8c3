"""Registry entry: one type-erased ParameterCore plus its display metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .constraints import ParameterCore, format_items, max_limit_label, min_limit_label
from .errors import ParameterTypeError
from .types import ParamType, format_value


@dataclass
class Parameter:
    """A registered name's stored state.

    `param_type` is fixed at creation and guards every access to `core`.
    The *_label properties are derived from `core` on each read and are only
    used for reporting.
    """

    param_type: ParamType
    core: ParameterCore[Any] = field(default_factory=ParameterCore)
    explanation: str | None = None
    visible: bool = True

    @property
    def type_label(self) -> str:
        return self.param_type.name

    @property
    def value_label(self) -> str | None:
        if self.core.value is None:
            return None
        return format_value(self.core.value)

    @property
    def range_labels(self) -> tuple[str | None, str | None]:
        lo, hi = self.core.range
        return (
            min_limit_label(lo) if lo is not None else None,
            max_limit_label(hi) if hi is not None else None,
        )

    @property
    def list_label(self) -> tuple[str, str] | None:
        cond = self.core.list_condition
        if cond is None:
            return None
        return (cond.label, format_items(cond.items))

    def downcast(self, param_type: ParamType, name: str) -> ParameterCore[Any]:
        """Return the core after checking the caller's tag against the declared one.

        Raises:
            ParameterTypeError: If the tags differ.
        """
        if param_type is not self.param_type:
            raise ParameterTypeError(
                f"`{name}` was added as {self.param_type.name}, but was accessed as {param_type.name}."
            )
        return self.core

    def check_value_type(self, value: Any, name: str, what: str = "value") -> Any:
        """Check a caller-supplied value against the declared tag and normalize it.

        Raises:
            ParameterTypeError: If the value is not of the declared type.
        """
        if not self.param_type.accepts(value):
            raise ParameterTypeError(
                f"`{name}` was added as {self.param_type.name}, but the {what} {value!r} "
                f"({type(value).__name__}) is not a {self.param_type.name}."
            )
        return self.param_type.coerce(value)
