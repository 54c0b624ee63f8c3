"""
Exit-on-error helpers for small command-line programs.

These sit outside ParameterBox on purpose: library callers handle
ParameterBoxError themselves, scripts that only want "print and quit" use
these.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Callable, NoReturn, TypeVar

from rich.console import Console

from .errors import ParameterBoxError

if TYPE_CHECKING:
    from .box import ParameterBox, TypeSpec

R = TypeVar("R")


def exit_with_error(message: str, console: Console | None = None) -> NoReturn:
    err = console or Console(stderr=True)
    err.print(message, style="red", markup=False, highlight=False, soft_wrap=True)
    sys.exit(1)


def unwrap_or_exit(call: Callable[..., R], *args: Any, **kwargs: Any) -> R:
    """Call `call(*args, **kwargs)`; on ParameterBoxError print it and exit(1)."""
    try:
        return call(*args, **kwargs)
    except ParameterBoxError as e:
        exit_with_error(e.message)


def clone_value_or_exit(box: "ParameterBox", name: str, value_type: "TypeSpec | None" = None) -> Any:
    """Return a copy of the value of `name`; exit(1) if it is missing or unset."""
    value = unwrap_or_exit(box.clone_value, name, value_type)
    if value is None:
        exit_with_error(f"`{name}` does not have a value.")
    return value
