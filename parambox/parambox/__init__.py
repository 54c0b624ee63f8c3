"""parambox - typed parameter registry with range and list conditions."""

from .box import ParameterBox
from .constraints import AllowList, BlockList, Close, Open, ParameterCore, Violation
from .errors import (
    AlreadyAddedError,
    InvalidConditionError,
    InvalidInputFileError,
    InvalidParseError,
    NotAddedError,
    ParameterBoxError,
    ParameterIOError,
    ParameterTypeError,
)
from .types import READABLE_TYPES, ParamType, resolve_type

__version__ = "0.1.0"

__all__ = [
    "AllowList",
    "AlreadyAddedError",
    "BlockList",
    "Close",
    "InvalidConditionError",
    "InvalidInputFileError",
    "InvalidParseError",
    "NotAddedError",
    "Open",
    "ParamType",
    "ParameterBox",
    "ParameterBoxError",
    "ParameterCore",
    "ParameterIOError",
    "ParameterTypeError",
    "READABLE_TYPES",
    "Violation",
    "resolve_type",
]
