"""Exceptions raised by the parameter box."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .constraints import Violation


class ParameterBoxError(Exception):
    """Base class for recoverable parameter box errors.

    Every instance has already been counted by the box that raised it.
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.message = message
        self.name = name


class InvalidConditionError(ParameterBoxError):
    """A value does not satisfy its range or list condition."""

    def __init__(self, message: str, name: str | None = None, violations: Sequence["Violation"] = ()):
        super().__init__(message, name)
        self.violations = list(violations)


class AlreadyAddedError(ParameterBoxError):
    """The name is already registered."""


class NotAddedError(ParameterBoxError):
    """The name has never been registered."""


class InvalidParseError(ParameterBoxError):
    """A string could not be converted to the declared type."""


class InvalidInputFileError(ParameterBoxError):
    """Aggregate of every problem found while reading one parameter file."""

    def __init__(self, messages: Sequence[str], path: str | None = None):
        super().__init__("\n".join(messages))
        self.messages = list(messages)
        self.path = path


class ParameterIOError(ParameterBoxError):
    """Reading a parameter file or writing a rendering failed."""


class ParameterTypeError(TypeError):
    """Caller used a type that differs from the one the name was added with.

    This is a programming error, so it is not a ParameterBoxError and is never
    counted.
    """
