"""
Parameter file reader.

File format (UTF-8, one parameter per line):

    # comment
    <name> <value>

Blank lines and lines starting with `#` are skipped. Every other line must
have exactly two whitespace-separated tokens. The value is parsed as the
name's declared type, which must be one of types.READABLE_TYPES.

Problems are collected per line and reading continues; the whole file is
reported at the end as one InvalidInputFileError. Values set before a later
line fails are kept.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import InvalidConditionError, InvalidInputFileError, InvalidParseError, ParameterIOError
from .types import READABLE_TYPES, ParamType

if TYPE_CHECKING:
    from .box import ParameterBox

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


def _dispatch(declared: ParamType) -> ParamType | None:
    """Find the readable tag matching `declared`, if any."""
    for candidate in READABLE_TYPES:
        if candidate is declared:
            return candidate
    return None


def read_lines(path: str | Path) -> list[str]:
    """Read the whole file as UTF-8 text lines.

    Lines end at LF or CRLF only; form feeds and other Unicode line breaks stay
    inside the line.

    Raises:
        ParameterIOError: If the file cannot be opened or decoded.
    """
    try:
        with Path(path).open(encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as err:
        raise ParameterIOError(f"Cannot read parameter file '{path}': {err}") from err

    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def read_parameter_file(box: "ParameterBox", path: str | Path) -> None:
    """Set values in `box` from a parameter file.

    Args:
        box: Box whose names were added beforehand
        path: Parameter file

    Raises:
        ParameterIOError: If the file cannot be read. Nothing is set.
        InvalidInputFileError: If any line failed, or any name appears on
            more than one line. Lines that succeeded stay applied.
    """
    lines = read_lines(path)
    filename = str(path)
    messages: list[str] = []
    seen: dict[str, list[int]] = {}

    def where(line_number: int) -> str:
        return f"line {line_number} of the file '{filename}'"

    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        tokens = stripped.split()
        name = tokens[0]
        if name not in box:
            box.record_error()
            messages.append(f"In {where(line_number)}, `{name}` has not been added to a parameter box.")
            continue

        seen.setdefault(name, []).append(line_number)

        if len(tokens) != 2:
            box.record_error()
            messages.append(f"In {where(line_number)}, each line must be '<name> <value>' in a parameter file.")
            continue

        declared = box.param_type(name)
        readable = _dispatch(declared)
        if readable is None:
            box.record_error()
            messages.append(
                f"In {where(line_number)}, the type of `{name}` is {declared.name}, which cannot be read from files."
            )
            continue

        try:
            box.set_value_from_string(name, tokens[1])
        except (InvalidParseError, InvalidConditionError) as err:
            logger.debug("%s:%d: %s", filename, line_number, err.message)
            messages.append(f"{err.message} (in {where(line_number)})")

    for name, line_numbers in seen.items():
        if len(line_numbers) > 1:
            box.record_error()
            numbers = ", ".join(str(n) for n in line_numbers)
            messages.append(f"In lines {numbers} of the file '{filename}', `{name}` is duplicate.")

    logger.info("Read %d lines from %s (%d problems)", len(lines), filename, len(messages))
    if messages:
        raise InvalidInputFileError(messages, filename)
