"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ..box import ParameterBox
from ..declarations import build_box, load_declarations
from ..errors import InvalidInputFileError, ParameterBoxError, ParameterTypeError


def load_box(declarations_path: Path) -> ParameterBox:
    """Build a box from a declaration file, turning any failure into a ClickException."""
    try:
        declarations = load_declarations(declarations_path)
        return build_box(declarations)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(f"Invalid declarations in {declarations_path}: {e}") from e
    except (ParameterBoxError, ParameterTypeError) as e:
        raise click.ClickException(f"Declarations in {declarations_path} are inconsistent: {e}") from e


def ingest(box: ParameterBox, params_path: Path, console: Console) -> list[str]:
    """Read a parameter file into `box` and return the problems found (printed to `console`)."""
    try:
        box.read_file(params_path)
    except InvalidInputFileError as e:
        for message in e.messages:
            console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)
        return list(e.messages)
    except ParameterBoxError as e:
        console.print(e.message, style="bold red", markup=False, highlight=False, soft_wrap=True)
        return [e.message]
    return []
