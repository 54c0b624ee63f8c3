"""Check and get command implementations."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console

from ..abort import clone_value_or_exit
from ..box import ParameterBox
from ..types import format_value
from .common import ingest, load_box


def _json_value(value):
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return format_value(value)


def _values(box: ParameterBox) -> dict[str, object]:
    return {name: _json_value(box.get_value(name)) for name in box.names()}


def run_check(declarations_path: Path, params_path: Path, output_json: bool = False) -> int:
    """Validate a parameter file against declarations.

    Returns:
        Exit code (0 = clean, 1 = problems found)
    """
    console = Console()
    err = Console(stderr=True)

    box = load_box(declarations_path)
    problems = ingest(box, params_path, Console(stderr=True, quiet=output_json))

    if output_json:
        output = {
            "ok": not problems,
            "errors": problems,
            "error_count": box.error_count,
            "values": _values(box),
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
    elif problems:
        err.print(f"\n✗ {len(problems)} problem(s) in {params_path}", style="bold red")
    else:
        console.print(f"✓ {params_path}: {len(box)} parameter(s) OK", style="green")

    return 1 if problems else 0


def run_get(declarations_path: Path, params_path: Path, name: str) -> int:
    """Print the value of one parameter after reading the parameter file.

    Exits with status 1 if the file has problems or the value is unset.
    """
    err = Console(stderr=True)
    box = load_box(declarations_path)
    problems = ingest(box, params_path, err)
    if problems:
        return 1

    value = clone_value_or_exit(box, name)
    print(format_value(value))
    return 0
