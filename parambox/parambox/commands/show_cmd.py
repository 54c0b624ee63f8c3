"""Show command implementation."""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console

from ..render import render_table
from .common import ingest, load_box


def run_show(declarations_path: Path, params_path: Path | None = None, table: bool = False) -> int:
    """Print every visible parameter.

    Args:
        declarations_path: Declaration file (.toml/.yaml)
        params_path: Optional parameter file read before printing
        table: Print a rich table instead of the plain block format

    Returns:
        Exit code (0 = success, 1 = the parameter file had problems)
    """
    err = Console(stderr=True)
    box = load_box(declarations_path)

    problems: list[str] = []
    if params_path is not None:
        problems = ingest(box, params_path, err)

    if table:
        Console().print(render_table(box, title=str(declarations_path)))
    else:
        box.render(sys.stdout)

    return 1 if problems else 0
