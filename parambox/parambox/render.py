"""Human-readable output for a ParameterBox."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.markup import escape
from rich.table import Table

from .errors import ParameterIOError

if TYPE_CHECKING:
    from .box import ParameterBox
    from .parameter import Parameter

RULE = "----------------------------"
LABEL_WIDTH = 14


def _row(label: str, text: str) -> str:
    return f"{label:<{LABEL_WIDTH}}| {text}"


def range_text(name: str, parameter: "Parameter") -> str | None:
    """Render the bounds as an inequality chain around `name`, e.g. ``10 ≦ rate < 100``."""
    lo, hi = parameter.range_labels
    if lo is None and hi is None:
        return None
    return " ".join(part for part in (lo, name, hi) if part is not None)


def format_parameter(name: str, parameter: "Parameter") -> list[str]:
    """Lines for one parameter block, ending with a blank line."""
    lines = [name, RULE, _row("Type", parameter.type_label)]
    if parameter.value_label is not None:
        lines.append(_row("Default value", parameter.value_label))
    chain = range_text(name, parameter)
    if chain is not None:
        lines.append(_row("Range", chain))
    if parameter.list_label is not None:
        label, items = parameter.list_label
        lines.append(_row(label, items))
    if parameter.explanation is not None:
        lines.append(_row("Explanation", parameter.explanation))
    lines.append("")
    return lines


def render_box(box: "ParameterBox", sink: TextIO) -> None:
    """Write one block per visible parameter, in the order they were added.

    Raises:
        ParameterIOError: If writing to `sink` fails.
    """
    lines: list[str] = []
    for name, parameter in box.items():
        if not parameter.visible:
            continue
        lines.extend(format_parameter(name, parameter))
    try:
        sink.write("".join(line + "\n" for line in lines))
        sink.flush()
    except OSError as err:
        raise ParameterIOError(f"Cannot write parameters: {err}") from err


def render_table(box: "ParameterBox", title: str | None = None) -> Table:
    """Build a rich Table with one row per visible parameter."""
    table = Table(title=title, show_lines=False)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type", style="magenta")
    table.add_column("Value")
    table.add_column("Range")
    table.add_column("List")
    table.add_column("Explanation", style="dim")

    for name, parameter in box.items():
        if not parameter.visible:
            continue
        listed = ""
        if parameter.list_label is not None:
            label, items = parameter.list_label
            listed = f"{label} {items}"
        cells = (
            name,
            parameter.type_label,
            parameter.value_label or "",
            range_text(name, parameter) or "",
            listed,
            parameter.explanation or "",
        )
        table.add_row(*(escape(cell) for cell in cells))
    return table
