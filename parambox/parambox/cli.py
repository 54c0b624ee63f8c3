"""CLI entrypoint for parambox."""

import sys
from pathlib import Path

import click

from . import __version__
from .logging_setup import LOG_LEVELS, configure_cli_logging

_EXISTING_FILE = click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path)


@click.group()
@click.version_option(__version__, prog_name="parambox")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="PARAMBOX_LOG_LEVEL",
    show_default=True,
    help="Logging level (also read from PARAMBOX_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """parambox - Typed parameters with range and list conditions.

    Declare parameters in a TOML or YAML file, then check, show, or query
    `<name> <value>` parameter files against them.
    """
    ctx.ensure_object(dict)
    configure_cli_logging(log_level)
    ctx.obj["log_level"] = log_level


@cli.command()
@click.argument("declarations", type=_EXISTING_FILE)
@click.option(
    "--params",
    "params_path",
    type=_EXISTING_FILE,
    default=None,
    help="Parameter file to read before printing",
)
@click.option(
    "--table",
    is_flag=True,
    help="Print a table instead of one block per parameter",
)
def show(declarations: Path, params_path: Path | None, table: bool) -> None:
    """Print every visible parameter with its type, value and conditions.

    Examples:

        parambox show params.toml

        parambox show params.toml --params run.txt --table
    """
    from .commands.show_cmd import run_show

    sys.exit(run_show(declarations, params_path, table))


@cli.command()
@click.argument("declarations", type=_EXISTING_FILE)
@click.argument("params", type=_EXISTING_FILE)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output result as JSON",
)
def check(declarations: Path, params: Path, output_json: bool) -> None:
    """Check a parameter file against declarations.

    Exits with status 1 if any line is malformed, names an undeclared
    parameter, fails to parse, violates a condition, or repeats a name.
    """
    from .commands.check_cmd import run_check

    sys.exit(run_check(declarations, params, output_json))


@cli.command()
@click.argument("declarations", type=_EXISTING_FILE)
@click.argument("params", type=_EXISTING_FILE)
@click.argument("name")
def get(declarations: Path, params: Path, name: str) -> None:
    """Print the value of NAME after reading a parameter file."""
    from .commands.check_cmd import run_get

    sys.exit(run_get(declarations, params, name))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
