"""Command-line interface for boxtable."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import replace
from typing import IO, Any

import click

from .config import load_config, resolve_max_width
from .exceptions import BoxTableError, ConfigurationError, InputError
from .formatter import TableFormatter
from .models import Align, Column, TableConfig
from .readers import InputFormat, RowSet, read_rows
from .table import print_table

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="boxtable")
@click.option("--verbose", "-v", is_flag=True, help="Log width decisions to stderr.")
def cli(verbose: bool) -> None:
    """Render tabular data as box-drawing tables."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _table_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Input and layout options shared by every command."""
    options = [
        click.argument("file", type=click.File("r", encoding="utf-8"), default="-"),
        click.option(
            "--format",
            "-f",
            "fmt",
            type=click.Choice([f.value for f in InputFormat]),
            default=InputFormat.CSV.value,
            show_default=True,
            help="Input format",
        ),
        click.option(
            "--max-width",
            "-w",
            help=(
                "Total table width in cells, or 'auto' for the terminal width "
                "(default: config file, then BOXTABLE_MAX_WIDTH, then 80)"
            ),
        ),
        click.option(
            "--config",
            "-c",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            help="YAML table configuration file",
        ),
        click.option(
            "--header",
            "-H",
            "headers",
            multiple=True,
            help="Header for the next column as TEXT or TEXT:ALIGN (repeatable)",
        ),
        click.option(
            "--align",
            "-a",
            "aligns",
            multiple=True,
            help="Column alignment as INDEX=ALIGN, e.g. 2=right (repeatable)",
        ),
        click.option(
            "--header-row/--no-header-row",
            default=False,
            help="Use the first input row as column headers",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@cli.command()
@_table_options
def render(
    file: IO[str],
    fmt: str,
    max_width: str | None,
    config_path: str | None,
    headers: tuple[str, ...],
    aligns: tuple[str, ...],
    header_row: bool,
) -> None:
    """Render rows from FILE (default: stdin) as a table."""
    try:
        rows, config = _prepare(file, fmt, max_width, config_path, headers, aligns, header_row)
    except BoxTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    print_table(rows, config)


@cli.command()
@_table_options
def widths(
    file: IO[str],
    fmt: str,
    max_width: str | None,
    config_path: str | None,
    headers: tuple[str, ...],
    aligns: tuple[str, ...],
    header_row: bool,
) -> None:
    """Print the content width of each column as INDEX WIDTH."""
    try:
        rows, config = _prepare(file, fmt, max_width, config_path, headers, aligns, header_row)
    except BoxTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    formatter = TableFormatter(config)
    for index, width in enumerate(formatter.compute_column_widths(rows)):
        click.echo(f"{index} {width}")


def _prepare(
    file: IO[str],
    fmt: str,
    max_width: str | None,
    config_path: str | None,
    headers: tuple[str, ...],
    aligns: tuple[str, ...],
    header_row: bool,
) -> tuple[list[list[Any]], TableConfig]:
    """Read the input rows and assemble the table configuration."""
    try:
        text = file.read()
    except UnicodeDecodeError as e:
        raise InputError(fmt, str(e)) from e
    row_set = read_rows(text, fmt)
    if header_row:
        row_set = row_set.promote_header_row()

    # --max-width beats the config file, which beats the environment
    width = resolve_max_width(max_width)
    if config_path:
        config = load_config(config_path, default_max_width=width)
        if max_width is not None:
            config = replace(config, max_width=width)
    else:
        config = TableConfig(max_width=width)

    config = _apply_headers(config, row_set, headers)
    config = _apply_aligns(config, aligns)
    logger.debug(
        "Read %d row(s); max_width=%d, %d configured column(s)",
        len(row_set.rows),
        config.max_width,
        len(config.columns),
    )
    return row_set.rows, config


def _apply_headers(config: TableConfig, row_set: RowSet, headers: tuple[str, ...]) -> TableConfig:
    """Fill headers from the input, then override them with --header values."""
    columns = dict(config.columns)
    for index, header in enumerate(row_set.headers):
        column = columns.get(index, Column())
        if not column.header:
            columns[index] = Column(header, column.align)

    for index, spec in enumerate(headers):
        header, align = _parse_header(spec)
        column = columns.get(index, Column())
        columns[index] = Column(header, align if align is not None else column.align)
    return TableConfig(columns=columns, max_width=config.max_width)


def _parse_header(spec: str) -> tuple[str, Align | None]:
    """Split TEXT[:ALIGN]; a suffix that names no alignment stays in the text."""
    text, sep, suffix = spec.rpartition(":")
    if sep:
        try:
            return text, Align.parse(suffix)
        except ConfigurationError:
            pass
    return spec, None


def _apply_aligns(config: TableConfig, aligns: tuple[str, ...]) -> TableConfig:
    """Apply INDEX=ALIGN overrides."""
    for spec in aligns:
        index_text, sep, align = spec.partition("=")
        try:
            index = int(index_text)
        except ValueError:
            index = -1
        if not sep or index < 0:
            raise ConfigurationError("--align", spec, "expected INDEX=ALIGN")
        config = config.with_column(index, config.column(index).header, align)
    return config


if __name__ == "__main__":
    cli()
