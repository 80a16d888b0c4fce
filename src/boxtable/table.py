"""Convenience functions for formatting and printing tables."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import IO, Any

import click

from .formatter import TableFormatter
from .models import TableConfig


def format_table(
    rows: Iterable[Iterable[Any]],
    config: TableConfig | None = None,
    cell_format: Callable[[Any], str] = str,
) -> str:
    """
    Format rows as a box-drawing table.

    Args:
        rows: Cell values, one iterable per row
        config: Column and width configuration (default ``TableConfig()``)
        cell_format: Callable turning a cell value into display text

    Returns:
        The table text, every line terminated by a newline

    Example:
        >>> print(format_table([[1, 2, 3], [4, 5, 6]]), end="")
        ┌───┬───┬───┐
        │ 1 │ 2 │ 3 │
        │ 4 │ 5 │ 6 │
        └───┴───┴───┘
    """
    return TableFormatter(config, cell_format).render(rows)


def print_table(
    rows: Iterable[Iterable[Any]],
    config: TableConfig | None = None,
    file: IO[str] | None = None,
    cell_format: Callable[[Any], str] = str,
) -> None:
    """
    Write rows as a box-drawing table to ``file`` (standard output by default).
    """
    click.echo(format_table(rows, config, cell_format), file=file, nl=False)
