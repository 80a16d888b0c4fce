"""
Box-drawing table formatter.

This module provides the TableFormatter class, which fits rows of
arbitrary values into a bounded terminal width and renders them with
Unicode box-drawing borders.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, NamedTuple

from .models import Align, Column, TableConfig
from .text import display_width, pad, stringify, truncate

logger = logging.getLogger(__name__)

HORIZONTAL = "─"
VERTICAL = "│"


class _Edge(NamedTuple):
    """Glyphs for one horizontal rule of the table."""

    left: str
    junction: str
    right: str


TOP = _Edge("┌", "┬", "┐")
MIDDLE = _Edge("├", "┼", "┤")
BOTTOM = _Edge("└", "┴", "┘")

# Per column: two padding spaces plus its left bar; one more bar closes the row
_PADDING_PER_COLUMN = 3


def border_overhead(column_count: int) -> int:
    """Cells used by bars and padding in a table of ``column_count`` columns."""
    return _PADDING_PER_COLUMN * column_count + 1


class TableFormatter:
    """Render rows as a box-drawing table.

    Example output:
        ┌────────┬───────┬────────┐
        │ Name   │ Count │ Status │
        ├────────┼───────┼────────┤
        │ item-1 │    10 │ active │
        │ item-2 │     5 │ paused │
        └────────┴───────┴────────┘

    The formatter holds nothing but its configuration, so one instance can
    render any number of tables, from any number of threads.
    """

    def __init__(
        self,
        config: TableConfig | None = None,
        cell_format: Callable[[Any], str] = str,
    ) -> None:
        """Initialize the table formatter.

        Args:
            config: Column and width configuration. Defaults to
                ``TableConfig()`` (no headers, left aligned, 80 cells wide).
            cell_format: Callable turning a cell value into display text.
        """
        self.config = config if config is not None else TableConfig()
        self._cell_format = cell_format

    def compute_column_widths(
        self,
        rows: Iterable[Iterable[Any]],
        columns: Mapping[int, Column] | None = None,
        max_width: int | None = None,
    ) -> list[int]:
        """Compute the content width of every column.

        Each column starts at its natural width: the widest of its header
        and its cells, and at least 1. When the table would exceed
        ``max_width``, the widest column is narrowed one cell at a time
        (the rightmost one on ties) until the table fits or every column
        is down to 1. A budget smaller than ``4 * columns + 1`` cannot be
        met; the table then overflows with all widths at 1.

        Args:
            rows: Cell values, possibly ragged
            columns: Sparse column configuration (defaults to the formatter's);
                entries whose key is not a column index are ignored
            max_width: Total width budget (defaults to the formatter's)

        Returns:
            One width per column, excluding padding and borders
        """
        if columns is None:
            columns = self.config.columns
        config = TableConfig(
            columns={
                index: column
                for index, column in columns.items()
                if isinstance(index, int) and not isinstance(index, bool) and index >= 0
            },
            max_width=self.config.max_width if max_width is None else max_width,
        )
        cells = self._stringify_rows(rows)
        count = max((len(row) for row in cells), default=0)
        return self._fit_widths(cells, config, count)

    def format_cell(self, text: str, width: int, align: Align | str = Align.LEFT) -> list[str]:
        """Format one cell's text to exactly ``width`` cells.

        Text that fits is padded according to ``align``. Text that does not
        fit is cut to ``width - 1`` characters followed by the truncation
        marker; overflow is never wrapped onto further lines.

        Returns:
            The cell's lines (always exactly one)
        """
        if width <= 0:
            return [""]
        if display_width(text) > width:
            return [truncate(text, width)]
        return [pad(text, width, Align.parse(align))]

    def render_lines(
        self,
        rows: Iterable[Iterable[Any]],
        config: TableConfig | None = None,
    ) -> list[str]:
        """Render rows into table lines, without line terminators.

        Args:
            rows: Cell values; short rows are padded with empty cells
            config: Overrides the formatter's configuration for this call

        Returns:
            Lines of equal display width
        """
        config = config if config is not None else self.config
        cells = self._stringify_rows(rows)
        count = max((len(row) for row in cells), default=0)

        if count == 0:
            # Nothing to show: an empty box rather than no output at all
            widths = [0]
            return [
                self._rule(widths, TOP),
                self._row([""], widths, [Align.LEFT]),
                self._rule(widths, BOTTOM),
            ]

        cells = [row + [""] * (count - len(row)) for row in cells]
        widths = self._fit_widths(cells, config, count)
        aligns = [config.column(i).align for i in range(count)]

        lines = [self._rule(widths, TOP)]
        if config.has_headers(count):
            lines.append(self._row(config.headers(count), widths, aligns))
            lines.append(self._rule(widths, MIDDLE))
        for row in cells:
            lines.append(self._row(row, widths, aligns))
        lines.append(self._rule(widths, BOTTOM))
        return lines

    def render(
        self,
        rows: Iterable[Iterable[Any]],
        config: TableConfig | None = None,
    ) -> str:
        """Render rows as table text, each line terminated by a newline."""
        return "".join(f"{line}\n" for line in self.render_lines(rows, config))

    def _stringify_rows(self, rows: Iterable[Iterable[Any]]) -> list[list[str]]:
        return [[stringify(cell, self._cell_format) for cell in row] for row in rows]

    def _fit_widths(
        self,
        cells: list[list[str]],
        config: TableConfig,
        count: int,
    ) -> list[int]:
        widths = []
        for i in range(count):
            natural = display_width(config.column(i).header)
            for row in cells:
                if i < len(row):
                    natural = max(natural, display_width(row[i]))
            widths.append(max(natural, 1))

        budget = config.max_width - border_overhead(count)
        natural_total = sum(widths)
        if natural_total <= budget:
            return widths

        while sum(widths) > budget:
            widest = max(widths)
            if widest <= 1:
                break
            # rightmost of the widest columns gives way first
            index = len(widths) - 1 - widths[::-1].index(widest)
            widths[index] -= 1

        if sum(widths) > budget:
            logger.debug(
                "Table needs %d cells but max_width is %d; overflowing",
                sum(widths) + border_overhead(count),
                config.max_width,
            )
        else:
            logger.debug(
                "Shrank %d column(s) from %d to %d content cells to fit max_width %d",
                count,
                natural_total,
                sum(widths),
                config.max_width,
            )
        return widths

    def _row(self, cells: list[str], widths: list[int], aligns: list[Align]) -> str:
        formatted = [
            self.format_cell(text, width, align)[0]
            for text, width, align in zip(cells, widths, aligns)
        ]
        return f"{VERTICAL} " + f" {VERTICAL} ".join(formatted) + f" {VERTICAL}"

    @staticmethod
    def _rule(widths: list[int], edge: _Edge) -> str:
        segments = (HORIZONTAL * width for width in widths)
        inner = f"{HORIZONTAL}{edge.junction}{HORIZONTAL}".join(segments)
        return f"{edge.left}{HORIZONTAL}{inner}{HORIZONTAL}{edge.right}"
