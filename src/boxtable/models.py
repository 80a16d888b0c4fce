"""Core models for boxtable."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType

from .exceptions import ConfigurationError

DEFAULT_MAX_WIDTH = 80
"""Total printable width budget used when none is configured."""

# Line breaks and tabs would split or stretch a rendered line
CONTROL_TRANSLATION = str.maketrans({"\n": " ", "\r": " ", "\t": " "})


class Align(Enum):
    """Horizontal alignment of a column's content."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Align | str) -> Align:
        """
        Normalize an alignment given as an enum member or a string.

        Accepts the member values plus the short forms ``l``/``c``/``r``,
        the format-spec characters ``<``/``^``/``>`` and ``centre``.

        Raises:
            ConfigurationError: If the value names no alignment
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = _ALIASES.get(value.strip().lower())
            if member is not None:
                return member
        raise ConfigurationError("align", value, "expected left, center or right")


_ALIASES = {
    "left": Align.LEFT,
    "l": Align.LEFT,
    "<": Align.LEFT,
    "center": Align.CENTER,
    "centre": Align.CENTER,
    "c": Align.CENTER,
    "^": Align.CENTER,
    "right": Align.RIGHT,
    "r": Align.RIGHT,
    ">": Align.RIGHT,
}


@dataclass(frozen=True)
class Column:
    """
    Configuration of a single column.

    Attributes:
        header: Text shown in the header line (empty for none)
        align: Alignment applied to the header and every data cell
    """

    header: str = ""
    align: Align = Align.LEFT

    def __post_init__(self) -> None:
        object.__setattr__(self, "align", Align.parse(self.align))
        header = "" if self.header is None else str(self.header)
        object.__setattr__(self, "header", header.translate(CONTROL_TRANSLATION))


_DEFAULT_COLUMN = Column()


@dataclass(frozen=True)
class TableConfig:
    """
    Table-wide rendering configuration.

    Columns are sparse: only configured indices are stored and every other
    index falls back to ``Column()``. Instances are immutable and can be
    shared between any number of render calls.

    Attributes:
        columns: Mapping of 0-based column index to its configuration
        max_width: Total printable width, borders and padding included
    """

    columns: Mapping[int, Column] = field(default_factory=dict)
    max_width: int = DEFAULT_MAX_WIDTH

    def __post_init__(self) -> None:
        for index in self.columns:
            if not isinstance(index, int) or isinstance(index, bool) or index < 0:
                raise ConfigurationError(
                    "column index", index, "must be a non-negative integer"
                )
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    def column(self, index: int) -> Column:
        """Return the configuration for ``index``, defaulting unset columns."""
        return self.columns.get(index, _DEFAULT_COLUMN)

    def with_column(
        self,
        index: int,
        header: str = "",
        align: Align | str = Align.LEFT,
    ) -> TableConfig:
        """Return a copy of this config with column ``index`` set."""
        columns = dict(self.columns)
        columns[index] = Column(header, align)
        return replace(self, columns=columns)

    def headers(self, count: int) -> list[str]:
        """Headers for the first ``count`` columns."""
        return [self.column(i).header for i in range(count)]

    def has_headers(self, count: int) -> bool:
        """True if any of the first ``count`` columns has a non-empty header."""
        return any(self.headers(count))
