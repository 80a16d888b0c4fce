"""
boxtable: Box-drawing tables for the terminal.

This library renders rows of arbitrary values as Unicode box-drawing
tables with:
- Sparse per-column headers and alignment (left, center, right)
- A global width budget, met by narrowing the widest columns first
- Single-line truncation with a ``+`` marker
- Ragged rows padded with empty cells

Example:
    from boxtable import Align, TableConfig, print_table

    config = (
        TableConfig(max_width=40)
        .with_column(0, "Name")
        .with_column(1, "Count", Align.RIGHT)
    )
    print_table([["item-1", 10], ["item-2", 5]], config)
    # ┌────────┬───────┐
    # │ Name   │ Count │
    # ├────────┼───────┤
    # │ item-1 │    10 │
    # │ item-2 │     5 │
    # └────────┴───────┘
"""

from .config import config_from_dict, load_config, resolve_max_width
from .exceptions import BoxTableError, ConfigurationError, InputError
from .formatter import TableFormatter
from .models import DEFAULT_MAX_WIDTH, Align, Column, TableConfig
from .readers import InputFormat, RowSet, read_rows
from .table import format_table, print_table

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Models
    "Align",
    "Column",
    "TableConfig",
    "DEFAULT_MAX_WIDTH",
    # Formatting
    "TableFormatter",
    "format_table",
    "print_table",
    # Configuration
    "config_from_dict",
    "load_config",
    "resolve_max_width",
    # Input
    "InputFormat",
    "RowSet",
    "read_rows",
    # Exceptions
    "BoxTableError",
    "ConfigurationError",
    "InputError",
]
