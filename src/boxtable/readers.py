"""Row readers for CSV, TSV, JSON and YAML input."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import yaml

from .exceptions import InputError


class InputFormat(Enum):
    """Supported row input formats."""

    CSV = "csv"
    TSV = "tsv"
    JSON = "json"
    YAML = "yaml"


@dataclass
class RowSet:
    """
    Rows read from input text.

    Attributes:
        rows: Cell values, one list per row (possibly ragged)
        headers: Header suggestions taken from mapping keys (may be empty)
    """

    rows: list[list[Any]] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)

    def promote_header_row(self) -> RowSet:
        """Return a copy whose first row has become the headers."""
        if not self.rows:
            return RowSet()
        return RowSet(
            rows=self.rows[1:],
            headers=["" if cell is None else str(cell) for cell in self.rows[0]],
        )


def read_rows(text: str, fmt: InputFormat | str = InputFormat.CSV) -> RowSet:
    """
    Parse input text into rows.

    CSV and TSV yield one row per record. JSON and YAML documents must be a
    list; each item is a list of cells, a mapping or a scalar (a one-cell
    row). Mapping keys, in first-seen order, become the headers and each
    mapping row holds its values in that order, ``None`` where a key is
    missing.

    Args:
        text: Input document
        fmt: Input format

    Returns:
        The parsed rows

    Raises:
        InputError: If the text cannot be parsed in the given format
    """
    try:
        fmt = InputFormat(fmt)
    except ValueError:
        raise InputError(str(fmt), "unsupported format") from None
    if fmt is InputFormat.CSV:
        return _read_delimited(text, ",", fmt)
    if fmt is InputFormat.TSV:
        return _read_delimited(text, "\t", fmt)
    if fmt is InputFormat.JSON:
        try:
            document = json.loads(text) if text.strip() else []
        except json.JSONDecodeError as e:
            raise InputError(fmt.value, str(e)) from e
        return _rows_from_document(document, fmt)
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InputError(fmt.value, str(e)) from e
    return _rows_from_document(document if document is not None else [], fmt)


def _read_delimited(text: str, delimiter: str, fmt: InputFormat) -> RowSet:
    try:
        rows = [list(record) for record in csv.reader(io.StringIO(text), delimiter=delimiter)]
    except csv.Error as e:
        raise InputError(fmt.value, str(e)) from e
    return RowSet(rows=rows)


def _rows_from_document(document: Any, fmt: InputFormat) -> RowSet:
    if not isinstance(document, list):
        raise InputError(fmt.value, f"expected a list of rows, got {type(document).__name__}")

    # Keys of all mapping rows, in first-seen order
    keys: dict[Any, None] = {}
    for item in document:
        if isinstance(item, Mapping):
            keys.update(dict.fromkeys(item))

    result = RowSet(headers=[str(key) for key in keys])
    for item in document:
        if isinstance(item, Mapping):
            result.rows.append([item.get(key) for key in keys])
        elif isinstance(item, list):
            result.rows.append(item)
        else:
            result.rows.append([item])
    return result
