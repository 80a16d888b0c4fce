"""
Configuration loading.

Builds ``TableConfig`` values from plain mappings (as found in YAML files)
and resolves the width budget from explicit values, the environment and
the terminal.

A YAML config file looks like::

    max_width: 100
    columns:
      - Name
      - header: Count
        align: right
      - null            # column 2 keeps the defaults
      - {header: Status, align: center}

``columns`` may also be a mapping of column index to column.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .models import DEFAULT_MAX_WIDTH, Column, TableConfig

MAX_WIDTH_ENV_VAR = "BOXTABLE_MAX_WIDTH"
"""Environment variable overriding the default width budget."""

AUTO_WIDTH = "auto"
"""Width value meaning "the width of the current terminal"."""


def column_from_value(value: Any) -> Column:
    """
    Build a column from a header string or a ``{header, align}`` mapping.

    Raises:
        ConfigurationError: If the value has any other shape
    """
    if isinstance(value, Column):
        return value
    if isinstance(value, str):
        return Column(header=value)
    if isinstance(value, Mapping):
        unknown = set(value) - {"header", "align"}
        if unknown:
            raise ConfigurationError(
                "column", dict(value), f"unknown keys: {', '.join(sorted(map(str, unknown)))}"
            )
        header = value.get("header", "")
        if header is None:
            header = ""
        return Column(header=str(header), align=value.get("align", "left"))
    raise ConfigurationError("column", value, "expected a header string or a mapping")


def config_from_dict(
    data: Mapping[str, Any],
    default_max_width: int = DEFAULT_MAX_WIDTH,
) -> TableConfig:
    """
    Build a table configuration from a mapping.

    Args:
        data: Mapping with optional ``max_width`` and ``columns`` keys
        default_max_width: Width budget used when ``max_width`` is absent

    Returns:
        The table configuration; missing keys take their defaults

    Raises:
        ConfigurationError: If a key or value has the wrong shape
    """
    unknown = set(data) - {"max_width", "columns"}
    if unknown:
        raise ConfigurationError(
            "config", dict(data), f"unknown keys: {', '.join(sorted(map(str, unknown)))}"
        )

    max_width = data.get("max_width")
    if max_width is None:
        max_width = default_max_width
    max_width = parse_max_width(max_width)

    raw_columns = data.get("columns") or []
    columns: dict[int, Column] = {}
    if isinstance(raw_columns, Mapping):
        for key, value in raw_columns.items():
            try:
                index = int(key)
            except (TypeError, ValueError):
                raise ConfigurationError(
                    "column index", key, "must be a non-negative integer"
                ) from None
            if value is not None:
                columns[index] = column_from_value(value)
    elif isinstance(raw_columns, list):
        for index, value in enumerate(raw_columns):
            if value is not None:
                columns[index] = column_from_value(value)
    else:
        raise ConfigurationError("columns", raw_columns, "expected a list or a mapping")

    return TableConfig(columns=columns, max_width=max_width)


def load_config(
    path: str | Path,
    default_max_width: int = DEFAULT_MAX_WIDTH,
) -> TableConfig:
    """
    Load a table configuration from a YAML file.

    An empty file yields the default configuration. ``default_max_width``
    applies when the file sets no ``max_width``.

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError("config file", str(path), str(e)) from e
    if data is None:
        return TableConfig(max_width=default_max_width)
    if not isinstance(data, dict):
        raise ConfigurationError("config file", str(path), "YAML file must contain a mapping")
    return config_from_dict(data, default_max_width)


def parse_max_width(value: int | str) -> int:
    """
    Parse a width budget given as an integer, a numeric string or ``auto``.

    Raises:
        ConfigurationError: If the value is none of those
    """
    if isinstance(value, bool):
        raise ConfigurationError("max_width", value, "expected an integer or 'auto'")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.lower() == AUTO_WIDTH:
            return terminal_width()
        try:
            return int(text)
        except ValueError:
            pass
    raise ConfigurationError("max_width", value, "expected an integer or 'auto'")


def terminal_width() -> int:
    """Width of the attached terminal, or the default when there is none."""
    return shutil.get_terminal_size((DEFAULT_MAX_WIDTH, 24)).columns


def resolve_max_width(max_width: int | str | None) -> int:
    """Resolve the width budget from explicit arg, env var, or default.

    Resolution order: ``max_width`` arg → ``BOXTABLE_MAX_WIDTH`` env var → 80.

    Args:
        max_width: Explicit width or ``"auto"``, or ``None`` to use env/default.

    Returns:
        The width budget in cells.
    """
    if max_width is not None:
        return parse_max_width(max_width)
    env_value = os.environ.get(MAX_WIDTH_ENV_VAR)
    if env_value:
        return parse_max_width(env_value)
    return DEFAULT_MAX_WIDTH
