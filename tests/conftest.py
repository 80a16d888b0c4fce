"""Pytest fixtures for boxtable tests."""

import pytest

from boxtable import Align, Column, TableConfig


@pytest.fixture
def cube_rows() -> list[list[int]]:
    """Three rows of three single-digit cells."""
    return [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


@pytest.fixture
def cube_config() -> TableConfig:
    """Headers a, b, c on the first three columns."""
    return TableConfig(
        columns={
            0: Column("a", Align.LEFT),
            1: Column("b", Align.LEFT),
            2: Column("c", Align.LEFT),
        }
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove boxtable environment overrides."""
    monkeypatch.delenv("BOXTABLE_MAX_WIDTH", raising=False)
