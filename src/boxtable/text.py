"""
Cell text helpers.

Display width is measured as the number of characters. Wide characters
(CJK, emoji) are counted as one cell each, so tables containing them will
not line up in a terminal.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .models import CONTROL_TRANSLATION, Align

TRUNCATION_MARKER = "+"
"""Appended to a cell whose text was cut to fit its column."""


def display_width(text: str) -> int:
    """Number of terminal cells ``text`` occupies."""
    return len(text)


def stringify(value: Any, cell_format: Callable[[Any], str] = str) -> str:
    """
    Turn a cell value into single-line display text.

    Args:
        value: Any cell value; ``None`` renders as an empty cell
        cell_format: Callable producing the display string

    Returns:
        Display text with line breaks and tabs replaced by spaces
    """
    if value is None:
        return ""
    return cell_format(value).translate(CONTROL_TRANSLATION)


def truncate(text: str, width: int) -> str:
    """Cut ``text`` to ``width`` cells, ending with the truncation marker."""
    if width <= 0:
        return ""
    return text[: width - 1] + TRUNCATION_MARKER


def pad(text: str, width: int, align: Align) -> str:
    """
    Pad ``text`` with spaces to exactly ``width`` cells.

    Centered text gets the extra space on the right when the padding is odd.
    """
    gap = width - display_width(text)
    if gap <= 0:
        return text
    if align is Align.RIGHT:
        return " " * gap + text
    if align is Align.CENTER:
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap
