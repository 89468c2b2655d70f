"""Speech balloon rendering.

The pipeline runs once per invocation:
tab expansion -> width measurement -> padding -> border drawing.
"""

import logging

from .config import DEFAULT_CONFIG, BorderGlyphs
from .utils import calculate_text_width, pad_to_width

logger = logging.getLogger(__name__)


def expand_tabs(lines: list[str], tab_width: int = DEFAULT_CONFIG.tab_width) -> list[str]:
    """Replace every tab with a fixed run of spaces.

    Tab stops are not honored: each tab becomes exactly ``tab_width`` spaces
    wherever it appears in the line.
    """
    spaces = " " * tab_width
    return [line.replace("\t", spaces) for line in lines]


def calculate_max_width(lines: list[str]) -> int:
    """Return the largest code-point width among lines (0 when empty)."""
    max_width = 0
    for line in lines:
        width = calculate_text_width(line)
        if width > max_width:
            max_width = width
    return max_width


def normalize_lines(lines: list[str], width: int) -> list[str]:
    """Pad every line with trailing spaces to the given width."""
    return [pad_to_width(line, width) for line in lines]


def _row_glyphs(index: int, total: int, borders: BorderGlyphs) -> tuple[str, str]:
    if total == 1:
        return borders.left_corner, borders.right_corner
    if index == 0:
        return borders.top_left, borders.top_right
    if index == total - 1:
        return borders.bottom_left, borders.bottom_right
    return borders.side, borders.side


def build_balloon(lines: list[str], width: int, borders: BorderGlyphs = DEFAULT_CONFIG.borders) -> str:
    """Draw the balloon around already-normalized lines.

    Args:
        lines: Lines padded to ``width``
        width: Common width of the lines
        borders: Glyph table for the edges and corners

    Returns:
        The balloon rows joined by newlines, without a trailing newline

    Examples:
        >>> print(build_balloon(["moo"], 3))
         _____
        < moo >
         -----
    """
    rows = [" " + borders.top_edge * (width + 2)]

    total = len(lines)
    for i, line in enumerate(lines):
        left, right = _row_glyphs(i, total, borders)
        rows.append(f"{left} {line} {right}")

    rows.append(" " + borders.bottom_edge * (width + 2))
    return "\n".join(rows)


def render_balloon(lines: list[str], tab_width: int = DEFAULT_CONFIG.tab_width) -> str:
    """Run the full pipeline on raw input lines and return the balloon."""
    expanded = expand_tabs(lines, tab_width)
    width = calculate_max_width(expanded)
    logger.debug("Rendering balloon: %d lines, width %d", len(expanded), width)
    return build_balloon(normalize_lines(expanded, width), width)
