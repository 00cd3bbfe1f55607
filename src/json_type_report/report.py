from __future__ import annotations
import unicodedata
from typing import List

from .analysis import Analysis

HEADERS = ("Type", "Number of objects", "Total byte size")

# double-line box: (left, fill, join, right) per rule
_TOP = ("╔", "═", "╦", "╗")
_MID = ("╠", "═", "╬", "╣")
_BOTTOM = ("╚", "═", "╩", "╝")
_SIDE = "║"


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch) or unicodedata.category(ch) in ("Mn", "Me", "Cf"):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def display_width(text: str) -> int:
    """Terminal columns taken by `text` (CJK and emoji count double)."""
    return sum(_char_width(ch) for ch in text)


def _wrap(text: str, width: int) -> List[str]:
    # split on display columns; a double-width char never straddles lines
    chunks, cur, cur_w = [], "", 0
    for ch in text:
        w = _char_width(ch)
        if cur and cur_w + w > width:
            chunks.append(cur)
            cur, cur_w = "", 0
        cur += ch
        cur_w += w
    chunks.append(cur)
    return chunks


def _pad(text: str, width: int, align: str) -> str:
    gap = max(0, width - display_width(text))
    if align == "left":
        return text + " " * gap
    if align == "right":
        return " " * gap + text
    left = gap // 2
    return " " * left + text + " " * (gap - left)


def _rule(widths: List[int], parts) -> str:
    left, fill, join, right = parts
    return left + join.join(fill * (w + 2) for w in widths) + right


def render_table(analysis: Analysis, max_column_width: int = 40) -> str:
    """Render the analysis as a three column table, one row per type.

    Type cells are left-aligned and wrap at `max_column_width` display columns;
    counts are right-aligned. Rows follow key order.
    """
    if max_column_width < 1:
        raise ValueError("max_column_width must be >= 1")
    rows = [[str(k), str(i.object_count), str(i.total_byte_size)] for k, i in analysis.items()]
    cells = [[_wrap(c, max_column_width) for c in row] for row in [list(HEADERS)] + rows]
    widths = [max(display_width(part) for row in cells for part in row[col]) for col in range(len(HEADERS))]

    out = [_rule(widths, _TOP)]
    for idx, row in enumerate(cells):
        if idx:
            out.append(_rule(widths, _MID))
        height = max(len(c) for c in row)
        for n in range(height):
            parts = []
            for col, c in enumerate(row):
                part = c[n] if n < len(c) else ""
                w = widths[col]
                if idx == 0:
                    parts.append(_pad(part, w, "center"))
                elif col == 0:
                    parts.append(_pad(part, w, "left"))
                else:
                    parts.append(_pad(part, w, "right"))
            out.append(_SIDE + _SIDE.join(f" {p} " for p in parts) + _SIDE)
    out.append(_rule(widths, _BOTTOM))
    return "\n".join(out) + "\n"


def render_debug(analysis: Analysis) -> str:
    return repr(dict(analysis.items())) + "\n"
