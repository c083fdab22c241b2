# render.py
# Terminal rendering of solved boards

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional, TextIO, Tuple

from blessed import Terminal

from shape import BLOCKED, DAY_MARK, MONTH_MARK, Shape

BLOCK = "██"

COLOR_MODES = ("auto", "always", "never")


def color_enabled(mode: str, stream: TextIO) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def styled_terminal() -> Terminal:
    # Fall back to a common colour terminal when TERM is unset.
    return Terminal(kind=os.environ.get("TERM") or "xterm-256color", force_styling=True)


def block_map(
    colors: Mapping[str, Tuple[int, int, int]],
    term: Optional[Terminal] = None,
) -> Dict[str, str]:
    """Coloured blocks keyed by piece id, downgraded to what the terminal supports."""
    if term is None:
        term = styled_terminal()
    return {piece: term.color_rgb(r, g, b)(BLOCK) for piece, (r, g, b) in colors.items()}


def render_cell(symbol: str, month: int, day: int, blocks: Mapping[str, str]) -> str:
    if symbol == MONTH_MARK:
        return f"{month:02d}"
    if symbol == DAY_MARK:
        return f"{day:02d}"
    if symbol == BLOCKED:
        return "  "
    return blocks.get(symbol, symbol * 2)


def render_solution(
    solution: Shape,
    month: int,
    day: int,
    blocks: Mapping[str, str] | None = None,
) -> str:
    blocks = blocks or {}
    return "\n".join(
        "".join(render_cell(symbol, month, day, blocks) for symbol in row)
        for row in solution.cells
    )
