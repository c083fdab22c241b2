# board.py
# Board geometry, month/day coordinate maps, the live board

from __future__ import annotations

import calendar
import logging
from typing import Iterable, Iterator

from shape import BLOCKED, DAY_MARK, EMPTY, MONTH_MARK, Shape

logger = logging.getLogger(__name__)

BOARD_LAYOUT: tuple[str, ...] = (
    "......#",
    "......#",
    ".......",
    ".......",
    ".......",
    ".......",
    "...####",
)

MONTH_COLS = 6
DAY_COLS = 7
# Day cells start below the two month rows.
DAY_ROW_OFFSET = 2


class DateError(ValueError):
    pass


def board_shape() -> Shape:
    return Shape.from_rows(BOARD_LAYOUT, id=BLOCKED)


def month_cell(month: int) -> tuple[int, int]:
    if not 1 <= month <= 12:
        raise DateError(f"month must be in 1-12, got {month}")
    m = month - 1
    return m // MONTH_COLS, m % MONTH_COLS


def day_cell(day: int) -> tuple[int, int]:
    if not 1 <= day <= 31:
        raise DateError(f"day must be in 1-31, got {day}")
    d = day - 1
    return DAY_ROW_OFFSET + d // DAY_COLS, d % DAY_COLS


# Month coordinates (1–12)
MONTH_COORDS: dict[int, tuple[int, int]] = {m: month_cell(m) for m in range(1, 13)}

# Day coordinates (1–31)
DAY_COORDS: dict[int, tuple[int, int]] = {d: day_cell(d) for d in range(1, 32)}


def is_calendar_date(month: int, day: int) -> bool:
    # 2000 is a leap year so 29 February counts.
    return day <= calendar.monthrange(2000, month)[1]


class Board:
    """The one mutable grid the search fills in and clears again."""

    def __init__(self, shape: Shape) -> None:
        self.grid: list[list[str]] = [list(row) for row in shape.cells]
        self.height = shape.height
        self.width = shape.width

    @classmethod
    def for_date(cls, month: int, day: int, shape: Shape | None = None) -> Board:
        board = cls(shape or board_shape())
        for cell, mark in ((month_cell(month), MONTH_MARK), (day_cell(day), DAY_MARK)):
            r, c = cell
            if not (r < board.height and c < board.width) or board.grid[r][c] != EMPTY:
                raise DateError(f"cell {cell} for {mark} is not free on this board")
            board.grid[r][c] = mark
        if not is_calendar_date(month, day):
            logger.warning("%s %d is not a calendar date", calendar.month_abbr[month], day)
        return board

    def symbol_at(self, r: int, c: int) -> str:
        return self.grid[r][c]

    def coords(self) -> Iterator[tuple[int, int]]:
        for r in range(self.height):
            for c in range(self.width):
                yield r, c

    def fill(self, cells: Iterable[tuple[int, int]], symbol: str) -> None:
        for r, c in cells:
            self.grid[r][c] = symbol

    def clear(self, cells: Iterable[tuple[int, int]]) -> None:
        for r, c in cells:
            self.grid[r][c] = EMPTY

    def first_free(self) -> tuple[int, int] | None:
        for r, row in enumerate(self.grid):
            for c, symbol in enumerate(row):
                if symbol == EMPTY:
                    return r, c
        return None

    def free_count(self) -> int:
        return sum(row.count(EMPTY) for row in self.grid)

    def snapshot(self) -> Shape:
        return Shape(BLOCKED, tuple(tuple(row) for row in self.grid))
