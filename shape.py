# shape.py
# Immutable symbol grids + geometric transforms

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator, Sequence

EMPTY = "."
BLOCKED = "#"
MONTH_MARK = "M"
DAY_MARK = "D"

Grid = tuple[tuple[str, ...], ...]


class ShapeError(ValueError):
    """Raised for malformed grids (empty, ragged or multi-char symbols)."""


@dataclass(frozen=True)
class Shape:
    """A rectangular grid of one-character symbols.

    Equality and hashing only look at the grid, so two orientations of a
    piece that happen to produce the same cells collapse in a set.
    """

    id: str = field(compare=False)
    cells: Grid

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ShapeError(f"shape {self.id!r} has no cells")
        width = len(self.cells[0])
        for row in self.cells:
            if len(row) != width:
                raise ShapeError(f"shape {self.id!r} has ragged rows")
            if any(len(symbol) != 1 for symbol in row):
                raise ShapeError(f"shape {self.id!r} has multi-character symbols")

    @classmethod
    def from_rows(cls, rows: Sequence[str], id: str | None = None) -> Shape:
        cells = tuple(tuple(row) for row in rows)
        if id is None:
            symbols = [s for row in cells for s in row if s != EMPTY]
            if not symbols:
                raise ShapeError("cannot infer an id for a shape with no filled cells")
            id = symbols[0]
        return cls(id=id, cells=cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def filled_count(self) -> int:
        return sum(1 for _ in self.filled_cells())

    def symbol_at(self, r: int, c: int) -> str:
        return self.cells[r][c]

    def coords(self) -> Iterator[tuple[int, int]]:
        """Every (row, col) in row-major order."""
        return itertools.product(range(self.height), range(self.width))

    def filled_cells(self) -> Iterator[tuple[int, int]]:
        return ((r, c) for r, c in self.coords() if self.cells[r][c] != EMPTY)

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.cells]

    def reflect(self) -> Shape:
        # Mirror along the vertical axis.
        return Shape(self.id, tuple(tuple(reversed(row)) for row in self.cells))

    def transpose(self) -> Shape:
        return Shape(self.id, tuple(zip(*self.cells)))

    def rotate(self) -> Shape:
        # reflect-then-transpose; the other order turns the opposite way.
        return self.reflect().transpose()

    def __str__(self) -> str:
        return "\n".join(self.rows())
