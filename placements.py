# placements.py
# Fit test + placements covering a given board cell

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol

from shape import EMPTY, Shape

Cell = tuple[int, int]


class Grid(Protocol):
    height: int
    width: int

    def symbol_at(self, r: int, c: int) -> str: ...


@dataclass(frozen=True)
class Placement:
    piece: str
    cells: tuple[Cell, ...]  # board coordinates covered by this placement


def fit(piece: Shape, board: Grid, r: int, c: int) -> list[Cell]:
    """Board cells ``piece`` would fill with its top-left corner at (r, c).

    Empty when the piece overhangs the board or lands on any non-free
    cell; never a partial list.
    """
    if r + piece.height > board.height or c + piece.width > board.width:
        return []
    occupied: list[Cell] = []
    for pr, pc in piece.filled_cells():
        rr, cc = r + pr, c + pc
        if board.symbol_at(rr, cc) != EMPTY:
            return []
        occupied.append((rr, cc))
    return occupied


def placements_at(orientations: Iterable[Shape], board: Grid, cell: Cell) -> Iterator[Placement]:
    """Every fitting placement whose footprint includes ``cell``."""
    r, c = cell
    for piece in orientations:
        for pr, pc in piece.filled_cells():
            if pr > r or pc > c:
                continue
            occupied = fit(piece, board, r - pr, c - pc)
            if occupied:
                yield Placement(piece.id, tuple(occupied))
