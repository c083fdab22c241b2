# solver.py
# Backtracking search over the live board; solves for a given date

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from board import Board
from pieces import OrientationSet, build_roster
from placements import Cell, fit, placements_at
from shape import EMPTY, Shape

logger = logging.getLogger(__name__)

PIECE_ORDER = "pieces"
FIRST_FREE_CELL = "cells"
STRATEGIES = (PIECE_ORDER, FIRST_FREE_CELL)


@dataclass
class SearchStats:
    calls: int = 0
    solutions: int = 0
    elapsed: float = 0.0


ProgressCallback = Callable[["BacktrackingSearch", int], None]


class BacktrackingSearch:
    """Enumerates every way to place the whole roster on ``board``.

    ``pieces`` places roster entry k at depth k, trying every anchor in
    row-major order. ``cells`` instead covers the first free cell with any
    unused piece at each depth; both yield the same set of tilings.

    The board is mutated in place and always restored before a level
    returns, including when the consumer stops iterating early.
    """

    def __init__(
        self,
        board: Board,
        roster: Sequence[OrientationSet],
        strategy: str = PIECE_ORDER,
        prune: bool = False,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> None:
        if strategy not in STRATEGIES:
            raise ValueError(f"unknown strategy {strategy!r}, expected one of {STRATEGIES}")
        self.board = board
        self.roster = tuple(roster)
        self.strategy = strategy
        self.prune = prune
        self.stats = SearchStats()
        self._progress_callback = progress_callback
        self._used = [False] * len(self.roster)
        self._sums_cache: Dict[Tuple[int, ...], frozenset[int]] = {}

    def solutions(self) -> Iterator[Shape]:
        self.stats = SearchStats()
        piece_area = sum(piece.size for piece in self.roster)
        free = self.board.free_count()
        if free != piece_area:
            logger.warning("Board has %d free cells but the pieces cover %d", free, piece_area)
            if self.prune:
                logger.warning("Region pruning disabled: it needs an exact area match")
        pruning = self.prune and free == piece_area

        logger.info("Search started: %d pieces, strategy=%s, prune=%s", len(self.roster), self.strategy, pruning)
        start = time.time()
        search = self._search_pieces if self.strategy == PIECE_ORDER else self._search_cells
        try:
            yield from search(0, pruning)
        finally:
            self.stats.elapsed = time.time() - start
            logger.info(
                "Search finished: %d calls, %d solutions in %.2fs",
                self.stats.calls,
                self.stats.solutions,
                self.stats.elapsed,
            )

    def _enter(self, depth: int) -> None:
        self.stats.calls += 1
        if self._progress_callback:
            self._progress_callback(self, depth)

    def _report(self) -> Shape:
        self.stats.solutions += 1
        snapshot = self.board.snapshot()
        logger.debug("Solution #%d found after %d calls", self.stats.solutions, self.stats.calls)
        return snapshot

    def _search_pieces(self, piece_idx: int, pruning: bool) -> Iterator[Shape]:
        self._enter(piece_idx)
        if piece_idx == len(self.roster):
            yield self._report()
            return
        for r, c in self.board.coords():
            for orientation in self.roster[piece_idx]:
                occupied = fit(orientation, self.board, r, c)
                if not occupied:
                    continue
                self._apply(piece_idx, occupied)
                try:
                    if not (pruning and self._creates_dead_region()):
                        yield from self._search_pieces(piece_idx + 1, pruning)
                finally:
                    self._remove(piece_idx, occupied)

    def _search_cells(self, depth: int, pruning: bool) -> Iterator[Shape]:
        self._enter(depth)
        if depth == len(self.roster):
            yield self._report()
            return
        cell = self.board.first_free()
        if cell is None:
            return
        for piece_idx, piece in enumerate(self.roster):
            if self._used[piece_idx]:
                continue
            for placement in list(placements_at(piece, self.board, cell)):
                self._apply(piece_idx, placement.cells)
                try:
                    if not (pruning and self._creates_dead_region()):
                        yield from self._search_cells(depth + 1, pruning)
                finally:
                    self._remove(piece_idx, placement.cells)

    def _apply(self, piece_idx: int, cells: Sequence[Cell]) -> None:
        self.board.fill(cells, self.roster[piece_idx].id)
        self._used[piece_idx] = True

    def _remove(self, piece_idx: int, cells: Sequence[Cell]) -> None:
        self.board.clear(cells)
        self._used[piece_idx] = False

    def _reachable_areas(self) -> frozenset[int]:
        sizes = tuple(sorted(p.size for idx, p in enumerate(self.roster) if not self._used[idx]))
        cached = self._sums_cache.get(sizes)
        if cached is not None:
            return cached
        reachable = {0}
        for size in sizes:
            reachable |= {total + size for total in reachable}
        result = frozenset(reachable)
        self._sums_cache[sizes] = result
        return result

    def _creates_dead_region(self) -> bool:
        """True when some free region can't be an exact sum of remaining piece sizes."""
        reachable = self._reachable_areas()
        grid = self.board.grid
        visited: set[Cell] = set()
        for r, c in self.board.coords():
            if grid[r][c] != EMPTY or (r, c) in visited:
                continue
            stack = [(r, c)]
            visited.add((r, c))
            area = 0
            while stack:
                cr, cc = stack.pop()
                area += 1
                for nr, nc in ((cr - 1, cc), (cr + 1, cc), (cr, cc - 1), (cr, cc + 1)):
                    if 0 <= nr < self.board.height and 0 <= nc < self.board.width:
                        if (nr, nc) not in visited and grid[nr][nc] == EMPTY:
                            visited.add((nr, nc))
                            stack.append((nr, nc))
            if area not in reachable:
                return True
        return False


def solve_for_date(
    month: int,
    day: int,
    strategy: str = PIECE_ORDER,
    prune: bool = False,
    limit: Optional[int] = None,
) -> Tuple[List[Shape], SearchStats]:
    """Solutions for the date (all of them unless ``limit`` is given)."""
    roster = build_roster()
    board = Board.for_date(month, day)
    search = BacktrackingSearch(board, roster, strategy=strategy, prune=prune)
    solutions = search.solutions()
    try:
        found = list(itertools.islice(solutions, limit))
    finally:
        solutions.close()
    return found, search.stats
