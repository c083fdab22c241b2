# pieces.py
# Piece definitions + rotations/flips

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Sequence, Tuple

from shape import BLOCKED, DAY_MARK, EMPTY, MONTH_MARK, Shape

logger = logging.getLogger(__name__)

# Symbols the board itself uses; pieces may not reuse them.
RESERVED_SYMBOLS = frozenset({EMPTY, BLOCKED, MONTH_MARK, DAY_MARK})

# Canonical piece shapes, '.' is transparent
PIECE_DEFINITIONS: Tuple[Tuple[str, ...], ...] = (
    ("F..", "F..", "FFF"),
    ("TTTT", ".T.."),
    ("SS..", ".SSS"),
    ("QQQ", "QQQ"),
    ("Z..", "ZZZ", "..Z"),
    ("L...", "LLLL"),
    ("U.U", "UUU"),
    ("BB.", "BBB"),
)

PIECE_COLORS: Dict[str, Tuple[int, int, int]] = {
    "F": (250, 80, 80),
    "T": (60, 200, 80),
    "S": (255, 190, 60),
    "Q": (45, 140, 255),
    "Z": (190, 70, 210),
    "L": (90, 220, 220),
    "U": (235, 235, 240),
    "B": (130, 130, 140),
}


class PieceDefinitionError(ValueError):
    pass


@dataclass(frozen=True)
class OrientationSet:
    """Distinct orientations of one piece, in first-seen order."""

    id: str
    orientations: Tuple[Shape, ...]

    @property
    def size(self) -> int:
        return self.orientations[0].filled_count

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.orientations)

    def __len__(self) -> int:
        return len(self.orientations)

    def __contains__(self, shape: object) -> bool:
        return shape in self.orientations


def piece_from_rows(rows: Sequence[str]) -> Shape:
    symbols = {s for row in rows for s in row if s != EMPTY}
    if not symbols:
        raise PieceDefinitionError(f"piece {list(rows)!r} has no filled cells")
    if len(symbols) > 1:
        raise PieceDefinitionError(f"piece {list(rows)!r} mixes symbols {sorted(symbols)}")
    return Shape.from_rows(rows)


def generate_orientations(shape: Shape) -> OrientationSet:
    """All unique rotations + reflected rotations of ``shape``."""
    seen: set[Shape] = set()
    result: list[Shape] = []

    for base in (shape, shape.reflect()):
        current = base
        for _ in range(4):
            if current not in seen:
                seen.add(current)
                result.append(current)
            current = current.rotate()

    return OrientationSet(shape.id, tuple(result))


def build_roster(definitions: Iterable[Sequence[str]] = PIECE_DEFINITIONS) -> Tuple[OrientationSet, ...]:
    roster: list[OrientationSet] = []
    ids: set[str] = set()
    for rows in definitions:
        piece = piece_from_rows(rows)
        if piece.id in RESERVED_SYMBOLS:
            raise PieceDefinitionError(f"piece id {piece.id!r} is reserved for the board")
        if piece.id in ids:
            raise PieceDefinitionError(f"duplicate piece id {piece.id!r}")
        ids.add(piece.id)
        roster.append(generate_orientations(piece))

    logger.info(
        "Built roster: %s",
        ", ".join(f"{p.id}={len(p)}" for p in roster),
    )
    return tuple(roster)

