from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple


Offset = Tuple[int, int]
Offsets = Tuple[Offset, ...]

NUM_SQUARES = 4


class PieceType(IntEnum):
    T = 1
    L = 2
    J = 3
    Z = 4
    S = 5
    I = 6
    O = 7


NUM_TYPES = len(PieceType)


# (dx, dy) relative to the anchor; entry 0 is always the anchor itself
BASE_OFFSETS: Dict[PieceType, Offsets] = {
    PieceType.T: ((0, 0), (1, 0), (-1, 0), (0, 1)),
    PieceType.L: ((0, 0), (1, 0), (-1, 0), (-1, 1)),
    PieceType.J: ((0, 0), (1, 0), (-1, 0), (1, 1)),
    PieceType.Z: ((0, 0), (-1, 0), (1, 1), (0, 1)),
    PieceType.S: ((0, 0), (1, 0), (-1, 1), (0, 1)),
    PieceType.I: ((0, 0), (1, 0), (-1, 0), (-2, 0)),
    PieceType.O: ((0, 0), (1, 0), (1, 1), (0, 1)),
}


def base_offsets(piece: int) -> Offsets:
    """Look up the spawn orientation of a piece type id (1..7)."""
    return BASE_OFFSETS[PieceType(piece)]


def rotate(offsets: Offsets) -> Offsets:
    """Rotate 90 degrees about the anchor (clockwise with y pointing down)."""
    return tuple((dy, -dx) for dx, dy in offsets)


def cells_at(offsets: Offsets, origin_x: int, origin_y: int) -> list[Tuple[int, int]]:
    return [(origin_x + dx, origin_y + dy) for dx, dy in offsets]
