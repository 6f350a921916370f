from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List

import numpy as np


class CellKind(IntEnum):
    EMPTY = 0
    SETTLED = 1
    ACTIVE = 2


@dataclass(frozen=True)
class Cell:
    kind: CellKind
    piece: int = 0


EMPTY_CELL = Cell(CellKind.EMPTY)


class GameGrid:
    """Fixed-size board of tagged cells plus the skyline cursor.

    Each cell is empty, settled by a landed piece, or occupied by the falling
    piece. Kinds and piece ids live in two parallel ``int8`` arrays indexed
    ``[y, x]`` with y=0 at the top. Collision only ever looks at settled cells,
    so the falling piece can be tested against a new position while its old
    cells are still marked.

    ``skyline`` is the topmost row known to hold settled content; no row above
    it holds any. It bounds the row shifting done by :meth:`compact_full_rows`.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.kinds = np.zeros((self.height, self.width), dtype=np.int8)
        self.pieces = np.zeros((self.height, self.width), dtype=np.int8)
        self.skyline = self.height - 1

    def reset(self) -> None:
        self.kinds.fill(CellKind.EMPTY)
        self.pieces.fill(0)
        self.skyline = self.height - 1

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        kind = CellKind(int(self.kinds[y, x]))
        if kind == CellKind.EMPTY:
            return EMPTY_CELL
        return Cell(kind, int(self.pieces[y, x]))

    def is_occupied_by_settled(self, x: int, y: int) -> bool:
        # Above the top edge is open space; walls and floor block.
        if x < 0 or x >= self.width or y >= self.height:
            return True
        if y < 0:
            return False
        return self.kinds[y, x] == CellKind.SETTLED

    def mark_active(self, piece: int, x: int, y: int) -> None:
        if not self.is_inside(x, y):
            return
        if self.kinds[y, x] == CellKind.ACTIVE and self.pieces[y, x] == piece:
            return
        self.kinds[y, x] = CellKind.ACTIVE
        self.pieces[y, x] = piece

    def clear_active(self, piece: int, x: int, y: int) -> None:
        if not self.is_inside(x, y):
            return
        self.kinds[y, x] = CellKind.EMPTY
        self.pieces[y, x] = 0

    def settle(self, piece: int, x: int, y: int) -> None:
        if not self.is_inside(x, y):
            return
        self.kinds[y, x] = CellKind.SETTLED
        self.pieces[y, x] = piece
        if y < self.skyline:
            self.skyline = y

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self.kinds[y, :] != CellKind.EMPTY))

    def compact_full_rows(self) -> List[int]:
        """Remove full rows in a single top-to-bottom pass.

        Every row from the skyline down to a full row ``y`` moves down by one,
        row 0 is emptied and the skyline drops by one. The row that lands on
        index ``y`` is not re-checked during the same pass.

        Returns the indices of the rows that were cleared, one per line.
        """
        cleared: List[int] = []
        for y in range(self.height):
            if not self.is_row_full(y):
                continue
            top = max(self.skyline, 1)
            if y >= top:
                self.kinds[top : y + 1, :] = self.kinds[top - 1 : y, :].copy()
                self.pieces[top : y + 1, :] = self.pieces[top - 1 : y, :].copy()
            self.kinds[0, :] = CellKind.EMPTY
            self.pieces[0, :] = 0
            self.skyline += 1
            cleared.append(y)
        return cleared

    def count_active(self) -> int:
        return int(np.count_nonzero(self.kinds == CellKind.ACTIVE))

    def to_array(self) -> np.ndarray:
        """Sign-encoded copy: 0 empty, +t settled, -t falling piece of type t."""
        state = np.zeros((self.height, self.width), dtype=np.int8)
        settled = self.kinds == CellKind.SETTLED
        active = self.kinds == CellKind.ACTIVE
        state[settled] = self.pieces[settled]
        state[active] = -self.pieces[active]
        return state
