from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np

from .grid import GameGrid
from .pieces import NUM_TYPES, Offsets, base_offsets, cells_at, rotate
from .rules import LevelRules
from .timer import GravityTimer, ManualTimer

logger = logging.getLogger(__name__)


class GameState(IntEnum):
    INTRO = 0
    STARTED = 1
    PAUSED = 2
    OVER = 3


class Command(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    HARD_DROP = 4
    START = 5
    PAUSE = 6


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        # The I piece spans four columns around the centre spawn column
        if self.width < 4:
            raise ValueError(f"board width must be at least 4, got {self.width}")
        if self.height < 2:
            raise ValueError(f"board height must be at least 2, got {self.height}")


class FallingBlocksGame:
    """Rules engine: board, falling piece, gravity timing, line clears and levels.

    Commands are silently ignored when the lifecycle state does not allow
    them. The host must deliver commands and timer expiries one at a time;
    the engine does no locking of its own.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[LevelRules] = None,
        timer: Optional[GravityTimer] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or LevelRules()
        self.timer = timer if timer is not None else ManualTimer()
        self.rng = rng or random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.state = GameState.INTRO
        self.level = 1
        self.lines = 0
        self.piece = 0
        self.x = 0
        self.y = 0
        self.offsets: Offsets = ()
        self.reset()

    def reset(self) -> None:
        self.timer.disarm()
        self.grid.reset()
        self.state = GameState.INTRO
        self.level = 1
        self.lines = 0
        self.piece = 0
        self.x = self.grid.width // 2
        self.y = 0
        self.offsets = ()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def skyline(self) -> int:
        return self.grid.skyline

    @property
    def interval_ms(self) -> int:
        return self.rules.interval_ms(self.level)

    # -- piece helpers -------------------------------------------------------

    def piece_fits(self, x: int, y: int, offsets: Offsets) -> bool:
        for cx, cy in cells_at(offsets, x, y):
            if self.grid.is_occupied_by_settled(cx, cy):
                return False
        return True

    def _erase_piece(self) -> None:
        for cx, cy in cells_at(self.offsets, self.x, self.y):
            self.grid.clear_active(self.piece, cx, cy)

    def _place_piece(self) -> None:
        for cx, cy in cells_at(self.offsets, self.x, self.y):
            self.grid.mark_active(self.piece, cx, cy)

    def _lock_piece(self) -> None:
        for cx, cy in cells_at(self.offsets, self.x, self.y):
            self.grid.settle(self.piece, cx, cy)

    def _spawn_piece(self) -> bool:
        self.piece = self.rng.randint(1, NUM_TYPES)
        self.x = self.grid.width // 2
        self.y = 0
        self.offsets = base_offsets(self.piece)
        if not self.piece_fits(self.x, self.y, self.offsets):
            return False
        self._place_piece()
        return True

    def _shift(self, dx: int, dy: int) -> bool:
        if not self.piece_fits(self.x + dx, self.y + dy, self.offsets):
            return False
        self._erase_piece()
        self.x += dx
        self.y += dy
        self._place_piece()
        return True

    def _arm_timer(self) -> None:
        self.timer.arm(self.interval_ms)

    def _resume(self) -> None:
        self.state = GameState.STARTED
        self._arm_timer()
        logger.debug("resumed at level %d (%d ms)", self.level, self.interval_ms)

    def _game_over(self) -> None:
        self.state = GameState.OVER
        self.timer.disarm()
        logger.debug("game over: %d lines, level %d", self.lines, self.level)

    # -- commands ------------------------------------------------------------

    def start(self) -> None:
        if self.state == GameState.STARTED:
            return
        if self.state == GameState.PAUSED:
            self._resume()
            return
        if self.state == GameState.OVER:
            self.reset()
        self.state = GameState.STARTED
        logger.debug("game started on a %dx%d board", self.grid.width, self.grid.height)
        if self._spawn_piece():
            self._arm_timer()
        else:
            self._game_over()

    def pause(self) -> None:
        if self.state == GameState.STARTED:
            self.state = GameState.PAUSED
            self.timer.disarm()
            logger.debug("paused")
        elif self.state == GameState.PAUSED:
            self._resume()

    def move_left(self) -> None:
        if self.state != GameState.STARTED:
            return
        self._shift(-1, 0)

    def move_right(self) -> None:
        if self.state != GameState.STARTED:
            return
        self._shift(1, 0)

    def rotate(self) -> None:
        if self.state != GameState.STARTED:
            return
        rotated = rotate(self.offsets)
        if not self.piece_fits(self.x, self.y, rotated):
            return
        self._erase_piece()
        self.offsets = rotated
        self._place_piece()

    def soft_down(self) -> bool:
        """Move the piece one row down if it fits. Never settles the piece."""
        if self.state != GameState.STARTED:
            return False
        return self._shift(0, 1)

    def hard_drop(self) -> None:
        if self.state != GameState.STARTED:
            return
        if not self.piece_fits(self.x, self.y + 1, self.offsets):
            return
        self.timer.disarm()
        self._erase_piece()
        while self.piece_fits(self.x, self.y + 1, self.offsets):
            self.y += 1
        self._place_piece()
        self._arm_timer()

    def tick(self) -> None:
        """Gravity timer expiry: fall one row, or settle and bring in the next piece."""
        if self.state != GameState.STARTED:
            return
        if self.soft_down():
            self._arm_timer()
            return

        self._lock_piece()
        for _ in self.grid.compact_full_rows():
            self.lines += 1
            level = self.rules.level_after_line(self.level, self.lines)
            if level != self.level:
                logger.debug("level %d reached after %d lines", level, self.lines)
            self.level = level

        if self.grid.skyline > 0 and self._spawn_piece():
            self._arm_timer()
        else:
            self._game_over()

    def handle(self, command: Command | int) -> None:
        command = Command(command)
        if command == Command.LEFT:
            self.move_left()
        elif command == Command.RIGHT:
            self.move_right()
        elif command == Command.ROTATE:
            self.rotate()
        elif command == Command.HARD_DROP:
            self.hard_drop()
        elif command == Command.START:
            self.start()
        elif command == Command.PAUSE:
            self.pause()
        elif command == Command.NONE:
            pass

    def get_state(self) -> np.ndarray:
        return self.grid.to_array()
