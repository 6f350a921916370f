from __future__ import annotations

import random
from typing import Iterable

import pytest

from falling_blocks.game import FallingBlocksGame, GameConfig, ManualTimer, PieceType


class ScriptedRandom(random.Random):
    """Deals piece ids from a fixed script, repeating the last one."""

    def __init__(self, pieces: Iterable[int]) -> None:
        super().__init__(0)
        self.script = [int(p) for p in pieces]

    def randint(self, a: int, b: int) -> int:  # type: ignore[override]
        value = self.script.pop(0) if len(self.script) > 1 else self.script[0]
        assert a <= value <= b
        return value


def make_game(width: int = 10, height: int = 20, pieces: Iterable[int] = (PieceType.O,)) -> FallingBlocksGame:
    return FallingBlocksGame(GameConfig(width=width, height=height), timer=ManualTimer(), rng=ScriptedRandom(pieces))


@pytest.fixture
def game() -> FallingBlocksGame:
    return make_game()
