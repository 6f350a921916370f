"""Game module for Falling Blocks.

Exports the rules engine and supporting classes:
- GameGrid: tagged-cell board, skyline and row compaction
- PieceType: the seven piece shapes and their offsets
- LevelRules: level progression and gravity timing
- GravityTimer / ManualTimer: one-shot gravity alarm
- FallingBlocksGame: lifecycle, commands and gravity tick
"""

from .grid import Cell, CellKind, GameGrid
from .pieces import BASE_OFFSETS, PieceType, rotate
from .rules import LevelRules
from .timer import GravityTimer, ManualTimer
from .core import Command, FallingBlocksGame, GameConfig, GameState

__all__ = [
    "Cell",
    "CellKind",
    "GameGrid",
    "BASE_OFFSETS",
    "PieceType",
    "rotate",
    "LevelRules",
    "GravityTimer",
    "ManualTimer",
    "Command",
    "FallingBlocksGame",
    "GameConfig",
    "GameState",
]
