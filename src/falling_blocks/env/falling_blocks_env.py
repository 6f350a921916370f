from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import (
    Command,
    FallingBlocksGame,
    GameConfig,
    GameState,
    LevelRules,
    ManualTimer,
    PieceType,
)
from falling_blocks.visualization.renderer import color_for_value


# Agent-facing commands; START and PAUSE stay with the environment
PLAY_COMMANDS = (Command.NONE, Command.LEFT, Command.RIGHT, Command.ROTATE, Command.HARD_DROP)


class FallingBlocksEnv(gym.Env):
    """Drives the engine one command plus one gravity tick per step.

    The environment is the host: it owns a :class:`ManualTimer` and delivers
    the gravity expiry itself after each command, so every step is serialized.
    Reward is the number of lines cleared during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 rules: Optional[LevelRules] = None,
                 max_steps: int = 10000) -> None:
        super().__init__()
        self.timer = ManualTimer()
        self.game = FallingBlocksGame(config, rules=rules, timer=self.timer)
        self.render_mode = render_mode
        self.max_steps = int(max_steps)

        h, w = self.game.height, self.game.width
        n = len(PieceType)
        self.observation_space = spaces.Box(low=-n, high=n, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(PLAY_COMMANDS))

        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "lines": self.game.lines,
            "level": self.game.level,
            "interval_ms": self.game.interval_ms,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.reset()
        self.game.start()
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        lines_before = self.game.lines
        self.game.handle(PLAY_COMMANDS[int(action)])
        if self.timer.consume():
            self.game.tick()
        self._steps += 1

        reward = float(self.game.lines - lines_before)
        terminated = self.game.state == GameState.OVER
        truncated = not terminated and self._steps >= self.max_steps
        return self.game.get_state(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self.game.get_state()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(grid[y, x]))
        return img

    def close(self) -> None:
        pass
