

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LevelRules:
    slowest_interval_ms: int = 700
    interval_step_ms: int = 60
    rows_per_level: int = 5
    max_level: int = 10

    def __post_init__(self) -> None:
        if self.rows_per_level < 1:
            raise ValueError("rows_per_level must be positive")
        if self.max_level < 1:
            raise ValueError("max_level must be positive")
        if self.interval_ms(self.max_level) <= 0:
            raise ValueError(
                f"gravity interval at level {self.max_level} would be "
                f"{self.interval_ms(self.max_level)} ms"
            )

    def interval_ms(self, level: int) -> int:
        return self.slowest_interval_ms - self.interval_step_ms * level

    def level_after_line(self, level: int, lines: int) -> int:
        # Called once per cleared line with the updated line count
        if lines % self.rows_per_level == 0 and level < self.max_level:
            return level + 1
        return level
