"""One-shot gravity alarms.

The engine arms a timer after every successful fall step and disarms it on
pause. Hosts implement :class:`GravityTimer` on top of whatever scheduling they
have and route each expiry, serialized with user commands, into
``FallingBlocksGame.tick``.
"""

from __future__ import annotations

from typing import Optional


class GravityTimer:
    def arm(self, duration_ms: int) -> None:
        """Schedule a single wake-up, replacing any pending one."""
        raise NotImplementedError

    def disarm(self) -> None:
        """Cancel the pending wake-up, if any."""
        raise NotImplementedError


class ManualTimer(GravityTimer):
    """Timer for headless hosts: records the pending interval, never fires itself."""

    def __init__(self) -> None:
        self.pending_ms: Optional[int] = None
        self.arm_count = 0

    @property
    def armed(self) -> bool:
        return self.pending_ms is not None

    def arm(self, duration_ms: int) -> None:
        self.pending_ms = int(duration_ms)
        self.arm_count += 1

    def disarm(self) -> None:
        self.pending_ms = None

    def consume(self) -> bool:
        """Treat the pending wake-up as expired. Returns whether one was pending."""
        if self.pending_ms is None:
            return False
        self.pending_ms = None
        return True
