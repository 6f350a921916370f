from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import pygame

from falling_blocks.game import Command, FallingBlocksGame, GameConfig, GameState, GravityTimer
from .renderer import Renderer


GRAVITY_EVENT = pygame.USEREVENT + 1

KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_s: Command.START,
    pygame.K_p: Command.PAUSE,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
}

STATE_HINTS = {
    GameState.INTRO: "press S to start",
    GameState.STARTED: "",
    GameState.PAUSED: "paused - P to resume",
    GameState.OVER: "game over - S to play again",
}


class PygameTimer(GravityTimer):
    """One-shot gravity alarm posted to the pygame event queue."""

    def __init__(self, event_type: int = GRAVITY_EVENT) -> None:
        self.event_type = event_type

    def arm(self, duration_ms: int) -> None:
        # set_timer replaces any pending timer for the same event type
        pygame.time.set_timer(self.event_type, int(duration_ms), loops=1)

    def disarm(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        # Drop an expiry that was queued before the cancel
        pygame.event.clear(self.event_type)


def status_line(game: FallingBlocksGame) -> str:
    text = f"Level {game.level}  Lines {game.lines}"
    hint = STATE_HINTS[game.state]
    return f"{text}  {hint}" if hint else text


def run(config: Optional[GameConfig] = None, cell_size: int = 28) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlocksGame(config, timer=PygameTimer())
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.width, game.height))
        pygame.display.set_caption("Falling Blocks")

        # All engine calls happen on this loop, one event at a time
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == GRAVITY_EVENT:
                    game.tick()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            game.handle(command)

            renderer.draw(screen, game.get_state(), status_line(game))
            clock.tick(60)
        print(f"Final: {game.lines} lines, level {game.level}")
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks")
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell_size", type=int, default=28)
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = GameConfig(width=args.width, height=args.height, random_seed=args.seed)
    run(config, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
