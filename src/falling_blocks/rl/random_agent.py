

from __future__ import annotations

import argparse

import gymnasium as gym

import falling_blocks.env  # noqa: F401


def run_random(steps: int = 500, seed: int | None = None) -> float:
    env = gym.make("FallingBlocks-v0")
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    total_lines = 0.0
    games = 1
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_lines += float(reward)
        if terminated or truncated:
            obs, info = env.reset()
            games += 1
    env.close()
    print(f"Random agent cleared {total_lines:.0f} lines over {games} game(s)")
    return total_lines


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=500)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args()
    run_random(args.steps, args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
