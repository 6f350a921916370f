import gymnasium as gym
import numpy as np

import falling_blocks.env  # noqa: F401
from falling_blocks.env.falling_blocks_env import PLAY_COMMANDS
from falling_blocks.game import Command, GameState


def test_reset_starts_a_game():
    env = gym.make("FallingBlocks-v0")
    obs, info = env.reset(seed=1)
    assert obs.shape == (20, 10)
    assert obs.dtype == np.int8
    assert env.observation_space.contains(obs)
    assert np.count_nonzero(obs < 0) == 4
    assert info["lines"] == 0 and info["level"] == 1
    assert env.unwrapped.game.state == GameState.STARTED
    env.close()


def test_hard_drop_step_settles_piece():
    env = gym.make("FallingBlocks-v0")
    env.reset(seed=2)
    obs, reward, terminated, truncated, info = env.step(PLAY_COMMANDS.index(Command.HARD_DROP))
    assert np.count_nonzero(obs > 0) == 4
    assert np.count_nonzero(obs < 0) == 4
    assert reward == 0.0
    assert not terminated and not truncated
    env.close()


def test_random_play_runs_until_game_over():
    env = gym.make("FallingBlocks-v0", max_episode_steps=5000)
    env.reset(seed=3)
    env.action_space.seed(3)
    terminated = truncated = False
    steps = 0
    while not (terminated or truncated):
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        assert env.observation_space.contains(obs)
        assert reward >= 0.0
        steps += 1
    assert steps <= 5000
    env.close()


def test_rgb_render():
    env = gym.make("FallingBlocks-v0", render_mode="rgb_array")
    env.reset(seed=4)
    img = env.render()
    assert img.shape == (240, 120, 3)
    assert img.dtype == np.uint8
    env.close()
