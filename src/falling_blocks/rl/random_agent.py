from __future__ import annotations

import argparse
import logging
from typing import Optional

import gymnasium as gym

import falling_blocks.env  # noqa: F401  ensure registration
from falling_blocks.game import print_grid


logger = logging.getLogger(__name__)


def run_random(steps: int = 500, seed: Optional[int] = None, show_final: bool = False) -> float:
    env = gym.make("FallingBlocks-10x20-v0")
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    total_reward = 0.0
    episodes = 1
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            logger.info("Episode %d finished: lines=%d pieces=%d", episodes, info["lines_cleared"], info["pieces_spawned"])
            obs, info = env.reset()
            episodes += 1
    if show_final:
        print_grid(env.unwrapped.game.get_grid())
    env.close()
    print(f"Random agent total reward: {total_reward:.2f} over {episodes} episode(s)")
    return total_reward


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=500)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--show-final", action="store_true")
    p.add_argument("--log-level", default="INFO")
    args = p.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    run_random(args.steps, args.seed, args.show_final)


if __name__ == "__main__":  # pragma: no cover
    main()
