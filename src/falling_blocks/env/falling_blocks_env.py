from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, FallingBlockGame, GameConfig, PieceType


BACKGROUND = (30, 30, 36)


class FallingBlocksEnv(gym.Env):
    """Agent-facing wrapper around ``FallingBlockGame``.

    Actions (6 total, see ``Action``):
      0: No-op
      1: Move left
      2: Move right
      3: Rotate +1
      4: Rotate -1
      5: Gravity tick

    Every step applies the chosen action followed by one gravity tick, so the
    piece keeps falling whatever the agent does. Choosing the tick action
    itself applies a single tick. The reward is the number of lines cleared
    during the step.
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        max_episode_steps: int = 5000,
    ) -> None:
        super().__init__()
        self.game = FallingBlockGame(config)
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)

        h, w = self.game.config.height, self.game.config.width
        p = self.game.config.preview_size

        # grid: 0 empty, 1 locked, 2 falling piece
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=2, shape=(h, w), dtype=np.int8),
                "preview": spaces.Box(low=0, high=1, shape=(p, p), dtype=np.int8),
                "next_piece": spaces.Discrete(len(PieceType)),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        state = self.game.get_state()
        return {
            "grid": state["grid"],
            "preview": state["preview"],
            "next_piece": state["next_piece"],
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "lines_cleared": self.game.lines_cleared,
            "pieces_spawned": self.game.pieces_spawned,
            "status": self.game.status.value,
            "steps": self._steps,
        }

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[dict] = None,
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.restart(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = Action(int(action))
        lines = self.game.step(action)
        if action != Action.TICK:
            lines += self.game.step(Action.TICK)

        self._steps += 1
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        reward = float(lines)

        info = self._get_info()
        info["lines_this_step"] = lines
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            cell = 12
            state = self.game.get_state()
            colors = state["colors"]
            colors[state["grid"] == 0] = BACKGROUND
            return np.repeat(np.repeat(colors, cell, axis=0), cell, axis=1)
        # human rendering delegated to the pygame front end; noop
        return None

    def close(self) -> None:
        pass
