from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, FallingBlocksGame, GameConfig, ScoringRules, TetrominoType


# Agent-facing actions; pause and reset are left to the environment itself
AGENT_ACTIONS = (Action.LEFT, Action.RIGHT, Action.SOFT_DROP, Action.ROTATE, Action.NONE)


class FallingBlocksEnv(gym.Env):
    """Gymnasium adapter around ``FallingBlocksGame``.

    Each step applies one command followed by one gravity tick, so the
    piece keeps falling even when the agent only moves sideways.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 render_mode: Optional[str] = None,
                 reward_weights: Optional[Dict[str, float]] = None,
                 terminal_penalty: float = 0.0,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.game = FallingBlocksGame(self.config, rules)
        self.render_mode = render_mode
        self.terminal_penalty = float(terminal_penalty)
        self.max_episode_steps = int(max_episode_steps)

        self.reward_weights: Dict[str, float] = {
            "score": 1.0,    # per engine score point
            "holes": 0.1,    # penalize holes created
            "height": 0.02,  # penalize stack height increase
        }
        if reward_weights:
            self.reward_weights.update({k: float(v) for k, v in reward_weights.items()})

        h, w = self.config.height, self.config.width
        n_kinds = len(TetrominoType)
        # Board cells: settled pieces as +kind, falling piece as -kind
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=-n_kinds, high=n_kinds, shape=(h, w), dtype=np.int8),
                "next_piece": spaces.Discrete(n_kinds + 1),
                "level": spaces.Box(low=1, high=np.iinfo(np.int32).max, shape=(1,), dtype=np.int32),
                "score": spaces.Box(low=0, high=np.iinfo(np.int32).max, shape=(1,), dtype=np.int32),
            }
        )
        self.action_space = spaces.Discrete(len(AGENT_ACTIONS))

        self._steps = 0
        self._last_obs: Optional[Dict[str, Any]] = None

    def _get_obs(self) -> Dict[str, Any]:
        snap = self.game.snapshot()
        return {
            "board": snap.composite().astype(np.int8),
            "next_piece": int(snap.next_value),
            "level": np.array([snap.level], dtype=np.int32),
            "score": np.array([snap.score], dtype=np.int32),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "level": self.game.level,
            "rows_cleared_total": self.game.state.rows_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.catalog.rng.seed(seed)
        self.game.reset()
        self._steps = 0
        obs = self._get_obs()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int):
        command = AGENT_ACTIONS[int(action)]

        score_before = self.game.score
        holes_before = self.game.grid.count_holes()
        height_before = self.game.grid.get_max_height()

        self.game.step(command)
        if command != Action.SOFT_DROP:
            self.game.tick()
        self._steps += 1

        reward_components: Dict[str, float] = {
            "score": self.reward_weights["score"] * float(self.game.score - score_before),
            "holes": -self.reward_weights["holes"] * float(
                max(0, self.game.grid.count_holes() - holes_before)),
            "height": -self.reward_weights["height"] * float(
                max(0, self.game.grid.get_max_height() - height_before)),
        }
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        if terminated:
            reward_components["terminal"] = self.terminal_penalty
        reward = float(sum(reward_components.values()))

        obs = self._get_obs()
        info = self._get_info()
        info["reward_components"] = reward_components
        self._last_obs = obs
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        board = self._last_obs["board"] if self._last_obs is not None else self.game.grid.grid
        cell = 12
        h, w = board.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                if board[y, x] > 0:
                    color = (70, 200, 120)
                elif board[y, x] < 0:
                    color = (220, 220, 90)
                else:
                    color = (30, 30, 36)
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
