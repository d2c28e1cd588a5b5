from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from blocktris.game import Action, BlockTrisGame, GameConfig, ManualClock, ScoringRules
from blocktris.visualization.palette import color_for_value


class BlockTrisEnv(gym.Env):
    """Falling block game as a gymnasium environment.

    One env step applies one input and then advances the engine clock by
    `frame_ms`, so gravity runs at the level's speed measured in frames.
    Observation is the board with the falling piece overlaid as negative
    color indices. Reward is the score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        render_mode: Optional[str] = None,
        frame_ms: int = 100,
        max_episode_steps: int = 10000,
        terminal_penalty: float = 0.0,
    ) -> None:
        super().__init__()
        self.clock = ManualClock()
        self.game = BlockTrisGame(config, rules, clock=self.clock)
        self.render_mode = render_mode
        self.frame_ms = int(frame_ms)
        self.max_episode_steps = int(max_episode_steps)
        self.terminal_penalty = float(terminal_penalty)

        h, w = self.game.grid.height, self.game.grid.width
        self.observation_space = spaces.Box(low=-7, high=7, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))
        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        info = self.game.get_game_stats()
        info["phase"] = self.game.phase.value
        info["max_height"] = self.game.grid.get_max_height()
        info["holes"] = self.game.grid.count_holes()
        return info

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.reset()
        self.game.spawn_next()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        score_before = self.game.score
        lines_before = self.game.nb_lines
        self.game.step(Action(int(action)))
        self.clock.advance(self.frame_ms)
        self.game.tick()
        if self.game.current_piece is None:
            self.game.spawn_next()

        self._steps += 1
        terminated = bool(self.game.game_over)
        truncated = not terminated and self._steps >= self.max_episode_steps

        reward = float(self.game.score - score_before)
        if terminated:
            reward += self.terminal_penalty

        info = self._get_info()
        info["lines_this_step"] = self.game.nb_lines - lines_before
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            state = self.game.get_state()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = color_for_value(int(state[y, x])) if state[y, x] else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
