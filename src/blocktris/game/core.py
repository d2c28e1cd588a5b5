from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from .clock import Clock, MonotonicClock
from .grid import GameGrid
from .pieces import Piece
from .rules import ScoringRules
from .shapes import TetrominoType

logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


class Phase(Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    LANDING = "landing"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 16
    random_seed: Optional[int] = None
    spawn_x: int = 4
    spawn_y: int = 0


class BlockTrisGame:
    """Single-session falling block engine.

    The engine is driven from outside: the caller spawns pieces, forwards
    player input and polls `tick()` once per frame for gravity. Every call
    returns immediately. Illegal moves are reported as False, never raised.
    The only way to lose is a spawn that collides with the stack.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.clock = clock or MonotonicClock()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.current_piece: Optional[Piece] = None
        self.score = 0
        self.nb_lines = 0
        self.current_level = 1
        self.pieces_placed = 0
        self.phase = Phase.SPAWNING
        self.last_gravity_tick = self.clock.now_ms()
        self.reset()

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def reset(self) -> None:
        self.grid.reset()
        self.current_piece = None
        self.score = 0
        self.nb_lines = 0
        self.current_level = 1
        self.pieces_placed = 0
        self.phase = Phase.SPAWNING
        self.last_gravity_tick = self.clock.now_ms()

    def _random_kind(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))

    def spawn_next(self, kind: Optional[TetrominoType] = None) -> bool:
        """Put a new piece at the spawn anchor.

        Returns False when the game is over, including when this spawn is the
        one that ends it. A call while a piece is already falling is a no-op.
        """
        if self.game_over:
            return False
        if self.current_piece is not None:
            return True
        kind = self._random_kind() if kind is None else TetrominoType(kind)
        piece = Piece.spawn(kind, self.config.spawn_x, self.config.spawn_y)
        if not piece.test_current_position(self.grid):
            self.phase = Phase.GAME_OVER
            logger.debug(
                "game over: %s blocked at spawn (score=%d, lines=%d, level=%d)",
                kind.name, self.score, self.nb_lines, self.current_level,
            )
            return False
        self.current_piece = piece
        self.phase = Phase.FALLING
        logger.debug("spawned %s at (%d, %d)", kind.name, piece.x, piece.y)
        return True

    def attempt_move(self, dx: int) -> bool:
        if self.phase is not Phase.FALLING or self.current_piece is None:
            return False
        piece = self.current_piece
        return piece.change_position(self.grid, piece.x + dx, piece.y)

    def attempt_rotate(self) -> bool:
        if self.phase is not Phase.FALLING or self.current_piece is None:
            return False
        return self.current_piece.rotate(self.grid)

    def _move_down(self) -> bool:
        piece = self.current_piece
        if piece is None:
            return False
        return piece.change_position(self.grid, piece.x, piece.y + 1)

    def soft_drop(self) -> bool:
        """Move the piece one row down; land it if it cannot move."""
        if self.phase is not Phase.FALLING or self.current_piece is None:
            return False
        if self._move_down():
            return True
        self._land()
        return False

    def hard_drop(self) -> int:
        """Drop the piece as far as it goes and land it. Returns rows fallen."""
        if self.phase is not Phase.FALLING or self.current_piece is None:
            return 0
        rows = 0
        while self._move_down():
            rows += 1
        self._land()
        return rows

    def is_time_over(self) -> bool:
        elapsed = self.clock.now_ms() - self.last_gravity_tick
        return elapsed >= self.rules.gravity_interval_ms(self.current_level)

    def tick(self) -> bool:
        """Apply gravity if the level's interval has elapsed since the last step."""
        if self.phase is not Phase.FALLING or self.current_piece is None:
            return False
        if not self.is_time_over():
            return False
        if not self._move_down():
            self._land()
        self.last_gravity_tick = self.clock.now_ms()
        return True

    def _land(self) -> int:
        if self.current_piece is None:
            return 0
        self.phase = Phase.LANDING
        self.grid.merge(self.current_piece)
        self.current_piece = None
        self.pieces_placed += 1

        lines = self.grid.clear_completed_rows()
        self.score += self.rules.score_for_lines(lines, self.current_level) + self.rules.placement_score
        self.nb_lines += lines
        self.current_level = max(self.current_level, self.rules.level_for_lines(self.nb_lines))
        if lines:
            logger.debug(
                "cleared %d row(s): score=%d lines=%d level=%d",
                lines, self.score, self.nb_lines, self.current_level,
            )

        self.last_gravity_tick = self.clock.now_ms()
        self.phase = Phase.SPAWNING
        return lines

    def step(self, action: Action) -> bool:
        """Apply one discrete input, spawning around it as needed.

        Returns whether the input had an effect (moved, rotated or dropped).
        """
        action = Action(action)
        if self.current_piece is None and not self.spawn_next():
            return False

        if action == Action.LEFT:
            result = self.attempt_move(-1)
        elif action == Action.RIGHT:
            result = self.attempt_move(1)
        elif action == Action.ROTATE:
            result = self.attempt_rotate()
        elif action == Action.SOFT_DROP:
            result = self.soft_drop()
        elif action == Action.HARD_DROP:
            self.hard_drop()
            result = True
        else:
            result = False

        if self.current_piece is None:
            self.spawn_next()
        return result

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if self.current_piece is not None and not self.game_over:
            for x, y in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -self.current_piece.color
        return state

    def get_game_stats(self) -> dict:
        return {
            "score": self.score,
            "lines_cleared": self.nb_lines,
            "level": self.current_level,
            "pieces_placed": self.pieces_placed,
            "game_over": self.game_over,
        }
