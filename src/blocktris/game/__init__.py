"""Game module for BlockTris.

Exports the core game engine and supporting classes:
- TetrominoType / SHAPE_STATES: the seven piece kinds and their rotation states
- Piece: a falling tetromino with movement and rotation checks
- GameGrid: playfield, merging and row clearing
- ScoringRules: line-clear points, level progression and gravity speed
- ManualClock / MonotonicClock: time sources for gravity
- BlockTrisGame: the game state machine
"""

from .shapes import SHAPE_STATES, TetrominoType, states_for
from .pieces import Piece
from .grid import GameGrid
from .rules import ScoringRules
from .clock import Clock, ManualClock, MonotonicClock
from .core import Action, BlockTrisGame, GameConfig, Phase

__all__ = [
    "SHAPE_STATES",
    "TetrominoType",
    "states_for",
    "Piece",
    "GameGrid",
    "ScoringRules",
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "Action",
    "BlockTrisGame",
    "GameConfig",
    "Phase",
]
