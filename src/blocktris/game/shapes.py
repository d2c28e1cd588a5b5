from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


# Rotation states, clockwise from spawn orientation. Cell values are the
# color index of the kind (0 = empty).
_RAW_STATES = {
    TetrominoType.I: (
        ((0, 0, 0, 0),
         (1, 1, 1, 1),
         (0, 0, 0, 0),
         (0, 0, 0, 0)),
        ((0, 0, 1, 0),
         (0, 0, 1, 0),
         (0, 0, 1, 0),
         (0, 0, 1, 0)),
        ((0, 0, 0, 0),
         (0, 0, 0, 0),
         (1, 1, 1, 1),
         (0, 0, 0, 0)),
        ((0, 1, 0, 0),
         (0, 1, 0, 0),
         (0, 1, 0, 0),
         (0, 1, 0, 0)),
    ),
    TetrominoType.O: (
        ((2, 2),
         (2, 2)),
    ),
    TetrominoType.T: (
        ((0, 3, 0),
         (3, 3, 3),
         (0, 0, 0)),
        ((0, 3, 0),
         (0, 3, 3),
         (0, 3, 0)),
        ((0, 0, 0),
         (3, 3, 3),
         (0, 3, 0)),
        ((0, 3, 0),
         (3, 3, 0),
         (0, 3, 0)),
    ),
    TetrominoType.S: (
        ((0, 4, 4),
         (4, 4, 0),
         (0, 0, 0)),
        ((0, 4, 0),
         (0, 4, 4),
         (0, 0, 4)),
        ((0, 0, 0),
         (0, 4, 4),
         (4, 4, 0)),
        ((4, 0, 0),
         (4, 4, 0),
         (0, 4, 0)),
    ),
    TetrominoType.Z: (
        ((5, 5, 0),
         (0, 5, 5),
         (0, 0, 0)),
        ((0, 0, 5),
         (0, 5, 5),
         (0, 5, 0)),
        ((0, 0, 0),
         (5, 5, 0),
         (0, 5, 5)),
        ((0, 5, 0),
         (5, 5, 0),
         (5, 0, 0)),
    ),
    TetrominoType.J: (
        ((6, 0, 0),
         (6, 6, 6),
         (0, 0, 0)),
        ((0, 6, 6),
         (0, 6, 0),
         (0, 6, 0)),
        ((0, 0, 0),
         (6, 6, 6),
         (0, 0, 6)),
        ((0, 6, 0),
         (0, 6, 0),
         (6, 6, 0)),
    ),
    TetrominoType.L: (
        ((0, 0, 7),
         (7, 7, 7),
         (0, 0, 0)),
        ((0, 7, 0),
         (0, 7, 0),
         (0, 7, 7)),
        ((0, 0, 0),
         (7, 7, 7),
         (7, 0, 0)),
        ((7, 7, 0),
         (0, 7, 0),
         (0, 7, 0)),
    ),
}


def _freeze(rows: Tuple[Tuple[int, ...], ...]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


SHAPE_STATES: Dict[TetrominoType, Tuple[Shape, ...]] = {
    kind: tuple(_freeze(state) for state in states) for kind, states in _RAW_STATES.items()
}


def states_for(kind: TetrominoType) -> Tuple[Shape, ...]:
    """Rotation states of `kind`, in clockwise order."""
    return SHAPE_STATES[TetrominoType(kind)]
