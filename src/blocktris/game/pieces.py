from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from .shapes import Shape, TetrominoType, states_for

if TYPE_CHECKING:
    from .grid import GameGrid


@dataclass
class Piece:
    """A falling tetromino: its rotation states, the active one, and its anchor.

    `x`, `y` locate the top-left corner of the current state's bitmap on the
    grid. `y` may be negative while the piece still pokes out above the board.
    """

    kind: TetrominoType
    states: Tuple[Shape, ...]
    current_state: int = 0
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, kind: TetrominoType, x: int, y: int) -> "Piece":
        kind = TetrominoType(kind)
        return cls(kind=kind, states=states_for(kind), current_state=0, x=x, y=y)

    @property
    def color(self) -> int:
        return int(self.kind)

    def shape(self, state: Optional[int] = None) -> Shape:
        if state is None:
            state = self.current_state
        return self.states[state]

    def cells_at(self, origin_x: int, origin_y: int, state: Optional[int] = None) -> List[Tuple[int, int]]:
        s = self.shape(state)
        h, w = s.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if s[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self.x, self.y)

    def test_position(self, grid: "GameGrid", x: int, y: int, state: Optional[int] = None) -> bool:
        return grid.can_place(self.shape(state), x, y)

    def test_current_position(self, grid: "GameGrid") -> bool:
        return self.test_position(grid, self.x, self.y)

    def change_position(self, grid: "GameGrid", new_x: int, new_y: int) -> bool:
        if not self.test_position(grid, new_x, new_y):
            return False
        self.x = new_x
        self.y = new_y
        return True

    def rotate(self, grid: "GameGrid") -> bool:
        # No wall kicks: a blocked rotation leaves the piece untouched.
        next_state = (self.current_state + 1) % len(self.states)
        if not self.test_position(grid, self.x, self.y, next_state):
            return False
        self.current_state = next_state
        return True
