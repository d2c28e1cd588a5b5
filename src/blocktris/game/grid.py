from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .pieces import Piece

logger = logging.getLogger(__name__)


class GameGrid:
    """Playfield of placed blocks.

    The grid uses 0 for empty cells and 1..7 for blocks left by merged pieces;
    the value is the color index of the piece kind. Row 0 is the top of the
    visible board. Rows above it are virtual: always empty, never stored.
    """

    def __init__(self, width: int = 10, height: int = 16) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, col: int, row: int) -> bool:
        # Walls and floor block movement; the space above the board does not.
        if col < 0 or col >= self.width or row >= self.height:
            return True
        if row < 0:
            return False
        return bool(self.grid[row, col] != 0)

    def can_place(self, bitmap: np.ndarray, x: int, y: int) -> bool:
        """True iff every filled cell of `bitmap` anchored at (x, y) lands on a free cell."""
        h, w = bitmap.shape
        for dy in range(h):
            for dx in range(w):
                if bitmap[dy, dx] and self.is_occupied(x + dx, y + dy):
                    return False
        return True

    def merge(self, piece: "Piece") -> None:
        """Write `piece` into the grid at its current position.

        The caller is responsible for the position being valid. Cells still
        above the visible top have nowhere to go and are dropped.
        """
        value = piece.color
        for x, y in piece.cells():
            if y < 0:
                logger.debug("dropping cell (%d, %d) above the board", x, y)
                continue
            self.grid[y, x] = value

    def clear_completed_rows(self) -> int:
        full_rows = np.where(np.all(self.grid != 0, axis=1))[0]
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        top_index = int(non_empty_rows[0])
        return self.height - top_index

    def count_holes(self) -> int:
        holes = 0
        for x in range(self.width):
            column = self.grid[:, x]
            seen_block = False
            for cell in column:
                if cell != 0:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
