from __future__ import annotations

import numpy as np

from blocktris.game import GameGrid, Piece, TetrominoType


def test_is_occupied_bounds(grid):
    assert grid.is_occupied(-1, 0)
    assert grid.is_occupied(10, 0)
    assert grid.is_occupied(0, 16)
    assert grid.is_occupied(-1, -1)
    assert not grid.is_occupied(0, -1)
    assert not grid.is_occupied(0, 0)
    grid.grid[0, 0] = 3
    assert grid.is_occupied(0, 0)


def test_merge_changes_only_piece_cells(grid):
    grid.grid[15, 0] = 7
    before = grid.clone_state()
    piece = Piece.spawn(TetrominoType.T, 3, 10)
    grid.merge(piece)

    changed = np.argwhere(grid.grid != before)
    assert sorted((int(x), int(y)) for y, x in changed) == sorted(piece.cells())
    for x, y in piece.cells():
        assert grid.grid[y, x] == int(TetrominoType.T)


def test_merge_drops_cells_above_the_board(grid):
    piece = Piece.spawn(TetrominoType.O, 0, -1)
    grid.merge(piece)
    assert grid.grid[0, 0] == int(TetrominoType.O)
    assert grid.grid[0, 1] == int(TetrominoType.O)
    assert int(np.count_nonzero(grid.grid)) == 2


def test_clear_completed_rows_shifts_rows_down(grid):
    grid.grid[15, :] = 1
    grid.grid[13, :] = 2
    grid.grid[12, 0] = 5
    grid.grid[14, 3] = 6

    assert grid.clear_completed_rows() == 2
    assert grid.grid.shape == (16, 10)
    assert not grid.grid[:2].any()
    assert grid.grid[14, 0] == 5
    assert grid.grid[15, 3] == 6
    assert int(np.count_nonzero(grid.grid)) == 2


def test_clear_without_complete_rows_is_noop(grid):
    grid.grid[15, :9] = 1
    before = grid.clone_state()
    assert grid.clear_completed_rows() == 0
    assert np.array_equal(grid.grid, before)


def test_clear_four_rows():
    grid = GameGrid(4, 6)
    grid.grid[2:, :] = 1
    assert grid.clear_completed_rows() == 4
    assert not grid.grid.any()


def test_height_and_holes(grid):
    grid.grid[13, 2] = 1
    grid.grid[15, 2] = 1
    assert grid.get_max_height() == 3
    assert grid.count_holes() == 1
