from __future__ import annotations

import numpy as np

from blocktris.game import Piece, TetrominoType


def test_o_piece_spawned_above_the_board_falls_to_the_floor(grid):
    piece = Piece.spawn(TetrominoType.O, 4, -2)
    assert piece.test_current_position(grid)

    last_y = piece.y
    while piece.change_position(grid, piece.x, piece.y + 1):
        last_y = piece.y
    assert last_y == 14
    assert piece.y == 14

    grid.merge(piece)
    color = int(TetrominoType.O)
    for x, y in [(4, 14), (5, 14), (4, 15), (5, 15)]:
        assert grid.grid[y, x] == color
    assert int(np.count_nonzero(grid.grid)) == 4


def test_rejected_move_keeps_position(grid):
    piece = Piece.spawn(TetrominoType.T, 0, 3)
    assert not piece.change_position(grid, -1, 3)
    assert (piece.x, piece.y) == (0, 3)

    grid.grid[5, 1] = 1
    assert not piece.change_position(grid, 0, 4)
    assert (piece.x, piece.y) == (0, 3)


def test_test_position_checks_every_cell(grid):
    piece = Piece.spawn(TetrominoType.O, 4, 4)
    assert piece.test_position(grid, 4, 4)
    grid.grid[5, 4] = 1
    assert not piece.test_position(grid, 4, 4)
    assert piece.test_position(grid, 6, 4)
    # Right wall
    assert not piece.test_position(grid, 9, 4)


def test_rows_above_the_board_are_free_but_walls_still_apply(grid):
    piece = Piece.spawn(TetrominoType.I, 0, -1)
    assert piece.test_current_position(grid)
    assert piece.test_position(grid, 0, -2)
    o = Piece.spawn(TetrominoType.O, -1, -3)
    assert not o.test_current_position(grid)


def test_rotation_cycles_through_states(grid):
    piece = Piece.spawn(TetrominoType.T, 4, 4)
    seen = []
    for _ in range(4):
        assert piece.rotate(grid)
        seen.append(piece.current_state)
    assert seen == [1, 2, 3, 0]

    o = Piece.spawn(TetrominoType.O, 4, 4)
    assert o.rotate(grid)
    assert o.current_state == 0


def test_rotation_against_wall_is_rejected_without_kick(grid):
    piece = Piece.spawn(TetrominoType.I, 0, 0)
    assert piece.rotate(grid)
    assert piece.current_state == 1
    assert piece.change_position(grid, -2, 0)

    assert not piece.rotate(grid)
    assert piece.current_state == 1
    assert (piece.x, piece.y) == (-2, 0)


def test_rotation_blocked_by_stack(grid):
    piece = Piece.spawn(TetrominoType.T, 4, 4)
    grid.grid[6, 5] = 1
    assert not piece.rotate(grid)
    assert piece.current_state == 0


def test_cells_follow_current_state():
    piece = Piece.spawn(TetrominoType.T, 2, 3)
    assert sorted(piece.cells()) == sorted([(3, 3), (2, 4), (3, 4), (4, 4)])
    assert piece.color == int(TetrominoType.T)
