from __future__ import annotations

import numpy as np
import pytest

from blocktris.game import SHAPE_STATES, TetrominoType, states_for


def test_catalog_covers_every_kind():
    assert set(SHAPE_STATES) == set(TetrominoType)


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_states_are_square_tetrominoes_in_kind_color(kind):
    for state in states_for(kind):
        h, w = state.shape
        assert h == w
        assert int(np.count_nonzero(state)) == 4
        assert set(np.unique(state[state != 0]).tolist()) == {int(kind)}


def test_rotation_state_counts():
    assert len(states_for(TetrominoType.O)) == 1
    for kind in TetrominoType:
        if kind != TetrominoType.O:
            states = states_for(kind)
            assert len(states) == 4
            # Every orientation is distinct within its bounding box
            for i in range(4):
                for j in range(i + 1, 4):
                    assert not np.array_equal(states[i], states[j])


def test_catalog_is_read_only():
    state = states_for(TetrominoType.T)[0]
    with pytest.raises(ValueError):
        state[0, 0] = 9
