from __future__ import annotations

import pytest

from blocktris.game import BlockTrisGame, GameConfig, GameGrid, ManualClock


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def grid() -> GameGrid:
    return GameGrid(10, 16)


@pytest.fixture
def game(clock: ManualClock) -> BlockTrisGame:
    return BlockTrisGame(GameConfig(random_seed=0), clock=clock)
