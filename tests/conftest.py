import pytest

from app_types import SearchConfig
from cube_moves import Axis, Move, TurnMultiple
from cube_solver import ReorientSolver

ALL_MOVES = [
    Move(axis, pos, neg)
    for axis in Axis
    for pos in TurnMultiple
    for neg in TurnMultiple
]


@pytest.fixture
def solver():
    return ReorientSolver()


@pytest.fixture
def config():
    return SearchConfig(max_depth=5)


@pytest.fixture
def all_moves():
    return list(ALL_MOVES)
