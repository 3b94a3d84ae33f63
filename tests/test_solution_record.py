import pytest

from config import SOLUTION_CAPACITY
from cube_moves import parse_moves
from reorients import Reorient
from solution_record import SolutionRecord


def test_push_skips_identity():
    record = SolutionRecord()
    assert record.push_if_not_ident(Reorient.NONE, 3) is record
    assert record.reorient_count == 0


def test_push_returns_new_record():
    base = SolutionRecord()
    pushed = base.push_if_not_ident(Reorient.F, 0)
    assert base.entries == ()
    assert pushed.entries == ((0, Reorient.F),)


def test_capacity_is_enforced():
    record = SolutionRecord()
    for i in range(SOLUTION_CAPACITY):
        record = record.push_if_not_ident(Reorient.R, i)
    assert record.reorient_count == SOLUTION_CAPACITY
    assert record.push_if_not_ident(Reorient.NONE, 99) is record
    with pytest.raises(OverflowError):
        record.push_if_not_ident(Reorient.R, SOLUTION_CAPACITY)


def test_expand_is_dense_and_aligned():
    record = SolutionRecord().push_if_not_ident(Reorient.B, 3).push_if_not_ident(Reorient.F, 4)
    assert record.expand(9) == [None, None, None, Reorient.B, Reorient.F, None, None, None, None]
    assert SolutionRecord().expand(0) == []


def test_cost_uses_cheap_mask():
    record = SolutionRecord().push_if_not_ident(Reorient.UR, 1).push_if_not_ident(Reorient.U2, 2)
    assert record.cost() == 5
    assert record.cost(1 << Reorient.UR.value) == 3


def test_render_interleaves_moves():
    moves = parse_moves("R U2 R2 U' R2 U' R2 U2 R")
    record = SolutionRecord().push_if_not_ident(Reorient.B, 3).push_if_not_ident(Reorient.F, 4)
    assert record.render(moves) == "R U2 R2 U' Oz' R2 Oz U' R2 U2 R"
    assert record.render(moves, sticker_notation=True) == "R U2 R2 U' 23I:F R2 23I:B U' R2 U2 R"
    assert SolutionRecord().render(moves) == "R U2 R2 U' R2 U' R2 U2 R"
