import logging

import pytest

from cube_orientation import Orientation
from reorients import (
    Reorient, cheap_mask_from_names, cheap_names_from_mask, orientation_from_generators,
    reorient_by_name, rotation_orientation,
)

FACE_QUARTERS = [Reorient.R, Reorient.L, Reorient.U, Reorient.D, Reorient.F, Reorient.B]
FACE_HALVES = [Reorient.R2, Reorient.U2, Reorient.F2]
EDGES = [Reorient.UF, Reorient.UR, Reorient.FR, Reorient.DF, Reorient.UL, Reorient.BR]
CORNERS = [Reorient.UFR, Reorient.DBL, Reorient.UFL, Reorient.DBR,
           Reorient.DFR, Reorient.UBL, Reorient.UBR, Reorient.DFL]


def test_catalog_order_and_size():
    members = list(Reorient)
    assert len(members) == 24
    assert [r.value for r in members] == list(range(24))
    assert members == [Reorient.NONE] + FACE_QUARTERS + FACE_HALVES + EDGES + CORNERS


@pytest.mark.parametrize("reorient", list(Reorient))
def test_table_matches_generator_composition(reorient):
    assert orientation_from_generators(reorient.generators) == reorient.orientation


def test_generators_follow_rotation_names():
    assert Reorient.NONE.generators == []
    assert Reorient.L.generators == ["x'"]
    assert Reorient.UF.generators == ["x", "y2"]
    assert Reorient.DBL.generators == ["y'", "x'"]


def test_rotation_tokens():
    x = rotation_orientation("x")
    assert rotation_orientation("x'") == x.inverse()
    assert rotation_orientation("x2") == x.compose(x)
    assert x.compose(x).compose(x).compose(x) == Orientation.identity()
    with pytest.raises(ValueError):
        rotation_orientation("w")


def test_rotation_orders():
    ident = Orientation.identity()

    def order(o):
        n, acc = 1, o
        while acc != ident:
            acc = o.compose(acc)
            n += 1
        return n

    assert order(Reorient.NONE.orientation) == 1
    assert all(order(r.orientation) == 4 for r in FACE_QUARTERS)
    assert all(order(r.orientation) == 2 for r in FACE_HALVES + EDGES)
    assert all(order(r.orientation) == 3 for r in CORNERS)


def test_opposite_quarters_are_inverses():
    for a, b in [(Reorient.R, Reorient.L), (Reorient.U, Reorient.D), (Reorient.F, Reorient.B)]:
        assert a.orientation.inverse() == b.orientation
    for a, b in zip(CORNERS[0::2], CORNERS[1::2]):
        assert a.orientation.inverse() == b.orientation


def test_base_costs():
    assert Reorient.NONE.cost() == 0
    assert all(r.cost() == 1 for r in FACE_QUARTERS)
    assert all(r.cost() == 2 for r in FACE_HALVES)
    assert all(r.cost() == 3 for r in EDGES)
    assert all(r.cost() == 2 for r in CORNERS)


def test_cheap_mask_overrides_cost_to_one():
    mask = cheap_mask_from_names("xy2 y2")
    assert mask == (1 << Reorient.UF.value) | (1 << Reorient.U2.value)
    assert Reorient.UF.cost(mask) == 1
    assert Reorient.U2.cost(mask) == 1
    assert Reorient.F2.cost(mask) == 2
    assert Reorient.NONE.cost(~0) == 0
    assert cheap_names_from_mask(mask) == ["y2", "xy2"]


def test_cheap_names_are_case_sensitive(caplog):
    with caplog.at_level(logging.WARNING, logger="reorients"):
        assert cheap_mask_from_names("XY2 Oxy2 y2") == 1 << Reorient.U2.value
    assert "'XY2'" in caplog.text
    assert cheap_mask_from_names("") == 0


def test_display_notations():
    assert Reorient.NONE.display() == " "
    assert Reorient.NONE.display(sticker_notation=True) == " "
    assert Reorient.R.display() == " Ox "
    assert Reorient.R.display(sticker_notation=True) == " 23I:L "
    assert Reorient.DBL.display() == " Oy'x' "
    assert Reorient.DBL.display(sticker_notation=True) == " 23I:UFR "
    assert Reorient.UR.display() == " Ozx2 "


def test_reorient_by_name():
    assert reorient_by_name("zx'") is Reorient.DFL
    assert reorient_by_name("y2") is Reorient.U2
    with pytest.raises(ValueError):
        reorient_by_name("")


def test_compose_table_matches_orientation_compose():
    for a in Reorient:
        for b in Reorient:
            assert a.compose(b).orientation == a.orientation.compose(b.orientation), (a, b)
    assert Reorient.R.compose(Reorient.U) is Reorient.UBR
    assert Reorient.U.compose(Reorient.R) is Reorient.UFR
    assert Reorient.NONE.compose(Reorient.DFL) is Reorient.DFL
