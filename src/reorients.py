"""
reorients.py — Catalog of whole-cube reorientations
===================================================

The 24 ways to pick the cube up and put it down again, in the fixed catalog
order the search tries them in:

* NONE
* 6 quarter rotations about a face axis (R L U D F B, i.e. x x' y y' z z')
* 3 half rotations about a face axis (R2 U2 F2)
* 6 half rotations about an edge axis (UF UR FR DF UL BR)
* 8 third rotations about a corner axis (UFR DBL UFL DBR DFR UBL UBR DFL)

Each entry carries its Orientation, a canonical rotation name (`x`, `xy2`,
`y'x'`, ...) that doubles as its generator sequence, a sticker-notation label
and a physical cost in quarter/half-turn equivalents.

The orientation table below is the only place packed orientation bits appear.
Every entry must equal the composition of its generators; the tests check the
whole table against that rule.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import Dict, List, Tuple

from config import CHEAP_COST
from cube_orientation import Orientation

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Reorient(enum.Enum):
    NONE = 0

    R = 1
    L = 2
    U = 3
    D = 4
    F = 5
    B = 6

    R2 = 7
    U2 = 8
    F2 = 9

    UF = 10
    UR = 11
    FR = 12
    DF = 13
    UL = 14
    BR = 15

    UFR = 16
    DBL = 17
    UFL = 18
    DBR = 19
    DFR = 20
    UBL = 21
    UBR = 22
    DFL = 23

    @property
    def orientation(self) -> Orientation:
        return _ORIENTATIONS[self]

    @property
    def rotation_name(self) -> str:
        return _CATALOG[self][1]

    @property
    def sticker_name(self) -> str:
        return _CATALOG[self][2]

    @property
    def base_cost(self) -> int:
        return _CATALOG[self][3]

    @property
    def generators(self) -> List[str]:
        """Whole-cube rotations (x, y', z2, ...) performed in order."""
        return _ROTATION_TOKEN.findall(self.rotation_name)

    def compose(self, other: "Reorient") -> "Reorient":
        """Table lookup of `self.orientation.compose(other.orientation)`."""
        return _COMPOSE[self.value][other.value]

    def cost(self, cheap_mask: int = 0) -> int:
        if self is not Reorient.NONE and (cheap_mask >> self.value) & 1:
            return CHEAP_COST
        return self.base_cost

    def display(self, sticker_notation: bool = False) -> str:
        """Text placed between two moves; NONE is a single separating space."""
        if self is Reorient.NONE:
            return " "
        if sticker_notation:
            return f" {self.sticker_name} "
        return f" O{self.rotation_name} "


# reorient -> (packed 0xyzXXYY orientation, rotation name, sticker name, cost)
_CATALOG: Dict[Reorient, Tuple[int, str, str, int]] = {
    Reorient.NONE: (0b0_000_00_01, "", "", 0),

    Reorient.R: (0b0_010_00_10, "x", "23I:L", 1),
    Reorient.L: (0b0_001_00_10, "x'", "23I:R", 1),
    Reorient.U: (0b0_001_10_01, "y", "23I:D", 1),
    Reorient.D: (0b0_100_10_01, "y'", "23I:U", 1),
    Reorient.F: (0b0_100_01_00, "z", "23I:B", 1),
    Reorient.B: (0b0_010_01_00, "z'", "23I:F", 1),

    Reorient.R2: (0b0_011_00_01, "x2", "23I:R2", 2),
    Reorient.U2: (0b0_101_00_01, "y2", "23I:U2", 2),
    Reorient.F2: (0b0_110_00_01, "z2", "23I:F2", 2),

    Reorient.UF: (0b0_100_00_10, "xy2", "23I:UF", 3),
    Reorient.UR: (0b0_001_01_00, "zx2", "23I:UR", 3),
    Reorient.FR: (0b0_010_10_01, "yz2", "23I:FR", 3),
    Reorient.DF: (0b0_111_00_10, "xz2", "23I:DF", 3),
    Reorient.UL: (0b0_111_01_00, "zy2", "23I:UL", 3),
    Reorient.BR: (0b0_111_10_01, "yx2", "23I:BR", 3),

    Reorient.UFR: (0b0_000_10_00, "xy", "23I:DBL", 2),
    Reorient.DBL: (0b0_000_01_10, "y'x'", "23I:UFR", 2),
    Reorient.UFL: (0b0_101_01_10, "zy", "23I:DBR", 2),
    Reorient.DBR: (0b0_110_10_00, "xy'", "23I:UFL", 2),
    Reorient.DFR: (0b0_110_01_10, "xz", "23I:UBL", 2),
    Reorient.UBL: (0b0_011_10_00, "yz'", "23I:DFR", 2),
    Reorient.UBR: (0b0_011_01_10, "yx", "23I:DFL", 2),
    Reorient.DFL: (0b0_101_10_00, "zx'", "23I:UBR", 2),
}

_ORIENTATIONS: Dict[Reorient, Orientation] = {
    r: Orientation.from_bits(bits) for r, (bits, _, _, _) in _CATALOG.items()
}

_BY_ROTATION_NAME: Dict[str, Reorient] = {
    r.rotation_name: r for r in Reorient if r is not Reorient.NONE
}

_ROTATION_TOKEN = re.compile(r"[xyz]['2]?")

# quarter rotations the generator names are built from
_BASE_ROTATIONS: Dict[str, Orientation] = {
    "x": _ORIENTATIONS[Reorient.R],
    "y": _ORIENTATIONS[Reorient.U],
    "z": _ORIENTATIONS[Reorient.F],
}


def rotation_orientation(token: str) -> Orientation:
    """Orientation of a single rotation token such as "x", "y'" or "z2"."""
    if not _ROTATION_TOKEN.fullmatch(token):
        raise ValueError(f"unknown rotation {token!r}")
    base = _BASE_ROTATIONS[token[0]]
    if token.endswith("'"):
        return base.inverse()
    if token.endswith("2"):
        return base.compose(base)
    return base


def orientation_from_generators(tokens: List[str]) -> Orientation:
    """Compose rotation tokens performed left to right."""
    result = Orientation.identity()
    for token in tokens:
        result = rotation_orientation(token).compose(result)
    return result


_BY_ORIENTATION: Dict[Orientation, Reorient] = {o: r for r, o in _ORIENTATIONS.items()}


def find_reorient(orientation: Orientation) -> Reorient:
    try:
        return _BY_ORIENTATION[orientation]
    except KeyError:
        raise ValueError(f"{orientation!r} is not a cube rotation") from None


# _COMPOSE[a][b] is the reorient for "b, then a"
_COMPOSE: List[List[Reorient]] = [
    [find_reorient(a.orientation.compose(b.orientation)) for b in Reorient]
    for a in Reorient
]


def reorient_by_name(name: str) -> Reorient:
    """Look up a reorientation by canonical rotation name (case-sensitive)."""
    try:
        return _BY_ROTATION_NAME[name]
    except KeyError:
        raise ValueError(f"unknown reorientation {name!r}") from None


def cheap_mask_from_names(text: str) -> int:
    """
    Build the cheap-reorientation bitmask (bit i = Reorient with value i)
    from space-separated rotation names. Unknown names are ignored.
    """
    mask = 0
    for name in text.split():
        try:
            r = reorient_by_name(name)
        except ValueError:
            logger.warning("Ignoring unknown cheap reorientation %r", name)
            continue
        mask |= 1 << r.value
    return mask


def cheap_names_from_mask(mask: int) -> List[str]:
    return [r.rotation_name for r in Reorient if r is not Reorient.NONE and (mask >> r.value) & 1]
