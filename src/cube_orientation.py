"""
cube_orientation.py — Whole-cube orientations
=============================================

An orientation is one of the 24 proper rotations of the cube, stored as a
signed permutation of the three axes: which axis X and Y are sent to, plus
one sign flag per source axis. Z's image is implied (the axis neither X nor
Y uses).

Applying an orientation to a Move remaps its axis; when the source axis is
flipped, the two opposite faces trade places, so the positive and negative
turn fields are swapped.

Composition is not commutative: `a.compose(b)` means "apply b first, then
a". Everything in the search uses that order.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Tuple

from cube_moves import Axis, Move


def third_axis(a: Axis, b: Axis) -> Axis:
    """Return the axis that is neither a nor b."""
    if a is b:
        raise ValueError(f"axes must differ, got {a} twice")
    return Axis(3 - a.value - b.value)


@dataclass(frozen=True)
class Orientation:
    x: Axis = Axis.X
    y: Axis = Axis.Y
    x_flip: bool = False
    y_flip: bool = False
    z_flip: bool = False

    def __post_init__(self):
        if self.x is self.y:
            raise ValueError(f"X and Y cannot share image axis {self.x}")

    @classmethod
    def identity(cls) -> "Orientation":
        return cls()

    @classmethod
    def from_bits(cls, bits: int) -> "Orientation":
        """
        Decode the packed 0xyzXXYY format: three sign bits (x, y, z) above the
        2-bit images of X and Y.
        """
        if not 0 <= bits < 0x80:
            raise ValueError(f"orientation bits out of range: {bits:#x}")
        return cls(
            x=Axis((bits >> 2) & 3),
            y=Axis(bits & 3),
            x_flip=bool(bits & 0x40),
            y_flip=bool(bits & 0x20),
            z_flip=bool(bits & 0x10),
        )

    @property
    def bits(self) -> int:
        return ((self.x_flip << 6) | (self.y_flip << 5) | (self.z_flip << 4)
                | (self.x.value << 2) | self.y.value)

    @property
    def z(self) -> Axis:
        return third_axis(self.x, self.y)

    def transform_axis(self, axis: Axis) -> Tuple[Axis, bool]:
        if axis is Axis.X:
            return self.x, self.x_flip
        if axis is Axis.Y:
            return self.y, self.y_flip
        return self.z, self.z_flip

    @functools.lru_cache(maxsize=None)
    def transform_move(self, move: Move) -> Move:
        axis, flip = self.transform_axis(move.axis)
        if flip:
            return Move(axis, move.negative, move.positive)
        return Move(axis, move.positive, move.negative)

    @functools.lru_cache(maxsize=None)
    def compose(self, other: "Orientation") -> "Orientation":
        """Apply `other` first, then `self`."""
        images = []
        for axis in Axis:
            mid, first_flip = other.transform_axis(axis)
            image, second_flip = self.transform_axis(mid)
            images.append((image, first_flip != second_flip))
        (x, x_flip), (y, y_flip), (_, z_flip) = images
        return Orientation(x, y, x_flip, y_flip, z_flip)

    def inverse(self) -> "Orientation":
        back = {}
        for axis in Axis:
            image, flip = self.transform_axis(axis)
            back[image] = (axis, flip)
        (x, x_flip), (y, y_flip), (_, z_flip) = back[Axis.X], back[Axis.Y], back[Axis.Z]
        return Orientation(x, y, x_flip, y_flip, z_flip)

    def is_proper(self) -> bool:
        """True for rotations, False for reflections (determinant -1)."""
        perm = [self.x.value, self.y.value, self.z.value]
        inversions = sum(1 for i in range(3) for j in range(i + 1, 3) if perm[i] > perm[j])
        return (inversions + self.x_flip + self.y_flip + self.z_flip) % 2 == 0

    def __repr__(self) -> str:
        return f"Orientation(0b{self.bits:07b})"
