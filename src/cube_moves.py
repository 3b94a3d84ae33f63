"""
cube_moves.py — Face turns as per-axis turn pairs
=================================================

A face turn is stored as the axis it turns about plus two turn multiples: one
for the "positive" face of the axis (R, U, F) and one for the opposite
"negative" face (L, D, B). Keeping both opposite faces in one value lets two
turns on the same axis be merged by simple addition mod 4, which is all the
cube state proxy needs.

### Core types

* **Axis**: X (R/L), Y (U/D), Z (F/B).
* **TurnMultiple**: none, quarter clockwise, half, quarter counter-clockwise;
  the cyclic group of order 4.
* **Move**: immutable (axis, positive, negative) triple. `m1 + m2` composes
  two moves on the same axis.

Parsing accepts the usual `R U2 F'` notation and raises `MoveParseError`
naming the first unknown token.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Axis(enum.Enum):
    X = 0
    Y = 1
    Z = 2


class TurnMultiple(enum.Enum):
    NONE = 0
    CW = 1
    HALF = 2
    CCW = 3

    def __add__(self, other: "TurnMultiple") -> "TurnMultiple":
        return TurnMultiple((self.value + other.value) % 4)

    def __neg__(self) -> "TurnMultiple":
        return TurnMultiple(-self.value % 4)

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]


_SUFFIXES = {
    TurnMultiple.NONE: "",
    TurnMultiple.CW: "",
    TurnMultiple.HALF: "2",
    TurnMultiple.CCW: "'",
}

# face letter -> (axis, True if it is the positive face of the axis)
FACES = {
    'R': (Axis.X, True),
    'L': (Axis.X, False),
    'U': (Axis.Y, True),
    'D': (Axis.Y, False),
    'F': (Axis.Z, True),
    'B': (Axis.Z, False),
}

# axis -> (positive face letter, negative face letter)
AXIS_FACES = {
    Axis.X: ('R', 'L'),
    Axis.Y: ('U', 'D'),
    Axis.Z: ('F', 'B'),
}


class MoveParseError(ValueError):
    """Raised when a move token is not valid notation."""

    def __init__(self, token: str):
        super().__init__(f"unknown move {token!r}")
        self.token = token


@dataclass(frozen=True)
class Move:
    axis: Axis
    positive: TurnMultiple = TurnMultiple.NONE
    negative: TurnMultiple = TurnMultiple.NONE

    @classmethod
    def identity(cls, axis: Axis) -> "Move":
        return cls(axis)

    def __add__(self, other: "Move") -> "Move":
        if self.axis is not other.axis:
            raise ValueError(f"cannot compose moves on different axes: {self} + {other}")
        return Move(self.axis, self.positive + other.positive, self.negative + other.negative)

    def __neg__(self) -> "Move":
        return Move(self.axis, -self.positive, -self.negative)

    def is_identity(self) -> bool:
        return self.positive is TurnMultiple.NONE and self.negative is TurnMultiple.NONE

    def requires_two_turns(self) -> bool:
        """True when both opposite faces turn, e.g. `R L'`."""
        return self.positive is not TurnMultiple.NONE and self.negative is not TurnMultiple.NONE

    def __str__(self) -> str:
        return display_move(self)


def parse_move(token: str) -> Move:
    """
    Parse one move token ("R", "U2", "F'", ...) into a Move.

    A trailing "'" is stripped first and a trailing "2" after it, so "R2'"
    reads as a half turn.
    """
    face = token
    multiple = TurnMultiple.CW
    if face.endswith("'"):
        face = face[:-1]
        multiple = TurnMultiple.CCW
    if face.endswith("2"):
        face = face[:-1]
        multiple = TurnMultiple.HALF
    if face not in FACES:
        raise MoveParseError(token)
    axis, is_positive = FACES[face]
    if is_positive:
        return Move(axis, multiple, TurnMultiple.NONE)
    return Move(axis, TurnMultiple.NONE, multiple)


def parse_moves(text: str) -> List[Move]:
    """Parse whitespace separated move notation. Empty text gives an empty list."""
    return [parse_move(tok) for tok in text.split()]


def face_turns(move: Move) -> List[Tuple[str, TurnMultiple]]:
    """Split a move into its (face letter, multiple) single-face turns."""
    pos, neg = AXIS_FACES[move.axis]
    return [(letter, multiple)
            for letter, multiple in ((pos, move.positive), (neg, move.negative))
            if multiple is not TurnMultiple.NONE]


def display_move(move: Move) -> str:
    # positive face first: "RL'", identity renders empty
    return "".join(letter + multiple.suffix for letter, multiple in face_turns(move))


def display_moves(moves: Iterable[Move]) -> str:
    return " ".join(display_move(m) for m in moves)
