"""
cube_status.py — Cheap "distance from solved" proxy for the cube
================================================================

The search never simulates stickers. Instead it keeps the freely reduced
residue of the moves applied so far: consecutive moves on the same axis are
merged, merges that cancel out are dropped, and a move on a new axis is
appended. Adjacent entries therefore never share an axis.

`lower_bound()` counts one turn per entry (two when both faces of the axis
turn). Each applied single-face move can lower that count by at most one,
which is what makes the `lower_bound > remaining + 1` pruning in the search
safe.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from config import STATE_CAPACITY
from cube_moves import Move, display_moves

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class CubeState:
    moves: Tuple[Move, ...] = ()

    @classmethod
    def empty(cls) -> "CubeState":
        return cls()

    def apply_move(self, move: Move) -> "CubeState":
        """Return the state after `move`: merge, cancel or append."""
        if self.moves and self.moves[-1].axis is move.axis:
            merged = self.moves[-1] + move
            if merged.is_identity():
                return CubeState(self.moves[:-1])
            return CubeState(self.moves[:-1] + (merged,))
        if len(self.moves) >= STATE_CAPACITY:
            raise OverflowError(f"cube state holds at most {STATE_CAPACITY} moves")
        return CubeState(self.moves + (move,))

    def apply_moves(self, moves: Iterable[Move]) -> "CubeState":
        state = self
        for m in moves:
            state = state.apply_move(m)
        return state

    def is_solved(self) -> bool:
        return not self.moves

    def is_one_from_solved(self) -> bool:
        return len(self.moves) == 1 and not self.moves[0].requires_two_turns()

    def lower_bound(self) -> int:
        return sum(2 if m.requires_two_turns() else 1 for m in self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    def __str__(self) -> str:
        return display_moves(self.moves)
