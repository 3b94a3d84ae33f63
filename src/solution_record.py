"""
solution_record.py — Sparse list of reorientations chosen along one path
=======================================================================

During the search only the non-identity choices are stored, each tagged with
the index of the move it follows. Records are immutable; every push returns
a new record so sibling branches never see each other's choices.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from config import SOLUTION_CAPACITY
from cube_moves import Move, display_move
from reorients import Reorient


@dataclass(frozen=True)
class SolutionRecord:
    entries: Tuple[Tuple[int, Reorient], ...] = ()

    def push_if_not_ident(self, reorient: Reorient, index: int) -> "SolutionRecord":
        if reorient is Reorient.NONE:
            return self
        if len(self.entries) >= SOLUTION_CAPACITY:
            raise OverflowError(f"a solution holds at most {SOLUTION_CAPACITY} reorientations")
        return SolutionRecord(self.entries + ((index, reorient),))

    @property
    def reorient_count(self) -> int:
        return len(self.entries)

    def cost(self, cheap_mask: int = 0) -> int:
        return sum(r.cost(cheap_mask) for _, r in self.entries)

    def expand(self, move_count: int) -> List[Optional[Reorient]]:
        """Dense per-move view: slot i is the reorientation after move i."""
        dense: List[Optional[Reorient]] = [None] * move_count
        for index, reorient in self.entries:
            dense[index] = reorient
        return dense

    def render(self, moves: Sequence[Move], sticker_notation: bool = False) -> str:
        """Moves interleaved with the recorded reorientations."""
        parts = []
        for mv, reorient in zip(moves, self.expand(len(moves))):
            parts.append(display_move(mv))
            if reorient is not None:
                parts.append(reorient.display(sticker_notation).strip())
        return " ".join(parts)
