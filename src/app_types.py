import re
from dataclasses import dataclass, field
from typing import List, Optional

from config import (
    DEFAULT_CHEAP_MOVES,
    DEFAULT_MAX_DEPTH,
    DEFAULT_SHOW_ALL,
    DEFAULT_STICKER_NOTATION,
    MAX_DEPTH_LIMIT,
)
from cube_moves import Move
from reorients import cheap_mask_from_names
from solution_record import SolutionRecord


@dataclass
class SearchConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    cheap_moves: str = DEFAULT_CHEAP_MOVES
    sticker_notation: bool = DEFAULT_STICKER_NOTATION
    show_all: bool = DEFAULT_SHOW_ALL
    cheap_mask: int = field(init=False, default=0)

    def __post_init__(self):
        if not 0 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max depth must be between 0 and {MAX_DEPTH_LIMIT}, got {self.max_depth}")
        self.cheap_mask = cheap_mask_from_names(self.cheap_moves)


@dataclass
class ScoredSolution:
    cost: int
    record: SolutionRecord


@dataclass
class SearchReport:
    moves: List[Move]
    reorient_count: int = 0
    solutions: List[ScoredSolution] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.solutions)

    @property
    def stm(self) -> int:
        return len(self.moves) + self.reorient_count

    @property
    def min_cost(self) -> Optional[int]:
        if not self.solutions:
            return None
        return min(s.cost for s in self.solutions)

    def cheapest(self) -> List[ScoredSolution]:
        best = self.min_cost
        return [s for s in self.solutions if s.cost == best]


def clean_alg_string(s: str) -> str:
    # collapse runs of whitespace, including newlines pasted into the field
    return re.sub(r'\s+', ' ', s).strip()
