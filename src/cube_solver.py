"""
cube_solver.py — Reorientation search (IDDFS) and run facade
============================================================

This module finds where to insert whole-cube reorientations into a fixed
algorithm so that, read through those reorientations, the algorithm reduces
to nothing (or to a single face turn).

### Search

* **iddfs**: tries reorientation budgets 0, 1, 2, ... and stops at the first
  budget that yields any solution, so every reported solution uses the
  fewest reorientations possible.
* **_dfs**: walks the algorithm move by move, threading a `CubeState` proxy
  and the current orientation as a `Reorient`. Orientation products come
  from the catalog's 24x24 table and every move is pre-transformed once
  per orientation, so the inner loop only indexes lists. At every move it
  branches over all 24
  catalog reorientations (NONE included, catalog order). A branch ends when
  at most one move is left or the budget is spent; it is accepted if folding
  the remaining moves leaves the proxy solved or one turn from solved.
  Branches whose lower bound exceeds `remaining + 1` are pruned.

### Run facade

* **ReorientSolver** owns the text output shared with the front ends. The
  buffer is guarded by a lock; the worker holds it only to append a line or
  replace the buffer. `run_async` starts each run on its own worker and does
  not stop earlier runs, so the last writer wins.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
from typing import Callable, List, Optional, Sequence

from app_types import ScoredSolution, SearchConfig, SearchReport, clean_alg_string
from config import STATE_CAPACITY
from cube_moves import Move, MoveParseError, parse_moves
from cube_status import CubeState
from reorients import Reorient, cheap_names_from_mask
from solution_record import SolutionRecord

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

ProgressCallback = Callable[[str], None]


_REORIENTS = list(Reorient)


def _transform_table(moves: Sequence[Move]) -> List[List[Move]]:
    """table[r][i] is moves[i] seen through the reorient with value r."""
    return [[r.orientation.transform_move(mv) for mv in moves] for r in _REORIENTS]


def _dfs(state: CubeState, orientation: Reorient, table: List[List[Move]], index: int,
         record: SolutionRecord, budget: int, results: List[SolutionRecord]) -> None:
    seen = table[orientation.value]
    remaining = len(seen) - index
    if remaining <= 1 or budget == 0:
        # No more reorients allowed: fold the rest and check the end state.
        for mv in seen[index:]:
            state = state.apply_move(mv)
        if state.is_solved() or state.is_one_from_solved():
            results.append(record)
        return

    if state.lower_bound() > remaining + 1:
        return

    new_state = state.apply_move(seen[index])
    for reorient in _REORIENTS:
        _dfs(
            new_state,
            reorient.compose(orientation),
            table,
            index + 1,
            record.push_if_not_ident(reorient, index),
            budget if reorient is Reorient.NONE else budget - 1,
            results,
        )


def dfs(moves: Sequence[Move], max_reorients: int) -> List[SolutionRecord]:
    """All solutions reachable with at most `max_reorients` reorientations."""
    results: List[SolutionRecord] = []
    _dfs(CubeState.empty(), Reorient.NONE, _transform_table(moves), 0, SolutionRecord(),
         max_reorients, results)
    return results


def iddfs(moves: Sequence[Move], max_depth: int, cheap_mask: int = 0,
          progress: Optional[ProgressCallback] = None) -> SearchReport:
    """
    Iterative deepening over the reorientation budget.

    Returns a SearchReport; `found` is False when no budget up to
    min(len(moves), max_depth) produced a solution. Zero or one move is
    already closed and is answered without searching or reporting progress.
    """
    moves = list(moves)
    if len(moves) <= 1:
        return SearchReport(moves=moves, solutions=[ScoredSolution(0, SolutionRecord())])

    for max_reorients in range(min(len(moves), max_depth) + 1):
        if progress is not None:
            progress(f"Searching solutions with {max_reorients} reorients")
        logger.debug("Searching %d moves with budget %d", len(moves), max_reorients)
        records = dfs(moves, max_reorients)
        if records:
            logger.debug("Budget %d produced %d solutions", max_reorients, len(records))
            return SearchReport(
                moves=moves,
                reorient_count=max_reorients,
                solutions=[ScoredSolution(r.cost(cheap_mask), r) for r in records],
            )
    return SearchReport(moves=moves)


def format_report(report: SearchReport, config: SearchConfig) -> List[str]:
    """Summary and solution lines for a finished search."""
    if not report.found:
        return ["No solutions?"]
    lines = [
        f"Found {len(report.solutions)} solutions with "
        f"{report.reorient_count} reorients ({report.stm} STM)."
    ]
    solutions = report.solutions
    if not config.show_all:
        solutions = report.cheapest()
        lines.append(f"{len(solutions)} of them add only {report.min_cost} ETM.")
    lines.extend(s.record.render(report.moves, config.sticker_notation) for s in solutions)
    return lines


class ReorientSolver:
    def __init__(self):
        self._output = ""
        self._lock = threading.Lock()

    def output(self) -> str:
        with self._lock:
            return self._output

    def _replace_output(self, text: str) -> None:
        with self._lock:
            self._output = text

    def _append_line(self, line: str) -> None:
        with self._lock:
            self._output += line + "\n"

    def search(self, moves: Sequence[Move], config: SearchConfig) -> SearchReport:
        """Run the search, streaming progress lines into the shared output."""
        logger.debug("Cheap reorientations: %s", " ".join(cheap_names_from_mask(config.cheap_mask)) or "none")
        return iddfs(moves, config.max_depth, config.cheap_mask, progress=self._append_line)

    def run(self, alg: str, config: SearchConfig) -> Optional[SearchReport]:
        """
        High-level run interface used by the front ends.

        Clears the output, parses `alg`, searches and appends the formatted
        result. Invalid notation replaces the whole output with the parse
        error and returns None.
        """
        self._replace_output("")
        alg = clean_alg_string(alg)
        try:
            moves = parse_moves(alg)
        except MoveParseError as e:
            logger.info("Rejected algorithm %r: %s", alg, e)
            self._replace_output(f"{e}\n")
            return None
        if len(moves) > STATE_CAPACITY:
            self._replace_output(f"algorithm too long: {len(moves)} moves (max {STATE_CAPACITY})\n")
            return None

        try:
            report = self.search(moves, config)
        except Exception as e:
            logger.exception("Search failed: %s", e)
            self._append_line(f"Search failed: {e}")
            raise
        for line in format_report(report, config):
            self._append_line(line)
        return report

    def run_async(self, alg: str, config: SearchConfig) -> concurrent.futures.Future:
        """Start `run` on a fresh worker and return its Future."""
        executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
        try:
            return executor.submit(self.run, alg, config)
        finally:
            executor.shutdown(wait=False)
