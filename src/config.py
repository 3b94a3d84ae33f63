"""config.py — project configuration
------------------------------------

This file centralizes default runtime constants for the reorientation search.
Keep in mind these are *defaults*; the front ends override them per run by
building an `app_types.SearchConfig`.

Notes / warnings
- The fixed capacities below size the value types threaded through the
  search. The depth limit is tied to the solution record capacity so that a
  configuration can never overflow a record.
- Search time grows roughly with 24^depth; depths above 4 on long
  algorithms can take minutes.

-------------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

# ---------------- Fixed capacities ----------------

# Maximum number of uncancelled entries the cube state proxy can hold.
# Inputs longer than this are rejected before searching.
STATE_CAPACITY: int = 31

# Maximum number of non-identity reorientations a single solution can carry.
SOLUTION_CAPACITY: int = 7


# ---------------- Search defaults ----------------

DEFAULT_MAX_DEPTH: int = 5
# Upper bound accepted for the max depth option (slider range in the UI).
MAX_DEPTH_LIMIT: int = SOLUTION_CAPACITY

# Space-separated rotation names (e.g. "xy2 xz2 y2") whose cost is forced to 1.
DEFAULT_CHEAP_MOVES: str = ""
CHEAP_COST: int = 1

# Display reorientations as "23I:L" instead of "Ox".
DEFAULT_STICKER_NOTATION: bool = False
# Report every minimal-reorientation solution, not only the cheapest ones.
DEFAULT_SHOW_ALL: bool = False


# ---------------- Output / UI ----------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

WINDOW_TITLE = "RocKeT"
ALG_HINT = "eg. R U2 R2 U' R2 U' R2 U2 R ..."
CHEAP_MOVES_HINT = "eg. xy2 xz2 y2 ..."
# Milliseconds between refreshes of the output panel from the shared buffer.
OUTPUT_REFRESH_MS: int = 100
