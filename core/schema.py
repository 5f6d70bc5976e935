from __future__ import annotations

from typing import Literal, Tuple

# Built-in internal variable names, always evaluated before any other kind.
PERIOD_NUMBER = "periodNumber"
TOTAL_PERIODS = "totalPeriods"
DATE = "date"

# Synthetic series holding the per-period sum of all derived variables.
TOTAL = "total"

# Key under which ResultStore.to_dict() exposes the formatted dates.
DATES = "dates"

BUILTIN_NAMES: Tuple[str, ...] = (PERIOD_NUMBER, TOTAL_PERIODS, DATE)
RESERVED_NAMES: Tuple[str, ...] = BUILTIN_NAMES + (TOTAL, DATES)

# Names no variable may take, whatever the configuration.
STORE_KEYS: Tuple[str, ...] = (TOTAL, DATES)

Projection = Literal["current", "sum", "average"]
PROJECTIONS: Tuple[str, ...] = ("current", "sum", "average")

# Spellings accepted on input and what they normalise to.
PROJECTION_ALIASES = {
    "avg": "average",
    "mean": "average",
    "cumulative": "sum",
}

DateIncrementUnit = Literal["days", "months", "years"]
DATE_INCREMENT_UNITS: Tuple[str, ...] = ("days", "months", "years")

DEFAULT_DATE_FORMAT = "%B %d, %Y"
