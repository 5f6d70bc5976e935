"""
Result store -> pandas tables.

One row per period (indexed by 1-based period number), one column per
variable, `total` last. Derived columns show the chosen projection; internal
and external columns always show their raw values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence, Union

import pandas as pd

from core.schema import DATE, PROJECTIONS, TOTAL
from engine.store import ResultStore
from variables.base import VariableKind


def results_to_frame(
    store: ResultStore,
    *,
    projection: str = "current",
    include_hidden: bool = False,
    include_internal: bool = True,
) -> pd.DataFrame:
    """
    Parameters
    ----------
    store : ResultStore
        Output of CashflowEngine.run()
    projection : str
        "current", "sum" or "average" for derived columns and total
    include_hidden : bool
        Keep derived variables registered with hidden=True
    include_internal : bool
        Keep periodNumber / totalPeriods (the date column is always kept)
    """
    if projection not in PROJECTIONS:
        raise ValueError(f"projection must be one of {PROJECTIONS}, got {projection!r}")

    columns: Dict[str, list] = {}
    if store.dates:
        columns[DATE] = list(store.dates)

    if include_internal:
        for name in store.names(VariableKind.INTERNAL):
            if name != DATE:
                columns[name] = store.projection_series(name)
    for name in store.names(VariableKind.EXTERNAL):
        columns[name] = store.projection_series(name)
    for name in store.names(VariableKind.DERIVED, include_hidden=include_hidden):
        if name != TOTAL:
            columns[name] = store.projection_series(name, projection)
    columns[TOTAL] = store.projection_series(TOTAL, projection)

    index = pd.RangeIndex(1, store.periods_evaluated + 1, name="period")
    return pd.DataFrame(columns, index=index)


def export_excel(
    store: ResultStore,
    path: Union[str, Path],
    *,
    projections: Sequence[str] = PROJECTIONS,
    include_hidden: bool = False,
) -> Path:
    """Write one sheet per projection to an .xlsx workbook (openpyxl engine)."""
    path = Path(path)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for projection in projections:
            frame = results_to_frame(store, projection=projection, include_hidden=include_hidden)
            frame.to_excel(writer, sheet_name=projection)
    return path
