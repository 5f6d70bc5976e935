"""
Post-run consistency checks for a result store.

Catches problems that would otherwise only show up as wrong numbers:
- histories of the wrong length
- running sums / averages that do not match their series
- a total that is not the sum of its contributors
- non-finite values coming out of user formulas
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from core.schema import TOTAL
from engine.store import ResultStore
from variables.base import VariableKind


@dataclass
class ValidationResult:
    """
    Findings from validate_results().

    errors   : the store is internally inconsistent and should not be reported
    warnings : the store is consistent but some values deserve a look
    """
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        if not self.errors and not self.warnings:
            return "Result store is consistent."
        sections = [("Inconsistent", self.errors), ("Check", self.warnings)]
        lines = []
        for label, messages in sections:
            lines.extend(f"{label}: {message}" for message in messages)
        return "\n".join(lines)


def validate_results(
    store: ResultStore,
    *,
    total_members: Optional[Sequence[str]] = None,
    rtol: float = 1e-9,
    atol: float = 1e-9,
) -> ValidationResult:
    """
    Run all consistency checks on a completed store.

    total_members : derived names expected to add up to `total`. Defaults to
        the members recorded by the evaluator (derived variables registered
        with include_in_total=True).
    """
    result = ValidationResult()
    n = store.periods_evaluated
    if n == 0:
        result.errors.append("No periods evaluated.")
        return result

    # --- History lengths ---
    for name in store:
        if len(store[name]) != n:
            result.errors.append(f"{name}: {len(store[name])} entries, expected {n}.")
    if not result.is_valid:
        return result  # aggregates are meaningless on ragged histories

    # --- Running aggregates ---
    periods = np.arange(1, n + 1, dtype=float)
    derived = store.names(VariableKind.DERIVED)
    for name in derived:
        current = np.asarray(store.projection_series(name, "current"), dtype=float)
        sums = np.asarray(store.projection_series(name, "sum"), dtype=float)
        averages = np.asarray(store.projection_series(name, "average"), dtype=float)

        if not np.isfinite(current).all():
            n_bad = int((~np.isfinite(current)).sum())
            result.warnings.append(f"{name}: {n_bad} non-finite values.")
            continue
        if not np.allclose(sums, np.cumsum(current), rtol=rtol, atol=atol):
            result.errors.append(f"{name}: running sum does not match cumulative current values.")
        if not np.allclose(averages, sums / periods, rtol=rtol, atol=atol):
            result.errors.append(f"{name}: running average does not match sum / (period + 1).")

    # --- Total ---
    members = list(total_members) if total_members is not None else list(store.total_members)
    if members:
        stacked = np.vstack([np.asarray(store.projection_series(m, "current"), dtype=float) for m in members])
        expected = stacked.sum(axis=0)
    else:
        expected = np.zeros(n)
    total = np.asarray(store.projection_series(TOTAL, "current"), dtype=float)
    if np.isfinite(expected).all() and not np.allclose(total, expected, rtol=rtol, atol=atol):
        result.errors.append("total: per-period total does not match the sum of its members.")

    return result
