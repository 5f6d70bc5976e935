"""
Period evaluator: the per-period control loop.

For each period p:
  1. internal variables, in registration order
  2. external variables, in registration order
  3. derived variables, in registration order: resolve every dependency
     reference against the histories built so far, call compute, append the
     {current, sum, average} entry, add current to the period total
  4. the `total` entry for p

A reference whose index p - look_behind is negative resolves to 0, so
"previous period" formulas work from period 0 without special cases.
"""

from __future__ import annotations

from typing import Any, List, Optional

from core.errors import UnresolvedDependencyError
from core.logger import get_logger
from core.schema import TOTAL
from variables.base import DerivedVariable, VariableKind
from variables.references import DependencyReference

from .context import EvaluationContext
from .registry import VariableRegistry
from .store import ResultStore

logger = get_logger(__name__)


class PeriodEvaluator:
    def __init__(self, registry: VariableRegistry, context: EvaluationContext):
        self.registry = registry
        self.context = context

    def evaluate(self) -> ResultStore:
        """Run every period and return a complete store; raises on the first failure."""
        self.context.reset()
        store = ResultStore()
        for variable in self.registry:
            store.open_series(
                variable.name,
                variable.kind,
                hidden=getattr(variable, "hidden", False),
                in_total=getattr(variable, "include_in_total", False),
            )

        internals = self.registry.of_kind(VariableKind.INTERNAL)
        externals = self.registry.of_kind(VariableKind.EXTERNAL)
        derived = self.registry.of_kind(VariableKind.DERIVED)

        for period in range(self.context.total_periods):
            for variable in internals:
                store.append(variable.name, variable.compute())
            for variable in externals:
                store.append(variable.name, variable.compute())

            period_total = 0
            for variable in derived:
                entry = self._evaluate_derived(variable, period, store)
                if variable.include_in_total:
                    period_total += entry.current

            store.append_derived(TOTAL, period_total)
            store.periods_evaluated = period + 1

        store.dates = list(self.context.computed_dates)
        return store

    def _evaluate_derived(self, variable: DerivedVariable, period: int, store: ResultStore):
        args = [self.resolve(ref, period, store, variable=variable.name) for ref in variable.dependencies]
        current = variable.compute(*args)
        return store.append_derived(variable.name, current)

    def resolve(
        self,
        ref: DependencyReference,
        period: int,
        store: ResultStore,
        *,
        variable: Optional[str] = None,
    ) -> Any:
        idx = ref.period_index(period)
        if idx < 0:
            return 0

        found = self.registry.lookup(ref.source_name)
        if found is None:
            logger.error("Unresolved dependency %r for %r at period %d", ref.source_name, variable, period)
            raise UnresolvedDependencyError(ref.source_name, period=period, variable=variable)

        kind, _ = found
        history: List[Any] = store[ref.source_name]
        if idx >= len(history):
            # same-period read of a derived variable declared later (or itself)
            logger.error(
                "Dependency %r not yet computed for %r at period %d", ref.source_name, variable, period
            )
            raise UnresolvedDependencyError(
                ref.source_name, period=period, variable=variable, reason="not yet computed"
            )

        value = history[idx]
        if kind == VariableKind.DERIVED:
            return value.project(ref.projection)
        return value
