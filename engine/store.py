"""
Result store: per-variable ordered histories for one evaluation run.

Internal and external variables keep flat lists of raw values. Derived
variables and the synthetic `total` series keep ResultEntry triples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from core.schema import DATES, PROJECTIONS, TOTAL
from core.utils import running_average
from variables.base import VariableKind


@dataclass(frozen=True)
class ResultEntry:
    """One period of a derived series with its running aggregates."""

    current: float
    sum: float
    average: float

    def project(self, projection: str) -> float:
        if projection not in PROJECTIONS:
            raise ValueError(f"Unknown projection {projection!r}")
        return getattr(self, projection)

    def to_dict(self) -> Dict[str, float]:
        return {"current": self.current, "sum": self.sum, "average": self.average}


def next_entry(history: Sequence[ResultEntry], current: float) -> ResultEntry:
    """
    Entry for period len(history) given that period's value.
    sum[p] = sum[p-1] + current[p]; average[p] = sum[p] / (p + 1).
    """
    previous_sum = history[-1].sum if history else 0
    total = previous_sum + current
    return ResultEntry(current=current, sum=total, average=running_average(total, len(history)))


class ResultStore:
    """
    Mapping of variable name -> history, plus the reserved `total` series and
    the formatted dates produced during the run.
    """

    def __init__(self):
        self._histories: Dict[str, List[Any]] = {}
        self._kinds: Dict[str, VariableKind] = {}
        self._hidden: set = set()
        self.total_members: List[str] = []
        self.dates: List[str] = []
        self.periods_evaluated = 0
        self.open_series(TOTAL, VariableKind.DERIVED)

    # ---- construction (used by the evaluator) -------------------------------

    def open_series(
        self, name: str, kind: VariableKind, *, hidden: bool = False, in_total: bool = False
    ) -> List[Any]:
        history: List[Any] = []
        self._histories[name] = history
        self._kinds[name] = kind
        if in_total:
            self.total_members.append(name)
        if hidden:
            self._hidden.add(name)
        return history

    def append(self, name: str, value: Any) -> None:
        self._histories[name].append(value)

    def append_derived(self, name: str, current: float) -> ResultEntry:
        history = self._histories[name]
        entry = next_entry(history, current)
        history.append(entry)
        return entry

    # ---- read access --------------------------------------------------------

    def __getitem__(self, name: str) -> List[Any]:
        return self._histories[name]

    def __contains__(self, name: object) -> bool:
        return name in self._histories

    def __iter__(self) -> Iterator[str]:
        return iter(self._histories)

    def __len__(self) -> int:
        return len(self._histories)

    def get(self, name: str, default=None):
        return self._histories.get(name, default)

    @property
    def total(self) -> List[ResultEntry]:
        return self._histories[TOTAL]

    def kind_of(self, name: str) -> VariableKind:
        return self._kinds[name]

    def is_hidden(self, name: str) -> bool:
        return name in self._hidden

    def names(self, kind: Optional[VariableKind] = None, *, include_hidden: bool = True) -> List[str]:
        return [
            n for n, k in self._kinds.items()
            if (kind is None or k == kind) and (include_hidden or n not in self._hidden)
        ]

    def projection_series(self, name: str, projection: str = "current") -> List[Any]:
        """Values of one projection for a derived series, raw values otherwise."""
        history = self._histories[name]
        if self._kinds[name] != VariableKind.DERIVED:
            return list(history)
        return [entry.project(projection) for entry in history]

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {DATES: list(self.dates)}
        for name, history in self._histories.items():
            if self._kinds[name] == VariableKind.DERIVED:
                out[name] = [entry.to_dict() for entry in history]
            else:
                out[name] = list(history)
        return out

    def __repr__(self) -> str:
        return f"ResultStore(periods={self.periods_evaluated}, variables={list(self._histories)})"
