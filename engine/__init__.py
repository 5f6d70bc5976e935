"""
Projection engine: per-period evaluation of internal, external and derived variables.
"""

from .cashflow import CashflowEngine
from .context import DateSequence, EvaluationContext
from .evaluator import PeriodEvaluator
from .registry import VariableRegistry
from .runner import run_projection
from .store import ResultEntry, ResultStore

__all__ = [
    "CashflowEngine",
    "DateSequence",
    "EvaluationContext",
    "PeriodEvaluator",
    "VariableRegistry",
    "ResultEntry",
    "ResultStore",
    "run_projection",
]
