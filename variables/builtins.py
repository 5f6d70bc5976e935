"""
Built-in internal variables.

They read everything from the EvaluationContext owned by the evaluator, so a
context reset is all it takes to start counting from period 1 again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from core.schema import DATE, PERIOD_NUMBER, TOTAL_PERIODS

from .base import InternalVariable

if TYPE_CHECKING:
    from engine.context import EvaluationContext


def builtin_variables(context: "EvaluationContext") -> List[InternalVariable]:
    """periodNumber, totalPeriods and (when dates are configured) date."""
    variables = [
        InternalVariable(name=PERIOD_NUMBER, compute=context.advance_period),
        InternalVariable(name=TOTAL_PERIODS, compute=lambda: context.total_periods),
    ]
    if context.dates is not None:
        variables.append(InternalVariable(name=DATE, compute=context.next_date))
    return variables
