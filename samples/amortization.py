"""
Straight-line loan amortization.

Capital is repaid in equal instalments; interest each period is charged on the
previous period's capital instalment at a flat monthly rate.
"""

from __future__ import annotations

from engine.cashflow import CashflowEngine
from variables.references import DependencyReference


def build_amortization_engine(
    loan_amount: float = 10000.0,
    periods: int = 12,
    rate: float = 0.0087,
) -> CashflowEngine:
    engine = CashflowEngine(periods)
    engine.register_external("rate", lambda: rate)
    engine.register_derived(
        "capital",
        lambda total_periods: loan_amount / total_periods,
        dependencies=["totalPeriods"],
    )
    engine.register_derived(
        "interest",
        lambda capital, monthly_rate: capital * monthly_rate,
        dependencies=[
            DependencyReference(source_name="capital", look_behind=1),
            "rate",
        ],
    )
    return engine
