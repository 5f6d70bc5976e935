"""
Indexed rent schedule.

A fixed floor area is taken up in equal monthly tranches; each tranche is
priced per square meter and escalated linearly by a monthly index.
"""

from __future__ import annotations

from typing import Optional

from core.config import ProjectionConfig
from engine.cashflow import CashflowEngine


def build_rent_escalation_engine(
    periods: int = 18,
    square_meter_value: float = 1600000.0,
    total_meters: float = 6000.0,
    monthly_index: float = 0.005,
    start_date: str = "2018-03-01",
    date_format: str = "%B %Y",
    date_locale: Optional[str] = None,
) -> CashflowEngine:
    engine = CashflowEngine(
        ProjectionConfig(
            periods=periods,
            start_date=start_date,
            date_increment="months",
            date_format=date_format,
            date_locale=date_locale,
        )
    )
    engine.register_external("squareMeterValue", lambda: square_meter_value)
    engine.register_external("totalMeters", lambda: total_meters)
    engine.register_external("monthlyIndex", lambda: monthly_index)

    engine.register_derived(
        "monthlyMeters",
        lambda meters, total_periods: meters / total_periods,
        dependencies=["totalMeters", "totalPeriods"],
        include_in_total=False,
        description="Square meters taken up each month",
    )
    engine.register_derived(
        "monthlyMeterCost",
        lambda meters, value: meters * value,
        dependencies=["monthlyMeters", "squareMeterValue"],
        hidden=True,
    )
    engine.register_derived(
        "monthlyMeterIndexedCost",
        lambda cost, index, period: cost + cost * period * index,
        dependencies=["monthlyMeterCost", "monthlyIndex", "periodNumber"],
    )
    return engine
