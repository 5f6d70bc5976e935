from __future__ import annotations

from typing import Optional

import pandas as pd
from dateutil.relativedelta import relativedelta


def increment_delta(unit: str, steps: int) -> relativedelta:
    """relativedelta of `steps` increments of `unit` (days, months or years)."""
    return relativedelta(**{unit: steps})


def format_date(ts: pd.Timestamp, fmt: str, locale: Optional[str] = None) -> str:
    """
    strftime with optional localized month (%B) and weekday (%A) names.
    Locale names must be installed on the host; pandas raises otherwise.
    """
    ts = pd.Timestamp(ts)
    if locale:
        # escape % so the localized name survives strftime untouched
        fmt = fmt.replace("%B", ts.month_name(locale=locale).replace("%", "%%"))
        fmt = fmt.replace("%A", ts.day_name(locale=locale).replace("%", "%%"))
    return ts.strftime(fmt)


def running_average(total: float, period_index: int) -> float:
    """Average over periods 0..period_index given their running sum."""
    return total / (period_index + 1)
