"""
Mutable per-run state for the built-in internal variables.

The evaluator owns one EvaluationContext and resets it at the start of every
run, so repeated runs on the same engine always start at period 1 and at the
configured start date.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd

from core.config import ProjectionConfig
from core.schema import DEFAULT_DATE_FORMAT
from core.utils import format_date, increment_delta


class DateSequence:
    """
    Date-sequence collaborator.

    First call to next() returns the start date formatted; each further call
    returns the date one increment later. Dates are offset from the start
    (start + k * unit), not chained from the previous date.
    """

    def __init__(
        self,
        start_date,
        unit: str = "months",
        fmt: str = DEFAULT_DATE_FORMAT,
        locale: Optional[str] = None,
    ):
        self.start = pd.Timestamp(start_date).normalize()
        self.unit = unit
        self.fmt = fmt
        self.locale = locale
        self._step = 0

    def reset(self) -> None:
        self._step = 0

    def peek(self) -> pd.Timestamp:
        return self.start + increment_delta(self.unit, self._step)

    def next(self) -> str:
        current = self.peek()
        self._step += 1
        return format_date(current, self.fmt, self.locale)

    __next__ = next

    def __iter__(self):
        return self


class EvaluationContext:
    """Period counter, period count and date cursor for one evaluation run."""

    def __init__(self, config: ProjectionConfig):
        self.total_periods = config.periods
        self.period_number = 0
        self.computed_dates: List[str] = []
        self.dates: Optional[DateSequence] = None
        if config.has_dates:
            self.dates = DateSequence(
                config.start_timestamp,
                unit=config.date_increment,
                fmt=config.date_format,
                locale=config.date_locale,
            )

    def reset(self) -> None:
        self.period_number = 0
        self.computed_dates = []
        if self.dates is not None:
            self.dates.reset()

    def advance_period(self) -> int:
        self.period_number += 1
        return self.period_number

    def next_date(self) -> str:
        if self.dates is None:
            raise RuntimeError("No date sequence configured")
        value = self.dates.next()
        self.computed_dates.append(value)
        return value
