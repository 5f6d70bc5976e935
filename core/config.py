"""
Projection configuration.
Everything the engine needs to know at construction time; validated eagerly so
a bad value never surfaces mid-run.
"""

from __future__ import annotations

import datetime as dt
import locale
from dataclasses import dataclass
from typing import Optional, Union

import pandas as pd

from .errors import ConfigurationError
from .schema import DATE_INCREMENT_UNITS, DEFAULT_DATE_FORMAT, DateIncrementUnit

DateLike = Union[str, dt.date, pd.Timestamp]


@dataclass(frozen=True)
class ProjectionConfig:
    periods: int

    # date collaborator; no start_date means no `date` variable
    start_date: Optional[DateLike] = None
    date_increment: DateIncrementUnit = "months"
    date_locale: Optional[str] = None
    date_format: str = DEFAULT_DATE_FORMAT

    def __post_init__(self):
        if isinstance(self.periods, bool) or not isinstance(self.periods, int):
            raise ConfigurationError(f"periods must be an integer, got {self.periods!r}")
        if self.periods <= 0:
            raise ConfigurationError(f"periods must be positive, got {self.periods}")
        if self.date_increment not in DATE_INCREMENT_UNITS:
            raise ConfigurationError(
                f"date_increment must be one of {DATE_INCREMENT_UNITS}, got {self.date_increment!r}"
            )
        if not isinstance(self.date_format, str) or not self.date_format:
            raise ConfigurationError("date_format must be a non-empty string")
        if self.start_date is not None:
            try:
                start = pd.Timestamp(self.start_date)
            except (ValueError, TypeError) as exc:
                raise ConfigurationError(f"Unparseable start_date: {self.start_date!r}") from exc
            if pd.isna(start):
                raise ConfigurationError(f"Unparseable start_date: {self.start_date!r}")
        if self.date_locale is not None:
            try:
                pd.Timestamp("2000-01-01").month_name(locale=self.date_locale)
            except (locale.Error, ValueError, TypeError) as exc:
                raise ConfigurationError(f"Unavailable date_locale: {self.date_locale!r}") from exc

    @property
    def has_dates(self) -> bool:
        return self.start_date is not None

    @property
    def start_timestamp(self) -> Optional[pd.Timestamp]:
        if self.start_date is None:
            return None
        return pd.Timestamp(self.start_date).normalize()
