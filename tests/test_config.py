import datetime as dt

import pandas as pd
import pytest

from core.config import ProjectionConfig
from core.errors import CashflowError, ConfigurationError


def test_defaults():
    cfg = ProjectionConfig(periods=12)
    assert cfg.periods == 12
    assert cfg.date_increment == "months"
    assert cfg.date_format == "%B %d, %Y"
    assert cfg.has_dates is False
    assert cfg.start_timestamp is None


@pytest.mark.parametrize("periods", [0, -3, 1.5, "12", True, None])
def test_rejects_bad_period_count(periods):
    with pytest.raises(ConfigurationError):
        ProjectionConfig(periods=periods)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        ProjectionConfig(periods=0)
    assert issubclass(ConfigurationError, CashflowError)


def test_rejects_unknown_increment_unit():
    with pytest.raises(ConfigurationError, match="date_increment"):
        ProjectionConfig(periods=3, start_date="2020-01-01", date_increment="weeks")


def test_rejects_unparseable_start_date():
    with pytest.raises(ConfigurationError, match="start_date"):
        ProjectionConfig(periods=3, start_date="not a date")


def test_rejects_empty_format():
    with pytest.raises(ConfigurationError):
        ProjectionConfig(periods=3, date_format="")


@pytest.mark.parametrize(
    "start",
    ["2018-03-01", dt.date(2018, 3, 1), pd.Timestamp("2018-03-01 15:30")],
)
def test_start_timestamp_is_normalised(start):
    cfg = ProjectionConfig(periods=3, start_date=start)
    assert cfg.has_dates
    assert cfg.start_timestamp == pd.Timestamp("2018-03-01")


def test_config_is_frozen():
    cfg = ProjectionConfig(periods=3)
    with pytest.raises(Exception):
        cfg.periods = 4


def test_rejects_unavailable_locale():
    with pytest.raises(ConfigurationError, match="date_locale"):
        ProjectionConfig(periods=3, date_locale="xx_XX.not-a-locale")


def test_accepts_c_locale():
    assert ProjectionConfig(periods=3, date_locale="C").date_locale == "C"
