import math

import pandas as pd
import pytest

from reporting.frame import export_excel, results_to_frame
from reporting.validators import validate_results


@pytest.fixture
def store(make_engine):
    engine = make_engine(3, start_date="2020-01-01", date_format="%Y-%m")
    engine.register_external("rent", lambda: 100.0)
    engine.register_derived("gross", lambda r: r, dependencies=["rent"])
    engine.register_derived("fee", lambda g: -0.1 * g, dependencies=["gross"], hidden=True)
    engine.register_derived("memo", lambda n: n, dependencies=["periodNumber"], include_in_total=False)
    return engine.run()


def test_frame_layout(store):
    frame = results_to_frame(store)
    assert list(frame.columns) == ["date", "periodNumber", "totalPeriods", "rent", "gross", "memo", "total"]
    assert list(frame.index) == [1, 2, 3]
    assert frame.index.name == "period"
    assert frame.loc[1, "date"] == "2020-01"
    assert frame.loc[3, "total"] == pytest.approx(90.0)


def test_frame_hidden_and_internal_toggles(store):
    frame = results_to_frame(store, include_hidden=True, include_internal=False)
    assert "fee" in frame.columns
    assert "periodNumber" not in frame.columns
    assert "date" in frame.columns


def test_frame_projection(store):
    frame = results_to_frame(store, projection="sum")
    assert list(frame["gross"]) == [100.0, 200.0, 300.0]
    assert list(frame["rent"]) == [100.0, 100.0, 100.0]
    assert frame.loc[3, "total"] == pytest.approx(270.0)


def test_frame_rejects_unknown_projection(store):
    with pytest.raises(ValueError):
        results_to_frame(store, projection="median")


def test_export_excel(store, tmp_path):
    path = export_excel(store, tmp_path / "projection.xlsx")
    assert path.exists()
    sheets = pd.read_excel(path, sheet_name=None, index_col=0)
    assert list(sheets) == ["current", "sum", "average"]
    assert list(sheets["sum"]["gross"]) == [100.0, 200.0, 300.0]


def test_validate_clean_store(store):
    result = validate_results(store)
    assert result.is_valid
    assert result.warnings == []
    assert result.summary() == "Result store is consistent."


def test_validate_detects_wrong_total_membership(store):
    result = validate_results(store, total_members=["gross", "fee", "memo"])
    assert not result.is_valid
    assert any("total" in e for e in result.errors)


def test_validate_detects_ragged_history(store):
    store["rent"].append(1.0)
    result = validate_results(store)
    assert not result.is_valid
    assert "rent" in result.summary()
    assert result.summary().startswith("Inconsistent: rent")


def test_validate_warns_on_non_finite(make_engine):
    engine = make_engine(2)
    engine.register_derived("nan", lambda: math.nan)
    result = validate_results(engine.run())
    assert result.is_valid
    assert any("non-finite" in w for w in result.warnings)


def test_summary_lists_warnings_after_errors():
    from reporting.validators import ValidationResult

    result = ValidationResult(errors=["total off"], warnings=["nan: 1 non-finite values."])
    assert result.summary().splitlines() == ["Inconsistent: total off", "Check: nan: 1 non-finite values."]
