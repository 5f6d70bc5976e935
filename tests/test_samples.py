import pytest

from reporting.frame import results_to_frame
from reporting.validators import validate_results
from samples.amortization import build_amortization_engine
from samples.cli import main
from samples.rent_escalation import build_rent_escalation_engine


def test_amortization_sample():
    store = build_amortization_engine().run()
    capital = store["capital"]
    interest = store["interest"]
    assert capital[-1].sum == pytest.approx(10000.0)
    assert interest[0].current == 0
    assert interest[1].current == pytest.approx(10000 / 12 * 0.0087)
    assert interest[-1].sum == pytest.approx(11 * 10000 / 12 * 0.0087)
    assert validate_results(store).is_valid


def test_rent_escalation_sample():
    store = build_rent_escalation_engine().run()
    assert store.periods_evaluated == 18
    assert store.dates[0] == "March 2018"
    assert store.dates[-1] == "August 2019"

    meters = 6000 / 18
    cost = meters * 1600000
    assert store["monthlyMeters"][0].current == pytest.approx(meters)
    assert store["monthlyMeterIndexedCost"][0].current == pytest.approx(cost * 1.005)
    assert store["monthlyMeterIndexedCost"][9].current == pytest.approx(cost * 1.05)
    # monthlyMeters is excluded from the total, the hidden cost is not
    assert store.total[0].current == pytest.approx(cost + cost * 1.005)
    assert validate_results(store).is_valid


def test_rent_escalation_hides_cost_column():
    frame = results_to_frame(build_rent_escalation_engine(periods=3).run())
    assert "monthlyMeterCost" not in frame.columns
    assert "monthlyMeterIndexedCost" in frame.columns


def test_cli_runs_sample(capsys):
    assert main(["amortization", "--periods", "3"]) == 0
    out = capsys.readouterr().out
    assert "capital" in out
    assert "interest" in out


def test_cli_rent_with_hidden_and_sum(capsys):
    assert main(["rent", "--periods", "2", "--projection", "sum", "--show-hidden"]) == 0
    out = capsys.readouterr().out
    assert "monthlyMeterCost" in out
    assert "April 2018" in out


def test_cli_reports_configuration_errors(capsys):
    assert main(["amortization", "--periods", "0"]) == 1
    assert "periods" in capsys.readouterr().err


def test_cli_writes_workbook(tmp_path, capsys):
    target = tmp_path / "out.xlsx"
    assert main(["amortization", "--periods", "2", "--excel", str(target)]) == 0
    assert target.exists()


def test_cli_reports_unavailable_locale(capsys):
    assert main(["rent", "--periods", "2", "--locale", "xx_XX.not-a-locale"]) == 1
    assert "date_locale" in capsys.readouterr().err
