"""
Tests for report generation, export files and state comparison.
"""

import json

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from medicaid_model.app_data import PRESET_SCENARIOS
from medicaid_model.calculator import evaluate
from medicaid_model.preset_handler import create_scenario_from_preset, get_preset
from medicaid_model.reporting import (
    ScenarioReport,
    create_comparison_table,
    create_state_comparison_frame,
    scenario_fingerprint,
)
from medicaid_model.states import list_state_names


def test_fingerprint_is_stable_and_lever_sensitive(full_package):
    assert scenario_fingerprint(full_package) == scenario_fingerprint(full_package.with_state("Texas"))
    assert len(scenario_fingerprint(full_package)) == 12
    assert scenario_fingerprint(full_package) != scenario_fingerprint(full_package.reset())


def test_text_report_sections(california_levers):
    report = ScenarioReport(california_levers)
    text = report.generate_text_report()

    assert "MEDICAID REFORM SCENARIO REPORT" in text
    assert "State: California" in text
    assert "Work requirements: On, 30 hours/week" in text
    assert "SNAP cost sharing: Off" in text
    assert f"{report.metrics.net_budget_impact:>12,.1f}" in text
    for year in range(2026, 2032):
        assert str(year) in text
    assert "DEMO ONLY" in text


def test_report_evaluates_when_metrics_not_given(full_package):
    assert ScenarioReport(full_package).metrics == evaluate(full_package)


def test_json_export(full_package):
    payload = json.loads(ScenarioReport(full_package).to_json())

    assert payload["scenario"] == full_package.to_record()
    assert payload["metrics"]["net_budget_impact"] == pytest.approx(evaluate(full_package).net_budget_impact)
    assert [row["year"] for row in payload["trajectory"]] == list(range(2026, 2032))
    assert payload["funding_breakdown"][-1]["name"] == "SNAP Costs"
    assert len(payload["enrollment"]) == 2


def test_flat_record_includes_metrics(full_package):
    record = ScenarioReport(full_package).to_record()

    assert record["state"] == "Texas"
    assert record["run_id"] == scenario_fingerprint(full_package)
    assert record["total_affected"] > 0


def test_trajectory_csv(full_package):
    csv = ScenarioReport(full_package).trajectory_csv().decode("utf-8")
    lines = csv.strip().splitlines()

    assert lines[0] == "Year,Net Budget Position ($B)"
    assert len(lines) == 7
    assert lines[1].startswith("2026,")


def test_figure_png(california_baseline):
    png = ScenarioReport(california_baseline).figure_png()
    assert png.startswith(b"\x89PNG")


def test_plot_dashboard_saves(tmp_path, full_package):
    out = tmp_path / "scenario.png"
    fig = ScenarioReport(full_package).plot_dashboard(save_path=str(out))

    assert out.exists()
    assert len(fig.axes) == 3


def test_state_comparison_frame(full_package):
    df = create_state_comparison_frame(full_package)

    assert isinstance(df, pd.DataFrame)
    assert df["State"].tolist() == list_state_names()
    texas = df.set_index("State").loc["Texas"]
    assert texas["Net Budget Impact ($B)"] == pytest.approx(evaluate(full_package).net_budget_impact)
    assert (df["Share of Gap Closed (%)"] > 0).all()

    table = create_comparison_table(df)
    assert "STATE COMPARISON TABLE" in table
    assert "North Carolina" in table
    assert "COMBINED NET" in table


def test_baseline_comparison_closes_no_gap(california_baseline):
    df = create_state_comparison_frame(california_baseline)
    assert df["Share of Gap Closed (%)"].abs().max() == pytest.approx(0.0)


# =============================================================================
# PRESETS
# =============================================================================

@pytest.mark.parametrize("preset_name", list(PRESET_SCENARIOS))
def test_presets_build_valid_scenarios(preset_name):
    preset = get_preset(preset_name)
    scenario = create_scenario_from_preset(preset, "Florida")

    assert scenario.state_name == "Florida"
    for key, value in preset["levers"].items():
        assert scenario.to_record()[key] == value


def test_baseline_preset_is_baseline():
    scenario = create_scenario_from_preset(PRESET_SCENARIOS["Baseline (No Action)"], "Ohio")
    assert scenario.is_baseline


def test_unknown_preset():
    assert get_preset("No Such Preset") is None
