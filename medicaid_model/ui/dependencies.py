"""
Dependency assembly for Streamlit app bootstrap.
"""

from __future__ import annotations

from types import SimpleNamespace

from medicaid_model import (
    PolicyImpactCalculator,
    ScenarioReport,
    compare_to_baseline,
    create_state_comparison_frame,
    evaluate,
)
from medicaid_model.app_data import DASHBOARD_NOTES, PRESET_SCENARIOS
from medicaid_model.preset_handler import create_scenario_from_preset

from .app_controller import run_main_app
from .styles import apply_app_styles
from .tabs import (
    render_budget_charts_tab,
    render_export_tab,
    render_methodology_tab,
    render_results_summary_tab,
    render_state_comparison_tab,
)


def build_app_dependencies() -> SimpleNamespace:
    """
    Build all runtime dependencies needed by the app controller.
    """
    return SimpleNamespace(
        PRESET_SCENARIOS=PRESET_SCENARIOS,
        DASHBOARD_NOTES=DASHBOARD_NOTES,
        PolicyImpactCalculator=PolicyImpactCalculator,
        ScenarioReport=ScenarioReport,
        evaluate=evaluate,
        compare_to_baseline=compare_to_baseline,
        create_state_comparison_frame=create_state_comparison_frame,
        create_scenario_from_preset=create_scenario_from_preset,
        render_results_summary_tab=render_results_summary_tab,
        render_budget_charts_tab=render_budget_charts_tab,
        render_state_comparison_tab=render_state_comparison_tab,
        render_export_tab=render_export_tab,
        render_methodology_tab=render_methodology_tab,
        apply_app_styles=apply_app_styles,
        run_main_app=run_main_app,
    )
