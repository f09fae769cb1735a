"""
UI helper utilities for Streamlit app composition.
"""

from .styles import APP_STYLES, CHART_COLORS, COLORS, apply_app_styles
from .charts import build_enrollment_bar, build_funding_pie, build_trajectory_line
from .scenario_controller import (
    apply_preset_state,
    ensure_scenario_state,
    reset_scenario_state,
    scenario_from_widget_state,
    scenario_to_widget_state,
)
from .app_controller import run_main_app
from .dependencies import build_app_dependencies

__all__ = [
    "APP_STYLES",
    "CHART_COLORS",
    "COLORS",
    "apply_app_styles",
    "build_enrollment_bar",
    "build_funding_pie",
    "build_trajectory_line",
    "apply_preset_state",
    "ensure_scenario_state",
    "reset_scenario_state",
    "scenario_from_widget_state",
    "scenario_to_widget_state",
    "run_main_app",
    "build_app_dependencies",
]
