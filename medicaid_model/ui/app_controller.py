"""
Top-level Streamlit app orchestration.
"""

from __future__ import annotations

from typing import Any

from .scenario_controller import (
    ensure_scenario_state,
    render_lever_sections,
    render_preset_selector,
    render_reset_button,
    render_state_selector,
    scenario_from_widget_state,
)
from .settings_controller import render_settings_panel
from .tabs_controller import build_main_tabs, render_footer, render_info_box, render_result_tabs


def run_main_app(st_module: Any, deps: Any) -> None:
    """
    Render and orchestrate the full Streamlit app flow.

    The scenario is rebuilt from widget state at the top of every rerun and
    evaluated once; all sections render from that single result.
    """
    ensure_scenario_state(st_module.session_state)
    scenario = scenario_from_widget_state(st_module.session_state)
    baseline_metrics, metrics = deps.compare_to_baseline(scenario)

    st_module.markdown('<div class="main-header">Medicaid Reform Modeling Dashboard</div>', unsafe_allow_html=True)
    st_module.caption(
        "Model how a state could respond to lost federal Medicaid funding with eligibility, "
        "work requirement, SNAP cost-sharing and revenue levers."
    )

    # Sidebar Inputs
    with st_module.sidebar:
        st_module.header("🗺️ State")
        render_state_selector(st_module)

        st_module.markdown("---")
        st_module.header("⚙️ Scenario")
        render_preset_selector(st_module, deps.PRESET_SCENARIOS)
        render_reset_button(st_module)

        st_module.markdown("---")
        settings = render_settings_panel(
            st_module=st_module,
            settings_container=st_module.expander("⚙️ Display Options"),
        )

    deps.render_results_summary_tab(
        st_module=st_module,
        metrics=metrics,
        baseline_metrics=baseline_metrics,
    )

    st_module.markdown("---")
    st_module.subheader("Policy Levers")
    render_lever_sections(st_module, scenario, metrics)

    st_module.markdown("---")
    tabs = build_main_tabs(st_module=st_module)
    render_result_tabs(
        st_module=st_module,
        deps=deps,
        tabs=tabs,
        scenario=scenario,
        metrics=metrics,
        baseline_metrics=baseline_metrics,
        settings=settings,
    )

    render_info_box(st_module, deps.DASHBOARD_NOTES["how_to_use"])
    render_footer(st_module=st_module)
