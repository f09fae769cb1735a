"""
Scenario input controls and session-state wiring.

Every lever widget is keyed by its flat record field (see
``Scenario.to_record``) with a ``scenario_`` prefix, so the current
Scenario can be rebuilt from session state at the top of each rerun and
reset or preset actions only need to rewrite those keys.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

from medicaid_model.calculator import DerivedMetrics
from medicaid_model.policies import (
    ALLOWED_WORK_HOURS,
    MAX_FPL_THRESHOLD,
    MAX_RATE_INCREASE,
    MAX_SIN_TAX_INCREASE,
    MAX_SNAP_SHARE_PERCENT,
    MIN_FPL_THRESHOLD,
    DemographicGroup,
    Scenario,
    WorkExemption,
    baseline_scenario,
)
from medicaid_model.preset_handler import create_scenario_from_preset, get_preset
from medicaid_model.states import DEFAULT_STATE, get_state_profile, list_state_names

logger = logging.getLogger(__name__)

WIDGET_PREFIX = "scenario_"
RECORD_FIELDS = tuple(baseline_scenario().to_record())


def widget_key(field_name: str) -> str:
    return f"{WIDGET_PREFIX}{field_name}"


def scenario_to_widget_state(scenario: Scenario) -> dict[str, Any]:
    """Map a Scenario onto lever widget keys."""
    return {widget_key(name): value for name, value in scenario.to_record().items()}


def scenario_from_widget_state(session_state: MutableMapping[str, Any]) -> Scenario:
    """Rebuild the current Scenario from lever widget values."""
    record = {
        name: session_state[widget_key(name)]
        for name in RECORD_FIELDS
        if widget_key(name) in session_state
    }
    return Scenario.from_record(record)


def _write_scenario(session_state: MutableMapping[str, Any], scenario: Scenario) -> None:
    for key, value in scenario_to_widget_state(scenario).items():
        session_state[key] = value


def _current_state_name(session_state: MutableMapping[str, Any]) -> str:
    return session_state.get(widget_key("state"), DEFAULT_STATE)


def ensure_scenario_state(session_state: MutableMapping[str, Any]) -> None:
    """
    Initialize any missing lever widget values to baseline.
    """
    for key, value in scenario_to_widget_state(baseline_scenario()).items():
        if key not in session_state:
            session_state[key] = value


def reset_scenario_state(session_state: MutableMapping[str, Any]) -> None:
    """
    Restore every lever to baseline, keeping the selected state.
    """
    scenario = scenario_from_widget_state(session_state).reset()
    _write_scenario(session_state, scenario)
    logger.info(f"Scenario reset to baseline for {scenario.state_name}")


def apply_preset_state(session_state: MutableMapping[str, Any], preset_name: str) -> None:
    """
    Replace the levers with a preset's, keeping the selected state.
    """
    preset = get_preset(preset_name)
    if preset is None:
        logger.warning(f"Unknown preset {preset_name!r} ignored")
        return
    scenario = create_scenario_from_preset(preset, _current_state_name(session_state))
    _write_scenario(session_state, scenario)
    logger.info(f"Applied preset {preset_name!r} to {scenario.state_name}")


# =============================================================================
# SIDEBAR
# =============================================================================

def render_state_selector(st_module: Any) -> None:
    """
    Render the state dropdown and its projected funding loss.
    """
    state_name = st_module.selectbox(
        "Select State",
        options=list_state_names(),
        key=widget_key("state"),
    )
    profile = get_state_profile(state_name)
    st_module.markdown(
        f"**Projected Federal Funding Loss (2026):** "
        f"<span class='funding-loss'>${profile.funding_loss}B</span>",
        unsafe_allow_html=True,
    )
    st_module.caption(
        f"Population {profile.population:.1f}M · Medicaid enrollment {profile.medicaid_enrollment:.1f}M"
    )


def render_preset_selector(st_module: Any, preset_scenarios: dict[str, dict[str, Any]]) -> None:
    """
    Render preset dropdown with an apply button.
    """
    preset_name = st_module.selectbox(
        "Preset scenario",
        options=list(preset_scenarios),
        key="preset_choice",
        help="Load an illustrative bundle of lever settings for the selected state",
    )
    st_module.caption(preset_scenarios[preset_name]["description"])
    st_module.button(
        "📥 Apply Preset",
        use_container_width=True,
        on_click=apply_preset_state,
        args=(st_module.session_state, preset_name),
    )


def render_reset_button(st_module: Any) -> None:
    st_module.button(
        "🔄 Reset to Baseline",
        use_container_width=True,
        on_click=reset_scenario_state,
        args=(st_module.session_state,),
        help="Thresholds back to 138% FPL, work requirements and SNAP sharing off, no tax increases",
    )


# =============================================================================
# LEVER SECTIONS
# =============================================================================

def render_eligibility_section(st_module: Any, metrics: DerivedMetrics) -> None:
    """
    Render per-group eligibility threshold sliders.
    """
    with st_module.expander("Eligibility Adjustments by Group", expanded=True):
        for group in DemographicGroup:
            st_module.slider(
                f"{group.value.capitalize()} (% FPL)",
                min_value=MIN_FPL_THRESHOLD,
                max_value=MAX_FPL_THRESHOLD,
                step=1,
                key=widget_key(f"eligibility_{group.value}"),
            )
        st_module.markdown("---")
        st_module.caption(f"People affected: {metrics.eligibility_affected / 1e6:.2f}M")
        st_module.caption(f"Spending impact: ${metrics.eligibility_savings:.1f}B saved")


def render_work_section(st_module: Any, scenario: Scenario, metrics: DerivedMetrics) -> None:
    """
    Render work requirement toggle, hours and exemptions.
    """
    with st_module.expander("Work Requirements", expanded=True):
        st_module.checkbox("Implement work requirements", key=widget_key("work_enabled"))
        disabled = not scenario.work.enabled

        st_module.selectbox(
            "Hours per week",
            options=list(ALLOWED_WORK_HOURS),
            format_func=lambda hours: f"{hours} hours",
            key=widget_key("work_hours_per_week"),
            disabled=disabled,
        )
        st_module.markdown("**Exemptions:**")
        cols = st_module.columns(2)
        for i, exemption in enumerate(WorkExemption):
            with cols[i % 2]:
                st_module.checkbox(
                    exemption.value.capitalize(),
                    key=widget_key(f"exempt_{exemption.value}"),
                    disabled=disabled,
                )

        if scenario.work.enabled:
            st_module.caption(f"Admin cost: ${metrics.work_admin_cost}B")
            st_module.caption(f"Net savings: ${metrics.work_savings:.1f}B")


def render_snap_section(st_module: Any, scenario: Scenario, metrics: DerivedMetrics) -> None:
    """
    Render SNAP cost-sharing toggle and state share slider.
    """
    with st_module.expander("Include Budget Impact of SNAP Cost Sharing", expanded=True):
        st_module.checkbox(
            "Include Budget Impact of SNAP Cost Sharing",
            key=widget_key("snap_enabled"),
        )
        st_module.slider(
            "Cost-sharing percentage (%)",
            min_value=0,
            max_value=MAX_SNAP_SHARE_PERCENT,
            step=1,
            key=widget_key("snap_share_percent"),
            disabled=not scenario.snap.enabled,
        )
        if scenario.snap.enabled:
            st_module.caption(f"Additional cost: ${metrics.snap_cost:.1f}B")


def render_revenue_section(st_module: Any, metrics: DerivedMetrics) -> None:
    """
    Render revenue option sliders with per-source revenue.
    """
    with st_module.expander("Revenue Options", expanded=True):
        st_module.slider(
            "Income tax increase (pp)",
            min_value=0.0,
            max_value=MAX_RATE_INCREASE,
            step=0.1,
            format="%.1f",
            key=widget_key("income_tax_increase"),
        )
        st_module.caption(f"Revenue: ${metrics.income_revenue:.1f}B")
        st_module.slider(
            "Property tax increase (pp)",
            min_value=0.0,
            max_value=MAX_RATE_INCREASE,
            step=0.1,
            format="%.1f",
            key=widget_key("property_tax_increase"),
        )
        st_module.caption(f"Revenue: ${metrics.property_revenue:.1f}B")
        st_module.slider(
            "Sin tax increase (%)",
            min_value=0,
            max_value=MAX_SIN_TAX_INCREASE,
            step=1,
            key=widget_key("sin_tax_increase"),
        )
        st_module.caption(f"Revenue: ${metrics.sin_revenue:.1f}B")
        st_module.markdown(f"**Total Revenue: ${metrics.total_revenue:.1f}B**")


def render_lever_sections(st_module: Any, scenario: Scenario, metrics: DerivedMetrics) -> None:
    """
    Lay out the four lever sections in a two-column grid.
    """
    left, right = st_module.columns(2)
    with left:
        render_eligibility_section(st_module, metrics)
        render_snap_section(st_module, scenario, metrics)
    with right:
        render_work_section(st_module, scenario, metrics)
        render_revenue_section(st_module, metrics)
