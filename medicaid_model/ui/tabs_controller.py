"""
Tab wiring and render orchestration helpers.
"""

from __future__ import annotations

from typing import Any

from medicaid_model.calculator import DerivedMetrics
from medicaid_model.policies import Scenario

TAB_LABELS = ["📊 Charts", "🔀 State Comparison", "⬇️ Export", "ℹ️ Methodology"]


def build_main_tabs(st_module: Any) -> dict[str, Any]:
    """
    Create main result tabs layout and return named tab references.
    """
    tabs = st_module.tabs(TAB_LABELS)
    return dict(zip(["tab_charts", "tab_comparison", "tab_export", "tab_methodology"], tabs))


def render_result_tabs(
    st_module: Any,
    deps: Any,
    tabs: dict[str, Any],
    scenario: Scenario,
    metrics: DerivedMetrics,
    baseline_metrics: DerivedMetrics,
    settings: dict[str, Any],
) -> None:
    """
    Render chart, comparison, export and reference tabs.
    """
    with tabs["tab_charts"]:
        deps.render_budget_charts_tab(
            st_module=st_module,
            metrics=metrics,
            baseline_metrics=baseline_metrics,
            settings=settings,
        )

    with tabs["tab_comparison"]:
        deps.render_state_comparison_tab(
            st_module=st_module,
            scenario=scenario,
            create_state_comparison_frame_fn=deps.create_state_comparison_frame,
        )

    with tabs["tab_export"]:
        deps.render_export_tab(
            st_module=st_module,
            scenario=scenario,
            metrics=metrics,
            scenario_report_cls=deps.ScenarioReport,
        )

    with tabs["tab_methodology"]:
        deps.render_methodology_tab(st_module=st_module)


def render_info_box(st_module: Any, how_to_use: list[str]) -> None:
    """
    Render the usage notes box below the dashboard.
    """
    items = "".join(f"<li>{item}</li>" for item in how_to_use)
    st_module.markdown(
        f"""
        <div class="info-box">
            <p style="font-weight: 600; margin-bottom: 0.25rem;">ℹ️ How to use this dashboard:</p>
            <ul style="margin: 0;">{items}</ul>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_footer(st_module: Any) -> None:
    """
    Render app footer.
    """
    st_module.markdown("---")
    st_module.caption(
        """
**Medicaid Reform Modeling Dashboard** | Built with Streamlit |
Demonstration data only | Not a fiscal estimate
"""
    )
