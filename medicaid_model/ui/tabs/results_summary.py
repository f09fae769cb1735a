"""
Budget impact summary renderer.
"""

from __future__ import annotations

from typing import Any

from medicaid_model.calculator import DerivedMetrics

from ..styles import COLORS, impact_color


def _metric_card(label: str, value: str, color: str) -> str:
    return f"""
        <div class="metric-card">
            <div class="metric-label">{label}</div>
            <div class="metric-value" style="color: {color};">{value}</div>
        </div>
        """


def render_results_summary_tab(
    st_module: Any,
    metrics: DerivedMetrics,
    baseline_metrics: DerivedMetrics,
) -> None:
    """
    Render headline cards plus component metrics with deltas against baseline.
    """
    st_module.subheader("Budget Impact Summary")

    col1, col2, col3 = st_module.columns(3)
    with col1:
        st_module.markdown(
            _metric_card(
                "Net Budget Impact",
                f"${metrics.net_budget_impact:.1f}B",
                impact_color(metrics.net_budget_impact),
            ),
            unsafe_allow_html=True,
        )
    with col2:
        st_module.markdown(
            _metric_card("People Affected", f"{metrics.total_affected / 1e6:.1f}M", COLORS["DARKEST_BLUE"]),
            unsafe_allow_html=True,
        )
    with col3:
        st_module.markdown(
            _metric_card("Coverage Reduction", f"{metrics.coverage_reduction * 100:.1f}%", COLORS["DARKEST_BLUE"]),
            unsafe_allow_html=True,
        )

    m1, m2, m3, m4 = st_module.columns(4)
    with m1:
        st_module.metric(
            "Program Savings",
            f"${metrics.total_savings:.1f}B",
            delta=f"{metrics.total_savings - baseline_metrics.total_savings:+.1f}B vs baseline",
            delta_color="off",
            help="Eligibility savings plus work requirement savings net of admin cost.",
        )
    with m2:
        st_module.metric(
            "State Revenue",
            f"${metrics.total_revenue:.1f}B",
            delta=f"{metrics.total_revenue - baseline_metrics.total_revenue:+.1f}B vs baseline",
            delta_color="off",
        )
    with m3:
        st_module.metric(
            "SNAP Costs",
            f"${metrics.snap_cost:.1f}B",
            help="State share of SNAP benefits. Adds to the shortfall.",
        )
    with m4:
        gap_closed = metrics.net_budget_impact - baseline_metrics.net_budget_impact
        st_module.metric(
            "Gap Closed",
            f"${gap_closed:.1f}B",
            delta=f"{gap_closed / metrics.base_funding_loss * 100:.0f}% of loss" if metrics.base_funding_loss else None,
            delta_color="off",
            help="Improvement in net budget impact over taking no action.",
        )
