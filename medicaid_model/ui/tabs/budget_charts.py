"""
Chart tab renderer: funding gap, enrollment and trajectory.
"""

from __future__ import annotations

from typing import Any, Optional

from medicaid_model.calculator import DerivedMetrics

from ..charts import build_enrollment_bar, build_funding_pie, build_trajectory_line


def render_budget_charts_tab(
    st_module: Any,
    metrics: DerivedMetrics,
    baseline_metrics: Optional[DerivedMetrics],
    settings: dict[str, Any],
) -> None:
    """
    Render the three dashboard charts.
    """
    c_chart1, c_chart2 = st_module.columns(2)

    with c_chart1:
        st_module.subheader("Funding Gap Coverage")
        st_module.plotly_chart(build_funding_pie(metrics), use_container_width=True)

    with c_chart2:
        st_module.subheader("Enrollment Impact")
        st_module.plotly_chart(build_enrollment_bar(metrics), use_container_width=True)

    st_module.subheader("5-Year Budget Trajectory")
    show_baseline = settings.get("show_baseline", False) and baseline_metrics is not None
    st_module.plotly_chart(
        build_trajectory_line(metrics, baseline_metrics if show_baseline else None),
        use_container_width=True,
    )

    if settings.get("show_data_tables", False):
        col_a, col_b, col_c = st_module.columns(3)
        with col_a:
            st_module.dataframe(metrics.funding_frame(), hide_index=True)
        with col_b:
            st_module.dataframe(metrics.enrollment_frame(), hide_index=True)
        with col_c:
            st_module.dataframe(metrics.trajectory_frame(), hide_index=True)
