"""
Export tab renderer.
"""

from __future__ import annotations

import logging
from typing import Any

from medicaid_model.calculator import DerivedMetrics
from medicaid_model.policies import Scenario

from ..controller_utils import run_with_spinner_feedback

logger = logging.getLogger(__name__)


def render_export_tab(
    st_module: Any,
    scenario: Scenario,
    metrics: DerivedMetrics,
    scenario_report_cls: Any,
) -> None:
    """
    Render download buttons for the current scenario.
    """
    st_module.subheader("⬇️ Export Report")
    report = scenario_report_cls(scenario, metrics)
    slug = scenario.state_name.lower().replace(" ", "_")
    file_stem = f"medicaid_scenario_{slug}_{report.run_id}"
    st_module.caption(f"Run ID `{report.run_id}`")

    col1, col2, col3 = st_module.columns(3)
    with col1:
        st_module.download_button(
            "📄 Text report",
            data=report.generate_text_report(),
            file_name=f"{file_stem}.txt",
            mime="text/plain",
            use_container_width=True,
        )
    with col2:
        st_module.download_button(
            "🧾 Scenario JSON",
            data=report.to_json(),
            file_name=f"{file_stem}.json",
            mime="application/json",
            use_container_width=True,
        )
    with col3:
        st_module.download_button(
            "📈 Trajectory CSV",
            data=report.trajectory_csv(),
            file_name=f"{file_stem}_trajectory.csv",
            mime="text/csv",
            use_container_width=True,
        )

    if st_module.button("🖼️ Render chart image"):
        def _render() -> None:
            st_module.session_state.export_png = (report.run_id, report.figure_png())
            logger.info(f"Prepared chart export {file_stem}.png")

        run_with_spinner_feedback(
            st_module=st_module,
            spinner_message="Rendering charts...",
            success_message="✅ Chart image ready",
            error_prefix="❌ Could not render chart image",
            action_fn=_render,
        )

    cached = st_module.session_state.get("export_png")
    if cached and cached[0] == report.run_id:
        st_module.download_button(
            "🖼️ Download chart image",
            data=cached[1],
            file_name=f"{file_stem}.png",
            mime="image/png",
        )

    with st_module.expander("Preview text report", expanded=False):
        st_module.code(report.generate_text_report(), language=None)
