"""
State comparison tab renderer.
"""

from __future__ import annotations

from typing import Any, Callable

import plotly.express as px

from medicaid_model.policies import Scenario

from ..styles import COLORS


def render_state_comparison_tab(
    st_module: Any,
    scenario: Scenario,
    create_state_comparison_frame_fn: Callable[[Scenario], Any],
) -> None:
    """
    Apply the current levers to every state and compare outcomes.
    """
    st_module.subheader("🔀 Same Levers, Every State")
    st_module.caption("The current lever settings applied to each state's reference figures.")

    df = create_state_comparison_frame_fn(scenario)

    fig = px.bar(
        df,
        x="State",
        y="Net Budget Impact ($B)",
        color_discrete_sequence=[COLORS["BLUE_PRIMARY"]],
    )
    fig.update_layout(margin=dict(l=20, r=20, t=10, b=10), height=320, xaxis_title=None)
    st_module.plotly_chart(fig, use_container_width=True)

    st_module.dataframe(
        df.round(2),
        hide_index=True,
        use_container_width=True,
    )
