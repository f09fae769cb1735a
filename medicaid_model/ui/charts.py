"""
Plotly figure builders for the dashboard charts.
"""

from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from medicaid_model.calculator import DerivedMetrics

from .styles import CHART_COLORS, COLORS

FUNDING_SLICE_COLORS = dict(zip(["Federal Loss", "State Revenue", "Program Savings", "SNAP Costs"], CHART_COLORS))


def build_funding_pie(metrics: DerivedMetrics) -> go.Figure:
    """
    Funding gap coverage pie. Only strictly positive components appear.
    """
    df = metrics.funding_frame()
    fig = go.Figure(
        go.Pie(
            labels=df["name"],
            values=df["value"],
            marker=dict(colors=[FUNDING_SLICE_COLORS.get(n, COLORS["GRAY"]) for n in df["name"]]),
            texttemplate="%{label}: $%{value:.1f}B",
            hovertemplate="%{label}: $%{value:.2f}B<extra></extra>",
            sort=False,
        )
    )
    fig.update_layout(margin=dict(l=20, r=20, t=10, b=10), height=300, showlegend=False)
    return fig


def build_enrollment_bar(metrics: DerivedMetrics) -> go.Figure:
    """
    Current vs projected Medicaid enrollment.
    """
    df = metrics.enrollment_frame()
    fig = go.Figure(
        go.Bar(
            x=df["name"],
            y=df["enrollment"],
            marker_color=COLORS["BLUE_PRIMARY"],
            text=[f"{v:.2f}M" for v in df["enrollment"]],
            textposition="outside",
        )
    )
    fig.update_layout(
        margin=dict(l=20, r=20, t=10, b=10),
        height=300,
        xaxis_title=None,
        yaxis_title="Millions",
    )
    return fig


def build_trajectory_line(
    metrics: DerivedMetrics,
    baseline_metrics: Optional[DerivedMetrics] = None,
) -> go.Figure:
    """
    5-year budget trajectory, optionally against the no-action baseline.
    """
    df = metrics.trajectory_frame()
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=df["year"],
            y=df["deficit"],
            mode="lines+markers",
            name="Scenario",
            line=dict(color=COLORS["BLUE_PRIMARY"], width=3),
            marker=dict(color=COLORS["BLUE_PRIMARY"]),
        )
    )
    if baseline_metrics is not None:
        base = baseline_metrics.trajectory_frame()
        fig.add_trace(
            go.Scatter(
                x=base["year"],
                y=base["deficit"],
                mode="lines",
                name="Baseline (no action)",
                line=dict(color=COLORS["DARK_RED"], width=2, dash="dash"),
            )
        )
    fig.add_hline(y=0, line_width=1, line_color=COLORS["BLACK"])
    fig.update_layout(
        margin=dict(l=20, r=20, t=10, b=10),
        height=300,
        xaxis=dict(title=None, tickmode="array", tickvals=df["year"].tolist()),
        yaxis_title="Billions ($)",
        showlegend=baseline_metrics is not None,
    )
    return fig
