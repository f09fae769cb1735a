"""
Reporting and Export Module

Turns an evaluated scenario into downloadable artifacts: a plain-text
report, a JSON document, a CSV trajectory and a static chart image.
"""

from __future__ import annotations

import hashlib
import io
import json
import logging
from typing import Any, Optional

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
import numpy as np
import pandas as pd

from .app_data import DASHBOARD_NOTES
from .calculator import DerivedMetrics, PolicyImpactCalculator, evaluate
from .policies import Scenario
from .states import STATE_PROFILES

logger = logging.getLogger(__name__)

# Pie/bar/line colours, matching the dashboard
REPORT_COLORS = ["#b50d0d", "#2C6496", "#29d40f", "#808080"]

HEADLINE_METRICS = [
    "eligibility_savings",
    "work_savings",
    "work_admin_cost",
    "snap_cost",
    "income_revenue",
    "property_revenue",
    "sin_revenue",
    "total_revenue",
    "total_savings",
    "net_budget_impact",
    "enrollment_reduction",
    "work_requirement_reduction",
    "coverage_reduction",
    "eligibility_affected",
    "work_affected",
    "total_affected",
]


def scenario_fingerprint(scenario: Scenario) -> str:
    """
    Produce a stable identifier for a scenario's lever settings.
    """
    raw = json.dumps(scenario.to_record(), sort_keys=True).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:12]


class ScenarioReport:
    """
    Generate reports and export files for one evaluated scenario.
    """

    def __init__(self, scenario: Scenario, metrics: Optional[DerivedMetrics] = None):
        self.scenario = scenario
        self.metrics = metrics if metrics is not None else evaluate(scenario)
        self.run_id = scenario_fingerprint(scenario)

    def generate_text_report(self) -> str:
        """Generate a detailed text report."""
        s = self.scenario
        m = self.metrics
        lines = []

        lines.append("=" * 70)
        lines.append("MEDICAID REFORM SCENARIO REPORT")
        lines.append("=" * 70)
        lines.append(f"Run ID: {self.run_id}")
        lines.append(f"State: {s.state_name}")
        lines.append(f"Projected Federal Funding Loss (2026): ${m.base_funding_loss:,.1f}B")
        lines.append("")

        lines.append("POLICY LEVERS")
        lines.append("-" * 40)
        thresholds = ", ".join(f"{g.value} {t}%" for g, t in s.eligibility.items())
        lines.append(f"Eligibility thresholds (FPL): {thresholds}")
        if s.work.enabled:
            exempt = [name for name, on in s.work.exemptions.as_dict().items() if on]
            lines.append(
                f"Work requirements: On, {s.work.hours_per_week} hours/week "
                f"(exempt: {', '.join(exempt) or 'none'})"
            )
        else:
            lines.append("Work requirements: Off")
        if s.snap.enabled:
            lines.append(f"SNAP cost sharing: On, {s.snap.share_percent}% state share")
        else:
            lines.append("SNAP cost sharing: Off")
        lines.append(f"Income tax increase:   {s.revenue.income_tax_increase:.1f} pp")
        lines.append(f"Property tax increase: {s.revenue.property_tax_increase:.1f} pp")
        lines.append(f"Sin tax increase:      {s.revenue.sin_tax_increase}%")
        lines.append("")

        lines.append("KEY BUDGET METRICS ($ billions)")
        lines.append("-" * 40)
        lines.append(f"Federal Funding Loss:       {-m.base_funding_loss:>12,.1f}")
        lines.append(f"Eligibility Savings:        {m.eligibility_savings:>12,.1f}")
        lines.append(f"Work Requirement Savings:   {m.work_savings:>12,.1f}")
        lines.append(f"  (net of admin cost {m.work_admin_cost:,.1f})")
        lines.append(f"SNAP Cost Sharing:          {-m.snap_cost:>12,.1f}")
        lines.append(f"Income Tax Revenue:         {m.income_revenue:>12,.1f}")
        lines.append(f"Property Tax Revenue:       {m.property_revenue:>12,.1f}")
        lines.append(f"Sin Tax Revenue:            {m.sin_revenue:>12,.1f}")
        lines.append(f"Net Budget Impact:          {m.net_budget_impact:>12,.1f}")
        lines.append("")

        lines.append("PEOPLE AFFECTED")
        lines.append("-" * 40)
        lines.append(f"Eligibility changes:        {m.eligibility_affected / 1e6:>10,.2f}M")
        lines.append(f"Work requirements:          {m.work_affected / 1e6:>10,.2f}M")
        lines.append(f"Total:                      {m.total_affected / 1e6:>10,.2f}M")
        lines.append(f"Coverage Reduction:         {m.coverage_reduction * 100:>10,.1f}%")
        lines.append("")

        lines.append("5-YEAR BUDGET TRAJECTORY ($ billions)")
        lines.append("-" * 40)
        lines.append(f"{'Year':>6} {'Net Position':>14}")
        for point in m.trajectory:
            lines.append(f"{point.year:>6} {point.deficit:>14,.1f}")
        lines.append("")

        lines.append("NOTES")
        lines.append("-" * 40)
        lines.append(f"- {DASHBOARD_NOTES['disclaimer']}")
        lines.append(f"- {DASHBOARD_NOTES['double_counting']}")
        lines.append("- Negative net budget impact is a shortfall for the state budget")
        lines.append("")

        return "\n".join(lines)

    def to_record(self) -> dict[str, Any]:
        """Flat scenario record plus headline metrics."""
        record = self.scenario.to_record()
        record["run_id"] = self.run_id
        record["base_funding_loss"] = self.metrics.base_funding_loss
        for name in HEADLINE_METRICS:
            record[name] = getattr(self.metrics, name)
        return record

    def to_json(self, indent: int = 2) -> str:
        m = self.metrics
        payload = {
            "run_id": self.run_id,
            "scenario": self.scenario.to_record(),
            "metrics": {name: getattr(m, name) for name in HEADLINE_METRICS},
            "funding_breakdown": m.funding_frame().to_dict(orient="records"),
            "enrollment": m.enrollment_frame().to_dict(orient="records"),
            "trajectory": m.trajectory_frame().to_dict(orient="records"),
        }
        return json.dumps(payload, indent=indent, default=float)

    def trajectory_csv(self) -> bytes:
        df = self.metrics.trajectory_frame().rename(
            columns={"year": "Year", "deficit": "Net Budget Position ($B)"}
        )
        return df.to_csv(index=False).encode("utf-8")

    def plot_dashboard(self, save_path: Optional[str] = None, show: bool = False) -> plt.Figure:
        """
        Static version of the dashboard charts: funding gap coverage,
        enrollment impact and the 5-year trajectory.
        """
        m = self.metrics
        fig, axes = plt.subplots(1, 3, figsize=(16, 5))
        fig.suptitle(f"Medicaid Reform Scenario: {m.state_name}", fontsize=14, fontweight="bold")

        ax1 = axes[0]
        funding = m.funding_frame()
        if len(funding):
            ax1.pie(
                funding["value"],
                labels=[f"{n}: ${v:.1f}B" for n, v in zip(funding["name"], funding["value"])],
                colors=REPORT_COLORS[: len(funding)],
                startangle=90,
            )
        else:
            ax1.text(0.5, 0.5, "No funding components", ha="center", va="center",
                     transform=ax1.transAxes)
        ax1.set_title("Funding Gap Coverage")

        ax2 = axes[1]
        enrollment = m.enrollment_frame()
        ax2.bar(enrollment["name"], enrollment["enrollment"], color=REPORT_COLORS[1])
        ax2.set_ylabel("Millions")
        ax2.set_title("Enrollment Impact")
        ax2.grid(True, alpha=0.3, axis="y")

        ax3 = axes[2]
        trajectory = m.trajectory_frame()
        ax3.plot(trajectory["year"], trajectory["deficit"], "o-", linewidth=3, color=REPORT_COLORS[1])
        ax3.axhline(y=0, color="black", linestyle="-", linewidth=0.5)
        ax3.set_xticks(trajectory["year"])
        ax3.set_ylabel("Billions ($)")
        ax3.set_title("5-Year Budget Trajectory")
        ax3.yaxis.set_major_formatter(mticker.StrMethodFormatter("${x:,.0f}"))
        ax3.grid(True, alpha=0.3)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches="tight")

        if show:
            plt.show()

        return fig

    def figure_png(self) -> bytes:
        fig = self.plot_dashboard()
        buffer = io.BytesIO()
        fig.savefig(buffer, format="png", dpi=150, bbox_inches="tight")
        plt.close(fig)
        logger.debug(f"Rendered report figure for {self.metrics.state_name} ({self.run_id})")
        return buffer.getvalue()


def create_state_comparison_frame(scenario: Scenario) -> pd.DataFrame:
    """
    Apply one scenario's levers to every state in the reference table.
    """
    calculator = PolicyImpactCalculator()
    rows = []
    for profile in STATE_PROFILES.values():
        m = calculator.evaluate(scenario.with_state(profile.name))
        rows.append(
            {
                "State": profile.name,
                "Funding Loss ($B)": m.base_funding_loss,
                "Program Savings ($B)": m.total_savings,
                "State Revenue ($B)": m.total_revenue,
                "SNAP Costs ($B)": m.snap_cost,
                "Net Budget Impact ($B)": m.net_budget_impact,
                "People Affected (M)": m.total_affected / 1e6,
                "Coverage Reduction (%)": m.coverage_reduction * 100,
            }
        )
    df = pd.DataFrame(rows)
    df["Share of Gap Closed (%)"] = np.where(
        df["Funding Loss ($B)"] > 0,
        (df["Net Budget Impact ($B)"] + df["Funding Loss ($B)"]) / df["Funding Loss ($B)"] * 100,
        0.0,
    )
    return df


def create_comparison_table(frame: pd.DataFrame) -> str:
    """Create a text comparison table from create_state_comparison_frame output."""
    lines = []
    lines.append("STATE COMPARISON TABLE")
    lines.append("=" * 80)

    header = f"{'State':<18} {'Loss':>10} {'Savings':>10} {'Revenue':>10} {'Net':>10} {'Affected':>10}"
    lines.append(header)
    lines.append("-" * 80)

    for row in frame.itertuples(index=False):
        lines.append(
            f"{row[0]:<18} ${row[1]:>8,.1f}B ${row[2]:>8,.1f}B ${row[3]:>8,.1f}B "
            f"${row[5]:>8,.1f}B {row[6]:>8,.2f}M"
        )

    lines.append("-" * 80)
    if len(frame) > 1:
        lines.append(f"{'COMBINED NET':<18} ${frame['Net Budget Impact ($B)'].sum():>8,.1f}B")

    return "\n".join(lines)
