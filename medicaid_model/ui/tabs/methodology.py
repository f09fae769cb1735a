"""
Methodology tab renderer.
"""

from __future__ import annotations

from typing import Any

from medicaid_model import calculator as calc
from medicaid_model.app_data import DASHBOARD_NOTES


def render_methodology_tab(st_module: Any) -> None:
    """
    Render usage notes, formulas and model assumptions.
    """
    st_module.header("ℹ️ Methodology")

    st_module.markdown("**How to use this dashboard:**")
    st_module.markdown("\n".join(f"- {item}" for item in DASHBOARD_NOTES["how_to_use"]))

    weights = ", ".join(f"{g.value} {w:.0%}" for g, w in calc.GROUP_WEIGHTS.items())
    st_module.markdown(
        f"""
        ## How the Estimate Works

        1. **Eligibility.** Each group's cut is `(138 - threshold) / 138`, floored at zero,
           weighted by enrollment share ({weights}). Enrollment falls by
           {calc.ENROLLMENT_RESPONSE_FACTOR:.0%} of the weighted cut and
           {calc.SPENDING_PER_ENROLLEE_FACTOR:.0%} of the matching funding is saved.
        2. **Work requirements.** Disenroll {calc.WORK_REQUIREMENT_DISENROLLMENT_RATE:.0%} of enrollees
           at an administrative cost of \\${calc.WORK_REQUIREMENT_ADMIN_COST}B.
        3. **SNAP cost sharing.** SNAP benefits are taken as {calc.SNAP_BENEFIT_SHARE_OF_LOSS:.0%}
           of the funding loss; the state's share is a new cost.
        4. **Revenue.** Per percentage point per million residents: income tax
           \\${calc.INCOME_TAX_REVENUE_PER_POINT}B, property tax \\${calc.PROPERTY_TAX_REVENUE_PER_POINT}B,
           sin tax \\${calc.SIN_TAX_REVENUE_PER_POINT}B.
        5. **Net impact** = savings + revenue - SNAP costs - federal funding loss.
        6. **Trajectory.** Savings, revenue and SNAP costs grow {calc.ANNUAL_GROWTH_RATE:.0%} a year
           (simple growth) from {calc.PROJECTION_START_YEAR}; the funding loss is held flat.
        """
    )

    st_module.warning(DASHBOARD_NOTES["disclaimer"])
    st_module.info(DASHBOARD_NOTES["double_counting"])
