"""
Policy Impact Calculator

Maps a reform Scenario to its derived fiscal metrics: program savings,
added SNAP costs, new state revenue, net budget impact, people affected,
and the chart series shown on the dashboard.

The model is a fixed chain of linear formulas. Its coefficients are
illustrative placeholders chosen for demonstration, not calibrated fiscal
estimates; they are kept as named constants so they can be recalibrated
without touching the formulas.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np
import pandas as pd

from .policies import BASELINE_FPL_THRESHOLD, DemographicGroup, Scenario, baseline_scenario

logger = logging.getLogger(__name__)


# =============================================================================
# CALIBRATION CONSTANTS (demonstration placeholders)
# =============================================================================

# Share of enrollment in each group; sums to 1.0
GROUP_WEIGHTS: dict[DemographicGroup, float] = {
    DemographicGroup.CHILDREN: 0.40,
    DemographicGroup.PARENTS: 0.15,
    DemographicGroup.ADULTS: 0.25,
    DemographicGroup.ELDERLY: 0.10,
    DemographicGroup.DISABLED: 0.10,
}

# Fraction of the eligibility reduction that turns into actual disenrollment
ENROLLMENT_RESPONSE_FACTOR = 0.8
# Fraction of per-enrollee federal funding saved when an enrollee leaves
SPENDING_PER_ENROLLEE_FACTOR = 0.85

WORK_REQUIREMENT_DISENROLLMENT_RATE = 0.15
WORK_REQUIREMENT_ADMIN_COST = 0.3  # $ billions

# SNAP benefits as a share of the federal funding loss
SNAP_BENEFIT_SHARE_OF_LOSS = 0.25

# $ billions raised per percentage point per million residents
INCOME_TAX_REVENUE_PER_POINT = 0.05
PROPERTY_TAX_REVENUE_PER_POINT = 0.04
SIN_TAX_REVENUE_PER_POINT = 0.002

ANNUAL_GROWTH_RATE = 0.02  # simple (non-compounding) growth of savings and costs
PROJECTION_START_YEAR = 2026
PROJECTION_YEARS = 6  # start year plus five

PEOPLE_PER_MILLION = 1_000_000


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class FundingSlice:
    """One slice of the funding-gap coverage chart ($ billions)."""
    name: str
    value: float


@dataclass(frozen=True)
class EnrollmentBar:
    """Medicaid enrollment before or after the reform (millions)."""
    name: str
    enrollment: float


@dataclass(frozen=True)
class TrajectoryPoint:
    """Net budget position for one projection year ($ billions)."""
    year: int
    deficit: float


@dataclass(frozen=True)
class DerivedMetrics:
    """
    Everything the dashboard displays for one scenario.

    Dollar figures are in billions, enrollment in millions, people affected
    in persons. Reductions are fractions of current enrollment.
    """
    state_name: str
    base_funding_loss: float

    # Eligibility
    total_eligibility_reduction: float
    enrollment_reduction: float
    eligibility_savings: float

    # Work requirements
    work_requirement_reduction: float
    work_admin_cost: float
    work_savings: float

    # SNAP
    snap_cost: float

    # Revenue
    income_revenue: float
    property_revenue: float
    sin_revenue: float
    total_revenue: float

    # Totals
    total_savings: float
    net_budget_impact: float
    coverage_reduction: float

    # People affected
    eligibility_affected: float
    work_affected: float
    total_affected: float

    # Chart series
    funding_breakdown: tuple[FundingSlice, ...]
    enrollment: tuple[EnrollmentBar, ...]
    trajectory: tuple[TrajectoryPoint, ...]

    def funding_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"name": [s.name for s in self.funding_breakdown],
             "value": [s.value for s in self.funding_breakdown]}
        )

    def enrollment_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"name": [b.name for b in self.enrollment],
             "enrollment": [b.enrollment for b in self.enrollment]}
        )

    def trajectory_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"year": [p.year for p in self.trajectory],
             "deficit": [p.deficit for p in self.trajectory]}
        )


# =============================================================================
# CALCULATOR
# =============================================================================

def group_reduction(threshold: float, baseline: float = BASELINE_FPL_THRESHOLD) -> float:
    """
    Fractional cut in a group's eligibility relative to the baseline threshold.

    Raising a threshold above baseline is not credited as an expansion;
    the reduction floors at zero.
    """
    if baseline <= 0:
        return 0.0
    return max(0.0, (baseline - threshold) / baseline)


class PolicyImpactCalculator:
    """
    Stateless evaluator for reform scenarios.

    Example:
        >>> metrics = PolicyImpactCalculator().evaluate(baseline_scenario("Ohio"))
        >>> metrics.net_budget_impact
        -24.6
    """

    def evaluate(self, scenario: Scenario) -> DerivedMetrics:
        state = scenario.state
        base_loss = state.funding_loss

        # 1-3. Eligibility
        total_eligibility_reduction = sum(
            group_reduction(threshold) * GROUP_WEIGHTS[group]
            for group, threshold in scenario.eligibility.items()
        )
        enrollment_reduction = total_eligibility_reduction * ENROLLMENT_RESPONSE_FACTOR
        eligibility_savings = base_loss * enrollment_reduction * SPENDING_PER_ENROLLEE_FACTOR

        # 4. Work requirements
        if scenario.work.enabled:
            work_reduction = WORK_REQUIREMENT_DISENROLLMENT_RATE
            admin_cost = WORK_REQUIREMENT_ADMIN_COST
            work_savings = base_loss * work_reduction * SPENDING_PER_ENROLLEE_FACTOR - admin_cost
        else:
            work_reduction = admin_cost = work_savings = 0.0

        # 5. SNAP cost sharing is a new cost to the state
        snap_cost = (
            base_loss * SNAP_BENEFIT_SHARE_OF_LOSS * (scenario.snap.share_percent / 100)
            if scenario.snap.enabled
            else 0.0
        )

        # 6. Revenue
        revenue = scenario.revenue
        income_revenue = revenue.income_tax_increase * state.population * INCOME_TAX_REVENUE_PER_POINT
        property_revenue = revenue.property_tax_increase * state.population * PROPERTY_TAX_REVENUE_PER_POINT
        sin_revenue = revenue.sin_tax_increase * state.population * SIN_TAX_REVENUE_PER_POINT
        total_revenue = income_revenue + property_revenue + sin_revenue

        # 7. Net impact
        total_savings = eligibility_savings + work_savings
        net_budget_impact = -base_loss + total_savings + total_revenue - snap_cost

        # 8. People affected. The two counts are added without removing people
        # hit by both levers, so the total can overstate the affected population.
        eligibility_affected = state.medicaid_enrollment * enrollment_reduction * PEOPLE_PER_MILLION
        work_affected = state.medicaid_enrollment * work_reduction * PEOPLE_PER_MILLION
        total_affected = eligibility_affected + work_affected

        metrics = DerivedMetrics(
            state_name=state.name,
            base_funding_loss=base_loss,
            total_eligibility_reduction=total_eligibility_reduction,
            enrollment_reduction=enrollment_reduction,
            eligibility_savings=eligibility_savings,
            work_requirement_reduction=work_reduction,
            work_admin_cost=admin_cost,
            work_savings=work_savings,
            snap_cost=snap_cost,
            income_revenue=income_revenue,
            property_revenue=property_revenue,
            sin_revenue=sin_revenue,
            total_revenue=total_revenue,
            total_savings=total_savings,
            net_budget_impact=net_budget_impact,
            coverage_reduction=enrollment_reduction + work_reduction,
            eligibility_affected=eligibility_affected,
            work_affected=work_affected,
            total_affected=total_affected,
            funding_breakdown=self._funding_breakdown(
                base_loss, total_savings, total_revenue, snap_cost, scenario.snap.enabled
            ),
            enrollment=(
                EnrollmentBar("Current", state.medicaid_enrollment),
                EnrollmentBar(
                    "Projected",
                    state.medicaid_enrollment * (1 - enrollment_reduction - work_reduction),
                ),
            ),
            trajectory=self._trajectory(base_loss, total_savings + total_revenue, snap_cost),
        )
        logger.debug(
            f"Evaluated {state.name}: net impact ${net_budget_impact:+.2f}B, "
            f"{total_affected:,.0f} people affected"
        )
        return metrics

    @staticmethod
    def _funding_breakdown(
        base_loss: float,
        total_savings: float,
        total_revenue: float,
        snap_cost: float,
        snap_enabled: bool,
    ) -> tuple[FundingSlice, ...]:
        slices = [
            FundingSlice("Federal Loss", max(0.0, base_loss - total_savings)),
            FundingSlice("State Revenue", total_revenue),
            FundingSlice("Program Savings", total_savings),
        ]
        if snap_enabled and snap_cost > 0:
            slices.append(FundingSlice("SNAP Costs", snap_cost))
        return tuple(s for s in slices if s.value > 0)

    @staticmethod
    def _trajectory(base_loss: float, offsets: float, snap_cost: float) -> tuple[TrajectoryPoint, ...]:
        steps = np.arange(PROJECTION_YEARS)
        growth = 1 + ANNUAL_GROWTH_RATE * steps
        deficits = -base_loss + offsets * growth - snap_cost * growth
        return tuple(
            TrajectoryPoint(year=int(PROJECTION_START_YEAR + i), deficit=float(d))
            for i, d in zip(steps, deficits)
        )


_CALCULATOR = PolicyImpactCalculator()


def evaluate(scenario: Scenario) -> DerivedMetrics:
    """Evaluate a scenario with the shared calculator instance."""
    return _CALCULATOR.evaluate(scenario)


def compare_to_baseline(scenario: Scenario) -> tuple[DerivedMetrics, DerivedMetrics]:
    """Return (baseline, reform) metrics for the scenario's state."""
    return evaluate(scenario.reset()), evaluate(scenario)
