"""
Tests for the policy impact calculator formulas.
"""

import pytest

from medicaid_model.calculator import (
    ANNUAL_GROWTH_RATE,
    GROUP_WEIGHTS,
    compare_to_baseline,
    evaluate,
    group_reduction,
)
from medicaid_model.policies import DemographicGroup, baseline_scenario
from medicaid_model.states import STATE_PROFILES


class TestBaseline:
    """No policy response leaves the full funding loss."""

    @pytest.mark.parametrize("state_name", list(STATE_PROFILES))
    def test_baseline_identity(self, calculator, state_name):
        m = calculator.evaluate(baseline_scenario(state_name))
        loss = STATE_PROFILES[state_name].funding_loss

        assert m.eligibility_savings == 0
        assert m.work_savings == 0
        assert m.snap_cost == 0
        assert m.total_revenue == 0
        assert m.net_budget_impact == pytest.approx(-loss)

    def test_california_baseline(self, calculator, california_baseline):
        m = calculator.evaluate(california_baseline)

        assert m.net_budget_impact == pytest.approx(-42.3)
        assert m.total_revenue == 0
        assert m.total_affected == 0
        assert m.coverage_reduction == 0

    def test_baseline_funding_breakdown_is_federal_loss_only(self, calculator, california_baseline):
        m = calculator.evaluate(california_baseline)

        assert [s.name for s in m.funding_breakdown] == ["Federal Loss"]
        assert m.funding_breakdown[0].value == pytest.approx(42.3)


class TestLevers:
    """Worked example with eligibility, work and income tax levers."""

    def test_concrete_scenario(self, calculator, california_levers):
        m = calculator.evaluate(california_levers)

        assert m.total_eligibility_reduction == pytest.approx(1.0)
        assert m.enrollment_reduction == pytest.approx(0.8)
        assert m.eligibility_savings == pytest.approx(28.764)
        assert m.work_savings == pytest.approx(4.79325)
        assert m.income_revenue == pytest.approx(1.975)
        assert m.snap_cost == 0
        assert m.net_budget_impact == pytest.approx(-6.76775)

    def test_people_affected_is_additive(self, calculator, california_levers):
        m = calculator.evaluate(california_levers)

        assert m.eligibility_affected == pytest.approx(14.2 * 0.8 * 1_000_000)
        assert m.work_affected == pytest.approx(14.2 * 0.15 * 1_000_000)
        assert m.total_affected == pytest.approx(m.eligibility_affected + m.work_affected)

    def test_enrollment_series(self, calculator, california_levers):
        m = calculator.evaluate(california_levers)

        assert [b.name for b in m.enrollment] == ["Current", "Projected"]
        assert m.enrollment[0].enrollment == pytest.approx(14.2)
        assert m.enrollment[1].enrollment == pytest.approx(14.2 * (1 - 0.8 - 0.15))
        assert m.coverage_reduction == pytest.approx(0.95)

    def test_work_hours_do_not_change_estimate(self, calculator, california_baseline):
        m20 = calculator.evaluate(california_baseline.with_work(enabled=True, hours_per_week=20))
        m35 = calculator.evaluate(california_baseline.with_work(enabled=True, hours_per_week=35))

        assert m20 == m35
        assert m20.work_admin_cost == pytest.approx(0.3)

    def test_revenue_sources(self, calculator, california_baseline):
        scenario = california_baseline.with_revenue(
            income_tax_increase=2.0, property_tax_increase=1.5, sin_tax_increase=50
        )
        m = calculator.evaluate(scenario)

        assert m.income_revenue == pytest.approx(2.0 * 39.5 * 0.05)
        assert m.property_revenue == pytest.approx(1.5 * 39.5 * 0.04)
        assert m.sin_revenue == pytest.approx(50 * 39.5 * 0.002)
        assert m.total_revenue == pytest.approx(m.income_revenue + m.property_revenue + m.sin_revenue)

    def test_raising_threshold_is_not_an_expansion(self, calculator, california_baseline):
        m = calculator.evaluate(california_baseline.with_threshold("children", 200))

        assert m.total_eligibility_reduction == 0
        assert m.eligibility_savings == 0


class TestProperties:

    def test_weights_sum_to_one(self):
        assert sum(GROUP_WEIGHTS.values()) == pytest.approx(1.0)
        assert set(GROUP_WEIGHTS) == set(DemographicGroup)

    @pytest.mark.parametrize("group", list(DemographicGroup))
    def test_eligibility_savings_monotone(self, calculator, california_baseline, group):
        previous = -1.0
        for threshold in range(138, -1, -1):
            m = calculator.evaluate(california_baseline.with_threshold(group, threshold))
            assert m.eligibility_savings >= previous
            previous = m.eligibility_savings

    def test_snap_sharing_lowers_net_impact(self, calculator, full_package):
        with_snap = calculator.evaluate(full_package)
        without_snap = calculator.evaluate(full_package.with_snap(enabled=False))

        assert with_snap.snap_cost == pytest.approx(38.7 * 0.25 * 0.20)
        assert with_snap.net_budget_impact < without_snap.net_budget_impact

    def test_snap_share_ignored_when_disabled(self, calculator, california_baseline):
        m = calculator.evaluate(california_baseline.with_snap(enabled=False, share_percent=30))

        assert m.snap_cost == 0
        assert "SNAP Costs" not in [s.name for s in m.funding_breakdown]

    @pytest.mark.parametrize("state_name", ["California", "Georgia"])
    def test_trajectory_years(self, calculator, full_package, state_name):
        m = calculator.evaluate(full_package.with_state(state_name))
        years = [p.year for p in m.trajectory]

        assert len(m.trajectory) == 6
        assert years == list(range(2026, 2032))
        assert all(a < b for a, b in zip(years, years[1:]))

    def test_trajectory_values(self, calculator, full_package):
        m = calculator.evaluate(full_package)

        for i, point in enumerate(m.trajectory):
            growth = 1 + ANNUAL_GROWTH_RATE * i
            expected = -m.base_funding_loss + (m.total_savings + m.total_revenue) * growth - m.snap_cost * growth
            assert point.deficit == pytest.approx(expected)
        assert m.trajectory[0].deficit == pytest.approx(m.net_budget_impact)

    def test_funding_breakdown_only_positive(self, calculator, full_package, california_baseline):
        for scenario in (full_package, california_baseline, full_package.with_state("Ohio")):
            m = calculator.evaluate(scenario)
            assert all(s.value > 0 for s in m.funding_breakdown)

    def test_funding_breakdown_with_snap(self, calculator, full_package):
        m = calculator.evaluate(full_package)

        assert [s.name for s in m.funding_breakdown] == [
            "Federal Loss",
            "State Revenue",
            "Program Savings",
            "SNAP Costs",
        ]

    def test_negative_program_savings_dropped_from_breakdown(self, calculator):
        from medicaid_model.policies import Scenario
        from medicaid_model.states import StateProfile

        # Admin cost outweighs the savings in a very small state
        tiny = Scenario(state=StateProfile("Tiny", funding_loss=0.5, population=1.0, medicaid_enrollment=0.1))
        m = calculator.evaluate(tiny.with_work(enabled=True))

        assert m.total_savings < 0
        assert [s.name for s in m.funding_breakdown] == ["Federal Loss"]
        assert m.funding_breakdown[0].value == pytest.approx(0.5 - m.total_savings)

    def test_evaluate_is_deterministic(self, full_package):
        assert evaluate(full_package) == evaluate(full_package)


def test_group_reduction_guards_zero_baseline():
    assert group_reduction(50, baseline=0) == 0.0
    assert group_reduction(69) == pytest.approx(0.5)
    assert group_reduction(180) == 0.0


def test_compare_to_baseline(full_package):
    baseline, reform = compare_to_baseline(full_package)

    assert baseline.state_name == reform.state_name == "Texas"
    assert baseline.net_budget_impact == pytest.approx(-38.7)
    assert reform.net_budget_impact != baseline.net_budget_impact


def test_frames_match_series(calculator, full_package):
    m = calculator.evaluate(full_package)

    assert list(m.trajectory_frame().columns) == ["year", "deficit"]
    assert len(m.trajectory_frame()) == 6
    assert m.funding_frame()["value"].sum() == pytest.approx(sum(s.value for s in m.funding_breakdown))
    assert m.enrollment_frame()["name"].tolist() == ["Current", "Projected"]
