"""
Tests for scenario value objects, clamping and flat records.
"""

import dataclasses
import logging

import pytest

from medicaid_model.policies import (
    BASELINE_FPL_THRESHOLD,
    EligibilityThresholds,
    RevenuePolicy,
    Scenario,
    SnapCostSharingPolicy,
    WorkExemptions,
    WorkRequirementPolicy,
    baseline_scenario,
)
from medicaid_model.states import (
    DEFAULT_STATE,
    StateProfile,
    UnknownStateError,
    get_state_profile,
    list_state_names,
)


# =============================================================================
# STATE REFERENCE DATA
# =============================================================================

def test_state_table():
    names = list_state_names()
    assert len(names) == 10
    assert names[0] == "California"
    assert names[-1] == "Georgia"

    ca = get_state_profile("California")
    assert (ca.funding_loss, ca.population, ca.medicaid_enrollment) == (42.3, 39.5, 14.2)


def test_unknown_state_raises_key_error():
    with pytest.raises(UnknownStateError, match="Wyoming"):
        get_state_profile("Wyoming")
    with pytest.raises(KeyError):
        get_state_profile("")


def test_state_profile_clamps_negative_values(caplog):
    with caplog.at_level(logging.WARNING):
        profile = StateProfile("Test", funding_loss=-1.0, population=2, medicaid_enrollment=-0.5)

    assert profile.funding_loss == 0.0
    assert profile.population == 2.0
    assert profile.medicaid_enrollment == 0.0
    assert "clamped" in caplog.text


# =============================================================================
# DEFAULTS AND CLAMPING
# =============================================================================

def test_baseline_defaults():
    scenario = baseline_scenario()

    assert scenario.state_name == DEFAULT_STATE
    assert set(scenario.eligibility.as_dict().values()) == {BASELINE_FPL_THRESHOLD}
    assert scenario.work.enabled is False
    assert scenario.work.hours_per_week == 20
    assert scenario.work.exemptions.as_dict() == {
        "pregnant": True,
        "disabled": True,
        "caregivers": True,
        "students": False,
    }
    assert scenario.snap == SnapCostSharingPolicy(enabled=False, share_percent=0)
    assert scenario.revenue == RevenuePolicy()
    assert scenario.is_baseline


def test_thresholds_clamped(caplog):
    with caplog.at_level(logging.WARNING):
        thresholds = EligibilityThresholds(children=-20, parents=250, adults=99.6)

    assert thresholds.children == 0
    assert thresholds.parents == 200
    assert thresholds.adults == 100
    assert thresholds.elderly == BASELINE_FPL_THRESHOLD
    assert "children threshold" in caplog.text


def test_unparseable_threshold_defaults_to_baseline():
    assert EligibilityThresholds(children="lots").children == BASELINE_FPL_THRESHOLD
    assert EligibilityThresholds(children=float("nan")).children == BASELINE_FPL_THRESHOLD


def test_work_hours_fall_back_to_default():
    assert WorkRequirementPolicy(hours_per_week=35).hours_per_week == 35
    assert WorkRequirementPolicy(hours_per_week=25).hours_per_week == 20
    assert WorkRequirementPolicy(hours_per_week=None).hours_per_week == 20


def test_snap_and_revenue_clamped():
    assert SnapCostSharingPolicy(enabled=True, share_percent=45).share_percent == 30
    assert SnapCostSharingPolicy(enabled=True, share_percent=-3).share_percent == 0

    revenue = RevenuePolicy(income_tax_increase=7.2, property_tax_increase=1.26, sin_tax_increase=150)
    assert revenue.income_tax_increase == 5.0
    assert revenue.property_tax_increase == 1.3
    assert revenue.sin_tax_increase == 100


def test_string_flags_coerced():
    assert WorkRequirementPolicy(enabled="true").enabled is True
    assert SnapCostSharingPolicy(enabled="off").enabled is False
    assert WorkExemptions(students="yes").students is True


# =============================================================================
# UPDATE BY COPY
# =============================================================================

def test_scenarios_are_immutable(california_baseline):
    with pytest.raises(dataclasses.FrozenInstanceError):
        california_baseline.state = get_state_profile("Ohio")
    with pytest.raises(dataclasses.FrozenInstanceError):
        california_baseline.eligibility.children = 0


def test_with_helpers_return_new_scenarios(california_baseline):
    changed = (
        california_baseline
        .with_threshold("adults", 100)
        .with_work(enabled=True, hours_per_week=30)
        .with_snap(enabled=True, share_percent=10)
        .with_revenue(sin_tax_increase=25)
        .with_state("Ohio")
    )

    assert california_baseline.is_baseline
    assert changed.state_name == "Ohio"
    assert changed.eligibility.adults == 100
    assert changed.work.hours_per_week == 30
    assert changed.snap.share_percent == 10
    assert changed.revenue.sin_tax_increase == 25
    assert not changed.is_baseline


def test_with_helpers_clamp(california_baseline):
    assert california_baseline.with_threshold("children", 500).eligibility.children == 200
    assert california_baseline.with_snap(share_percent=99).snap.share_percent == 30


def test_reset_keeps_state(full_package):
    reset = full_package.reset()

    assert reset.state_name == "Texas"
    assert reset.is_baseline
    assert reset == baseline_scenario("Texas")


# =============================================================================
# FLAT RECORDS
# =============================================================================

def test_record_round_trip(full_package):
    record = full_package.to_record()

    assert record["state"] == "Texas"
    assert record["eligibility_adults"] == 100
    assert record["exempt_students"] is False
    assert record["snap_share_percent"] == 20
    assert all(not isinstance(v, (dict, list)) for v in record.values())
    assert Scenario.from_record(record) == full_package


def test_from_record_defaults_missing_fields():
    scenario = Scenario.from_record({"state": "Michigan", "sin_tax_increase": 10})

    assert scenario.state_name == "Michigan"
    assert scenario.revenue.sin_tax_increase == 10
    assert scenario.with_revenue(sin_tax_increase=0).is_baseline


def test_from_record_unknown_state_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        scenario = Scenario.from_record({"state": "Atlantis", "snap_share_percent": 500})

    assert scenario.state_name == DEFAULT_STATE
    assert scenario.snap.share_percent == 30
    assert "Atlantis" in caplog.text
