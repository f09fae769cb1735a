"""
Policy Lever Definitions

Immutable value objects describing a Medicaid/SNAP reform scenario:
eligibility thresholds by group, work requirements, SNAP cost sharing
and state revenue options. Every field is clamped into its allowed range
at construction, so a Scenario is always valid input for the calculator.

Scenarios are never edited in place; use the ``with_*`` helpers to get an
updated copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping
import logging
import math

from .states import DEFAULT_STATE, STATE_PROFILES, StateProfile, get_state_profile

logger = logging.getLogger(__name__)


# Current ACA expansion eligibility level, % of the federal poverty line
BASELINE_FPL_THRESHOLD = 138
MIN_FPL_THRESHOLD = 0
MAX_FPL_THRESHOLD = 200

ALLOWED_WORK_HOURS = (20, 30, 35)
DEFAULT_WORK_HOURS = 20

MAX_SNAP_SHARE_PERCENT = 30
MAX_RATE_INCREASE = 5.0  # percentage points, income and property tax
MAX_SIN_TAX_INCREASE = 100  # percent


class DemographicGroup(Enum):
    """Eligibility groups with separate FPL thresholds."""
    CHILDREN = "children"
    PARENTS = "parents"
    ADULTS = "adults"
    ELDERLY = "elderly"
    DISABLED = "disabled"


class WorkExemption(Enum):
    """Populations that can be exempted from work requirements."""
    PREGNANT = "pregnant"
    DISABLED = "disabled"
    CAREGIVERS = "caregivers"
    STUDENTS = "students"


def _clamp_number(value: Any, low: float, high: float, label: str, default: float) -> float:
    """Coerce to float and clamp into [low, high]; fall back to default if unusable."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(f"{label}: could not interpret {value!r}, using {default}")
        return float(default)
    if math.isnan(number):
        logger.warning(f"{label}: NaN input, using {default}")
        return float(default)

    clamped = min(max(number, low), high)
    if clamped != number:
        logger.warning(f"{label}: {number} outside [{low}, {high}], clamped to {clamped}")
    return clamped


def _clamp_int(value: Any, low: int, high: int, label: str, default: int) -> int:
    return int(round(_clamp_number(value, low, high, label, default)))


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass(frozen=True)
class EligibilityThresholds:
    """Medicaid income eligibility threshold per group, in % of FPL (0-200)."""
    children: int = BASELINE_FPL_THRESHOLD
    parents: int = BASELINE_FPL_THRESHOLD
    adults: int = BASELINE_FPL_THRESHOLD
    elderly: int = BASELINE_FPL_THRESHOLD
    disabled: int = BASELINE_FPL_THRESHOLD

    def __post_init__(self):
        for group in DemographicGroup:
            raw = getattr(self, group.value)
            object.__setattr__(
                self,
                group.value,
                _clamp_int(raw, MIN_FPL_THRESHOLD, MAX_FPL_THRESHOLD,
                           f"{group.value} threshold", BASELINE_FPL_THRESHOLD),
            )

    def items(self):
        """(group, threshold) pairs in the fixed group order."""
        return [(group, getattr(self, group.value)) for group in DemographicGroup]

    def with_group(self, group: DemographicGroup | str, threshold: int) -> "EligibilityThresholds":
        return replace(self, **{DemographicGroup(group).value: threshold})

    def as_dict(self) -> dict[str, int]:
        return {group.value: value for group, value in self.items()}


@dataclass(frozen=True)
class WorkExemptions:
    """Which populations are exempt from work requirements."""
    pregnant: bool = True
    disabled: bool = True
    caregivers: bool = True
    students: bool = False

    def __post_init__(self):
        for exemption in WorkExemption:
            object.__setattr__(self, exemption.value, _as_bool(getattr(self, exemption.value)))

    def with_exemption(self, exemption: WorkExemption | str, exempt: bool) -> "WorkExemptions":
        return replace(self, **{WorkExemption(exemption).value: exempt})

    def as_dict(self) -> dict[str, bool]:
        return {exemption.value: getattr(self, exemption.value) for exemption in WorkExemption}


@dataclass(frozen=True)
class WorkRequirementPolicy:
    """
    Work/community engagement requirement for Medicaid enrollees.

    Hours and exemptions are recorded with the scenario but do not change
    the fiscal estimate; only ``enabled`` does.
    """
    enabled: bool = False
    hours_per_week: int = DEFAULT_WORK_HOURS
    exemptions: WorkExemptions = field(default_factory=WorkExemptions)

    def __post_init__(self):
        object.__setattr__(self, "enabled", _as_bool(self.enabled))
        try:
            hours = int(self.hours_per_week)
        except (TypeError, ValueError):
            hours = None
        if hours not in ALLOWED_WORK_HOURS:
            logger.warning(
                f"Work hours {self.hours_per_week!r} not one of {ALLOWED_WORK_HOURS}, "
                f"using {DEFAULT_WORK_HOURS}"
            )
            hours = DEFAULT_WORK_HOURS
        object.__setattr__(self, "hours_per_week", hours)


@dataclass(frozen=True)
class SnapCostSharingPolicy:
    """State share of SNAP benefit costs (0-30%)."""
    enabled: bool = False
    share_percent: int = 0

    def __post_init__(self):
        object.__setattr__(self, "enabled", _as_bool(self.enabled))
        object.__setattr__(
            self,
            "share_percent",
            _clamp_int(self.share_percent, 0, MAX_SNAP_SHARE_PERCENT, "SNAP share", 0),
        )


@dataclass(frozen=True)
class RevenuePolicy:
    """
    State revenue options.

    Attributes:
        income_tax_increase: Income tax rate increase, percentage points (0-5, step 0.1)
        property_tax_increase: Property tax rate increase, percentage points (0-5, step 0.1)
        sin_tax_increase: Tobacco/alcohol excise increase, percent (0-100)
    """
    income_tax_increase: float = 0.0
    property_tax_increase: float = 0.0
    sin_tax_increase: int = 0

    def __post_init__(self):
        for attr in ("income_tax_increase", "property_tax_increase"):
            value = _clamp_number(getattr(self, attr), 0.0, MAX_RATE_INCREASE, attr, 0.0)
            object.__setattr__(self, attr, round(value, 1))
        object.__setattr__(
            self,
            "sin_tax_increase",
            _clamp_int(self.sin_tax_increase, 0, MAX_SIN_TAX_INCREASE, "sin_tax_increase", 0),
        )


@dataclass(frozen=True)
class Scenario:
    """
    A complete reform scenario for one state.

    Build a fresh one with ``baseline_scenario`` and derive variants with the
    ``with_*`` helpers; each returns a new Scenario.
    """
    state: StateProfile
    eligibility: EligibilityThresholds = field(default_factory=EligibilityThresholds)
    work: WorkRequirementPolicy = field(default_factory=WorkRequirementPolicy)
    snap: SnapCostSharingPolicy = field(default_factory=SnapCostSharingPolicy)
    revenue: RevenuePolicy = field(default_factory=RevenuePolicy)

    @property
    def state_name(self) -> str:
        return self.state.name

    def with_state(self, state_name: str) -> "Scenario":
        return replace(self, state=get_state_profile(state_name))

    def with_threshold(self, group: DemographicGroup | str, threshold: int) -> "Scenario":
        return replace(self, eligibility=self.eligibility.with_group(group, threshold))

    def with_work(self, **changes) -> "Scenario":
        return replace(self, work=replace(self.work, **changes))

    def with_snap(self, **changes) -> "Scenario":
        return replace(self, snap=replace(self.snap, **changes))

    def with_revenue(self, **changes) -> "Scenario":
        return replace(self, revenue=replace(self.revenue, **changes))

    def reset(self) -> "Scenario":
        """All levers back to baseline, keeping the selected state."""
        return Scenario(state=self.state)

    @property
    def is_baseline(self) -> bool:
        return self == self.reset()

    def to_record(self) -> dict[str, Any]:
        """Flatten to a single-level dict of primitive values."""
        record: dict[str, Any] = {"state": self.state.name}
        for group, threshold in self.eligibility.items():
            record[f"eligibility_{group.value}"] = threshold
        record["work_enabled"] = self.work.enabled
        record["work_hours_per_week"] = self.work.hours_per_week
        for name, exempt in self.work.exemptions.as_dict().items():
            record[f"exempt_{name}"] = exempt
        record["snap_enabled"] = self.snap.enabled
        record["snap_share_percent"] = self.snap.share_percent
        record["income_tax_increase"] = self.revenue.income_tax_increase
        record["property_tax_increase"] = self.revenue.property_tax_increase
        record["sin_tax_increase"] = self.revenue.sin_tax_increase
        return record

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Scenario":
        """
        Rebuild a Scenario from a flat record.

        Missing keys take baseline values; an unknown state falls back to
        DEFAULT_STATE. Out-of-range values are clamped.
        """
        state_name = record.get("state", DEFAULT_STATE)
        if state_name not in STATE_PROFILES:
            logger.warning(f"Unknown state {state_name!r} in record, using {DEFAULT_STATE}")
            state_name = DEFAULT_STATE

        base_exemptions = WorkExemptions()
        base_work = WorkRequirementPolicy()
        base_snap = SnapCostSharingPolicy()
        base_revenue = RevenuePolicy()

        return cls(
            state=get_state_profile(state_name),
            eligibility=EligibilityThresholds(**{
                group.value: record.get(f"eligibility_{group.value}", BASELINE_FPL_THRESHOLD)
                for group in DemographicGroup
            }),
            work=WorkRequirementPolicy(
                enabled=record.get("work_enabled", base_work.enabled),
                hours_per_week=record.get("work_hours_per_week", base_work.hours_per_week),
                exemptions=WorkExemptions(**{
                    e.value: record.get(f"exempt_{e.value}", getattr(base_exemptions, e.value))
                    for e in WorkExemption
                }),
            ),
            snap=SnapCostSharingPolicy(
                enabled=record.get("snap_enabled", base_snap.enabled),
                share_percent=record.get("snap_share_percent", base_snap.share_percent),
            ),
            revenue=RevenuePolicy(
                income_tax_increase=record.get("income_tax_increase", base_revenue.income_tax_increase),
                property_tax_increase=record.get("property_tax_increase", base_revenue.property_tax_increase),
                sin_tax_increase=record.get("sin_tax_increase", base_revenue.sin_tax_increase),
            ),
        )


def baseline_scenario(state_name: str = DEFAULT_STATE) -> Scenario:
    """Fresh scenario with every lever at its baseline value."""
    return Scenario(state=get_state_profile(state_name))
