"""
Medicaid Reform Scenario Model

Models how a state could respond to a projected loss of federal Medicaid
funding using eligibility, work requirement, SNAP cost-sharing and
revenue levers.
"""

from .states import (
    DEFAULT_STATE,
    STATE_PROFILES,
    StateProfile,
    UnknownStateError,
    get_state_profile,
    list_state_names,
)
from .policies import (
    BASELINE_FPL_THRESHOLD,
    DemographicGroup,
    EligibilityThresholds,
    RevenuePolicy,
    Scenario,
    SnapCostSharingPolicy,
    WorkExemption,
    WorkExemptions,
    WorkRequirementPolicy,
    baseline_scenario,
)
from .calculator import (
    DerivedMetrics,
    EnrollmentBar,
    FundingSlice,
    PolicyImpactCalculator,
    TrajectoryPoint,
    compare_to_baseline,
    evaluate,
)
from .reporting import (
    ScenarioReport,
    create_comparison_table,
    create_state_comparison_frame,
    scenario_fingerprint,
)

__version__ = "1.0.0"
__all__ = [
    "DEFAULT_STATE",
    "STATE_PROFILES",
    "StateProfile",
    "UnknownStateError",
    "get_state_profile",
    "list_state_names",
    "BASELINE_FPL_THRESHOLD",
    "DemographicGroup",
    "EligibilityThresholds",
    "RevenuePolicy",
    "Scenario",
    "SnapCostSharingPolicy",
    "WorkExemption",
    "WorkExemptions",
    "WorkRequirementPolicy",
    "baseline_scenario",
    "DerivedMetrics",
    "EnrollmentBar",
    "FundingSlice",
    "PolicyImpactCalculator",
    "TrajectoryPoint",
    "compare_to_baseline",
    "evaluate",
    "ScenarioReport",
    "create_comparison_table",
    "create_state_comparison_frame",
    "scenario_fingerprint",
]
