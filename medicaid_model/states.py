"""
State Reference Data

Static per-state figures used as the starting point for every scenario:
projected federal funding loss, population and Medicaid enrollment.

NOTE: these are demonstration figures, not sourced estimates.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)


class UnknownStateError(KeyError):
    """Raised when a state name is not in the reference table."""


@dataclass(frozen=True)
class StateProfile:
    """
    Reference figures for one state.

    Attributes:
        name: State name (unique key)
        funding_loss: Baseline projected federal funding loss ($ billions)
        population: Total population (millions)
        medicaid_enrollment: Medicaid enrollment (millions)
    """
    name: str
    funding_loss: float
    population: float
    medicaid_enrollment: float

    def __post_init__(self):
        for attr in ("funding_loss", "population", "medicaid_enrollment"):
            value = float(getattr(self, attr))
            if value < 0:
                logger.warning(f"{self.name}: negative {attr} ({value}) clamped to 0")
                value = 0.0
            object.__setattr__(self, attr, value)


DEFAULT_STATE = "California"

STATE_PROFILES: dict[str, StateProfile] = {
    profile.name: profile
    for profile in (
        StateProfile("California", funding_loss=42.3, population=39.5, medicaid_enrollment=14.2),
        StateProfile("Texas", funding_loss=38.7, population=29.5, medicaid_enrollment=5.8),
        StateProfile("New York", funding_loss=35.2, population=19.5, medicaid_enrollment=7.3),
        StateProfile("Florida", funding_loss=31.5, population=21.8, medicaid_enrollment=5.2),
        StateProfile("Pennsylvania", funding_loss=28.9, population=12.8, medicaid_enrollment=3.4),
        StateProfile("Ohio", funding_loss=24.6, population=11.7, medicaid_enrollment=3.1),
        StateProfile("Illinois", funding_loss=22.1, population=12.6, medicaid_enrollment=3.2),
        StateProfile("Michigan", funding_loss=19.8, population=10.0, medicaid_enrollment=2.8),
        StateProfile("North Carolina", funding_loss=17.3, population=10.6, medicaid_enrollment=2.4),
        StateProfile("Georgia", funding_loss=15.9, population=10.7, medicaid_enrollment=2.0),
    )
}


def list_state_names() -> list[str]:
    """State names in display order."""
    return list(STATE_PROFILES)


def get_state_profile(name: str) -> StateProfile:
    """
    Look up a state's reference figures by name.

    Raises:
        UnknownStateError: if the name is not in STATE_PROFILES
    """
    try:
        return STATE_PROFILES[name]
    except KeyError:
        raise UnknownStateError(
            f"Unknown state {name!r}. Choose one of: {', '.join(STATE_PROFILES)}"
        ) from None
