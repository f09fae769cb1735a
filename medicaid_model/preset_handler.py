"""
Preset scenario handler for the Medicaid Reform Dashboard.

Creates Scenario objects from preset lever bundles.
"""

from typing import Any, Optional

from .app_data import PRESET_SCENARIOS
from .policies import Scenario
from .states import DEFAULT_STATE


def create_scenario_from_preset(preset_data: dict[str, Any], state_name: str = DEFAULT_STATE) -> Scenario:
    """
    Create a Scenario for a state from preset configuration data.

    Args:
        preset_data: Preset entry with a ``levers`` dict of flat record keys
        state_name: State the preset is applied to

    Returns:
        Scenario with the preset's levers and baseline values elsewhere
    """
    record = {"state": state_name}
    record.update(preset_data.get("levers", {}))
    return Scenario.from_record(record)


def get_preset(name: str) -> Optional[dict[str, Any]]:
    """Preset entry by display name, or None if there is no such preset."""
    return PRESET_SCENARIOS.get(name)
