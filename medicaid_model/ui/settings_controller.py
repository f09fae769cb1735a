"""
Display settings rendering helpers.
"""

from __future__ import annotations

from typing import Any


def render_settings_panel(st_module: Any, settings_container: Any) -> dict[str, Any]:
    """
    Render display options and return the selected values.
    """
    with settings_container:
        show_baseline = st_module.checkbox(
            "Show baseline trajectory",
            value=True,
            key="settings_show_baseline",
            help="Overlay the no-action budget path on the trajectory chart",
        )
        show_data_tables = st_module.checkbox(
            "Show chart data tables",
            value=False,
            key="settings_show_data_tables",
            help="Display the numbers behind each chart",
        )

    return {
        "show_baseline": show_baseline,
        "show_data_tables": show_data_tables,
    }
