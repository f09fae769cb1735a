"""
Tab renderer modules for Streamlit app.
"""

from .budget_charts import render_budget_charts_tab
from .export import render_export_tab
from .methodology import render_methodology_tab
from .results_summary import render_results_summary_tab
from .state_comparison import render_state_comparison_tab

__all__ = [
    "render_budget_charts_tab",
    "render_export_tab",
    "render_methodology_tab",
    "render_results_summary_tab",
    "render_state_comparison_tab",
]
