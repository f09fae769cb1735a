"""
Centralized Streamlit style definitions.
"""

COLORS = {
    "BLACK": "#000000",
    "BLUE_95": "#D8E6F3",
    "BLUE_98": "#F7FAFD",
    "BLUE_LIGHT": "#D8E6F3",
    "BLUE_PRIMARY": "#2C6496",
    "DARK_BLUE_HOVER": "#1d3e5e",
    "DARK_GRAY": "#616161",
    "DARK_RED": "#b50d0d",
    "DARKEST_BLUE": "#0C1A27",
    "GRAY": "#808080",
    "GREEN": "#29d40f",
    "LIGHT_GRAY": "#F2F2F2",
    "MEDIUM_DARK_GRAY": "#D2D2D2",
    "TEAL_ACCENT": "#39C6C0",
    "TEAL_LIGHT": "#F7FDFC",
    "WHITE": "#FFFFFF",
}

# Funding pie slice order: Federal Loss, State Revenue, Program Savings, SNAP Costs
CHART_COLORS = [COLORS["DARK_RED"], COLORS["BLUE_PRIMARY"], COLORS["GREEN"], COLORS["GRAY"]]

APP_STYLES = f"""
<style>
    .stApp {{
        background-color: {COLORS["BLUE_98"]};
    }}
    .main-header {{
        font-size: 2.2rem;
        font-weight: 700;
        color: {COLORS["DARKEST_BLUE"]};
        margin-bottom: 0.5rem;
    }}
    .metric-card {{
        background-color: {COLORS["LIGHT_GRAY"]};
        padding: 1rem;
        border-radius: 0.5rem;
        text-align: center;
        margin: 0.5rem 0;
    }}
    .metric-label {{
        font-size: 0.9rem;
        color: {COLORS["DARK_GRAY"]};
    }}
    .metric-value {{
        font-size: 1.8rem;
        font-weight: 700;
    }}
    .funding-loss {{
        color: {COLORS["DARK_RED"]};
        font-weight: bold;
    }}
    .demo-watermark {{
        position: fixed;
        top: 4rem;
        right: 1rem;
        z-index: 1000;
        background-color: #dc2626;
        color: {COLORS["WHITE"]};
        padding: 0.6rem 1rem;
        border-radius: 0.5rem;
        opacity: 0.9;
    }}
    .info-box {{
        background-color: {COLORS["BLUE_95"]};
        border: 1px solid {COLORS["BLUE_PRIMARY"]};
        padding: 1rem;
        margin: 1rem 0;
        border-radius: 0.5rem;
        color: {COLORS["DARKEST_BLUE"]};
    }}
</style>
"""

DEMO_WATERMARK = """
<div class="demo-watermark">
    <div style="font-weight: 700; font-size: 1.1rem;">DEMO ONLY</div>
    <div style="font-size: 0.85rem;">Not real data</div>
</div>
"""


def apply_app_styles(st_module) -> None:
    """Apply shared CSS style block and the demo watermark to the Streamlit app."""
    st_module.markdown(APP_STYLES, unsafe_allow_html=True)
    st_module.markdown(DEMO_WATERMARK, unsafe_allow_html=True)


def impact_color(value: float) -> str:
    """Green for a surplus or break-even, dark red for a shortfall."""
    return COLORS["GREEN"] if value >= 0 else COLORS["DARK_RED"]
