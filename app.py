"""
Medicaid Reform Modeling Dashboard - Main Streamlit App

Interactive what-if model of state responses to a projected loss of
federal Medicaid funding.

Run:
    streamlit run app.py
"""

import logging

import streamlit as st

# Configure page
st.set_page_config(
    page_title="Medicaid Reform Modeling Dashboard",
    page_icon="🏥",
    layout="wide",
    initial_sidebar_state="expanded",
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

try:
    from medicaid_model.ui import build_app_dependencies
    MODEL_AVAILABLE = True
except ImportError as e:
    MODEL_AVAILABLE = False
    st.error(f"⚠️ Could not import scenario model: {e}")

if MODEL_AVAILABLE:
    deps = build_app_dependencies()
    deps.apply_app_styles(st)
    deps.run_main_app(st_module=st, deps=deps)
