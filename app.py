"""
Wealth Tax Simulator - Main Streamlit App

Simulates how a minimum tax on wealth above a chosen threshold would change
effective tax rates along the income distribution, and the revenue it raises.

Run with:
    streamlit run app.py
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# Configure page
st.set_page_config(
    page_title="Wealth Tax Simulator",
    page_icon="🏛️",
    layout="wide",
    initial_sidebar_state="expanded"
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

sys.path.insert(0, str(Path(__file__).parent))

from wealth_tax_model.data import CountryDataLoader, InvalidDatasetError
from wealth_tax_model.ui import build_app_dependencies


@st.cache_resource
def load_datasets():
    """Load every country tabulation once per server process."""
    return CountryDataLoader().load_all()


deps = build_app_dependencies()
deps.apply_app_styles(st)

try:
    datasets = load_datasets()
except (InvalidDatasetError, FileNotFoundError) as e:
    logger.error(f"Could not load country data: {e}")
    st.error(f"⚠️ Could not load country data: {e}")
    datasets = []

deps.run_main_app(st, deps, datasets)
