"""
Centralized Streamlit style definitions.
"""

APP_STYLES = """
<style>
    .info-box {
        background-color: #e7f3ff;
        border-left: 4px solid #1f77b4;
        padding: 1rem;
        margin: 1rem 0;
        border-radius: 0.25rem;
    }
    div[data-testid="stMetricValue"] {
        font-weight: 700;
        color: #1f77b4;
    }
</style>
"""


def apply_app_styles(st_module) -> None:
    """Apply shared CSS style block to the Streamlit app."""
    st_module.markdown(APP_STYLES, unsafe_allow_html=True)
