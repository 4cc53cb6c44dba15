import streamlit as st


def apply_styling():
    """Apply global CSS styling."""
    css = """
    <style>
    /* Improve dataframe density */
    div[data-testid="stDataFrame"] div[data-testid="stTable"] { font-size: 0.85rem; }

    /* Hide Streamlit deploy button */
    .stDeployButton { display: none !important; }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
