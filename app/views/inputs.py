"""
Input View (Sidebar)
====================
Handles period selection, roster entry and configuration.
"""
import streamlit as st

from app.components.sidebar import (
    render_employee_input,
    render_holiday_status,
    render_logo,
    render_period_inputs,
    render_rota_config,
)
from app.state.session import SessionStateManager


def render_inputs(state: SessionStateManager):
    """Render the sidebar inputs and update state."""
    with st.sidebar:
        render_logo()

        st.header("1. Period")
        render_period_inputs()
        render_holiday_status(state)

        st.divider()

        st.header("2. Team")
        render_employee_input()

        st.divider()

        st.header("3. Settings")
        render_rota_config()
