"""
Sidebar Components
==================
Reusable widgets for the sidebar.
"""
import streamlit as st

from duty_rota.errors import DuplicateEmployee
from duty_rota.models.rules import HOLIDAY_DIVISIONS, MONTH_NAMES, RULES
from app.state.session import SessionStateManager


def render_logo():
    """Render the app header."""
    st.sidebar.markdown("### 📅 Monthly Rota Generator")


def render_period_inputs():
    """Year and month selectors."""
    c1, c2 = st.sidebar.columns(2)
    with c1:
        st.number_input("Year", min_value=1900, max_value=2999, step=1, key="config_year")
    with c2:
        st.selectbox(
            "Month", options=list(range(12)), key="config_month",
            format_func=lambda i: MONTH_NAMES[i],
        )


def _add_employee():
    state = SessionStateManager()
    name = st.session_state.get("new_employee_name", "")
    try:
        state.roster.add_employee(name)
        st.session_state["employee_error"] = ""
    except DuplicateEmployee as e:
        st.session_state["employee_error"] = str(e)
    st.session_state["new_employee_name"] = ""


def render_employee_input():
    """Employee name input; Enter or the button adds the employee."""
    st.sidebar.text_input(
        "Employee name", key="new_employee_name",
        placeholder="Employee name", on_change=_add_employee,
    )
    st.sidebar.button("➕ Add Employee", on_click=_add_employee, width="stretch")
    error = st.session_state.get("employee_error")
    if error:
        st.sidebar.error(error)


def render_rota_config():
    """Generator configuration inputs."""
    with st.sidebar.expander("🔧 Settings", expanded=False):
        st.number_input(
            "Seed (0=auto)", min_value=0, key="config_seed",
            help="Fixed seed gives the same rota for the same inputs",
        )
        st.session_state.setdefault("cfg_max_per_employee", RULES.max_assignments_per_employee)
        st.number_input(
            "Max days per employee (first pass)", min_value=1, max_value=31,
            key="cfg_max_per_employee",
        )
        st.session_state.setdefault("cfg_fetch_holidays", True)
        st.checkbox("Exclude bank holidays", key="cfg_fetch_holidays")
        st.session_state.setdefault("cfg_holiday_division", RULES.holiday_division)
        st.selectbox("Holiday calendar", HOLIDAY_DIVISIONS, key="cfg_holiday_division")


def render_holiday_status(state: SessionStateManager):
    """Show the holiday feed result; a failure is a warning, not an error."""
    holidays = state.holidays
    if holidays is None:
        return
    if holidays.warning:
        st.sidebar.warning(f"⚠️ {holidays.warning}")
    else:
        st.sidebar.caption(f"🏖️ {len(holidays.dates)} bank holidays loaded")
