"""
Duty Rota Streamlit Web UI
==========================
Monthly one-person-per-weekday rota with unavailability and bank holidays.
"""
import os
import sys

import streamlit as st

# Add src and project root to python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../src"))

from app.components.styling import apply_styling
from app.components.team_editor import render_employee_list, render_unavailability_editor
from app.components.utils import get_rota_config
from app.services.holidays import HolidayService
from app.state.session import SessionStateManager
from app.views.dashboard import render_dashboard
from app.views.export import render_downloads
from app.views.inputs import render_inputs
from duty_rota.engine.generate import generate_rota
from duty_rota.engine.validation import validate_rota
from duty_rota.utils.logging_setup import get_logger, init_logging

logger = get_logger("duty_rota.app")


def main():
    # 1. Init
    if "logging_ready" not in st.session_state:
        init_logging(level="INFO")
        st.session_state["logging_ready"] = True
    SessionStateManager.init_state()
    state = SessionStateManager()
    apply_styling()

    cfg = get_rota_config()
    with st.spinner("Loading bank holidays..."):
        state.holidays = HolidayService.load(cfg.holiday_division, cfg.fetch_holidays)

    st.title("📅 Monthly Rota Generator")

    # 2. Sidebar (Inputs)
    render_inputs(state)

    # 3. Roster and editor
    render_employee_list(state)
    render_unavailability_editor(state)

    st.divider()

    # 4. Actions
    c1, c2, _ = st.columns([1, 1, 4])
    with c1:
        if st.button("🚀 Generate Rota", type="primary"):
            _handle_generate(state)
    with c2:
        if state.rota is not None:
            st.button("Clear Rota", on_click=state.clear_results)

    # 5. Results
    render_dashboard(state)
    if state.rota is not None:
        render_downloads(state)


def _handle_generate(state: SessionStateManager):
    """Run a generation against the current roster snapshot."""
    cfg = get_rota_config()
    holidays = state.holidays
    rota = generate_rota(
        state.roster,
        state.year,
        state.month_index,
        holidays.dates if holidays else (),
        config=cfg,
        holiday_warning=holidays.warning if holidays else None,
    )
    state.rota = rota
    state.rota_config = cfg.to_dict()
    state.validation = validate_rota(rota, state.roster.availability, cfg.max_assignments_per_employee)
    logger.info(f"Rota generated: {rota.summary()}")


if __name__ == "__main__":
    main()
