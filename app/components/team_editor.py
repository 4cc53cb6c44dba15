"""Employee list and unavailability editor for Streamlit."""
from datetime import date

import streamlit as st

from duty_rota.models.weekday import WEEKDAYS
from duty_rota.utils.dates import date_key
from app.state.session import SessionStateManager


def render_employee_list(state: SessionStateManager):
    """Employees with their blocks and Edit / Remove actions."""
    st.subheader("👥 Employees & Unavailability")
    roster = state.roster
    if not len(roster):
        st.info("ℹ️ Add employees from the sidebar")
        return

    for name in roster.employees:
        c1, c2, c3 = st.columns([6, 1, 1])
        with c1:
            st.markdown(f"**{name}**")
            st.caption(roster.describe(name))
        with c2:
            label = "Cancel" if state.editing_employee == name else "Edit"
            st.button(label, key=f"edit_{name}", on_click=state.start_edit, args=(name,))
        with c3:
            st.button("Remove", key=f"remove_{name}", on_click=state.remove_employee, args=(name,))


def _toggle_weekday(day: int):
    state = SessionStateManager()
    state.draft = state.draft.toggle_weekday(day)


def _add_range():
    state = SessionStateManager()
    start = st.session_state.get("range_start")
    end = st.session_state.get("range_end")
    draft = state.draft.with_pending(
        date_key(start) if isinstance(start, date) else "",
        date_key(end) if isinstance(end, date) else "",
    )
    state.draft = draft.try_add_range()


def _delete_range(idx: int):
    state = SessionStateManager()
    state.draft = state.draft.delete_range(idx)


def _clear_draft():
    state = SessionStateManager()
    state.draft = state.draft.clear()


def render_unavailability_editor(state: SessionStateManager):
    """Edit panel for the employee currently being edited."""
    name = state.editing_employee
    draft = state.draft
    if name is None or draft is None:
        return

    with st.container(border=True):
        st.markdown(f"#### Edit Availability: {name}")
        if draft.error:
            st.error(draft.error)

        st.write("Weekdays:")
        cols = st.columns(len(WEEKDAYS))
        for col, day in zip(cols, WEEKDAYS):
            with col:
                selected = int(day) in draft.weekdays
                st.button(
                    day.label, key=f"wd_{name}_{int(day)}",
                    type="primary" if selected else "secondary",
                    on_click=_toggle_weekday, args=(int(day),),
                )

        st.write("Add Date Range:")
        c1, c2, c3, c4 = st.columns([2, 2, 1, 1])
        with c1:
            st.date_input("Start", value=None, key="range_start")
        with c2:
            st.date_input("End", value=None, key="range_end")
        with c3:
            st.button("Add Range", on_click=_add_range)
        with c4:
            st.button("Clear Ranges", on_click=_clear_draft)

        for idx, r in enumerate(draft.ranges):
            c1, c2 = st.columns([4, 1])
            with c1:
                st.text(str(r))
            with c2:
                st.button("Delete", key=f"del_range_{name}_{idx}", on_click=_delete_range, args=(idx,))

        st.button("💾 Save", type="primary", on_click=state.save_edit)
