"""
Dashboard View
==============
Displays the generated rota, KPIs and per-employee counts.
"""
import pandas as pd
import plotly.express as px
import streamlit as st

from app.state.session import SessionStateManager
from duty_rota.engine.validation import assignment_counts
from duty_rota.io.csv_export import rota_to_dataframe
from duty_rota.models.rules import CSV_HEADER, UNASSIGNED_LABEL


def render_dashboard(state: SessionStateManager):
    """Render the rota table and its statistics."""
    rota = state.rota
    if rota is None:
        st.info("👋 Add employees and press Generate Rota to see results.")
        return

    _render_kpis(state)

    if rota.holiday_warning:
        st.warning(f"⚠️ {rota.holiday_warning}: generated without bank holidays.")

    t1, t2 = st.tabs(["📊 Rota", "👥 Employees"])
    with t1:
        _render_table(state)
    with t2:
        _render_counts(state)


def _render_kpis(state: SessionStateManager):
    summary = state.rota.summary()
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Month", summary["month"])
    with col2:
        st.metric("Working days", summary["working_days"])
    with col3:
        st.metric("Assigned", summary["assigned"])
    with col4:
        st.metric("Unassigned", summary["unassigned"])

    validation = state.validation
    if validation is not None and validation.adjacent_repeats:
        st.caption(
            f"ℹ️ {validation.adjacent_repeats} back-to-back day(s): "
            "no other employee was available."
        )


def _highlight_unassigned(row: pd.Series):
    style = "background-color: #FFC7CE; color: #9C0006" if row[CSV_HEADER[1]] == UNASSIGNED_LABEL else ""
    return [style] * len(row)


def _render_table(state: SessionStateManager):
    df = rota_to_dataframe(state.rota)
    if df.empty:
        st.info("No working days in this month.")
        return
    st.dataframe(df.style.apply(_highlight_unassigned, axis=1), hide_index=True, width="stretch")


def _render_counts(state: SessionStateManager):
    counts = assignment_counts(state.rota)
    if not counts:
        st.info("No employees on this rota.")
        return
    df = pd.DataFrame({"Employee": list(counts.keys()), "Days": list(counts.values())})
    fig = px.bar(df, x="Employee", y="Days", text="Days")
    fig.update_layout(height=320, margin=dict(l=10, r=10, t=10, b=10))
    st.plotly_chart(fig, width="stretch")
