"""
Export View
===========
Handles file downloads (CSV, Excel).
"""
import io

import streamlit as st

from app.state.session import SessionStateManager
from duty_rota.io.csv_export import rota_to_csv_string, suggested_filename
from duty_rota.io.excel_export import export_rota_to_excel


def render_downloads(state: SessionStateManager):
    """Render the download section."""
    rota = state.rota
    if rota is None:
        st.warning("Generate a rota before exporting.")
        return

    st.subheader("📥 Downloads")
    col1, col2 = st.columns(2)

    with col1:
        st.download_button(
            "📥 Export CSV",
            rota_to_csv_string(rota),
            suggested_filename(rota.year, rota.month_index),
            "text/csv",
        )

    with col2:
        xlsx_buffer = io.BytesIO()
        export_rota_to_excel(rota, xlsx_buffer, config=state.rota_config)
        st.download_button(
            "📥 Export Excel",
            xlsx_buffer.getvalue(),
            suggested_filename(rota.year, rota.month_index, "xlsx"),
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
