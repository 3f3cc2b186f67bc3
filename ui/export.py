"""
Export — workbook download for the result rows.
"""

import streamlit as st

from tabular import XLSX_MIME, export_filename, rows_to_workbook


def render_download_button(rows):
    """Offer the result rows as a time-stamped .xlsx download."""
    if not rows:
        return

    filename = export_filename()
    st.download_button(
        label="📥 Download Excel",
        data=rows_to_workbook(rows),
        file_name=filename,
        mime=XLSX_MIME,
        use_container_width=True,
        type="primary",
    )
    st.caption(f"Filename: `{filename}`")
