"""
Home page — edit the field list, run the lookup batch, show results.
"""

import logging

import streamlit as st

from models.schema import FieldDefinition, default_fields
from search.config import ResolverConfig
from search.orchestrator import BatchOrchestrator
from search.resolver import Resolver
from tabular import fields_to_frame, frame_to_fields, read_header_fields, rows_to_frame
from ui.export import render_download_button

logger = logging.getLogger(__name__)


def init_state():
    """Seed session state on first load."""
    if "fields" not in st.session_state:
        st.session_state.fields = default_fields()
    st.session_state.setdefault("editor_version", 0)
    st.session_state.setdefault("results", [])
    st.session_state.setdefault("progress", "")


def render():
    """Render the full page."""
    init_state()

    st.title("📊 Excel Auto Filler")
    st.caption("Internet search to automatically fill your Excel fields")

    render_field_editor()
    st.divider()
    render_run_bar()

    if st.session_state.results:
        render_results(st.session_state.results)


def render_field_editor():
    """Editable table of fields: name, custom query, enabled."""
    fields = st.session_state.fields
    enabled = sum(1 for f in fields if f.is_runnable)

    st.subheader(f"Fields ({enabled} of {len(fields)} enabled)")
    st.caption(
        "Leave **Custom Query** blank to search by the field name. "
        "Add rows at the bottom of the table; select rows to delete them."
    )

    # A new key per replacement so the editor drops its pending edits
    edited = st.data_editor(
        fields_to_frame(fields),
        key=f"field_editor_{st.session_state.editor_version}",
        num_rows="dynamic",
        use_container_width=True,
        hide_index=True,
        column_config={
            "Field Name": st.column_config.TextColumn("Field Name", required=True),
            "Custom Query": st.column_config.TextColumn(
                "Custom Query", help="Optional search text used instead of the name"
            ),
            "Enabled": st.column_config.CheckboxColumn("Enabled", default=True),
        },
    )
    st.session_state.fields = frame_to_fields(edited)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("➕ Add Field", use_container_width=True):
            st.session_state.fields.append(FieldDefinition())
            _reset_editor()
    with col2:
        if st.button("↺ Reset to Defaults", use_container_width=True):
            st.session_state.fields = default_fields()
            _reset_editor()


def render_run_bar():
    """Search button plus live progress text."""
    runnable = [f for f in st.session_state.fields if f.is_runnable]

    run_btn = st.button(
        "🔎 Search & Fill",
        type="primary",
        use_container_width=True,
        disabled=not runnable,
    )

    status_text = st.empty()
    if st.session_state.progress:
        status_text.caption(st.session_state.progress)

    if run_btn:
        run_batch(runnable, status_text)


def run_batch(fields, status_text):
    """Resolve every field in sequence and store the single result row."""
    config = ResolverConfig.from_env()
    orchestrator = BatchOrchestrator(
        resolve=Resolver(config=config).resolve,
        delay_seconds=config.batch_delay,
    )

    st.session_state.results = []

    def on_status(msg: str):
        st.session_state.progress = msg
        status_text.caption(f"⏳ {msg}")

    with st.spinner("Searching the web…"):
        rows = orchestrator.run(fields, on_status=on_status)

    st.session_state.results = rows
    st.session_state.last_report = orchestrator.last_report
    status_text.caption(f"✅ {st.session_state.progress}")


def render_results(rows):
    """Show the result row and the download button."""
    st.subheader("Results")

    report = st.session_state.get("last_report")
    if report is not None and report.error_count:
        st.warning(f"{report.error_count} field(s) could not be fetched.")

    st.dataframe(rows_to_frame(rows), use_container_width=True, hide_index=True)
    render_download_button(rows)


# ------------------------------------------------------------------
# Uploads
# ------------------------------------------------------------------


def handle_upload(uploaded_file):
    """Replace the field list with the uploaded template's header row."""
    # The uploader keeps returning the same file on every rerun
    upload_key = (uploaded_file.name, uploaded_file.size)
    if st.session_state.get("last_upload") == upload_key:
        return
    st.session_state.last_upload = upload_key

    try:
        fields = read_header_fields(uploaded_file.getvalue())
    except Exception as e:
        logger.warning(f"Template upload failed: {e}")
        st.sidebar.error(f"Upload failed: {str(e)}")
        return

    if not fields:
        st.sidebar.warning("The first sheet has no header row.")
        return

    st.session_state.fields = fields
    st.session_state.results = []
    st.session_state.progress = ""
    _reset_editor()


def clear_upload():
    """Forget the last template once the uploader is emptied."""
    st.session_state.pop("last_upload", None)


def _reset_editor():
    st.session_state.editor_version += 1
    st.rerun()
