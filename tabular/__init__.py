"""
Spreadsheet import/export for field definitions and result rows.
"""

from .bridge import (
    XLSX_MIME,
    SHEET_NAME,
    read_header_fields,
    rows_to_frame,
    rows_to_workbook,
    export_filename,
    EDITOR_COLUMNS,
    fields_to_frame,
    frame_to_fields,
)

__all__ = [
    "XLSX_MIME",
    "SHEET_NAME",
    "read_header_fields",
    "rows_to_frame",
    "rows_to_workbook",
    "export_filename",
    "EDITOR_COLUMNS",
    "fields_to_frame",
    "frame_to_fields",
]
