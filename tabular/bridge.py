"""
Tabular Bridge — spreadsheet header row in, result workbook out.

  - Import: first sheet, first row → one enabled FieldDefinition per cell
  - Export: result rows → single "Data" sheet, columns in first-seen key order
"""

from __future__ import annotations

import io
import logging
from datetime import datetime
from typing import BinaryIO, Dict, List, Optional, Sequence, Union

import pandas as pd

from models.schema import FieldDefinition

logger = logging.getLogger(__name__)

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SHEET_NAME = "Data"


def read_header_fields(source: Union[str, bytes, BinaryIO]) -> List[FieldDefinition]:
    """
    Read the header row of the first sheet as field definitions.

    Empty header cells are skipped; other text is kept as-is, spaces
    included. An empty sheet yields an empty list.
    The caller replaces its field list with the result; nothing is merged.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    df = pd.read_excel(source, sheet_name=0, header=None, nrows=1)
    if df.empty:
        logger.info("Uploaded workbook has no header row")
        return []

    fields: List[FieldDefinition] = []
    for cell in df.iloc[0].tolist():
        if pd.isna(cell):
            continue
        name = _cell_text(cell)
        if not name:
            continue
        fields.append(FieldDefinition(name=name, search_query="", enabled=True))

    logger.info(f"Imported {len(fields)} fields from header row")
    return fields


def rows_to_frame(rows: Sequence[Dict[str, str]]) -> pd.DataFrame:
    """Columns are the union of row keys in first-seen order."""
    columns: List[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    return pd.DataFrame(list(rows), columns=columns)


def rows_to_workbook(rows: Sequence[Dict[str, str]]) -> bytes:
    """Serialize result rows to an .xlsx workbook."""
    if not rows:
        raise ValueError("No result rows to export")

    df = rows_to_frame(rows)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=SHEET_NAME, index=False)
    return buffer.getvalue()


def export_filename(now: Optional[datetime] = None) -> str:
    """Time-stamped download name, e.g. ``filled_data_1760688000000.xlsx``."""
    now = now or datetime.now()
    millis = int(now.timestamp() * 1000)
    return f"filled_data_{millis}.xlsx"


def _cell_text(cell) -> str:
    # Whole numbers come back from Excel as floats ("2024.0")
    if isinstance(cell, float) and cell.is_integer():
        cell = int(cell)
    return str(cell)


# ------------------------------------------------------------------
# Field list <-> editor table
# ------------------------------------------------------------------

EDITOR_COLUMNS = ["Field Name", "Custom Query", "Enabled"]


def fields_to_frame(fields: Sequence[FieldDefinition]) -> pd.DataFrame:
    """Field list as an editable table."""
    return pd.DataFrame(
        [[f.name, f.search_query, f.enabled] for f in fields],
        columns=EDITOR_COLUMNS,
    )


def frame_to_fields(df: pd.DataFrame) -> List[FieldDefinition]:
    """Read an edited table back into field definitions, in row order."""
    fields: List[FieldDefinition] = []
    for record in df.to_dict(orient="records"):
        name = record.get("Field Name")
        query = record.get("Custom Query")
        enabled = record.get("Enabled")
        fields.append(
            FieldDefinition(
                name="" if _is_blank(name) else name,
                search_query="" if _is_blank(query) else query,
                # Rows added in the editor start with an empty checkbox cell
                enabled=True if _is_blank(enabled) else bool(enabled),
            )
        )
    return fields


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value))
