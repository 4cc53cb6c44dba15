"""Excel export for generated rotas."""
import io
from pathlib import Path
from typing import Any, Dict, Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from duty_rota.engine.validation import assignment_counts
from duty_rota.models.assignment import Rota
from duty_rota.models.rules import CSV_HEADER, RULES
from duty_rota.utils.logging_setup import get_logger

logger = get_logger("duty_rota.io.excel_export")

UNASSIGNED_FILL = RULES.unassigned_color.lstrip("#")
HEADER_FILL = RULES.header_color.lstrip("#")

THIN = Side(border_style="thin", color="CCCCCC")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)


def _write_header(ws, labels, row: int = 1):
    for j, label in enumerate(labels, start=1):
        cell = ws.cell(row=row, column=j, value=label)
        cell.font = Font(bold=True)
        cell.fill = PatternFill(start_color=HEADER_FILL, end_color=HEADER_FILL, fill_type="solid")
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = BORDER_THIN


def export_rota_to_excel(
    rota: Rota,
    output: Union[str, Path, io.BytesIO],
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Export a rota to an Excel workbook.

    Sheets:
        Rota: Date, Weekday, Assigned Person (unassigned rows highlighted)
        Summary: month metadata and days per employee

    Args:
        rota: Generated rota
        output: File path or BytesIO buffer
        config: Generator configuration for metadata
    """
    wb = Workbook()

    # ========== Rota Sheet ==========
    ws = wb.active
    ws.title = "Rota"
    _write_header(ws, [CSV_HEADER[0], "Weekday", CSV_HEADER[1]])
    for r, entry in enumerate(rota.entries, start=2):
        values = [entry.display_date, entry.day.strftime("%A"), entry.display_employee]
        for c, val in enumerate(values, start=1):
            cell = ws.cell(row=r, column=c, value=val)
            cell.border = BORDER_THIN
            if not entry.is_assigned:
                cell.fill = PatternFill(start_color=UNASSIGNED_FILL, end_color=UNASSIGNED_FILL, fill_type="solid")
    ws.column_dimensions["A"].width = 14
    ws.column_dimensions["B"].width = 12
    ws.column_dimensions["C"].width = 24
    ws.freeze_panes = "A2"

    # ========== Summary Sheet ==========
    ws_sum = wb.create_sheet("Summary")
    summary = rota.summary()
    rows = [["Indicator", "Value"]] + [[k, v] for k, v in summary.items()]
    for key, val in (config or {}).items():
        if key not in summary:
            rows.append([key, val])
    for i, row_data in enumerate(rows, start=1):
        for j, val in enumerate(row_data, start=1):
            cell = ws_sum.cell(row=i, column=j, value=val if val is not None else "")
            if i == 1:
                cell.font = Font(bold=True)

    start = len(rows) + 2
    _write_header(ws_sum, ["Employee", "Days"], row=start)
    for i, (name, count) in enumerate(assignment_counts(rota).items(), start=start + 1):
        ws_sum.cell(row=i, column=1, value=name).border = BORDER_THIN
        ws_sum.cell(row=i, column=2, value=count).border = BORDER_THIN

    for i in range(1, 3):
        ws_sum.column_dimensions[get_column_letter(i)].width = 24

    if isinstance(output, io.BytesIO):
        wb.save(output)
    else:
        wb.save(str(output))
    logger.info(f"Exported rota for {rota.month_name} {rota.year} to Excel")
