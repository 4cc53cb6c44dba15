"""Rota rows for display and CSV export."""
import io
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from duty_rota.models.assignment import Rota
from duty_rota.models.rules import CSV_HEADER, MONTH_NAMES
from duty_rota.utils.logging_setup import get_logger

logger = get_logger("duty_rota.io.csv_export")


def format_rota_rows(rota: Rota) -> List[Dict[str, str]]:
    """One ``{"date": "DD/MM/YYYY", "employee": name or "-"}`` row per working day."""
    return [
        {"date": e.display_date, "employee": e.display_employee}
        for e in rota.entries
    ]


def rota_to_dataframe(rota: Rota) -> pd.DataFrame:
    """Display table with the export column headers."""
    rows = format_rota_rows(rota)
    return pd.DataFrame(
        [[r["date"], r["employee"]] for r in rows],
        columns=CSV_HEADER,
    )


def suggested_filename(year: int, month_index: int, extension: str = "csv") -> str:
    """e.g. ``rota_April_2024.csv``"""
    return f"rota_{MONTH_NAMES[month_index]}_{year}.{extension}"


def export_rota_to_csv(rota: Rota, output: Union[str, Path, io.StringIO]) -> None:
    """
    Export the rota as ``Date,Assigned Person`` rows.

    Args:
        rota: Generated rota
        output: File path or StringIO buffer
    """
    df = rota_to_dataframe(rota)
    if isinstance(output, (str, Path)):
        df.to_csv(str(output), index=False, lineterminator="\n")
    else:
        df.to_csv(output, index=False, lineterminator="\n")
    logger.info(f"Exported {len(df)} rota rows to CSV")


def rota_to_csv_string(rota: Rota) -> str:
    buffer = io.StringIO()
    export_rota_to_csv(rota, buffer)
    return buffer.getvalue()
