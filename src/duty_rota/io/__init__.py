# duty_rota/io - Holiday feed and rota exports
from .csv_export import export_rota_to_csv, format_rota_rows, rota_to_dataframe, suggested_filename
from .excel_export import export_rota_to_excel
from .holidays import HolidayFetchResult, fetch_bank_holidays, fetch_excluded_dates, parse_bank_holidays

__all__ = [
    "format_rota_rows",
    "rota_to_dataframe",
    "export_rota_to_csv",
    "export_rota_to_excel",
    "suggested_filename",
    "fetch_excluded_dates",
    "fetch_bank_holidays",
    "parse_bank_holidays",
    "HolidayFetchResult",
]
