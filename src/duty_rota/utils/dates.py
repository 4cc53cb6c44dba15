"""Canonical date keys and display formatting."""
from datetime import date, datetime
from typing import Union

CANONICAL_FORMAT = "%Y-%m-%d"
DISPLAY_FORMAT = "%d/%m/%Y"


def date_key(d: Union[date, str]) -> str:
    """Serialize a date as ``YYYY-MM-DD`` (strings are validated and passed through)."""
    if isinstance(d, datetime):
        d = d.date()
    if isinstance(d, date):
        return d.strftime(CANONICAL_FORMAT)
    return parse_date_key(d).strftime(CANONICAL_FORMAT)


def parse_date_key(key: str) -> date:
    """Parse a canonical ``YYYY-MM-DD`` key. Raises ValueError on bad input."""
    return datetime.strptime(str(key).strip(), CANONICAL_FORMAT).date()


def format_display_date(d: date) -> str:
    """Format a date for the rota table and CSV export (``DD/MM/YYYY``)."""
    return d.strftime(DISPLAY_FORMAT)
