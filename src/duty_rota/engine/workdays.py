"""
Working Day Expansion
=====================
Expands a month into the ordered list of weekdays that are not excluded.
"""
import calendar
from datetime import date
from typing import Iterable, List, Set, Union

from duty_rota.utils.dates import date_key
from duty_rota.utils.logging_setup import get_logger, log_function_call

logger = get_logger("duty_rota.engine.workdays")


def normalize_excluded(excluded_dates: Iterable[Union[str, date]]) -> Set[str]:
    """Coerce excluded dates (keys or dates) to a set of canonical keys."""
    return {date_key(d) for d in (excluded_dates or ())}


@log_function_call
def working_days(
    year: int,
    month_index: int,
    excluded_dates: Iterable[Union[str, date]] = (),
) -> List[date]:
    """
    List the working days of a month.

    Args:
        year: Calendar year
        month_index: Zero-based month (0 = January)
        excluded_dates: Canonical ``YYYY-MM-DD`` keys to skip (bank holidays)

    Returns:
        Ascending list of Mon-Fri dates not in ``excluded_dates``.
        May be empty.
    """
    if not 0 <= month_index <= 11:
        raise ValueError(f"month_index must be 0-11, got {month_index}")

    excluded = normalize_excluded(excluded_dates)
    month = month_index + 1
    _, days_in_month = calendar.monthrange(year, month)

    days = []
    for day_num in range(1, days_in_month + 1):
        d = date(year, month, day_num)
        if d.weekday() < 5 and date_key(d) not in excluded:
            days.append(d)

    logger.debug(f"{year}-{month:02d}: {len(days)} working days ({len(excluded)} excluded keys)")
    return days
