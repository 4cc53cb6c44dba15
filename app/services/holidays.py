"""
Holiday Service
===============
Cached access to the bank holiday feed for the web UI.
"""
import streamlit as st

from duty_rota.io.holidays import HolidayFetchResult, fetch_excluded_dates
from duty_rota.models.rules import RULES


@st.cache_data(ttl=6 * 3600, show_spinner=False)
def _cached_fetch(url: str, division: str) -> HolidayFetchResult:
    return fetch_excluded_dates(url, division)


class HolidayService:
    """Loads excluded dates once per session and division."""

    @staticmethod
    def load(division: str = RULES.holiday_division, enabled: bool = True) -> HolidayFetchResult:
        if not enabled:
            return HolidayFetchResult()
        result = _cached_fetch(RULES.holidays_url, division)
        if result.warning:
            # Do not keep a failed fetch in the cache
            _cached_fetch.clear()
        return result
