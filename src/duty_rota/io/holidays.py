"""
Bank Holiday Feed
=================
Fetch excluded dates from the GOV.UK bank holidays JSON feed.

Payload shape::

    {"england-and-wales": {"division": "...", "events": [{"date": "2024-01-01", ...}]}, ...}

``fetch_excluded_dates`` never raises: a failed fetch is reported as a
warning and generation proceeds with no excluded dates.
"""
import http.client
import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, FrozenSet, Optional

import certifi

from duty_rota.errors import HolidayFetchFailure
from duty_rota.models.rules import RULES
from duty_rota.utils.dates import date_key
from duty_rota.utils.logging_setup import get_logger

logger = get_logger("duty_rota.io.holidays")

USER_AGENT = "Mozilla/5.0 (DutyRota/0.1)"


@dataclass(frozen=True)
class HolidayFetchResult:
    """Excluded date keys plus a non-fatal warning when the fetch failed."""
    dates: FrozenSet[str] = frozenset()
    warning: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.warning is None


def parse_bank_holidays(payload: Any, division: str = RULES.holiday_division) -> FrozenSet[str]:
    """
    Extract canonical date keys for one division.

    A payload without the division yields an empty set, as the feed omits
    nothing else. Anything else malformed raises HolidayFetchFailure.
    """
    if not isinstance(payload, dict):
        raise HolidayFetchFailure("Bank holiday payload is not a JSON object")
    section = payload.get(division)
    if section is None:
        logger.warning(f"Division {division!r} missing from bank holiday feed")
        return frozenset()
    events = section.get("events") if isinstance(section, dict) else None
    if not isinstance(events, list):
        raise HolidayFetchFailure(f"No events list for {division!r}")

    dates = set()
    for event in events:
        raw = event.get("date") if isinstance(event, dict) else None
        try:
            dates.add(date_key(raw))
        except (TypeError, ValueError) as e:
            raise HolidayFetchFailure(f"Bad holiday date: {raw!r}") from e
    return frozenset(dates)


def fetch_bank_holidays(
    url: str = RULES.holidays_url,
    division: str = RULES.holiday_division,
    timeout: float = RULES.holiday_timeout_seconds,
) -> FrozenSet[str]:
    """
    Download and parse the holiday feed.

    Raises:
        HolidayFetchFailure: network error, bad JSON or unexpected shape
    """
    ctx = ssl.create_default_context(cafile=certifi.where())
    try:
        req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT, "Accept": "application/json"})
        with urllib.request.urlopen(req, context=ctx, timeout=timeout) as resp:
            data = resp.read()
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
        raise HolidayFetchFailure(f"Could not reach {url}: {e}") from e

    try:
        payload = json.loads(data.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise HolidayFetchFailure(f"Invalid JSON from {url}") from e

    dates = parse_bank_holidays(payload, division)
    logger.info(f"Loaded {len(dates)} bank holidays ({division})")
    return dates


def fetch_excluded_dates(
    url: str = RULES.holidays_url,
    division: str = RULES.holiday_division,
    timeout: float = RULES.holiday_timeout_seconds,
) -> HolidayFetchResult:
    """Fetch bank holidays, substituting an empty set on failure."""
    try:
        return HolidayFetchResult(dates=fetch_bank_holidays(url, division, timeout))
    except HolidayFetchFailure as e:
        logger.warning(f"Holiday fetch failed, continuing without exclusions: {e}")
        return HolidayFetchResult(dates=frozenset(), warning=str(HolidayFetchFailure()))
