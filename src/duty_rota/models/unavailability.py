"""Unavailability rules and the draft value object used while editing them."""
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Iterable, Optional, Tuple, Union

from duty_rota.errors import DuplicateRange, InvalidRange
from duty_rota.models.weekday import WEEKDAYS, Weekday, normalize_weekday
from duty_rota.utils.dates import date_key, parse_date_key


def _coerce_date(value: Union[date, str, None]) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidRange()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_date_key(value)
    except ValueError as e:
        raise InvalidRange() from e


@dataclass(frozen=True)
class DateRange:
    """Inclusive block of unavailable calendar dates."""
    start: date
    end: date

    def __post_init__(self):
        # Accept canonical keys as well as dates
        object.__setattr__(self, "start", _coerce_date(self.start))
        object.__setattr__(self, "end", _coerce_date(self.end))
        if self.start > self.end:
            raise InvalidRange()

    @classmethod
    def from_keys(cls, start: Optional[str], end: Optional[str]) -> "DateRange":
        """Build a range from ``YYYY-MM-DD`` inputs. Raises InvalidRange."""
        return cls(_coerce_date(start), _coerce_date(end))

    @property
    def start_key(self) -> str:
        return date_key(self.start)

    @property
    def end_key(self) -> str:
        return date_key(self.end)

    @property
    def key_pair(self) -> Tuple[str, str]:
        return self.start_key, self.end_key

    def contains(self, day: Union[date, str]) -> bool:
        """True if ``day`` falls within the range (both ends inclusive)."""
        key = date_key(day)
        return self.start_key <= key <= self.end_key

    def __str__(self) -> str:
        return f"{self.start_key} to {self.end_key}"

    def to_dict(self) -> dict:
        return {"start": self.start_key, "end": self.end_key}

    @classmethod
    def from_dict(cls, d: dict) -> "DateRange":
        return cls.from_keys(d.get("start"), d.get("end"))


def _normalize_weekdays(weekdays: Iterable[Union[int, str]]) -> frozenset:
    return frozenset(normalize_weekday(d) for d in weekdays)


@dataclass(frozen=True)
class UnavailabilityRule:
    """Weekdays and date ranges on which an employee cannot be rostered."""
    weekdays: frozenset = frozenset()
    ranges: Tuple[DateRange, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "weekdays", _normalize_weekdays(self.weekdays))
        ranges = tuple(self.ranges)
        for r in ranges:
            if not isinstance(r, DateRange):
                raise InvalidRange()
        object.__setattr__(self, "ranges", ranges)

    @property
    def is_empty(self) -> bool:
        return not self.weekdays and not self.ranges

    def blocks(self, day: date) -> bool:
        """True if the rule makes ``day`` unavailable."""
        if day.isoweekday() in self.weekdays:
            return True
        key = date_key(day)
        return any(r.start_key <= key <= r.end_key for r in self.ranges)

    def describe(self) -> str:
        """Short human summary used by the roster list."""
        if self.is_empty:
            return "No blocks"
        parts = [Weekday(d).label for d in sorted(self.weekdays)]
        text = ", ".join(parts)
        if self.ranges:
            ranges = " ".join(str(r) for r in self.ranges)
            text = f"{text} {ranges}" if text else ranges
        return f"Unavailable: {text}"

    def to_dict(self) -> dict:
        return {
            "weekdays": sorted(self.weekdays),
            "ranges": [r.to_dict() for r in self.ranges],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "UnavailabilityRule":
        return cls(
            weekdays=d.get("weekdays", ()),
            ranges=tuple(DateRange.from_dict(r) for r in d.get("ranges", ())),
        )


EMPTY_RULE = UnavailabilityRule()


@dataclass(frozen=True)
class DraftUnavailability:
    """
    Edit buffer for one employee's unavailability.

    Every edit returns a new draft; nothing is applied to the roster until
    the draft is saved. ``range_start`` / ``range_end`` hold the pending
    range inputs as entered (possibly blank).
    """
    weekdays: frozenset = frozenset()
    ranges: Tuple[DateRange, ...] = ()
    range_start: str = ""
    range_end: str = ""
    error: str = field(default="", compare=False)

    @classmethod
    def from_rule(cls, rule: Optional[UnavailabilityRule]) -> "DraftUnavailability":
        rule = rule or EMPTY_RULE
        return cls(weekdays=frozenset(rule.weekdays), ranges=tuple(rule.ranges))

    def toggle_weekday(self, day: Union[int, str]) -> "DraftUnavailability":
        d = normalize_weekday(day)
        weekdays = self.weekdays - {d} if d in self.weekdays else self.weekdays | {d}
        return replace(self, weekdays=frozenset(weekdays))

    def with_pending(self, start: Optional[str], end: Optional[str]) -> "DraftUnavailability":
        return replace(self, range_start=start or "", range_end=end or "")

    def add_range(self) -> "DraftUnavailability":
        """
        Commit the pending range.

        Raises:
            InvalidRange: start or end missing, or start after end
            DuplicateRange: identical range already in the draft
        """
        new_range = DateRange.from_keys(self.range_start, self.range_end)
        if any(r.key_pair == new_range.key_pair for r in self.ranges):
            raise DuplicateRange()
        return replace(
            self,
            ranges=self.ranges + (new_range,),
            range_start="",
            range_end="",
            error="",
        )

    def try_add_range(self) -> "DraftUnavailability":
        """Like add_range, but records the error message on the draft instead of raising."""
        try:
            return self.add_range()
        except (InvalidRange, DuplicateRange) as e:
            return replace(self, error=str(e))

    def delete_range(self, index: int) -> "DraftUnavailability":
        ranges = tuple(r for i, r in enumerate(self.ranges) if i != index)
        return replace(self, ranges=ranges)

    def clear(self) -> "DraftUnavailability":
        return DraftUnavailability()

    def to_rule(self) -> UnavailabilityRule:
        return UnavailabilityRule(weekdays=self.weekdays, ranges=self.ranges)


__all__ = [
    "DateRange",
    "UnavailabilityRule",
    "DraftUnavailability",
    "EMPTY_RULE",
    "WEEKDAYS",
]
