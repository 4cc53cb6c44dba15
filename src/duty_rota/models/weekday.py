"""Weekday definitions for unavailability rules."""
from enum import IntEnum
from typing import Union


class Weekday(IntEnum):
    """Working weekdays, numbered like ``date.isoweekday()``."""
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5

    @property
    def label(self) -> str:
        """Short display label (Mon, Tue, ...)."""
        return self.name.capitalize()

    @classmethod
    def from_value(cls, value: Union[int, str]) -> "Weekday":
        """Parse a weekday from an int (1-5) or a name/abbreviation."""
        if isinstance(value, bool):
            raise ValueError(f"Invalid weekday: {value!r}")
        if isinstance(value, int):
            return cls(value)
        key = str(value).strip().lower()
        if key.isdigit():
            return cls(int(key))
        if key in DAY_ALIASES:
            return DAY_ALIASES[key]
        raise ValueError(f"Invalid weekday: {value!r}")


WEEKDAYS = list(Weekday)
WEEKDAY_LABELS = [d.label for d in WEEKDAYS]

DAY_ALIASES = {
    "mon": Weekday.MON, "monday": Weekday.MON,
    "tue": Weekday.TUE, "tues": Weekday.TUE, "tuesday": Weekday.TUE,
    "wed": Weekday.WED, "wednesday": Weekday.WED,
    "thu": Weekday.THU, "thur": Weekday.THU, "thurs": Weekday.THU, "thursday": Weekday.THU,
    "fri": Weekday.FRI, "friday": Weekday.FRI,
}


def normalize_weekday(value: Union[int, str]) -> int:
    """Normalize a weekday to its integer code (Mon=1..Fri=5)."""
    return int(Weekday.from_value(value))
