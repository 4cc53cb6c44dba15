"""Rota result models."""
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from duty_rota.utils.dates import date_key, format_display_date

from .rules import MONTH_NAMES, UNASSIGNED_LABEL


@dataclass(frozen=True)
class RotaEntry:
    """One working day and the employee on duty (None when unassigned)."""
    day: date
    employee: Optional[str] = None

    @property
    def is_assigned(self) -> bool:
        return self.employee is not None

    @property
    def key(self) -> str:
        return date_key(self.day)

    @property
    def display_date(self) -> str:
        return format_display_date(self.day)

    @property
    def display_employee(self) -> str:
        return self.employee if self.employee is not None else UNASSIGNED_LABEL


@dataclass(frozen=True)
class Rota:
    """
    Snapshot of one generation run.

    Entries are in ascending date order, one per working day. A new run
    produces a new Rota; existing ones are never mutated.
    """
    year: int
    month_index: int
    entries: Tuple[RotaEntry, ...] = ()
    employees: Tuple[str, ...] = ()
    excluded_dates: FrozenSet[str] = frozenset()
    seed: Optional[int] = None
    holiday_warning: Optional[str] = None

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month_index]

    @property
    def days(self) -> List[date]:
        return [e.day for e in self.entries]

    @property
    def unassigned_days(self) -> List[date]:
        return [e.day for e in self.entries if not e.is_assigned]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def as_mapping(self) -> Dict[date, Optional[str]]:
        """Date -> employee (None when unassigned)."""
        return {e.day: e.employee for e in self.entries}

    def employee_on(self, day: date) -> Optional[str]:
        for e in self.entries:
            if e.day == day:
                return e.employee
        return None

    def summary(self) -> Dict[str, Any]:
        """Get summary dictionary for display."""
        assigned = sum(1 for e in self.entries if e.is_assigned)
        return {
            "month": f"{self.month_name} {self.year}",
            "working_days": len(self.entries),
            "assigned": assigned,
            "unassigned": len(self.entries) - assigned,
            "employees": len(self.employees),
            "excluded_dates": len(self.excluded_dates),
            "seed": self.seed,
        }
