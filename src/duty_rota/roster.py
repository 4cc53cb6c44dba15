"""Employee roster and per-employee unavailability editing."""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from duty_rota.engine.availability import AvailabilityIndex
from duty_rota.errors import DuplicateEmployee, UnknownEmployee
from duty_rota.models.unavailability import (
    DateRange,
    DraftUnavailability,
    UnavailabilityRule,
)
from duty_rota.utils.logging_setup import get_logger

logger = get_logger("duty_rota.roster")


@dataclass(frozen=True)
class RosterSnapshot:
    """Read-only copy of a roster taken at the start of a generation run."""
    employees: Tuple[str, ...]
    availability: AvailabilityIndex


class Roster:
    """Ordered list of unique employee names with their unavailability rules."""

    def __init__(self, employees: Iterable[str] = ()):
        self._employees: List[str] = []
        self.availability = AvailabilityIndex()
        for name in employees:
            self.add_employee(name)

    @property
    def employees(self) -> Tuple[str, ...]:
        return tuple(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, name: str) -> bool:
        return name in self._employees

    def __iter__(self) -> Iterator[str]:
        return iter(self.employees)

    def add_employee(self, name: str) -> Optional[str]:
        """
        Add an employee by display name.

        Blank names are ignored and return None.

        Raises:
            DuplicateEmployee: name already on the roster
        """
        name = str(name or "").strip()
        if not name:
            return None
        if name in self._employees:
            raise DuplicateEmployee(f"{name} is already on the roster")
        self._employees.append(name)
        logger.debug(f"Added employee {name}")
        return name

    def remove_employee(self, name: str) -> None:
        """Remove an employee and discard their unavailability rule."""
        self._require(name)
        self._employees.remove(name)
        self.availability.remove(name)
        logger.debug(f"Removed employee {name}")

    def rule_for(self, name: str) -> UnavailabilityRule:
        return self.availability.rule_for(name)

    def set_unavailability(
        self,
        name: str,
        weekdays: Iterable[Union[int, str]] = (),
        ranges: Iterable[DateRange] = (),
    ) -> UnavailabilityRule:
        self._require(name)
        return self.availability.set_unavailability(name, weekdays, ranges)

    def start_edit(self, name: str) -> DraftUnavailability:
        """Open an edit session seeded with the employee's current rule."""
        self._require(name)
        return DraftUnavailability.from_rule(self.rule_for(name))

    def save_edit(self, name: str, draft: DraftUnavailability) -> UnavailabilityRule:
        """Apply a draft, replacing the employee's rule."""
        self._require(name)
        rule = draft.to_rule()
        self.availability.set_rule(name, rule)
        logger.debug(f"Saved unavailability for {name}: {rule.to_dict()}")
        return rule

    def describe(self, name: str) -> str:
        return self.rule_for(name).describe()

    def snapshot(self) -> RosterSnapshot:
        return RosterSnapshot(employees=self.employees, availability=self.availability.copy())

    def _require(self, name: str) -> None:
        if name not in self._employees:
            raise UnknownEmployee(f"{name} is not on the roster")
