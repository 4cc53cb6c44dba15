"""
Validation and Statistics
=========================
Re-check a generated rota against its constraints and count assignments.
"""
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional

from duty_rota.engine.availability import AvailabilityIndex
from duty_rota.models.assignment import Rota
from duty_rota.models.rules import RULES
from duty_rota.utils.logging_setup import get_logger

logger = get_logger("duty_rota.engine.validation")


@dataclass
class Violation:
    """Single violation with details."""
    type: str  # "unassigned", "adjacent_repeat", "unavailable", "over_cap"
    severity: str  # "critical", "warning", "info"
    day: date
    message: str
    employee: str = ""


@dataclass
class ValidationResult:
    """Validation metrics for a rota."""
    unassigned_days: int = 0           # Days nobody could take
    adjacent_repeats: int = 0          # Same employee on consecutive calendar days
    unavailable_assignments: int = 0   # Employee placed on a blocked day
    over_cap: int = 0                  # Employees above the soft cap (informational)

    violations: List[Violation] = field(default_factory=list)

    def add_violation(self, v: Violation):
        self.violations.append(v)

    def as_dict(self) -> Dict[str, int]:
        return {
            "unassigned_days": self.unassigned_days,
            "adjacent_repeats": self.adjacent_repeats,
            "unavailable_assignments": self.unavailable_assignments,
            "over_cap": self.over_cap,
        }

    @property
    def has_critical_issues(self) -> bool:
        """An employee was placed on a day they are unavailable."""
        return self.unavailable_assignments > 0

    def get_critical_violations(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "critical"]

    def get_warnings(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "warning"]


def assignment_counts(rota: Rota) -> Dict[str, int]:
    """Days assigned per employee, in roster order (zero for unplaced employees)."""
    counts = {name: 0 for name in rota.employees}
    for entry in rota.entries:
        if entry.employee is not None:
            counts[entry.employee] = counts.get(entry.employee, 0) + 1
    return counts


def validate_rota(
    rota: Rota,
    availability: Optional[AvailabilityIndex] = None,
    cap: int = RULES.max_assignments_per_employee,
) -> ValidationResult:
    """
    Validate a rota and count violations.

    Args:
        rota: The generated rota
        availability: Rules the rota was generated against
        cap: Soft per-employee cap to report against

    Returns:
        ValidationResult with all metrics
    """
    availability = availability or AvailabilityIndex()
    result = ValidationResult()
    by_day = rota.as_mapping()

    for entry in rota.entries:
        day, emp = entry.day, entry.employee

        if emp is None:
            result.unassigned_days += 1
            result.add_violation(Violation(
                type="unassigned",
                severity="warning",
                day=day,
                message=f"{day.isoformat()}: no employee available",
            ))
            continue

        if not availability.is_available(emp, day):
            result.unavailable_assignments += 1
            result.add_violation(Violation(
                type="unavailable",
                severity="critical",
                day=day,
                employee=emp,
                message=f"{day.isoformat()}: {emp} is unavailable",
            ))

        if by_day.get(day - timedelta(days=1)) == emp:
            result.adjacent_repeats += 1
            result.add_violation(Violation(
                type="adjacent_repeat",
                severity="warning",
                day=day,
                employee=emp,
                message=f"{day.isoformat()}: {emp} also on duty the day before",
            ))

    for emp, count in assignment_counts(rota).items():
        if count > cap:
            result.over_cap += 1
            result.add_violation(Violation(
                type="over_cap",
                severity="info",
                day=rota.entries[0].day,
                employee=emp,
                message=f"{emp}: {count} days (cap {cap})",
            ))

    logger.debug(f"Validation: {result.as_dict()}")
    return result
