"""Per-employee availability lookup."""
from datetime import date
from typing import Dict, Iterable, Iterator, Optional, Union

from duty_rota.models.unavailability import EMPTY_RULE, DateRange, UnavailabilityRule


class AvailabilityIndex:
    """
    Unavailability rules keyed by employee name.

    Employees without a rule are fully available. Ranges are validated when
    they are built (see ``DateRange``), so the index trusts them.
    """

    def __init__(self, rules: Optional[Dict[str, UnavailabilityRule]] = None):
        self._rules: Dict[str, UnavailabilityRule] = dict(rules or {})

    def set_unavailability(
        self,
        employee: str,
        weekdays: Iterable[Union[int, str]] = (),
        ranges: Iterable[DateRange] = (),
    ) -> UnavailabilityRule:
        """Replace the employee's rule wholesale."""
        rule = UnavailabilityRule(weekdays=frozenset(weekdays), ranges=tuple(ranges))
        self._rules[employee] = rule
        return rule

    def set_rule(self, employee: str, rule: UnavailabilityRule) -> None:
        self._rules[employee] = rule

    def rule_for(self, employee: str) -> UnavailabilityRule:
        return self._rules.get(employee, EMPTY_RULE)

    def remove(self, employee: str) -> None:
        self._rules.pop(employee, None)

    def is_available(self, employee: str, day: date) -> bool:
        """False if the day's weekday or date is blocked for the employee."""
        rule = self._rules.get(employee)
        if rule is None:
            return True
        return not rule.blocks(day)

    def copy(self) -> "AvailabilityIndex":
        # Rules are immutable, a shallow copy is a full snapshot
        return AvailabilityIndex(self._rules)

    def __contains__(self, employee: str) -> bool:
        return employee in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def to_dict(self) -> Dict[str, dict]:
        return {name: rule.to_dict() for name, rule in self._rules.items()}

    @classmethod
    def from_dict(cls, d: Dict[str, dict]) -> "AvailabilityIndex":
        return cls({name: UnavailabilityRule.from_dict(r) for name, r in d.items()})
