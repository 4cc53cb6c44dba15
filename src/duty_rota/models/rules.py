"""
Business Rules and Constants
============================
Central source of truth for rota limits, labels and external defaults.
"""
from dataclasses import dataclass, field
from typing import List

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Soft fairness cap, enforced in the primary pass only
MAX_ASSIGNMENTS_PER_EMPLOYEE = 3

UNASSIGNED_LABEL = "-"
CSV_HEADER = ["Date", "Assigned Person"]

DEFAULT_HOLIDAYS_URL = "https://www.gov.uk/bank-holidays.json"
DEFAULT_DIVISION = "england-and-wales"
HOLIDAY_DIVISIONS = ["england-and-wales", "scotland", "northern-ireland"]


@dataclass
class RulesConfig:
    """Business rules constants."""

    max_assignments_per_employee: int = MAX_ASSIGNMENTS_PER_EMPLOYEE
    unassigned_label: str = UNASSIGNED_LABEL
    month_names: List[str] = field(default_factory=lambda: list(MONTH_NAMES))

    # Holiday feed
    holidays_url: str = DEFAULT_HOLIDAYS_URL
    holiday_division: str = DEFAULT_DIVISION
    holiday_timeout_seconds: int = 10

    # UI
    unassigned_color: str = "#FFC7CE"
    header_color: str = "#DDEEFF"


RULES = RulesConfig()
