# duty_rota/models - Data models for the rota generator
from .assignment import Rota, RotaEntry
from .config import RotaConfig
from .rules import MONTH_NAMES, RULES, UNASSIGNED_LABEL
from .unavailability import DateRange, DraftUnavailability, UnavailabilityRule
from .weekday import WEEKDAY_LABELS, WEEKDAYS, Weekday

__all__ = [
    "Rota", "RotaEntry",
    "RotaConfig",
    "DateRange", "UnavailabilityRule", "DraftUnavailability",
    "Weekday", "WEEKDAYS", "WEEKDAY_LABELS",
    "RULES", "MONTH_NAMES", "UNASSIGNED_LABEL",
]
