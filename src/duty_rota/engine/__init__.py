# duty_rota/engine - Calendar expansion, availability and assignment
from .availability import AvailabilityIndex
from .assigner import AssignmentContext, assign_rota
from .generate import generate_rota
from .validation import ValidationResult, Violation, assignment_counts, validate_rota
from .workdays import working_days

__all__ = [
    "working_days",
    "AvailabilityIndex",
    "assign_rota",
    "AssignmentContext",
    "generate_rota",
    "validate_rota",
    "assignment_counts",
    "ValidationResult",
    "Violation",
]
