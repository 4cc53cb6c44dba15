"""
Error Taxonomy
==============
Exceptions raised at the editing and I/O boundaries.

Nothing raised here is fatal to rota generation: unassignable days are
represented as ``None`` entries, and holiday fetch failures are recovered
by generating against an empty excluded-dates set.
"""


class RotaError(Exception):
    """Base class for all duty rota errors."""


class InvalidRange(RotaError, ValueError):
    """A date range with a missing bound or start after end."""

    def __init__(self, message: str = "Invalid date range"):
        super().__init__(message)


class DuplicateRange(RotaError, ValueError):
    """The same range was added twice for one employee."""

    def __init__(self, message: str = "Range already selected"):
        super().__init__(message)


class HolidayFetchFailure(RotaError):
    """The bank holiday source was unreachable or returned a malformed payload."""

    def __init__(self, message: str = "Failed to load bank holidays"):
        super().__init__(message)


class DuplicateEmployee(RotaError, ValueError):
    """An employee with the same name is already on the roster."""


class UnknownEmployee(RotaError, KeyError):
    """The named employee is not on the roster."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
