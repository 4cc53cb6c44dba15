"""Generation facade: calendar, roster snapshot, assignment and validation in one call."""
import random
from datetime import date
from typing import Iterable, Optional, Union

from duty_rota.engine.assigner import assign_rota
from duty_rota.engine.validation import validate_rota
from duty_rota.engine.workdays import normalize_excluded, working_days
from duty_rota.models.assignment import Rota
from duty_rota.models.config import RotaConfig
from duty_rota.roster import Roster
from duty_rota.utils.logging_setup import get_logger

logger = get_logger("duty_rota.engine.generate")


def generate_rota(
    roster: Roster,
    year: int,
    month_index: int,
    excluded_dates: Iterable[Union[str, date]] = (),
    config: Optional[RotaConfig] = None,
    rng: Optional[random.Random] = None,
    holiday_warning: Optional[str] = None,
) -> Rota:
    """
    Generate the rota for one month.

    Args:
        roster: Employees and their unavailability (read once, at start)
        year: Calendar year
        month_index: Zero-based month (0 = January)
        excluded_dates: Bank holiday keys (``YYYY-MM-DD``) to skip
        config: Generator configuration (uses defaults if None)
        rng: Random generator for tie-breaking and shuffling
        holiday_warning: Holiday feed warning to carry on the result

    Returns:
        A new Rota with one entry per working day
    """
    config = config or RotaConfig()
    excluded = frozenset(normalize_excluded(excluded_dates))
    snapshot = roster.snapshot()

    logger.info(
        f"Generating rota for {month_index + 1:02d}/{year}: "
        f"{len(snapshot.employees)} employees, {len(excluded)} excluded dates"
    )
    if not snapshot.employees:
        logger.warning("No employees on the roster - every day will be unassigned")

    days = working_days(year, month_index, excluded)
    entries = assign_rota(days, snapshot.employees, snapshot.availability, config=config, rng=rng)

    rota = Rota(
        year=year,
        month_index=month_index,
        entries=entries,
        employees=snapshot.employees,
        excluded_dates=excluded,
        seed=config.seed,
        holiday_warning=holiday_warning,
    )

    validation = validate_rota(rota, snapshot.availability, config.max_assignments_per_employee)
    if validation.unassigned_days:
        logger.warning(f"{validation.unassigned_days} working day(s) left unassigned")
    if validation.adjacent_repeats:
        logger.warning(f"{validation.adjacent_repeats} back-to-back assignment(s) from the fallback")
    return rota
