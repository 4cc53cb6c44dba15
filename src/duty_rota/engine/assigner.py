"""
Rota Assignment
===============
Greedy two-pass placement of one employee per working day.

Algorithm:
    - Primary pass: shuffle the roster; each employee, in that order, takes
      the first free working day where they are available, did not work the
      previous calendar day and are under the cap. One day per employee.
    - Fallback pass: every day still free, in date order, gets a random pick
      among employees who are available and did not work the previous
      calendar day (cap ignored). If nobody qualifies, the first available
      employee in roster order is used; otherwise the day stays unassigned.

The previous calendar day is checked, not the previous working day: a
Monday only looks at Sunday, which is never assigned.
"""
import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from duty_rota.engine.availability import AvailabilityIndex
from duty_rota.models.assignment import RotaEntry
from duty_rota.models.config import RotaConfig
from duty_rota.utils.logging_setup import GenerationLogger, get_logger

logger = get_logger("duty_rota.engine.assigner")

# Shared process-level generator, used when no seed or RNG is supplied
_RNG = random.Random()


@dataclass
class AssignmentContext:
    """State for a single generation run, threaded through both passes."""
    days: List[date]
    roster: List[str]
    order: List[str]
    availability: AvailabilityIndex
    rng: random.Random
    cap: int
    assigned: Dict[date, Optional[str]] = field(default_factory=dict)
    counts: Dict[str, int] = field(default_factory=dict)

    def previous_assignment(self, day: date) -> Optional[str]:
        """Employee on duty the calendar day before ``day``, if any."""
        return self.assigned.get(day - timedelta(days=1))

    def place(self, employee: str, day: date) -> None:
        self.assigned[day] = employee
        self.counts[employee] = self.counts.get(employee, 0) + 1

    def is_free(self, day: date) -> bool:
        return self.assigned.get(day) is None


def _unique(employees: Sequence[str]) -> List[str]:
    seen = set()
    out = []
    for name in employees:
        if name not in seen:
            seen.add(name)
            out.append(name)
    return out


def _can_assign(
    ctx: AssignmentContext,
    employee: str,
    day: date,
    previous: Optional[str],
    enforce_cap: bool,
) -> bool:
    if not ctx.availability.is_available(employee, day):
        return False
    if enforce_cap and ctx.counts.get(employee, 0) >= ctx.cap:
        return False
    if employee == previous:
        return False
    return True


def primary_pass(ctx: AssignmentContext, log: Optional[GenerationLogger] = None) -> int:
    """Give each employee, in shuffled order, their first valid day. Returns days placed."""
    log = log or GenerationLogger(logger.name)
    placed = 0
    for employee in ctx.order:
        log.enter(employee)
        for day in ctx.days:
            if not ctx.is_free(day):
                continue
            if _can_assign(ctx, employee, day, ctx.previous_assignment(day), enforce_cap=True):
                ctx.place(employee, day)
                placed += 1
                log.exit(f"placed on {day.isoformat()}")
                break
        else:
            log.exit()
            log.step(f"{employee}: no valid day in primary pass")
    return placed


def fallback_pass(ctx: AssignmentContext, log: Optional[GenerationLogger] = None) -> int:
    """Fill the remaining days in date order. Returns days placed."""
    log = log or GenerationLogger(logger.name)
    placed = 0
    for day in ctx.days:
        if not ctx.is_free(day):
            continue
        log.enter(day.isoformat())
        previous = ctx.previous_assignment(day)
        eligible = [
            e for e in ctx.order
            if _can_assign(ctx, e, day, previous, enforce_cap=False)
        ]
        log.detail("eligible", eligible)
        if eligible:
            pick = ctx.rng.choice(eligible)
        else:
            # Adjacency relaxed; roster order keeps the choice deterministic
            pick = next(
                (e for e in ctx.roster if ctx.availability.is_available(e, day)),
                None,
            )
            if pick is not None:
                log.constraint("no-repeat", False, f"{day.isoformat()} relaxed for {pick}")

        if pick is None:
            ctx.assigned[day] = None
            log.exit()
            log.step(f"{day.isoformat()}: no available employee")
            continue

        ctx.place(pick, day)
        placed += 1
        log.exit(f"picked {pick}" if eligible else f"{pick} (adjacency relaxed)")
    return placed


def assign_rota(
    working_days: Sequence[date],
    employees: Sequence[str],
    availability: Optional[AvailabilityIndex] = None,
    config: Optional[RotaConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[RotaEntry, ...]:
    """
    Assign one employee (or nobody) to each working day.

    Args:
        working_days: Ascending working days of the month
        employees: Roster in display order; duplicate names are collapsed
        availability: Unavailability rules (None = everyone available)
        config: Generator configuration (uses defaults if None)
        rng: Random generator; overrides ``config.seed`` when given

    Returns:
        One RotaEntry per working day, in date order. Never raises for
        unplaceable days; those entries have ``employee=None``.
    """
    config = config or RotaConfig()
    if rng is None:
        rng = random.Random(config.seed) if config.seed is not None else _RNG

    roster = _unique(employees)
    order = list(roster)
    rng.shuffle(order)

    ctx = AssignmentContext(
        days=sorted(working_days),
        roster=roster,
        order=order,
        availability=availability or AvailabilityIndex(),
        rng=rng,
        cap=config.max_assignments_per_employee,
        counts={e: 0 for e in roster},
    )

    log = GenerationLogger(logger.name)
    log.phase("Primary pass")
    log.detail("order", order)
    first = primary_pass(ctx, log)

    log.phase("Fallback pass")
    second = fallback_pass(ctx, log)

    entries = tuple(RotaEntry(day=d, employee=ctx.assigned.get(d)) for d in ctx.days)
    unassigned = len(entries) - first - second
    logger.info(
        f"Assigned {first + second}/{len(entries)} days "
        f"(primary={first}, fallback={second}, unassigned={unassigned})"
    )
    return entries
