from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from typing import Dict, List, Tuple

from pydantic import ValidationError

from duty_rota.engine.generate import generate_rota
from duty_rota.engine.validation import assignment_counts
from duty_rota.errors import DuplicateRange, RotaError
from duty_rota.io.csv_export import export_rota_to_csv, format_rota_rows, suggested_filename
from duty_rota.io.holidays import fetch_excluded_dates
from duty_rota.models.rules import MONTH_NAMES, RULES
from duty_rota.models.unavailability import DateRange
from duty_rota.models.validated import RangeInput, ValidatedRotaConfig
from duty_rota.models.weekday import normalize_weekday
from duty_rota.roster import Roster
from duty_rota.utils.logging_setup import init_logging


def _parse_month(value: str) -> int:
    """Month as 1-12 or a (prefix of a) month name; returns the zero-based index."""
    v = value.strip()
    if v.isdigit():
        m = int(v)
        if 1 <= m <= 12:
            return m - 1
        raise argparse.ArgumentTypeError(f"month must be 1-12, got {v}")
    for i, name in enumerate(MONTH_NAMES):
        if len(v) >= 3 and name.lower().startswith(v.lower()):
            return i
    raise argparse.ArgumentTypeError(f"unknown month: {value}")


def _split_owner(spec: str, flag: str) -> Tuple[str, str]:
    name, sep, rest = spec.partition(":")
    if not sep or not name.strip() or not rest.strip():
        raise RotaError(f"{flag} expects NAME:VALUE, got {spec!r}")
    return name.strip(), rest.strip()


def _build_roster(args: argparse.Namespace) -> Roster:
    roster = Roster(args.employee or [])

    weekdays: Dict[str, set] = {}
    for spec in args.unavailable or []:
        name, days = _split_owner(spec, "--unavailable")
        try:
            parsed = {normalize_weekday(d) for d in days.split(",") if d.strip()}
        except ValueError as e:
            raise RotaError(str(e)) from e
        weekdays.setdefault(name, set()).update(parsed)

    ranges: Dict[str, List[DateRange]] = {}
    for spec in args.range or []:
        name, rest = _split_owner(spec, "--range")
        start, _, end = rest.partition(":")
        r = RangeInput.parse(start, end)
        if any(x.key_pair == r.key_pair for x in ranges.get(name, [])):
            raise DuplicateRange()
        ranges.setdefault(name, []).append(r)

    for name in dict.fromkeys([*weekdays, *ranges]):
        if name not in roster:
            roster.add_employee(name)
        roster.set_unavailability(name, weekdays.get(name, ()), ranges.get(name, ()))
    return roster


def main(argv: list[str] | None = None) -> int:
    today = date.today()
    p = argparse.ArgumentParser(description="Generate a monthly duty rota")
    p.add_argument("--year", type=int, default=today.year, help="Year (default: current)")
    p.add_argument("--month", type=_parse_month, default=today.month - 1,
                   help="Month as 1-12 or name (default: current)")
    p.add_argument("-e", "--employee", action="append", help="Employee name (repeatable)")
    p.add_argument("--unavailable", action="append", metavar="NAME:DAYS",
                   help="Weekdays off, e.g. Alice:1,3 or Alice:mon,wed")
    p.add_argument("--range", action="append", metavar="NAME:START:END",
                   help="Unavailable dates, e.g. Alice:2024-04-01:2024-04-05")
    p.add_argument("--exclude", action="append", metavar="YYYY-MM-DD",
                   help="Extra excluded date (repeatable)")
    p.add_argument("--no-holidays", dest="fetch_holidays", action="store_false",
                   help="Skip the bank holiday feed")
    p.add_argument("--holidays-url", default=RULES.holidays_url)
    p.add_argument("--division", default=RULES.holiday_division)
    p.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible rota")
    p.add_argument("--max-per-employee", type=int, default=RULES.max_assignments_per_employee)
    p.add_argument("-o", "--output", default=None,
                   help="CSV path ('-' for stdout, default: suggested filename)")
    p.add_argument("--json", dest="json_out", action="store_true", help="JSON output (rows + summary)")
    p.add_argument("-v", "--verbose", action="count", default=0)
    args = p.parse_args(argv)

    level = {0: "WARNING", 1: "INFO"}.get(args.verbose, "DEBUG")
    init_logging(level=level, log_file=None, stream=sys.stderr)

    try:
        config = ValidatedRotaConfig(
            max_assignments_per_employee=args.max_per_employee,
            seed=args.seed,
            fetch_holidays=args.fetch_holidays,
            holidays_url=args.holidays_url,
            holiday_division=args.division,
        ).to_dataclass()
    except ValidationError as e:
        print(f"error: invalid configuration: {e.errors()[0]['msg']}", file=sys.stderr)
        return 2

    try:
        roster = _build_roster(args)
        excluded = set(args.exclude or [])
    except RotaError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    warning = None
    if config.fetch_holidays:
        fetched = fetch_excluded_dates(config.holidays_url, config.holiday_division, config.holiday_timeout_seconds)
        excluded |= fetched.dates
        warning = fetched.warning
        if warning:
            print(f"warning: {warning}", file=sys.stderr)

    try:
        rota = generate_rota(roster, args.year, args.month, excluded, config=config, holiday_warning=warning)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json_out:
        print(json.dumps({
            "summary": rota.summary(),
            "counts": assignment_counts(rota),
            "rows": format_rota_rows(rota),
        }, ensure_ascii=False, indent=2))
        return 0

    output = args.output or suggested_filename(rota.year, rota.month_index)
    if output == "-":
        export_rota_to_csv(rota, sys.stdout)
    else:
        export_rota_to_csv(rota, output)
        print(f"Wrote {len(rota)} rows to {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
