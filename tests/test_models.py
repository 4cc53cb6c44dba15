"""Tests for data models."""
from datetime import date, datetime

import pytest

from duty_rota.errors import InvalidRange
from duty_rota.models.assignment import Rota, RotaEntry
from duty_rota.models.config import RotaConfig
from duty_rota.models.rules import MONTH_NAMES, RULES, UNASSIGNED_LABEL
from duty_rota.models.unavailability import DateRange, UnavailabilityRule
from duty_rota.models.weekday import WEEKDAY_LABELS, WEEKDAYS, Weekday, normalize_weekday


class TestWeekday:
    """Tests for Weekday enum."""

    def test_weekday_values(self):
        """Weekday codes match isoweekday numbering."""
        assert Weekday.MON == 1
        assert Weekday.FRI == 5
        assert len(WEEKDAYS) == 5

    def test_labels(self):
        assert WEEKDAY_LABELS == ["Mon", "Tue", "Wed", "Thu", "Fri"]
        assert Weekday.WED.label == "Wed"

    def test_normalize_weekday(self):
        """Test parsing weekdays from various formats."""
        assert normalize_weekday(1) == 1
        assert normalize_weekday("3") == 3
        assert normalize_weekday("mon") == 1
        assert normalize_weekday("Thursday") == 4
        assert normalize_weekday(" FRI ") == 5

    @pytest.mark.parametrize("bad", [0, 6, 7, "sat", "sunday", "", True])
    def test_normalize_weekday_rejects_weekend_and_garbage(self, bad):
        with pytest.raises(ValueError):
            normalize_weekday(bad)


class TestDateRange:
    """Tests for DateRange."""

    def test_from_keys(self):
        r = DateRange.from_keys("2024-04-01", "2024-04-05")
        assert r.start == date(2024, 4, 1)
        assert r.end == date(2024, 4, 5)
        assert r.key_pair == ("2024-04-01", "2024-04-05")
        assert str(r) == "2024-04-01 to 2024-04-05"

    def test_single_day_range(self):
        r = DateRange.from_keys("2024-04-01", "2024-04-01")
        assert r.contains(date(2024, 4, 1))
        assert not r.contains(date(2024, 4, 2))

    def test_contains_is_inclusive(self):
        r = DateRange(date(2024, 4, 10), date(2024, 4, 12))
        assert r.contains(date(2024, 4, 10))
        assert r.contains(date(2024, 4, 12))
        assert r.contains("2024-04-11")
        assert not r.contains(date(2024, 4, 9))
        assert not r.contains(date(2024, 4, 13))

    def test_start_after_end_rejected(self):
        with pytest.raises(InvalidRange, match="Invalid date range"):
            DateRange.from_keys("2024-04-05", "2024-04-01")

    @pytest.mark.parametrize("start,end", [
        ("", "2024-04-01"),
        ("2024-04-01", ""),
        (None, "2024-04-01"),
        ("2024-04-01", None),
        ("not-a-date", "2024-04-01"),
    ])
    def test_missing_or_bad_bounds_rejected(self, start, end):
        with pytest.raises(InvalidRange):
            DateRange.from_keys(start, end)

    def test_invalid_range_is_value_error(self):
        """Callers catching ValueError also see range errors."""
        with pytest.raises(ValueError):
            DateRange.from_keys("2024-05-01", "2024-04-01")

    def test_datetime_bounds_truncated_to_dates(self):
        r = DateRange(datetime(2024, 4, 1, 9, 30), date(2024, 4, 2))
        assert r.start == date(2024, 4, 1)
        assert type(r.start) is date
        assert r.contains(date(2024, 4, 1))

    def test_datetime_bounds_inverted(self):
        with pytest.raises(InvalidRange):
            DateRange(datetime(2024, 4, 3, 8), datetime(2024, 4, 1, 17))


class TestUnavailabilityRule:
    """Tests for UnavailabilityRule."""

    def test_default_is_empty(self):
        rule = UnavailabilityRule()
        assert rule.is_empty
        assert not rule.blocks(date(2024, 4, 1))
        assert rule.describe() == "No blocks"

    def test_weekday_block(self):
        rule = UnavailabilityRule(weekdays=frozenset([1, 3]))
        assert rule.blocks(date(2024, 4, 1))  # Monday
        assert not rule.blocks(date(2024, 4, 2))  # Tuesday
        assert rule.blocks(date(2024, 4, 3))  # Wednesday

    def test_weekday_names_normalized(self):
        rule = UnavailabilityRule(weekdays=["mon", "fri"])
        assert rule.weekdays == frozenset({1, 5})

    def test_range_block(self):
        rule = UnavailabilityRule(ranges=(DateRange.from_keys("2024-04-08", "2024-04-09"),))
        assert rule.blocks(date(2024, 4, 8))
        assert rule.blocks(date(2024, 4, 9))
        assert not rule.blocks(date(2024, 4, 10))

    def test_describe(self):
        rule = UnavailabilityRule(
            weekdays=frozenset([3, 1]),
            ranges=(DateRange.from_keys("2024-04-01", "2024-04-05"),),
        )
        assert rule.describe() == "Unavailable: Mon, Wed 2024-04-01 to 2024-04-05"

    def test_dict_roundtrip(self):
        rule = UnavailabilityRule(
            weekdays=frozenset([2]),
            ranges=(DateRange.from_keys("2024-04-01", "2024-04-05"),),
        )
        d = rule.to_dict()
        assert d == {"weekdays": [2], "ranges": [{"start": "2024-04-01", "end": "2024-04-05"}]}
        assert UnavailabilityRule.from_dict(d) == rule

    def test_non_range_objects_rejected(self):
        with pytest.raises(InvalidRange):
            UnavailabilityRule(ranges=({"start": "2024-04-01", "end": "2024-04-02"},))


class TestRota:
    """Tests for Rota and RotaEntry."""

    def test_entry_display(self):
        assigned = RotaEntry(date(2024, 4, 1), "Alice")
        empty = RotaEntry(date(2024, 4, 2))
        assert assigned.display_date == "01/04/2024"
        assert assigned.display_employee == "Alice"
        assert empty.display_employee == UNASSIGNED_LABEL
        assert not empty.is_assigned
        assert assigned.key == "2024-04-01"

    def test_empty_rota(self):
        rota = Rota(year=2024, month_index=3)
        assert len(rota) == 0
        assert rota.month_name == "April"

    def test_rota_summary(self):
        rota = Rota(
            year=2024,
            month_index=3,
            entries=(RotaEntry(date(2024, 4, 1), "Alice"), RotaEntry(date(2024, 4, 2))),
            employees=("Alice", "Bob"),
            excluded_dates=frozenset({"2024-04-03"}),
            seed=9,
        )
        summary = rota.summary()
        assert summary["month"] == "April 2024"
        assert summary["working_days"] == 2
        assert summary["assigned"] == 1
        assert summary["unassigned"] == 1
        assert summary["employees"] == 2
        assert summary["excluded_dates"] == 1
        assert rota.unassigned_days == [date(2024, 4, 2)]
        assert rota.employee_on(date(2024, 4, 1)) == "Alice"


class TestRotaConfig:
    """Tests for RotaConfig dataclass."""

    def test_default_config(self):
        cfg = RotaConfig()
        assert cfg.max_assignments_per_employee == 3
        assert cfg.seed is None
        assert cfg.fetch_holidays is True
        assert cfg.holidays_url == RULES.holidays_url
        assert cfg.holiday_division == "england-and-wales"

    def test_config_serialization(self):
        cfg = RotaConfig(max_assignments_per_employee=5, seed=11)
        d = cfg.to_dict()
        assert d["max_assignments_per_employee"] == 5
        assert d["seed"] == 11

        cfg2 = RotaConfig.from_dict({**d, "unknown": 1})
        assert cfg2.max_assignments_per_employee == 5
        assert cfg2.seed == 11
        assert not hasattr(cfg2, "unknown")

    def test_month_names(self):
        assert len(MONTH_NAMES) == 12
        assert MONTH_NAMES[0] == "January"
