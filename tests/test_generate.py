"""Tests for the generation facade."""
import random
from datetime import date

import pytest

from duty_rota import generate_rota
from duty_rota.models.config import RotaConfig
from duty_rota.roster import Roster


class TestGenerateRota:
    def test_april_with_bank_holiday(self, sample_roster, default_config):
        rota = generate_rota(sample_roster, 2024, 3, ["2024-04-01"], config=default_config)
        assert len(rota) == 21
        assert date(2024, 4, 1) not in rota.days
        assert rota.excluded_dates == frozenset({"2024-04-01"})
        assert rota.seed == 42
        assert rota.month_name == "April"

    def test_respects_unavailability(self, sample_roster, default_config):
        rota = generate_rota(sample_roster, 2024, 3, config=default_config)
        for entry in rota:
            if entry.employee == "Bob":
                assert entry.day.isoweekday() != 1
            if entry.employee == "Diana":
                assert entry.day.isoweekday() != 5

    def test_every_day_covered_with_full_team(self, sample_roster, default_config):
        rota = generate_rota(sample_roster, 2024, 3, config=default_config)
        assert rota.unassigned_days == []

    def test_empty_roster(self):
        rota = generate_rota(Roster(), 2024, 3, rng=random.Random(0))
        assert len(rota) == 22
        assert len(rota.unassigned_days) == 22
        assert rota.employees == ()

    def test_snapshot_isolated_from_later_edits(self, sample_roster, default_config):
        rota = generate_rota(sample_roster, 2024, 3, config=default_config)
        sample_roster.add_employee("Frank")
        sample_roster.remove_employee("Alice")
        assert rota.employees == ("Alice", "Bob", "Charlie", "Diana", "Eve")

    def test_same_seed_same_rota(self, sample_roster):
        cfg = RotaConfig(seed=7)
        a = generate_rota(sample_roster, 2024, 3, config=cfg)
        b = generate_rota(sample_roster, 2024, 3, config=cfg)
        assert a.entries == b.entries

    def test_holiday_warning_carried(self, sample_roster, default_config):
        rota = generate_rota(
            sample_roster, 2024, 3, config=default_config,
            holiday_warning="Failed to load bank holidays",
        )
        assert rota.holiday_warning == "Failed to load bank holidays"

    def test_invalid_month(self, sample_roster):
        with pytest.raises(ValueError):
            generate_rota(sample_roster, 2024, 12)

    def test_bad_excluded_key(self, sample_roster):
        with pytest.raises(ValueError):
            generate_rota(sample_roster, 2024, 3, ["April 1st"])
