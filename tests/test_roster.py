"""Tests for the employee roster."""
from datetime import date

import pytest

from duty_rota.errors import DuplicateEmployee, UnknownEmployee
from duty_rota.models.unavailability import DateRange
from duty_rota.roster import Roster


class TestRosterMembership:
    def test_add_preserves_order(self):
        roster = Roster()
        roster.add_employee("Charlie")
        roster.add_employee("Alice")
        assert roster.employees == ("Charlie", "Alice")
        assert len(roster) == 2
        assert "Alice" in roster

    def test_names_are_trimmed(self):
        roster = Roster()
        assert roster.add_employee("  Alice ") == "Alice"
        assert roster.employees == ("Alice",)

    def test_blank_name_ignored(self):
        roster = Roster()
        assert roster.add_employee("   ") is None
        assert roster.add_employee("") is None
        assert len(roster) == 0

    def test_duplicate_rejected(self):
        roster = Roster(["Alice"])
        with pytest.raises(DuplicateEmployee):
            roster.add_employee("Alice")

    def test_remove_discards_rule(self):
        roster = Roster(["Alice", "Bob"])
        roster.set_unavailability("Bob", weekdays=[1])
        roster.remove_employee("Bob")
        assert roster.employees == ("Alice",)
        assert "Bob" not in roster.availability

    def test_remove_unknown(self):
        with pytest.raises(UnknownEmployee, match="Zed is not on the roster"):
            Roster().remove_employee("Zed")


class TestRosterEditing:
    def test_edit_session_roundtrip(self):
        roster = Roster(["Alice"])
        draft = roster.start_edit("Alice")
        draft = draft.toggle_weekday(3).with_pending("2024-04-10", "2024-04-11").add_range()
        roster.save_edit("Alice", draft)

        rule = roster.rule_for("Alice")
        assert rule.weekdays == frozenset({3})
        assert rule.ranges == (DateRange.from_keys("2024-04-10", "2024-04-11"),)
        assert roster.describe("Alice") == "Unavailable: Wed 2024-04-10 to 2024-04-11"

    def test_unsaved_draft_has_no_effect(self):
        roster = Roster(["Alice"])
        roster.start_edit("Alice").toggle_weekday(1)
        assert roster.rule_for("Alice").is_empty
        assert roster.availability.is_available("Alice", date(2024, 4, 1))

    def test_edit_unknown_employee(self):
        with pytest.raises(UnknownEmployee):
            Roster().start_edit("Nobody")

    def test_snapshot_is_independent(self):
        roster = Roster(["Alice"])
        snap = roster.snapshot()
        roster.set_unavailability("Alice", weekdays=[1])
        roster.add_employee("Bob")
        assert snap.employees == ("Alice",)
        assert snap.availability.rule_for("Alice").is_empty
