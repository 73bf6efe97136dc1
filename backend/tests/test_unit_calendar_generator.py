"""Unit tests for calendar year generation."""

from datetime import date

import pytest

from shiftcal.core.exceptions import ConfigurationError
from shiftcal.services.calendar_generator import CalendarSnapshot, generate, regenerate
from shiftcal.services.event_store import Birthday, EventAnnotation
from shiftcal.services.shift_cycle import Shift, shift_for

GROUP_ONE = date(2025, 1, 30)


class TestGenerate:
    def test_covers_whole_year(self):
        records = generate(2025, GROUP_ONE, {}, {}, [])
        assert len(records) == 365
        assert records[0].day == date(2025, 1, 1)
        assert records[-1].day == date(2025, 12, 31)

    def test_leap_year(self):
        records = generate(2024, GROUP_ONE, {}, {}, [])
        assert len(records) == 366
        assert records[59].day == date(2024, 2, 29)

    def test_ascending_without_gaps(self):
        records = generate(2025, GROUP_ONE, {}, {}, [])
        for previous, current in zip(records, records[1:]):
            assert (current.day - previous.day).days == 1

    def test_shifts_follow_cycle(self):
        records = generate(2025, GROUP_ONE, {}, {}, [])
        assert records[0].shift is Shift.MIDDAY
        assert records[-1].shift is Shift.EARLY
        assert all(r.shift is shift_for(r.day, GROUP_ONE) for r in records)

    def test_without_anchor(self):
        with pytest.raises(ConfigurationError):
            generate(2025, None, {}, {}, [])

    def test_overlays(self):
        events = {"2025-03-06": EventAnnotation(note="Flug")}
        holidays = {"2025-01-01": "Neujahr"}
        birthdays = [Birthday(month=2, day=6, name="Oma")]
        records = {r.date_key: r for r in generate(2025, GROUP_ONE, events, holidays, birthdays)}

        assert records["2025-03-06"].event == EventAnnotation(note="Flug")
        assert records["2025-03-06"].birthday == "Oma"
        assert records["2025-01-01"].holiday == "Neujahr"
        assert records["2025-01-02"].event is None
        assert records["2025-01-02"].holiday is None
        assert records["2025-01-02"].birthday is None

    def test_birthday_recurs_every_year(self):
        birthdays = [Birthday(month=11, day=24, name="Christkind")]
        for year in (2023, 2025, 2030):
            records = generate(year, GROUP_ONE, {}, {}, birthdays)
            assert records[-8].day == date(year, 12, 24)
            assert records[-8].birthday == "Christkind"

    def test_feb_29_birthday_only_in_leap_years(self):
        birthdays = [Birthday(month=1, day=29, name="Schaltjahr")]
        assert any(r.birthday for r in generate(2024, GROUP_ONE, {}, {}, birthdays))
        assert not any(r.birthday for r in generate(2025, GROUP_ONE, {}, {}, birthdays))

    def test_inputs_not_mutated(self):
        events = {"2025-03-06": EventAnnotation(note="Flug")}
        holidays = {"2025-01-01": "Neujahr"}
        birthdays = [Birthday(month=2, day=6, name="Oma")]
        generate(2025, GROUP_ONE, events, holidays, birthdays)
        assert events == {"2025-03-06": EventAnnotation(note="Flug")}
        assert holidays == {"2025-01-01": "Neujahr"}
        assert birthdays == [Birthday(month=2, day=6, name="Oma")]


class TestRegenerate:
    def test_matches_generate(self):
        snapshot = CalendarSnapshot(
            year=2025,
            anchor=GROUP_ONE,
            events={"2025-03-06": EventAnnotation(note="Flug")},
            holidays={"2025-01-01": "Neujahr"},
            birthdays=(Birthday(month=2, day=6, name="Oma"),),
        )
        assert regenerate(snapshot) == generate(
            2025, GROUP_ONE, snapshot.events, snapshot.holidays, snapshot.birthdays,
        )

    def test_snapshot_is_detached_from_source(self):
        events = {"2025-03-06": EventAnnotation(note="Flug")}
        snapshot = CalendarSnapshot(year=2025, anchor=GROUP_ONE, events=events)
        events["2025-03-07"] = EventAnnotation(note="später")
        assert "2025-03-07" not in snapshot.events

    def test_new_anchor_shifts_every_day(self):
        before = regenerate(CalendarSnapshot(year=2025, anchor=GROUP_ONE))
        after = regenerate(CalendarSnapshot(year=2025, anchor=date(2025, 1, 23)))
        assert [r.shift for r in before[7:]] == [r.shift for r in after[:-7]]
