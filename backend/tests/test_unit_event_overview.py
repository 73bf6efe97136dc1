"""Unit tests for the month-grouped entry list."""

from datetime import date

from shiftcal.services.event_overview import EntryItem, build_overview
from shiftcal.services.event_store import Birthday, EventAnnotation, EventStore
from shiftcal.services.shift_cycle import Shift
from shiftcal.services.vacation import VacationBlock, apply_range

GROUP_ONE = date(2025, 1, 30)


class TestBuildOverview:
    def test_groups_by_month_in_order(self):
        store = EventStore({
            "2025-04-02": EventAnnotation(note="April"),
            "2025-01-31": EventAnnotation(note="Januar"),
            "2025-01-02": EventAnnotation(note="Anfang"),
        })
        months = build_overview(store, 2025, GROUP_ONE)
        assert [m.month for m in months] == [1, 4]
        assert [i.day for i in months[0].items] == [date(2025, 1, 2), date(2025, 1, 31)]

    def test_vacation_days_collapse_into_blocks(self):
        store = apply_range(EventStore(), date(2025, 3, 6), date(2025, 3, 9), GROUP_ONE)
        store = store.upsert("2025-03-07", EventAnnotation(note="Flug", is_personal_vacation=True))
        store = store.upsert("2025-03-12", EventAnnotation(note="Arzt"))
        items = build_overview(store, 2025, GROUP_ONE)[0].items
        assert items[0] == VacationBlock(start=date(2025, 3, 6), end=date(2025, 3, 9))
        assert len(items) == 2
        assert items[1].day == date(2025, 3, 12)

    def test_items_carry_shift(self):
        store = EventStore({"2025-02-03": EventAnnotation(note="frei")})
        item = build_overview(store, 2025, GROUP_ONE)[0].items[0]
        assert item.shift is Shift.OFF

    def test_without_anchor_shift_is_off(self):
        store = EventStore({"2025-01-31": EventAnnotation(note="x")})
        item = build_overview(store, 2025, None)[0].items[0]
        assert item.shift is Shift.OFF

    def test_birthdays_only_on_request(self):
        store = EventStore(birthdays=[Birthday(month=4, day=1, name="Oma")])
        assert build_overview(store, 2025, GROUP_ONE) == []

        months = build_overview(store, 2025, GROUP_ONE, include_birthdays=True)
        assert months[0].month == 5
        assert months[0].items == [
            EntryItem(day=date(2025, 5, 1), shift=months[0].items[0].shift, birthday="Oma"),
        ]

    def test_birthday_merges_with_entry(self):
        store = EventStore(
            {"2025-05-01": EventAnnotation(note="Kuchen")},
            [Birthday(month=4, day=1, name="Oma")],
        )
        items = build_overview(store, 2025, GROUP_ONE, include_birthdays=True)[0].items
        assert len(items) == 1
        assert items[0].event.note == "Kuchen"
        assert items[0].birthday == "Oma"

    def test_other_years_excluded(self):
        store = EventStore({
            "2024-12-31": EventAnnotation(note="Silvester"),
            "2026-01-01": EventAnnotation(note="Neujahr"),
        })
        assert build_overview(store, 2025, GROUP_ONE) == []
