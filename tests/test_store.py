import datetime as dt

import pytest

from seat_booking.notices import SUCCESS, WARNING
from seat_booking.store import Outcome, Team

MONDAY = dt.date(2026, 10, 19)
WEDNESDAY = dt.date(2026, 10, 21)
SUNDAY = dt.date(2026, 10, 25)


def test_current_day_is_monday_first(make_store):
    assert make_store(today=MONDAY).current_day() == "Monday"
    assert make_store(today=SUNDAY).current_day() == "Sunday"


def test_book_other_day_records_team_and_counts_lunch(make_store):
    store = make_store("C", today=MONDAY)

    result = store.book("Tuesday", 5, "Alex", "hr")

    assert result.ok
    assert result.outcome == Outcome.BOOKED
    assert store.is_taken("Tuesday", 5)
    assert store.owner_of("Tuesday", 5) == "Alex"
    assert store.team_of("Tuesday", 5) == Team.HR
    assert store.lunch_count("Tuesday") == 1

    notice = store.notices.current()
    assert notice.level == SUCCESS
    assert "lunch reserved" in notice.message


def test_name_is_trimmed(make_store):
    store = make_store("B")

    store.book("Friday", 3, "  Sam  ", Team.PRODUCT)

    assert store.owner_of("Friday", 3) == "Sam"


def test_free_seat_has_no_owner_or_team(make_store):
    store = make_store()

    assert not store.is_taken("Monday", 1)
    assert store.owner_of("Monday", 1) == ""
    assert store.team_of("Monday", 1) is None


@pytest.mark.parametrize("revision", ["B", "C"])
def test_same_day_booking_is_kept_without_lunch(make_store, revision):
    store = make_store(revision, today=WEDNESDAY)

    result = store.book("Wednesday", 2, "Alex", "product")

    assert result.ok
    assert result.outcome == Outcome.BOOKED_TOO_LATE_FOR_LUNCH
    assert store.is_taken("Wednesday", 2)
    assert store.lunch_count("Wednesday") == 0

    notice = store.notices.current()
    assert notice.level == WARNING
    assert "too late" in notice.message


def test_revision_a_rejects_monday_on_monday(make_store):
    store = make_store("A", today=MONDAY)

    result = store.book("Monday", 4, "Alex")

    assert not result.ok
    assert result.outcome == Outcome.TOO_LATE
    assert not store.is_taken("Monday", 4)
    assert store.lunch_count("Monday") == 0
    assert store.notices.current().message == "Sorry, too late to book a lunch for today!"


def test_revision_a_allows_same_day_on_other_weekdays(make_store):
    store = make_store("A", today=WEDNESDAY)

    result = store.book("Wednesday", 4, "Alex")

    assert result.outcome == Outcome.BOOKED
    assert store.lunch_count("Wednesday") == 1
    assert store.notices.current() is None


def test_revision_a_ignores_team(make_store):
    store = make_store("A", today=WEDNESDAY)

    store.book("Friday", 1, "Alex", "hr")

    assert store.team_of("Friday", 1) is None


def test_taken_seat_is_not_overwritten(make_store):
    store = make_store()
    store.book("Tuesday", 5, "Alex", "hr")
    before = store.snapshot()

    result = store.book("Tuesday", 5, "Jordan", "product")

    assert result.outcome == Outcome.SEAT_TAKEN
    assert store.snapshot() == before
    assert store.lunch_count("Tuesday") == 1


@pytest.mark.parametrize(
    "day, seat, name, team, outcome",
    [
        ("Someday", 1, "Alex", "hr", Outcome.INVALID_DAY),
        ("Tuesday", 0, "Alex", "hr", Outcome.INVALID_SEAT),
        ("Tuesday", 33, "Alex", "hr", Outcome.INVALID_SEAT),
        ("Tuesday", 1, "   ", "hr", Outcome.MISSING_NAME),
        ("Tuesday", 1, "Alex", None, Outcome.INVALID_TEAM),
        ("Tuesday", 1, "Alex", "finance", Outcome.INVALID_TEAM),
    ],
)
def test_invalid_bookings_change_nothing(make_store, day, seat, name, team, outcome):
    store = make_store("C")

    result = store.book(day, seat, name, team)

    assert result.outcome == outcome
    assert not result.ok
    assert store.snapshot() == {}
    assert all(count == 0 for count in store.lunch_counts().values())
    assert store.notices.current() is None


def test_seat_range_follows_revision(make_store):
    assert make_store("B").book("Tuesday", 21, "Alex", "hr").outcome == Outcome.INVALID_SEAT
    assert make_store("C").book("Tuesday", 32, "Alex", "hr").ok


def test_cancel_removes_empty_day_key(make_store):
    store = make_store()
    store.book("Tuesday", 5, "Alex", "hr")

    cancelled = store.cancel("Tuesday", 5)

    assert cancelled.employee_name == "Alex"
    assert not store.is_taken("Tuesday", 5)
    assert "Tuesday" not in store.snapshot()
    assert store.lunch_count("Tuesday") == 0


def test_cancel_keeps_day_with_other_bookings(make_store):
    store = make_store()
    store.book("Tuesday", 5, "Alex", "hr")
    store.book("Tuesday", 6, "Sam", "hr")

    store.cancel("Tuesday", 5)

    assert store.snapshot()["Tuesday"].keys() == {6}
    assert store.lunch_count("Tuesday") == 1


def test_cancel_absent_seat_is_a_noop(make_store):
    store = make_store()
    store.book("Tuesday", 5, "Alex", "hr")

    assert store.cancel("Tuesday", 9) is None
    assert store.cancel("Thursday", 5) is None
    assert store.cancel("Thursday", 5) is None

    assert not store.is_taken("Thursday", 5)
    assert store.lunch_count("Tuesday") == 1


def test_cancel_same_day_booking_floors_at_zero(make_store):
    store = make_store("C", today=WEDNESDAY)
    store.book("Wednesday", 1, "Alex", "hr")
    assert store.lunch_count("Wednesday") == 0

    store.cancel("Wednesday", 1)

    assert store.lunch_count("Wednesday") == 0


def test_cancel_of_uncounted_booking_lowers_other_lunches(make_store):
    today = {"value": dt.date(2026, 10, 20)}
    store = make_store("C")
    store._today = lambda: today["value"]

    store.book("Wednesday", 1, "Alex", "hr")  # booked on Tuesday, counted
    today["value"] = WEDNESDAY
    store.book("Wednesday", 2, "Sam", "hr")  # same day, not counted

    assert store.lunch_count("Wednesday") == 1

    store.cancel("Wednesday", 2)

    assert store.lunch_count("Wednesday") == 0
    assert store.is_taken("Wednesday", 1)


def test_lunch_count_never_negative(make_store):
    store = make_store("C", today=MONDAY)

    for seat in (1, 2, 3):
        store.book("Monday", seat, f"Person {seat}", "hr")
    store.book("Friday", 1, "Alex", "hr")

    for seat in (1, 2, 3):
        store.cancel("Monday", seat)
        store.cancel("Monday", seat)
    store.cancel("Friday", 1)
    store.cancel("Friday", 1)

    assert min(store.lunch_counts().values()) == 0


def test_bookings_by_name_is_case_insensitive_and_ordered(make_store):
    store = make_store()
    store.book("Friday", 2, "Alex", "hr")
    store.book("Tuesday", 9, "alex", "product")
    store.book("Tuesday", 3, "Sam", "hr")

    found = store.bookings_by_name(" ALEX ")

    assert [(b.day, b.seat) for b in found] == [("Tuesday", 9), ("Friday", 2)]
    assert store.bookings_by_name("") == []


def test_snapshot_is_a_copy(make_store):
    store = make_store()
    store.book("Tuesday", 5, "Alex", "hr")

    snapshot = store.snapshot()
    snapshot["Tuesday"].clear()

    assert store.is_taken("Tuesday", 5)
    assert store.occupancy("Tuesday") == 1


def test_new_notice_replaces_previous(make_store):
    store = make_store("C", today=WEDNESDAY)

    store.book("Thursday", 1, "Alex", "hr")
    store.book("Wednesday", 2, "Sam", "hr")

    assert store.notices.current().level == WARNING
