"""Shared fixtures: fixed calendar days and a controllable clock."""

import datetime as dt

import pytest

from seat_booking.config import REVISIONS
from seat_booking.notices import NoticeBoard
from seat_booking.store import BookingStore

# 2026-10-19 is a Monday
MONDAY = dt.date(2026, 10, 19)


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_store(clock):
    def _make(revision: str = "C", today: dt.date = MONDAY) -> BookingStore:
        profile = REVISIONS[revision]
        return BookingStore(
            profile,
            today=lambda: today,
            notices=NoticeBoard(profile.notice_ms, clock=clock),
        )

    return _make
