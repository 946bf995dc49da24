import copy
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable

from loguru import logger

from seat_booking.config import LATE_LUNCH, REJECT_MONDAY, RevisionProfile
from seat_booking.dates import DAYS_OF_WEEK, current_day
from seat_booking.notices import SUCCESS, WARNING, NoticeBoard

TOO_LATE_MESSAGE = "Sorry, too late to book a lunch for today!"
BOOKED_LATE_MESSAGE = "Seat {seat} booked, but it's too late to book a lunch for today."
BOOKED_WITH_LUNCH_MESSAGE = "Seat {seat} booked and lunch reserved for {day}."


class Team(str, Enum):
    PRODUCT = "product"
    DATA_SCIENCE = "data-science"
    HR = "hr"

    @property
    def label(self) -> str:
        return TEAM_LABELS[self]


TEAM_LABELS = {
    Team.PRODUCT: "Product",
    Team.DATA_SCIENCE: "Data Science",
    Team.HR: "HR",
}


class Outcome(str, Enum):
    BOOKED = "booked"
    BOOKED_TOO_LATE_FOR_LUNCH = "booked_too_late_for_lunch"
    TOO_LATE = "too_late"
    INVALID_DAY = "invalid_day"
    INVALID_SEAT = "invalid_seat"
    MISSING_NAME = "missing_name"
    INVALID_TEAM = "invalid_team"
    SEAT_TAKEN = "seat_taken"


@dataclass(frozen=True)
class Booking:
    day: str
    seat: int
    employee_name: str
    team: Team | None = None


@dataclass(frozen=True)
class BookingResult:
    outcome: Outcome
    booking: Booking | None = None

    @property
    def ok(self) -> bool:
        return self.booking is not None


def _coerce_team(team) -> Team | None:
    if isinstance(team, Team):
        return team
    try:
        return Team(team)
    except ValueError:
        return None


class BookingStore:
    """
    Per-session seat bookings and lunch counts.

    bookings: day -> {seat -> Booking}. A day key only exists while at
    least one seat is booked on it.
    lunch counts: day -> int, never negative.
    """

    def __init__(
        self,
        profile: RevisionProfile,
        today: Callable[[], date] = date.today,
        notices: NoticeBoard | None = None,
    ):
        self.profile = profile
        self._today = today
        self.notices = notices or NoticeBoard(profile.notice_ms)
        self._bookings: dict[str, dict[int, Booking]] = {}
        self._lunch_counts: dict[str, int] = {}

    # ---------------------------------------------------
    # QUERIES
    # ---------------------------------------------------
    def today(self) -> date:
        return self._today()

    def current_day(self) -> str:
        return current_day(self._today())

    def is_taken(self, day: str, seat: int) -> bool:
        return seat in self._bookings.get(day, {})

    def booking_at(self, day: str, seat: int) -> Booking | None:
        return self._bookings.get(day, {}).get(seat)

    def owner_of(self, day: str, seat: int) -> str:
        booking = self.booking_at(day, seat)
        return booking.employee_name if booking else ""

    def team_of(self, day: str, seat: int) -> Team | None:
        booking = self.booking_at(day, seat)
        return booking.team if booking else None

    def lunch_count(self, day: str) -> int:
        return self._lunch_counts.get(day, 0)

    def lunch_counts(self) -> dict[str, int]:
        return {day: self.lunch_count(day) for day in DAYS_OF_WEEK}

    def bookings_for(self, day: str) -> dict[int, Booking]:
        return dict(self._bookings.get(day, {}))

    def occupancy(self, day: str) -> int:
        return len(self._bookings.get(day, {}))

    def snapshot(self) -> dict[str, dict[int, Booking]]:
        return copy.deepcopy(self._bookings)

    def bookings_by_name(self, name: str) -> list[Booking]:
        wanted = (name or "").strip().casefold()
        if not wanted:
            return []

        return [
            booking
            for day in DAYS_OF_WEEK
            for _, booking in sorted(self._bookings.get(day, {}).items())
            if booking.employee_name.casefold() == wanted
        ]

    # ---------------------------------------------------
    # MUTATIONS
    # ---------------------------------------------------
    def _validate(self, day, seat, name, team) -> Outcome | None:
        if day not in DAYS_OF_WEEK:
            return Outcome.INVALID_DAY
        if not isinstance(seat, int) or not 1 <= seat <= self.profile.seat_count:
            return Outcome.INVALID_SEAT
        if not name:
            return Outcome.MISSING_NAME
        if self.profile.teams_enabled and team is None:
            return Outcome.INVALID_TEAM
        if self.is_taken(day, seat):
            return Outcome.SEAT_TAKEN
        return None

    def book(self, day: str, seat: int, employee_name: str, team=None) -> BookingResult:
        name = (employee_name or "").strip()
        team = _coerce_team(team) if self.profile.teams_enabled else None

        invalid = self._validate(day, seat, name, team)
        if invalid is not None:
            logger.debug("Booking {} {} ignored: {}", day, seat, invalid.value)
            return BookingResult(invalid)

        same_day = day == self.current_day()

        if self.profile.same_day_policy == REJECT_MONDAY:
            if same_day and day == "Monday":
                self.notices.post(WARNING, TOO_LATE_MESSAGE)
                logger.info("Rejected same-day Monday booking for seat {}", seat)
                return BookingResult(Outcome.TOO_LATE)

            booking = self._record(day, seat, name, team)
            self._lunch_counts[day] = self.lunch_count(day) + 1
            return BookingResult(Outcome.BOOKED, booking)

        if self.profile.same_day_policy != LATE_LUNCH:
            raise ValueError(f"Unknown same-day policy {self.profile.same_day_policy!r}")

        booking = self._record(day, seat, name, team)

        if same_day:
            self.notices.post(WARNING, BOOKED_LATE_MESSAGE.format(seat=seat))
            return BookingResult(Outcome.BOOKED_TOO_LATE_FOR_LUNCH, booking)

        self._lunch_counts[day] = self.lunch_count(day) + 1
        self.notices.post(SUCCESS, BOOKED_WITH_LUNCH_MESSAGE.format(seat=seat, day=day))
        return BookingResult(Outcome.BOOKED, booking)

    def _record(self, day, seat, name, team) -> Booking:
        booking = Booking(day=day, seat=seat, employee_name=name, team=team)
        self._bookings.setdefault(day, {})[seat] = booking
        logger.info("Seat {} booked on {} for {}", seat, day, name)
        return booking

    def cancel(self, day: str, seat: int) -> Booking | None:
        seats = self._bookings.get(day)
        if not seats or seat not in seats:
            return None

        booking = seats.pop(seat)
        if not seats:
            del self._bookings[day]

        # Fires for same-day bookings too, even though they never counted
        self._lunch_counts[day] = max(self.lunch_count(day) - 1, 0)

        logger.info("Seat {} on {} released by {}", seat, day, booking.employee_name)
        return booking
