import pandas as pd

from seat_booking.dates import DAYS_OF_WEEK
from seat_booking.store import BookingStore


def week_summary(store: BookingStore) -> pd.DataFrame:
    """One row per day: occupancy and lunch count for the session."""
    today = store.current_day()

    return pd.DataFrame(
        [
            {
                "Day": day,
                "Today": day == today,
                "Seats booked": store.occupancy(day),
                "Lunches": store.lunch_count(day),
            }
            for day in DAYS_OF_WEEK
        ],
        columns=["Day", "Today", "Seats booked", "Lunches"],
    )


def team_summary(store: BookingStore) -> pd.DataFrame:
    rows = [
        {
            "Day": booking.day,
            "Team": booking.team.label if booking.team else "Unassigned",
        }
        for day in DAYS_OF_WEEK
        for _, booking in sorted(store.bookings_for(day).items())
    ]

    if not rows:
        return pd.DataFrame(columns=["Day", "Team", "Seats"])

    return (
        pd.DataFrame(rows)
        .groupby(["Day", "Team"], sort=False)
        .size()
        .rename("Seats")
        .reset_index()
    )
