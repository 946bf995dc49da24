from datetime import datetime, date, timedelta

DAYS_OF_WEEK = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


def week_index(day: str) -> int:
    """
    Position of a day label on the Monday-first week.
    Monday is 0, Sunday is 6.
    """
    return DAYS_OF_WEEK.index(day)


def day_for(value: date) -> str:
    # date.weekday() is already Monday-first (Sunday = 6)
    return DAYS_OF_WEEK[value.weekday()]


def current_day(today: date | None = None) -> str:
    if today is None:
        today = date.today()
    return day_for(today)


def next_date_for(day: str, today: date) -> date:
    """
    Next calendar date falling on the given day label, today included.
    """
    offset = (week_index(day) - today.weekday()) % 7
    return today + timedelta(days=offset)


def uk_date(value) -> str:
    """
    Converts a date, datetime, or ISO date string (YYYY-MM-DD)
    to UK format DD/MM/YYYY for display.
    """
    if value is None:
        return ""

    if isinstance(value, (date, datetime)):
        return value.strftime("%d/%m/%Y")

    try:
        return datetime.strptime(str(value), "%Y-%m-%d").strftime("%d/%m/%Y")
    except ValueError:
        return str(value)
