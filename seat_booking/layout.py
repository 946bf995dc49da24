from dataclasses import dataclass

OTHER_SEATS_LABEL = "Other seats"


@dataclass(frozen=True)
class SeatGroup:
    label: str
    first: int
    last: int

    @property
    def seats(self) -> list[int]:
        return list(range(self.first, self.last + 1))

    def __contains__(self, seat: int) -> bool:
        return self.first <= seat <= self.last


# 32-seat floor: four banks of eight
DEFAULT_GROUPS = (
    SeatGroup("Window Bank", 1, 8),
    SeatGroup("Centre Left", 9, 16),
    SeatGroup("Centre Right", 17, 24),
    SeatGroup("Quiet Corner", 25, 32),
)


def validate_groups(groups, seat_count: int) -> tuple[SeatGroup, ...]:
    """
    Check a group layout against the floor size.

    Raises ValueError for empty labels, reversed or out-of-range
    bounds, and overlapping groups. Returns the groups sorted by
    their first seat.
    """
    ordered = sorted(groups, key=lambda g: g.first)

    for group in ordered:
        if not group.label.strip():
            raise ValueError("Seat groups need a label.")
        if group.first > group.last:
            raise ValueError(
                f"Seat group '{group.label}' ends before it starts."
            )
        if group.first < 1 or group.last > seat_count:
            raise ValueError(
                f"Seat group '{group.label}' is outside seats 1-{seat_count}."
            )

    for previous, group in zip(ordered, ordered[1:]):
        if group.first <= previous.last:
            raise ValueError(
                f"Seat groups '{previous.label}' and '{group.label}' overlap."
            )

    return tuple(ordered)


def parse_groups(raw) -> tuple[SeatGroup, ...]:
    """Build groups from secrets tables: [{label, first, last}, ...]."""
    try:
        return tuple(
            SeatGroup(str(item["label"]), int(item["first"]), int(item["last"]))
            for item in raw
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid seat_groups entry: {e!r}") from e


def group_for_seat(seat: int, groups) -> SeatGroup | None:
    for group in groups:
        if seat in group:
            return group
    return None


def grouped_seats(seat_count: int, groups) -> list[tuple[str, list[int]]]:
    rows = [(g.label, g.seats) for g in sorted(groups, key=lambda g: g.first)]

    grouped = {seat for _, seats in rows for seat in seats}
    leftovers = [s for s in range(1, seat_count + 1) if s not in grouped]
    if leftovers:
        rows.append((OTHER_SEATS_LABEL, leftovers))

    return rows
