import os
from dataclasses import dataclass, field

import streamlit as st

from seat_booking.layout import DEFAULT_GROUPS, SeatGroup, parse_groups, validate_groups

# Same-day booking rules
REJECT_MONDAY = "reject_monday"
LATE_LUNCH = "late_lunch"

REVISION_ENV = "SEAT_BOOKING_REVISION"
NOTICE_MS_ENV = "SEAT_BOOKING_NOTICE_MS"


@dataclass(frozen=True)
class RevisionProfile:
    name: str
    seat_count: int
    teams_enabled: bool
    groups_enabled: bool
    login_required: bool
    same_day_policy: str
    notice_ms: int


REVISIONS = {
    "A": RevisionProfile(
        name="A",
        seat_count=20,
        teams_enabled=False,
        groups_enabled=False,
        login_required=False,
        same_day_policy=REJECT_MONDAY,
        notice_ms=3000,
    ),
    "B": RevisionProfile(
        name="B",
        seat_count=20,
        teams_enabled=True,
        groups_enabled=False,
        login_required=False,
        same_day_policy=LATE_LUNCH,
        notice_ms=5000,
    ),
    "C": RevisionProfile(
        name="C",
        seat_count=32,
        teams_enabled=True,
        groups_enabled=True,
        login_required=True,
        same_day_policy=LATE_LUNCH,
        notice_ms=5000,
    ),
}

DEFAULT_REVISION = "C"


@dataclass(frozen=True)
class Settings:
    profile: RevisionProfile
    notice_ms: int
    groups: tuple[SeatGroup, ...] = field(default_factory=tuple)

    @property
    def seat_count(self) -> int:
        return self.profile.seat_count


# ---------------------------------------------------
# SOURCE RESOLUTION
# ---------------------------------------------------
def _streamlit_secrets() -> dict:
    if not hasattr(st, "secrets"):
        return {}

    try:
        return st.secrets.to_dict()
    except FileNotFoundError:
        # No secrets.toml anywhere on the search path
        return {}


def _resolve(key: str, env_key: str, env, secrets):
    env_value = env.get(env_key)
    if env_value:
        return env_value

    return secrets.get(key)


def _resolve_revision(env, secrets) -> RevisionProfile:
    raw = _resolve("revision", REVISION_ENV, env, secrets) or DEFAULT_REVISION
    name = str(raw).strip().upper()

    if name not in REVISIONS:
        raise ValueError(
            f"Unknown revision {raw!r}; expected one of {', '.join(REVISIONS)}."
        )

    return REVISIONS[name]


def _resolve_notice_ms(profile: RevisionProfile, env, secrets) -> int:
    raw = _resolve("notice_ms", NOTICE_MS_ENV, env, secrets)
    if raw is None:
        return profile.notice_ms

    try:
        notice_ms = int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"notice_ms must be an integer, got {raw!r}") from e

    if notice_ms <= 0:
        raise ValueError("notice_ms must be positive.")

    return notice_ms


def _resolve_groups(profile: RevisionProfile, secrets) -> tuple[SeatGroup, ...]:
    if not profile.groups_enabled:
        return ()

    raw = secrets.get("seat_groups")
    groups = parse_groups(raw) if raw else DEFAULT_GROUPS

    return validate_groups(groups, profile.seat_count)


def load_settings(env=None, secrets=None) -> Settings:
    """
    Resolve settings: environment first, then Streamlit secrets,
    then the revision defaults.
    """
    if env is None:
        env = os.environ
    if secrets is None:
        secrets = _streamlit_secrets()

    profile = _resolve_revision(env, secrets)

    return Settings(
        profile=profile,
        notice_ms=_resolve_notice_ms(profile, env, secrets),
        groups=_resolve_groups(profile, secrets),
    )
