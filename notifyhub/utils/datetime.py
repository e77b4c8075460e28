"""Application clock and timestamp normalisation.

Every timestamp column is declared without timezone and holds wall-clock time
in ``APP_TIMEZONE``. Code above the repositories only handles aware values;
the two ``ensure_*`` helpers convert at the boundary.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from notifyhub.config import get_settings

_FALLBACK_ZONE: Final[str] = "UTC"
# Fixed offsets such as "UTC-05:00" or "GMT+2".
_FIXED_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the zone schedules are evaluated in.

    Accepts IANA names and fixed ``UTC±HH[:MM]`` offsets; anything else falls
    back to UTC. Call ``get_app_timezone.cache_clear()`` after changing
    ``APP_TIMEZONE`` at runtime.
    """

    name = (get_settings().app_timezone or "").strip()
    return _parse_timezone(name or _FALLBACK_ZONE)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Column default for ``created_at`` style fields."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Return ``value`` as an aware datetime in the application zone.

    A naive ``value`` is read back from the database, so it is taken to be
    application wall-clock time rather than UTC.
    """

    if value is None:
        return None
    zone = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return the wall-clock form of ``value`` that is written to the database."""

    aware = ensure_app_timezone(value)
    return None if aware is None else aware.replace(tzinfo=None)


def _parse_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    match = _FIXED_OFFSET.match(name)
    if match is None:
        return ZoneInfo(_FALLBACK_ZONE)
    offset = timedelta(
        hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
    )
    return timezone(-offset if match.group("sign") == "-" else offset)
