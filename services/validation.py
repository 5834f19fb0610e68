"""Pure field validators shared by every screen.

None of these read the clock or session state; callers pass everything in,
so the same input always yields the same answer.
"""
from __future__ import annotations
import datetime as dt
import re
from dataclasses import dataclass
from typing import Optional, Union
from zoneinfo import ZoneInfo

from domain.constants import (
    EMAIL_PATTERN,
    PASSWORD_PATTERN,
    REFERENCE_TIMEZONE,
    MSG_INVALID_EMAIL,
    MSG_INVALID_PASSWORD,
    MSG_PASSWORD_MISMATCH,
    MSG_START_AFTER_END,
    MSG_END_IN_FUTURE,
)

_EMAIL_RE = re.compile(EMAIL_PATTERN)
_PASSWORD_RE = re.compile(PASSWORD_PATTERN)

DateLike = Union[dt.date, dt.datetime]


def is_valid_email(value: str) -> bool:
    return bool(value) and _EMAIL_RE.fullmatch(value) is not None


def is_valid_password(value: str) -> bool:
    return bool(value) and _PASSWORD_RE.fullmatch(value) is not None


def email_error(value: str) -> Optional[str]:
    """Advisory text for an email field; silent while the field is empty."""
    if value and not is_valid_email(value):
        return MSG_INVALID_EMAIL
    return None


def password_error(value: str) -> Optional[str]:
    if value and not is_valid_password(value):
        return MSG_INVALID_PASSWORD
    return None


def mismatch_error(password: str, confirmation: str) -> Optional[str]:
    if confirmation and password != confirmation:
        return MSG_PASSWORD_MISMATCH
    return None


@dataclass(frozen=True)
class DateCheck:
    ok: bool
    reason: Optional[str] = None


def _zone() -> ZoneInfo:
    return ZoneInfo(REFERENCE_TIMEZONE)


def _as_instant(value: DateLike) -> dt.datetime:
    # Plain dates are read as midnight in the reference zone, naive datetimes as UTC.
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=dt.timezone.utc)
        return value
    return dt.datetime(value.year, value.month, value.day, tzinfo=_zone())


def reference_date(value: DateLike) -> dt.date:
    """Calendar date of `value` in the reference zone."""
    if isinstance(value, dt.datetime):
        return _as_instant(value).astimezone(_zone()).date()
    return value


def validate_project_dates(start: DateLike, end: DateLike, now: DateLike) -> DateCheck:
    """Check a project's date range against `now`.

    Rules apply in order and the first failure wins:
    1. start must be strictly earlier than end.
    2. end, as a reference-zone calendar date, must not be after today.
    """
    if _as_instant(start) >= _as_instant(end):
        return DateCheck(False, MSG_START_AFTER_END)
    if reference_date(end) > reference_date(now):
        return DateCheck(False, MSG_END_IN_FUTURE)
    return DateCheck(True)


def today_in_reference_zone(now: Optional[dt.datetime] = None) -> dt.date:
    now = now or dt.datetime.now(dt.timezone.utc)
    return reference_date(now)
