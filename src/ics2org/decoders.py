from __future__ import annotations
import logging
import re
from typing import Optional

from .models import DateTime, DateTimeFormat, Organizer

logger = logging.getLogger(__name__)

_STAMP = r"([0-9]{4})([0-9]{2})([0-9]{2})T([0-9]{2})([0-9]{2})([0-9]{2})"

_LOCAL_RE = re.compile(_STAMP)
_UTC_RE = re.compile(_STAMP + "Z")
_ZONE_RE = re.compile(r"TZID=(.+):" + _STAMP)

# Greedy name group: splits on the last ":mailto:".
_ORGANIZER_RE = re.compile(r".*CN=(?P<cal>.+):mailto:(?P<mail>.+)")


def _from_groups(fmt: DateTimeFormat, m: re.Match[str], offset: int = 0, tzid: Optional[str] = None) -> DateTime:
    year, month, day, hour, minute, second = (int(g) for g in m.groups()[offset:offset + 6])
    return DateTime(
        format=fmt,
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        tzid=tzid,
    )


def parse_date_time(value: str) -> DateTime:
    """
    Decode the value part of a DTSTART/DTEND line.

    Accepts `YYYYMMDDTHHMMSS` (local), `YYYYMMDDTHHMMSSZ` (UTC) and
    `TZID=<label>:YYYYMMDDTHHMMSS`. Anything else logs a warning and yields
    the 1970-01-01 UTC default. Calendar ranges are not checked.
    """
    m = _LOCAL_RE.fullmatch(value)
    if m:
        return _from_groups(DateTimeFormat.LOCAL, m)

    m = _UTC_RE.fullmatch(value)
    if m:
        return _from_groups(DateTimeFormat.UTC, m)

    m = _ZONE_RE.fullmatch(value)
    if m:
        return _from_groups(DateTimeFormat.TIMEZONE, m, offset=1, tzid=m.group(1))

    logger.warning("Failed to parse DateTime: %s", value)
    return DateTime()


def parse_organizer(value: str) -> Organizer:
    m = _ORGANIZER_RE.fullmatch(value)
    if not m:
        logger.debug("Unrecognized ORGANIZER value: %s", value)
        return Organizer()
    return Organizer(calendar=m.group("cal"), mail_to=m.group("mail"))
