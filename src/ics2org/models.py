from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class DateTimeFormat(Enum):
    LOCAL = "local"
    UTC = "utc"
    TIMEZONE = "timezone"   # label kept in DateTime.tzid


class PropertyKind(Enum):
    """Last text property seen; decides where a folded line is appended."""
    DESCRIPTION = "description"
    LOCATION = "location"
    SUMMARY = "summary"
    NONE = "none"


@dataclass(frozen=True)
class DateTime:
    format: DateTimeFormat = DateTimeFormat.UTC
    year: int = 1970
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    tzid: Optional[str] = None   # only set for DateTimeFormat.TIMEZONE


@dataclass(frozen=True)
class Organizer:
    calendar: str = ""          # CN= display name
    mail_to: str = ""


@dataclass
class Event:
    start: DateTime = field(default_factory=DateTime)
    end: DateTime = field(default_factory=DateTime)
    title: str = ""
    description: str = ""
    location: str = ""
    organizer: Organizer = field(default_factory=Organizer)
