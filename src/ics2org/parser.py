from __future__ import annotations
import logging
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Union

from .decoders import parse_date_time, parse_organizer
from .models import Event, PropertyKind

logger = logging.getLogger(__name__)

END_EVENT = "END:VEVENT"
DTSTART = "DTSTART"
DTEND = "DTEND"
DESCRIPTION = "DESCRIPTION:"
LOCATION = "LOCATION:"
SUMMARY = "SUMMARY:"
ORGANIZER = "ORGANIZER;"


def _append_folded(event: Event, kind: PropertyKind, text: str) -> None:
    if kind is PropertyKind.DESCRIPTION:
        event.description += text
    elif kind is PropertyKind.LOCATION:
        event.location += text
    elif kind is PropertyKind.SUMMARY:
        event.title += text


def parse_events(lines: Iterable[str]) -> List[Event]:
    """
    Turn calendar lines (newlines already removed) into events.

    An event is emitted each time an END:VEVENT line is seen, so whatever is
    still being collected when the input runs out is dropped. Unknown lines
    are not errors; they only stop folded lines from attaching to the
    previous property.
    """
    events: List[Event] = []
    current = Event()
    kind = PropertyKind.NONE

    for line in lines:
        if line.startswith(" "):
            _append_folded(current, kind, line[1:])
        elif line == END_EVENT:
            events.append(current)
            current = Event()
        elif line.startswith(DTSTART):
            # skip the ':' or ';' after the key
            current.start = parse_date_time(line[len(DTSTART) + 1:])
        elif line.startswith(DTEND):
            current.end = parse_date_time(line[len(DTEND) + 1:])
        elif line.startswith(DESCRIPTION):
            current.description = line[len(DESCRIPTION):]
            kind = PropertyKind.DESCRIPTION
        elif line.startswith(LOCATION):
            current.location = line[len(LOCATION):]
            kind = PropertyKind.LOCATION
        elif line.startswith(SUMMARY):
            current.title = line[len(SUMMARY):]
            kind = PropertyKind.SUMMARY
        elif line.startswith(ORGANIZER):
            current.organizer = parse_organizer(line[len(ORGANIZER):])
        else:
            kind = PropertyKind.NONE

    logger.debug("Parsed %d events", len(events))
    return events


def _read_lines(f: BinaryIO) -> Iterator[str]:
    # Binary iteration splits on b"\n" only; a bare "\r" stays in the value.
    for lineno, raw in enumerate(f, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Skipping line %d: not valid UTF-8", lineno)
            continue
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def parse_file(path: Union[str, Path]) -> List[Event]:
    with open(path, "rb") as f:
        return parse_events(_read_lines(f))
