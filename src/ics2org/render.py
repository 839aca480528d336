from __future__ import annotations
from pathlib import Path
from typing import List, Union

from .models import DateTime, Event

DEFAULT_HEADING = "Google Calendar"


def _fmt_scheduled(dt: DateTime, include_time: bool) -> str:
    # Org timestamps without weekday; month and day are not zero padded.
    stamp = f"{dt.year}-{dt.month}-{dt.day}"
    if include_time and dt != DateTime():
        stamp += f" {dt.hour:02d}:{dt.minute:02d}"
    return f"<{stamp}>"


def render_org(events: List[Event], heading: str = DEFAULT_HEADING, include_time: bool = False) -> str:
    """Render events as one Org outline; each event becomes a second-level heading."""
    lines = [f"* {heading}"]
    for e in events:
        lines.append(f"** {e.title}")
        lines.append(f"SCHEDULED: {_fmt_scheduled(e.start, include_time)}")
    return "\n".join(lines) + "\n"


def write_org(
    events: List[Event],
    path: Union[str, Path],
    heading: str = DEFAULT_HEADING,
    include_time: bool = False,
) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(render_org(events, heading=heading, include_time=include_time), encoding="utf-8")
