from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .config import AppConfig, load_config
from .parser import parse_file
from .render import write_org

CONFIG_ENV = "ICS2ORG_CONFIG"


def default_output_path(input_path: str) -> Path:
    # calendar.ics -> calendar.org; no suffix -> name.org
    return Path(input_path).with_suffix(".org")


def convert_file(input_path: str, output_path: str, cfg: AppConfig) -> int:
    events = parse_file(input_path)
    write_org(
        events,
        output_path,
        heading=cfg.output.heading,
        include_time=cfg.output.include_time,
    )
    return len(events)


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    ap = argparse.ArgumentParser(description="Convert an .ics calendar export into an Org outline")
    ap.add_argument("input", help="path to the .ics file")
    ap.add_argument("--output", help="output .org path (default: input with .org suffix)")
    ap.add_argument("--config")
    ap.add_argument("--include-time", action="store_true")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    load_dotenv()
    cfg = load_config(args.config or os.environ.get(CONFIG_ENV) or None)
    if args.include_time:
        cfg.output.include_time = True

    level = logging.DEBUG if args.verbose else getattr(logging, cfg.logging.level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: File {input_path} does not exist.", file=sys.stderr)
        return 1
    print(f"File exists at: {input_path}")

    output_path = Path(args.output) if args.output else default_output_path(args.input)
    count = convert_file(str(input_path), str(output_path), cfg)
    print(f"Wrote {count} events to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
