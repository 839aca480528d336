from __future__ import annotations
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .render import DEFAULT_HEADING

LOG_LEVEL_ENV = "ICS2ORG_LOG_LEVEL"

@dataclass
class OutputConfig:
    heading: str
    include_time: bool

@dataclass
class LoggingConfig:
    level: str

@dataclass
class AppConfig:
    output: OutputConfig
    logging: LoggingConfig

def load_config(path: Optional[str] = None) -> AppConfig:
    data: Dict[str, Any] = {}
    if path:
        p = Path(path)
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    output = data.get("output", {}) or {}
    log = data.get("logging", {}) or {}

    level = os.environ.get(LOG_LEVEL_ENV) or log.get("level", "WARNING")

    return AppConfig(
        output=OutputConfig(
            heading=str(output.get("heading", DEFAULT_HEADING)),
            include_time=bool(output.get("include_time", False)),
        ),
        logging=LoggingConfig(
            level=str(level).upper(),
        ),
    )
