"""
App-layer logging bootstrap.
Installs a JSONL file sink when a log path is configured, and an optional
stderr handler for ``--verbose``.
"""

import json
import logging
import os
import sys
from datetime import UTC
from datetime import datetime
from pathlib import Path

LOG_PATH_ENV_VAR = "GPS_LOG_PATH"
LOG_LEVEL_ENV_VAR = "GPS_LOG_LEVEL"

_RESERVED_ATTRS = frozenset(
    (
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
    )
)


class JsonlHandler(logging.Handler):
    """Append one JSON object per record to ``path``."""

    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def format_record(self, record: logging.LogRecord) -> dict:
        base = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "lvl": record.levelname,
            "schema": {"name": "gps.log", "ver": "1.0.0"},
            "logger": record.name,
            "event": getattr(record, "event", None),
            "message": record.getMessage(),
        }
        if isinstance(record.msg, dict):
            base.update(record.msg)
        # Attach any extra fields on the record
        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS:
                continue
            base.setdefault(k, v)
        return base

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = json.dumps(self.format_record(record), ensure_ascii=False, default=str)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except Exception:
            self.handleError(record)


def init_json_logging(path: str | None = None, level: str | None = None) -> JsonlHandler | None:
    """Attach the JSONL sink to the root logger.

    Environment variables win over the arguments, which usually come from
    settings. Nothing is installed when no path is known.
    """
    path = os.environ.get(LOG_PATH_ENV_VAR) or path
    if not path:
        return None
    level = (os.environ.get(LOG_LEVEL_ENV_VAR) or level or "INFO").upper()

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    # Remove existing handlers of the same kind to avoid duplicates
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
    handler = JsonlHandler(path)
    root.addHandler(handler)
    return handler


class VerboseHandler(logging.StreamHandler):
    """stderr handler installed by ``--verbose``."""

    def __init__(self):
        super().__init__(sys.stderr)
        self.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))


def init_verbose_logging() -> None:
    """Mirror DEBUG records to stderr for ``--verbose``."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if not any(isinstance(h, VerboseHandler) for h in root.handlers):
        root.addHandler(VerboseHandler())
