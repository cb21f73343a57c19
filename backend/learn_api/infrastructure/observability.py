"""Structured Logging — JSON log lines carrying lookup and pagination context.

Invariants:
    - Every line has timestamp (event time, UTC), level, logger and message
    - Lookup fields (identifier, category_path, article_slug), error_code, path
      and pagination numbers are added only when the record carries them
    - setup_logging installs exactly one handler, however often it is called

Design Decisions:
    - stdlib logging + a small Formatter: callers pass context through `extra=`
    - SQLAlchemy engine logs stay at WARNING unless the app runs at DEBUG
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "error_code", "path", "identifier", "category_path", "article_slug",
    "page", "limit", "total",
)
_HANDLER_NAME = "learn_api"


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure root logging; replaces the handler from any earlier call."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)

    root_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(root_level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if root_level <= logging.DEBUG else logging.WARNING,
    )
