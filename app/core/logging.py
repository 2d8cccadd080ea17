"""Structured logging setup."""
import logging, sys, json, os
from typing import Optional

_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RESERVED:
                continue
            base[k] = v
        return json.dumps(base, default=str)


def configure_logging(
    level: str = "INFO",
    fmt: str = "%(asctime)s %(levelname)s %(name)s %(message)s",
    log_file: Optional[str] = None,
) -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(level)
    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stdout)
    if os.getenv("LOG_FORMAT", "text") == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
