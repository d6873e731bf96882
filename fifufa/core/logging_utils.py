import logging
import json
import datetime as dt
from typing import Dict, Any, Optional, Set

# LogRecord attributes that are never copied into the JSON line as "extra" fields
LOG_RECORD_BUILTIN_ATTRS: Set[str] = {
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
}

class JSONLogFormatter(logging.Formatter):
    """
    Formats a record as one JSON object per line.

    `fmt_keys` maps output keys to LogRecord attributes, e.g.
    {"level": "levelname", "logger": "name"}. `message` and `timestamp` are
    always present, and anything passed through `extra=` (language, source,
    remaining, kind, latency_ms, ...) is appended as-is.
    """
    def __init__(self, *, fmt_keys: Optional[Dict[str, str]] = None, datefmt: Optional[str] = None):
        super().__init__(datefmt=datefmt)
        self.fmt_keys = fmt_keys if fmt_keys is not None else {}

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self._prepare_log_dict(record), default=str, ensure_ascii=False)

    def _timestamp(self, record: logging.LogRecord) -> str:
        if self.datefmt:
            return self.formatTime(record, self.datefmt)
        return dt.datetime.fromtimestamp(record.created, tz=dt.timezone.utc).isoformat()

    def _prepare_log_dict(self, record: logging.LogRecord) -> Dict[str, Any]:
        log_dict: Dict[str, Any] = {
            "timestamp": self._timestamp(record),
            "message": record.getMessage(),
        }
        for key, attr in self.fmt_keys.items():
            if attr in ("message", "timestamp"):
                log_dict[key] = log_dict[attr]
            else:
                val = getattr(record, attr, None)
                if val is not None:
                    log_dict[key] = val

        if record.exc_info:
            log_dict["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_dict["stack_info"] = self.formatStack(record.stack_info)

        for key, val in record.__dict__.items():
            if key not in LOG_RECORD_BUILTIN_ATTRS and key not in log_dict:
                log_dict[key] = val
        return log_dict
