import json
import logging
from datetime import datetime, timezone
from typing import Optional

from app.config import get_settings

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Extra attributes copied into JSON payloads when a record carries them.
_EXTRA_FIELDS = ("product_id",)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def build_formatter(json_output: bool) -> logging.Formatter:
    if json_output:
        return JsonFormatter()
    return logging.Formatter(fmt=_PLAIN_FORMAT, datefmt=_DATE_FORMAT)


def setup_logging(level: Optional[str] = None) -> None:
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(settings.LOG_JSON))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


__all__ = ["JsonFormatter", "build_formatter", "setup_logging"]
