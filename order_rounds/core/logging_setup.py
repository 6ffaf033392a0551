from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from order_rounds.core.config import LOG_LEVEL, SERVICE_NAME
from order_rounds.core.request_context import get_request_id, get_shop_id

_OPTIONAL_FIELDS = ("endpoint", "method", "status_code", "item_id", "rounds")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": SERVICE_NAME,
            "request_id": getattr(record, "request_id", None) or get_request_id(),
            "shop_id": getattr(record, "shop_id", None) or get_shop_id(),
            "module": record.name,
            "message": record.getMessage(),
            "duration_ms": getattr(record, "duration_ms", None),
        }
        for field in _OPTIONAL_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: str | None = None) -> None:
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level or LOG_LEVEL)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(message)s"))
    root_logger.addHandler(handler)

    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(level or LOG_LEVEL)
