"""
Logging setup for the DataCV document service.

setup_logging() configures the root handler once at startup, in plain
text for development or JSON for log aggregators. get_logger() returns
an adapter that tags each line of a service call with its request and
user, so one initialization can be followed through the logs.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional, Tuple

from pythonjsonlogger.json import JsonFormatter

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class RequestLogger(logging.LoggerAdapter):
    """
    Logger adapter for a single service call.

    Messages are prefixed with "[req:<first 8 chars>] [user:<id>]"; the
    same values are attached to the record as request_id/user_id so the
    JSON formatter emits them as fields.
    """

    def __init__(self, logger: logging.Logger, request_id: Optional[str] = None, user_id: Optional[str] = None):
        super().__init__(logger, {"request_id": request_id, "user_id": user_id})

    @property
    def prefix(self) -> str:
        parts = []
        if self.extra.get("request_id"):
            parts.append(f"[req:{self.extra['request_id'][:8]}]")
        if self.extra.get("user_id"):
            parts.append(f"[user:{self.extra['user_id']}]")
        return " ".join(parts)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        if self.prefix:
            msg = f"{self.prefix} {msg}"
        return msg, kwargs


def setup_logging(level: str = "INFO", format: str = "simple", debug_mode: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        format: "simple" for text lines or "json" for one JSON object per line
        debug_mode: Force DEBUG regardless of level
    """
    log_level = logging.DEBUG if debug_mode else getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    if format == "json":
        handler.setFormatter(JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str, request_id: Optional[str] = None, user_id: Optional[str] = None) -> RequestLogger:
    """Get a request-tagged logger (name is usually __name__)."""
    return RequestLogger(logging.getLogger(name), request_id, user_id)
