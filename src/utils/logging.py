"""Structured JSON logging configuration."""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict, Any

MAX_LOG_MESSAGE_LENGTH = 500

# Extra fields whose values must never reach log output
SENSITIVE_FIELDS = {
    'password', 'password_hash', 'token', 'secret', 'api_key', 'authorization',
}


def sanitize_log_message(message: str | None) -> str:
    """Flatten and truncate untrusted text before it is logged."""
    if not message:
        return ""
    flattened = message.replace('\r', ' ').replace('\n', ' ')
    if len(flattened) > MAX_LOG_MESSAGE_LENGTH:
        return flattened[:MAX_LOG_MESSAGE_LENGTH] + "..."
    return flattened


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    # Standard LogRecord attributes that should not be included as extra fields
    _STANDARD_ATTRS = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
        'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname',
        'process', 'processName', 'relativeCreated', 'thread', 'threadName',
        'exc_info', 'exc_text', 'stack_info', 'taskName'
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # logger.info("msg", extra={"userId": 1}) puts userId straight into record.__dict__
        for key, value in record.__dict__.items():
            if key in self._STANDARD_ATTRS or callable(value):
                continue
            if key.lower() in SENSITIVE_FIELDS:
                log_data[key] = "[REDACTED]"
            else:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_structured_logging(level: str | None = None):
    """Send every logger through one JSON handler on stderr.

    ``level`` defaults to the LOG_LEVEL env var, then INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    root_logger.handlers = [handler]

    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.handlers = [handler]
    uvicorn_access.setLevel(logging.WARNING)

    for noisy in ("LiteLLM", "botocore", "boto3", "httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
