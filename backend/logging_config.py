# logging_config.py
import logging
import uuid

from fastapi import Request

from config import LOG_LEVEL


def configure_logging() -> logging.Logger:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("trivia")


class RequestLogger(logging.LoggerAdapter):
    """Prefixes every message with the id of the request it belongs to."""

    def process(self, msg, kwargs):
        return f"[{self.extra['request_id']}] {msg}", kwargs


def request_logger(request: Request) -> RequestLogger:
    # X-Request-ID from the caller wins, else a fresh id
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    return RequestLogger(logging.getLogger("trivia.api"), {"request_id": request_id})
