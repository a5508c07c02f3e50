import logging
import sys
import uuid
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from . import config

request_id_var: ContextVar[str] = ContextVar("request_id", default="<not-set>")


class RequestIdFilter(logging.Filter):
    """Attaches the current request id to every log record."""

    def filter(self, record):
        record.request_id = request_id_var.get()
        return True


def setup_logging(level: str | None = None):
    """
    Configure the root logger for structured JSON output on stdout.
    Existing handlers are dropped so repeated calls (uvicorn reload, tests)
    don't duplicate lines.
    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()
    root_logger.setLevel(level or config.LOG_LEVEL)

    handler = logging.StreamHandler(sys.stdout)
    formatter = JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s %(request_id)s",
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
    )
    handler.setFormatter(formatter)
    handler.addFilter(RequestIdFilter())
    root_logger.addHandler(handler)


def generate_request_id() -> str:
    return f"REQ:{uuid.uuid4()}"
