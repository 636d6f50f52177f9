"""
Logging configuration
Text output for local runs, JSON lines for deployments
"""
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from pythonjsonlogger import jsonlogger

from a11yscan.core.config import Settings


class ScanJsonFormatter(jsonlogger.JsonFormatter):
    def __init__(self, *args, app_name: str = "A11yScan", **kwargs):
        super().__init__(*args, **kwargs)
        self.app_name = app_name

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["app"] = self.app_name
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(settings: Settings, stream: Optional[TextIO] = None) -> None:
    """Configure the root logger from settings. Safe to call more than once."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    if settings.log_format == "json":
        formatter = ScanJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s", app_name=settings.app_name
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
