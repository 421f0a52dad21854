import json
import logging
import os
import traceback
from datetime import datetime, timezone
from logging import Logger as StdLogger
from typing import Optional

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Structured fields passed as ``extra={"properties": {...}}`` are emitted
    under ``properties``. Records at ERROR and above carry a ``trace`` with
    the formatted exception, or the current stack when there is none.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": record.levelname,
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        properties = getattr(record, "properties", None)
        if properties:
            entry["properties"] = {key: str(value) for key, value in properties.items()}
        if record.levelno >= logging.ERROR:
            if record.exc_info:
                entry["trace"] = self.formatException(record.exc_info)
            else:
                entry["trace"] = "".join(traceback.format_stack())
        return json.dumps(entry)


def setup_logging(noisy_libs: Optional[dict[str, int]] = None, json_format: Optional[bool] = None):
    if json_format is None:
        json_format = os.getenv("LOG_FORMAT", "text").lower() == "json"

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        handlers=[handler],
        force=True,
    )

    if noisy_libs is not None:
        for lib, level in noisy_libs.items():
            logging.getLogger(lib).setLevel(level)


class Logger:
    @staticmethod
    def get_logger(name: Optional[str] = None) -> StdLogger:
        return logging.getLogger(name)
