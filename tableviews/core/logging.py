# File: /tableviews/core/logging.py | Version: 1.0 | Title: App logging configuration (quiet httpx/sqlalchemy; JSON optional)
import json
import logging
import logging.config
from typing import Optional

from tableviews.core.config import settings


class JsonConsole(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def configure_logging(level: Optional[str] = None, use_json: Optional[bool] = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if use_json is None else use_json

    if use_json:
        formatter = {"()": JsonConsole}
    else:
        formatter = {
            "format": "%(levelname)s %(asctime)s %(name)s: %(message)s",
            "class": "logging.Formatter",
        }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": formatter,
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        "loggers": {
            # Quiet overly chatty libraries during tests to avoid closed-stream errors
            "httpx": {"level": "WARNING", "propagate": False},
            "httpcore": {"level": "WARNING", "propagate": False},
            "python_multipart": {"level": "WARNING"},
            "sqlalchemy.engine": {"level": "WARNING"},
            "tableviews": {"level": level},
        },
    }

    logging.config.dictConfig(config)
