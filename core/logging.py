"""로깅 설정 유틸리티(KR). Logging configuration utilities (EN).

구체화 로그는 ``extra``로 ``policy``/``target``/``depth`` 필드를 넘기며,
포맷터는 이를 JSON 최상위 키로 기록합니다.
Materialization logs pass ``policy``/``target``/``depth`` through ``extra``;
the formatter writes them as top-level JSON keys.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

LOGGER_NAMES = ("core", "embedfs", "cli")

# attributes every LogRecord carries; anything else arrived through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """``extra``로 전달된 필드만 추린다 · Return the fields passed through ``extra``."""

    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    """구체화 이벤트 JSON 포맷터 · JSON formatter for materialization events."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": utc_now(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key, value in record_fields(record).items():
            payload.setdefault(key, value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def utc_now() -> str:
    """UTC 현재 시각을 ISO8601로 반환 · Return UTC now as ISO8601."""

    return datetime.now(tz=timezone.utc).isoformat(timespec="seconds")


def configure_logging(log_file: Path, level: str = "INFO") -> None:
    """구체화 로거들을 JSON 파일로 보낸다 · Route materialization loggers to a JSON file."""

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JsonFormatter}},
            "handlers": {
                "file": {
                    "class": "logging.FileHandler",
                    "formatter": "json",
                    "filename": str(log_file),
                    "encoding": "utf-8",
                }
            },
            "loggers": {
                name: {"level": level.upper(), "handlers": ["file"], "propagate": False}
                for name in LOGGER_NAMES
            },
        }
    )


__all__ = ["configure_logging", "JsonFormatter", "record_fields", "utc_now"]
