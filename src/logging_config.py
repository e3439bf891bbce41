"""
로깅 설정.

- 개발 환경: 사람이 읽기 쉬운 한 줄 포맷
- 운영 환경: JSON 포맷 (로그 수집기 호환)
- 로그 레벨과 포맷은 Settings(log_level, log_format)로 제어합니다.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from src.config import Settings, settings as default_settings


class JSONFormatter(logging.Formatter):
    """로그 수집용 JSON 포매터."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        for key in ("project_id", "user_id", "ticket_id", "dependency_id"):
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val
        return json.dumps(log_entry, ensure_ascii=False)


READABLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(config: Optional[Settings] = None) -> None:
    """루트 로거에 핸들러를 설치합니다. 여러 번 호출해도 핸들러가 중복되지 않습니다."""
    config = config or default_settings

    handler = logging.StreamHandler(sys.stdout)
    if config.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(READABLE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(config.log_level.upper())

    # SQLAlchemy 엔진 로그는 DEBUG일 때만 노출
    if config.log_level.upper() != "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
