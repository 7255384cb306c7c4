"""
로깅 설정

모든 모듈은 get_logger(name)으로 로거를 얻습니다.
로그는 stderr로 출력되어 stdout에는 생성된 프롬프트만 남습니다.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from app.config import LOG_FORMAT, LOG_LEVEL

ROOT_LOGGER_NAME = "docs_automation"

# LogRecord 기본 속성 (extra 필드와 구분하기 위함)
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """한 줄에 하나의 JSON 객체로 로그 출력 (extra 필드 포함)"""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """사람이 읽기 위한 포맷 (extra 필드는 key=value로 덧붙임)"""

    def __init__(self):
        super().__init__("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        extras = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if extras:
            text += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return text


def get_logger(name: str) -> logging.Logger:
    """docs_automation 네임스페이스 아래의 로거 반환"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str = "INFO", log_format: str = "text", stream=None) -> logging.Logger:
    """
    루트 로거(docs_automation)에 핸들러 설정

    Args:
        level: 로그 레벨 이름 (DEBUG, INFO, ...)
        log_format: "text" 또는 "json"
        stream: 출력 스트림 (기본값: sys.stderr)

    Returns:
        설정된 루트 로거
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    # 재호출 시 핸들러 중복 방지
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if log_format == "json" else TextFormatter())
    root.addHandler(handler)
    return root


def setup_logging_from_env(level: Optional[str] = None) -> logging.Logger:
    """app.config의 LOG_LEVEL / LOG_FORMAT으로 로깅 설정"""
    return setup_logging(level or LOG_LEVEL, LOG_FORMAT)


def log_error(message: str, error: BaseException, **context) -> None:
    """
    에러 로그 (예외 타입과 context를 extra로 함께 남김)

    Args:
        message: 에러 설명
        error: 발생한 예외
        **context: 추가로 남길 필드 (command, package_name 등)
    """
    logger = get_logger("error")
    logger.error(f"{message}: {error}", extra={"error_type": type(error).__name__, **context},
                 exc_info=logger.isEnabledFor(logging.DEBUG))
