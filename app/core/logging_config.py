import logging
import json
import os
import re
from logging.handlers import TimedRotatingFileHandler
from typing import Any

from app.core.context import get_trace_id, get_user_id

# LogRecord 기본 속성 (extra로 들어온 필드만 골라내기 위해 사용)
_RESERVED_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class LogMasker:
    """로그에 남으면 안 되는 값(토큰, 비밀번호 등)을 가리는 유틸리티"""

    MASK = "***"
    SENSITIVE_KEYS = (
        "password",
        "token",
        "secret",
        "api_key",
        "apikey",
        "authorization",
        "jwt",
    )
    _STRING_PATTERN = re.compile(
        r"(?i)\b([\w-]*(?:password|token|secret|api_key|apikey|authorization)[\w-]*)\s*[=:]\s*(?:Bearer\s+)?[^\s,&;]+"
    )

    @classmethod
    def is_sensitive(cls, key: str) -> bool:
        lowered = str(key).lower()
        return any(word in lowered for word in cls.SENSITIVE_KEYS)

    @classmethod
    def mask_dict(cls, data: Any) -> Any:
        """dict/list를 재귀적으로 순회하며 민감 키의 값을 마스킹한 사본을 반환"""
        if isinstance(data, dict):
            return {
                key: cls.MASK if cls.is_sensitive(key) else cls.mask_dict(value)
                for key, value in data.items()
            }
        if isinstance(data, list):
            return [cls.mask_dict(item) for item in data]
        if isinstance(data, str):
            return cls.mask_string(data)
        return data

    @classmethod
    def mask_string(cls, text: str) -> str:
        """`key=value`, `key: value` 형태의 민감 값을 마스킹"""
        return cls._STRING_PATTERN.sub(lambda m: f"{m.group(1)}={cls.MASK}", text)


class SensitiveDataFilter(logging.Filter):
    """Trace ID / 사용자 ID를 주입하고 민감 정보를 마스킹하는 필터"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id()
        if not hasattr(record, "user_id"):
            record.user_id = get_user_id()

        if isinstance(record.msg, dict):
            record.msg = LogMasker.mask_dict(record.msg)
        elif isinstance(record.msg, str) and not record.args:
            record.msg = LogMasker.mask_string(record.msg)

        for key, value in list(vars(record).items()):
            if key in _RESERVED_RECORD_ATTRS:
                continue
            if LogMasker.is_sensitive(key):
                setattr(record, key, LogMasker.MASK)
            elif isinstance(value, (dict, list)):
                setattr(record, key, LogMasker.mask_dict(value))
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        # 메시지가 dict면 그대로 기반으로 삼고, 아니면 기본 구조 생성
        base_message = record.msg if isinstance(record.msg, dict) else {
            "message": record.getMessage()
        }

        log = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            **base_message,
        }

        for key, value in vars(record).items():
            if key in _RESERVED_RECORD_ATTRS or key in log:
                continue
            log[key] = value

        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(log_dir: str = "logs", level: int = logging.INFO):
    """콘솔 + 일자별 파일 로테이션 핸들러를 루트 로거에 설치합니다.

    Note:
        여러 번 호출되어도(테스트에서 app 재import 등) 핸들러가 중복 추가되지 않습니다.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if any(getattr(h, "_radio_library_handler", False) for h in root_logger.handlers):
        return

    os.makedirs(log_dir, exist_ok=True)

    json_formatter = JsonFormatter()
    sensitive_filter = SensitiveDataFilter()

    # 콘솔 핸들러
    console_handler = logging.StreamHandler()

    # 일자별 파일 로테이션 핸들러 (자정 기준, 7일 보관)
    file_handler = TimedRotatingFileHandler(
        filename=os.path.join(log_dir, "app.log"),
        when="midnight",
        backupCount=7,
        encoding="utf-8",
        utc=False,
    )

    for handler in (console_handler, file_handler):
        handler.setFormatter(json_formatter)
        handler.addFilter(sensitive_filter)
        handler._radio_library_handler = True
        root_logger.addHandler(handler)
