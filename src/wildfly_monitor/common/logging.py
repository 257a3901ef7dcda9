"""
구조화 로깅 모듈

wildfly_monitor 전체에서 사용하는 로깅 설정과 유틸리티를 제공합니다.
loguru 기반으로 구조화된 로깅을 지원합니다.

주요 기능:
- JSON 형식 출력 (운영 환경, 로그 파일)
- 컬러 콘솔 출력 (개발 환경)
- 키워드 인자를 구조화 필드로 기록 (marker, description, error 등)
"""

import os
import sys
from functools import lru_cache
from typing import Any

import orjson
from loguru import logger


# loguru 내부 바인딩용 키 (구조화 필드에서 제외)
_INTERNAL_KEYS = ("logger_name", "_json")


def _serialize_record(record: dict[str, Any]) -> str:
    """레코드를 JSON 한 줄로 직렬화합니다."""
    log_entry: dict[str, Any] = {
        "timestamp": record["time"].strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["extra"].get("logger_name", record["name"]),
    }

    for key, value in record["extra"].items():
        if key not in _INTERNAL_KEYS:
            log_entry[key] = value

    if record["exception"]:
        exc_type, exc_value, _ = record["exception"]
        log_entry["exception"] = {
            "type": exc_type.__name__ if exc_type else None,
            "value": str(exc_value) if exc_value else None,
        }

    return orjson.dumps(log_entry, default=str).decode("utf-8")


def _json_formatter(record: dict[str, Any]) -> str:
    """
    JSON 형식의 로그 포맷터

    loguru는 포맷터 반환값을 템플릿으로 다시 포맷하므로,
    직렬화 결과는 extra에 넣고 템플릿에서 참조합니다.
    """
    record["extra"]["_json"] = _serialize_record(record)
    return "{extra[_json]}\n"


def _console_formatter(record: dict[str, Any]) -> str:
    """
    컬러 콘솔 형식의 로그 포맷터

    개발 환경에서 가독성을 높입니다.
    """
    fmt = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    fmt += "<level>{level: <8}</level> | "
    fmt += "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    fmt += "<level>{message}</level>"

    fields = [key for key in record["extra"] if key not in _INTERNAL_KEYS]
    if fields:
        fmt += " | " + " ".join(f"<yellow>{key}={{extra[{key}]}}</yellow>" for key in fields)

    fmt += "\n"
    if record["exception"]:
        fmt += "{exception}"
    return fmt


# 로그 레벨 매핑
_LOG_LEVELS = {
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARNING": "WARNING",
    "WARN": "WARNING",
    "ERROR": "ERROR",
    "CRITICAL": "CRITICAL",
}


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    로깅 설정을 초기화합니다.

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL). None이면 환경변수로 결정
        json_output: 표준 출력을 JSON 형식으로 쓸지 여부 (None이면 환경변수로 결정)
        log_file: 로그 파일 경로. 지정하면 표준 출력 대신 파일에 JSON으로 추가 기록

    환경변수:
        LOG_LEVEL: 로그 레벨 (기본: INFO)
        LOG_FORMAT: 로그 포맷 (json 또는 console, 기본: console)
        LOG_FILE: 로그 파일 경로
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    log_level = _LOG_LEVELS.get(level.upper(), "INFO")

    if json_output is None:
        json_output = os.getenv("LOG_FORMAT", "console").lower() == "json"

    if log_file is None:
        log_file = os.getenv("LOG_FILE") or None

    # 기존 핸들러 제거
    logger.remove()

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        logger.add(
            log_file,
            format=_json_formatter,
            level=log_level,
            rotation="100 MB",
            retention="7 days",
            encoding="utf-8",
        )
    elif json_output:
        logger.add(
            sys.stdout,
            format=_json_formatter,
            level=log_level,
        )
    else:
        logger.add(
            sys.stdout,
            format=_console_formatter,
            level=log_level,
            colorize=True,
        )

    logger.debug(
        f"로깅 설정 완료: level={log_level}, json={json_output}, file={log_file}"
    )


class BoundLogger:
    """
    컨텍스트가 바인딩된 로거

    폴링 루프와 디스패처에 생성자 인자로 전달됩니다.
    bind()로 고정 필드(예: directory)를 추가한 로거를 만들 수 있습니다.
    """

    def __init__(self, name: str, **context: Any) -> None:
        self._name = name
        self._context = dict(context)
        self._logger = logger.bind(logger_name=name)

    @property
    def name(self) -> str:
        return self._name

    def bind(self, **kwargs: Any) -> "BoundLogger":
        """추가 컨텍스트를 바인딩한 새 로거를 반환합니다."""
        return BoundLogger(self._name, **{**self._context, **kwargs})

    def _log(self, level: str, message: str, kwargs: dict[str, Any]) -> None:
        extra = {**self._context, **kwargs}
        self._logger.bind(**extra).opt(depth=2).log(level, message)

    def debug(self, message: str, **kwargs: Any) -> None:
        """DEBUG 레벨 로그를 기록합니다."""
        self._log("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """INFO 레벨 로그를 기록합니다."""
        self._log("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """WARNING 레벨 로그를 기록합니다."""
        self._log("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """ERROR 레벨 로그를 기록합니다."""
        self._log("ERROR", message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """CRITICAL 레벨 로그를 기록합니다."""
        self._log("CRITICAL", message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """예외 정보와 함께 ERROR 레벨 로그를 기록합니다."""
        extra = {**self._context, **kwargs}
        self._logger.bind(**extra).opt(depth=1, exception=True).error(message)


@lru_cache(maxsize=128)
def get_logger(name: str) -> BoundLogger:
    """
    로거 인스턴스를 반환합니다.

    동일한 이름으로 호출하면 캐시된 인스턴스를 반환합니다.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Change State", marker="Deployed", description="deployed")
    """
    return BoundLogger(name)


# 기본 로깅 설정 (모듈 임포트 시 실행)
# 애플리케이션에서 configure_logging()을 호출하여 재설정 가능
if not os.getenv("WILDFLY_MONITOR_SKIP_DEFAULT_LOGGING"):
    configure_logging()
