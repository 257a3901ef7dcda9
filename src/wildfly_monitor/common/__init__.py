"""
공통 유틸리티 모듈

에러 처리, 로깅 등 전체 애플리케이션에서 사용하는 공통 기능을 제공합니다.
"""

from wildfly_monitor.common.errors import (
    ConfigError,
    ErrorCode,
    MonitorError,
    SamplingError,
    TransportError,
)
from wildfly_monitor.common.logging import BoundLogger, configure_logging, get_logger

__all__ = [
    # 에러
    "MonitorError",
    "ConfigError",
    "SamplingError",
    "TransportError",
    "ErrorCode",
    # 로깅
    "BoundLogger",
    "get_logger",
    "configure_logging",
]
