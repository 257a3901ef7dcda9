"""
wildfly_monitor - WildFly 배포 마커 상태 모니터

배포 디렉터리의 마커 파일(.deployed, .failed 등)을 주기적으로 관측하고,
상태가 바뀌면 Slack 채널로 알림을 보냅니다.
"""

__version__ = "0.1.0"
__author__ = "wildfly_monitor Team"

from wildfly_monitor.common.errors import (
    ConfigError,
    ErrorCode,
    MonitorError,
    SamplingError,
    TransportError,
)
from wildfly_monitor.common.logging import get_logger

__all__ = [
    "__version__",
    "MonitorError",
    "ConfigError",
    "SamplingError",
    "TransportError",
    "ErrorCode",
    "get_logger",
]
