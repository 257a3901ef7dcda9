"""
설정 패키지

config.yaml 로딩과 스키마 검증을 담당합니다.
"""

from wildfly_monitor.interface.config.loader import ConfigLoader
from wildfly_monitor.interface.config.schema import AppConfig, AppSettings, SlackConfig, WildflyConfig

__all__ = [
    "AppConfig",
    "AppSettings",
    "ConfigLoader",
    "SlackConfig",
    "WildflyConfig",
]
