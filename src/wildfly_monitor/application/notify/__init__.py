"""
알림 패키지

알림 필터링, 메시지 구성, 싱크 호출을 담당합니다.
"""

from wildfly_monitor.application.notify.dispatcher import NotificationDispatcher, build_message
from wildfly_monitor.application.notify.filter import (
    NOTIFY_ALL,
    NotifyFilter,
    resolve_notify_filter,
    should_notify,
)

__all__ = [
    "NOTIFY_ALL",
    "NotificationDispatcher",
    "NotifyFilter",
    "build_message",
    "resolve_notify_filter",
    "should_notify",
]
