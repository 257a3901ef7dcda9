"""
Application Layer

비즈니스 로직과 유스케이스를 구현합니다.
Domain Layer만 참조하며, Infrastructure와 Interface Layer에 의존하지 않습니다.

구성 요소:
- monitor: 상태 샘플링, 비교, 폴링 루프
- notify: 알림 필터링과 디스패치
"""

from wildfly_monitor.application.monitor.loop import EXIT_ERROR, EXIT_OK, MonitorLoop
from wildfly_monitor.application.notify.dispatcher import NotificationDispatcher

__all__ = [
    "EXIT_ERROR",
    "EXIT_OK",
    "MonitorLoop",
    "NotificationDispatcher",
]
