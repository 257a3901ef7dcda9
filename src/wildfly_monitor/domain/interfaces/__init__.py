"""
인터페이스 모듈

외부 협력자가 구현해야 하는 인터페이스(Protocol)를 정의합니다.
"""

from wildfly_monitor.domain.interfaces.sink import NotificationSink

__all__ = ["NotificationSink"]
