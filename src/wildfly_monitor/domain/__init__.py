"""
Domain Layer

순수 비즈니스 규칙과 엔티티를 정의합니다.
외부 라이브러리에 의존하지 않으며, 표준 라이브러리만 사용합니다.

구성 요소:
- interfaces: 알림 싱크 인터페이스 (Protocol)
- models: 데이터 모델 (Marker, ObservedState, FormattedMessage)
"""

from wildfly_monitor.domain.interfaces.sink import NotificationSink
from wildfly_monitor.domain.models.marker import MARKER_CATALOG, Marker, MarkerCategory
from wildfly_monitor.domain.models.message import FormattedMessage
from wildfly_monitor.domain.models.state import ObservedState

__all__ = [
    # 인터페이스
    "NotificationSink",
    # 마커 모델
    "MARKER_CATALOG",
    "Marker",
    "MarkerCategory",
    # 상태/메시지 모델
    "ObservedState",
    "FormattedMessage",
]
