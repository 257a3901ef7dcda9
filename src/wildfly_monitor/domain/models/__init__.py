"""
데이터 모델 모듈

마커, 관측 상태, 알림 메시지 등 핵심 데이터 구조를 정의합니다.
"""

from wildfly_monitor.domain.models.marker import (
    MARKER_CATALOG,
    Marker,
    MarkerCategory,
    find_by_name,
    lookup,
)
from wildfly_monitor.domain.models.message import (
    Attachment,
    AttachmentField,
    FormattedMessage,
    color_for,
)
from wildfly_monitor.domain.models.state import ObservedState

__all__ = [
    # 마커
    "MARKER_CATALOG",
    "Marker",
    "MarkerCategory",
    "find_by_name",
    "lookup",
    # 메시지
    "Attachment",
    "AttachmentField",
    "FormattedMessage",
    "color_for",
    # 상태
    "ObservedState",
]
