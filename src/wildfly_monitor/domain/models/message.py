"""
알림 메시지 모델

Slack incoming webhook의 attachment 메시지 구조를 정의합니다.
이 모듈은 외부 라이브러리에 의존하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wildfly_monitor.domain.models.marker import MarkerCategory


# 분류별 attachment 색상 (Slack 예약 색상)
COLOR_GOOD = "good"         # 초록
COLOR_WARNING = "warning"   # 노랑
COLOR_DANGER = "danger"     # 빨강

_CATEGORY_COLORS: dict[MarkerCategory, str] = {
    MarkerCategory.START: COLOR_GOOD,
    MarkerCategory.END: COLOR_WARNING,
    MarkerCategory.ERROR: COLOR_DANGER,
}

DEFAULT_USERNAME = "Wildfly State Monitor"
DEFAULT_ICON_URL = "http://design.jboss.org/wildfly/logo/final/wildfly_icon_64px.png"


def color_for(category: MarkerCategory) -> str:
    """마커 분류에 해당하는 심각도 색상을 반환합니다."""
    return _CATEGORY_COLORS[category]


@dataclass(frozen=True)
class AttachmentField:
    """attachment 안의 제목/값 한 쌍"""

    title: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "value": self.value}


@dataclass(frozen=True)
class Attachment:
    """
    attachment

    Attributes:
        fallback: 알림 미리보기 등에 쓰이는 짧은 텍스트
        color: 심각도 색상 (good, warning, danger)
        fields: 제목/값 필드 목록
    """

    fallback: str
    color: str
    fields: tuple[AttachmentField, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "fallback": self.fallback,
            "color": self.color,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass(frozen=True)
class FormattedMessage:
    """
    채널로 보낼 메시지

    Example:
        >>> message = FormattedMessage(
        ...     channel="#deploy",
        ...     attachments=(Attachment("deployed", "good"),),
        ... )
        >>> message.to_payload()["channel"]
        '#deploy'
    """

    channel: str
    attachments: tuple[Attachment, ...] = ()
    username: str = DEFAULT_USERNAME
    icon_url: str = DEFAULT_ICON_URL

    def to_payload(self) -> dict[str, Any]:
        """webhook 요청 본문(payload)으로 변환합니다."""
        return {
            "channel": self.channel,
            "username": self.username,
            "icon_url": self.icon_url,
            "attachments": [a.to_dict() for a in self.attachments],
        }
