"""
알림 싱크 인터페이스

디스패처가 메시지를 넘기는 외부 협력자를 Protocol로 정의합니다.
실제 구현(Slack webhook 클라이언트)은 Infrastructure Layer에 있습니다.

이 모듈은 외부 라이브러리에 의존하지 않습니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wildfly_monitor.domain.models.message import FormattedMessage


@runtime_checkable
class NotificationSink(Protocol):
    """
    알림 싱크 (Protocol)

    send()는 성공 시 아무것도 반환하지 않고,
    전송에 실패하면 TransportError를 발생시킵니다.
    타임아웃이나 취소는 호출 측에서 적용하지 않습니다.
    """

    def send(self, channel: str, message: "FormattedMessage") -> None: ...
