"""
알림 디스패처

변경된 마커 중 알림 대상을 골라 메시지를 만들고 싱크로 전달합니다.
"""

from __future__ import annotations

import socket
from typing import Iterable

from wildfly_monitor.common.errors import TransportError
from wildfly_monitor.common.logging import BoundLogger, get_logger
from wildfly_monitor.domain.interfaces.sink import NotificationSink
from wildfly_monitor.domain.models.marker import Marker
from wildfly_monitor.domain.models.message import (
    DEFAULT_ICON_URL,
    DEFAULT_USERNAME,
    Attachment,
    AttachmentField,
    FormattedMessage,
    color_for,
)
from wildfly_monitor.application.notify.filter import NOTIFY_ALL, NotifyFilter, should_notify


def build_message(
    marker: Marker,
    channel: str,
    hostname: str,
    username: str = DEFAULT_USERNAME,
    icon_url: str = DEFAULT_ICON_URL,
) -> FormattedMessage:
    """
    마커 하나에 대한 알림 메시지를 만듭니다.

    fallback은 마커 설명이고, 필드에는 호스트 이름과 설명이 들어갑니다.
    """
    fields = (
        AttachmentField("HostName", hostname),
        AttachmentField("Message", marker.description),
    )
    attachment = Attachment(
        fallback=marker.description,
        color=color_for(marker.category),
        fields=fields,
    )
    return FormattedMessage(
        channel=channel,
        attachments=(attachment,),
        username=username,
        icon_url=icon_url,
    )


class NotificationDispatcher:
    """
    알림 디스패처

    마커마다 독립적으로 전송합니다. 한 마커의 전송 실패는 기록만 하고
    나머지 마커 처리를 계속합니다 (재시도 없음, 최대 1회 전달).

    Attributes:
        channel: 알림 채널
        notify_filter: 알림 대상 마커 이름 집합 (빈 집합이면 전체)
        hostname: 메시지에 표시할 호스트 이름

    Example:
        >>> dispatcher = NotificationDispatcher(sink, channel="#deploy")
        >>> dispatcher.dispatch(state)
    """

    def __init__(
        self,
        sink: NotificationSink,
        channel: str,
        notify_filter: NotifyFilter = NOTIFY_ALL,
        hostname: str | None = None,
        username: str = DEFAULT_USERNAME,
        icon_url: str = DEFAULT_ICON_URL,
        logger: BoundLogger | None = None,
    ) -> None:
        self._sink = sink
        self.channel = channel
        self.notify_filter = frozenset(notify_filter)
        self.hostname = hostname if hostname is not None else socket.gethostname()
        self._username = username
        self._icon_url = icon_url
        self._logger = logger or get_logger(__name__)

        # 통계
        self._sent_count = 0
        self._failed_count = 0

    @property
    def sent_count(self) -> int:
        return self._sent_count

    @property
    def failed_count(self) -> int:
        return self._failed_count

    def dispatch(self, markers: Iterable[Marker]) -> int:
        """
        마커 목록을 순서대로 알립니다.

        호출자에게 예외를 전파하지 않습니다.

        Returns:
            전송에 성공한 알림 수
        """
        delivered = 0
        for marker in markers:
            if not should_notify(marker, self.notify_filter):
                continue

            message = build_message(
                marker,
                self.channel,
                self.hostname,
                username=self._username,
                icon_url=self._icon_url,
            )
            try:
                self._sink.send(self.channel, message)
            except TransportError as e:
                self._failed_count += 1
                self._logger.error(
                    f"알림 전송 실패: {e.message}",
                    marker=marker.name,
                    code=e.code.value,
                    **e.details,
                )
                continue
            except Exception as e:
                self._failed_count += 1
                self._logger.exception("알림 전송 중 오류", marker=marker.name, error=str(e))
                continue

            delivered += 1
            self._sent_count += 1
            self._logger.info("Send notification to slack.", marker=marker.name)

        return delivered

    def get_stats(self) -> dict:
        """통계 정보 반환."""
        return {
            "channel": self.channel,
            "notify_filter": sorted(self.notify_filter),
            "sent_count": self._sent_count,
            "failed_count": self._failed_count,
        }
