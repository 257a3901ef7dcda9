# -*- coding: utf-8 -*-
"""
Slack webhook 전송 클라이언트.

httpx를 사용하여 알림 메시지를 Slack incoming webhook으로 전송합니다.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import httpx
import orjson

from wildfly_monitor.common.errors import ErrorCode, TransportError
from wildfly_monitor.common.logging import get_logger

if TYPE_CHECKING:
    from wildfly_monitor.domain.models.message import FormattedMessage


TRANSPORT_TYPE = "slack"


class SlackWebhookClient:
    """
    Slack webhook 전송 클라이언트.

    NotificationSink를 구현합니다. 메시지 JSON을 `payload` 폼 필드로 POST합니다.
    재시도하지 않으며, 실패하면 TransportError를 발생시킵니다.

    Example:
        >>> with SlackWebhookClient("https://hooks.slack.com/services/...") as client:
        ...     client.send("#deploy", message)
    """

    def __init__(
        self,
        api_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        SlackWebhookClient 초기화.

        Args:
            api_url: webhook URL
            timeout_seconds: 요청 타임아웃 (초)
            transport: httpx 전송 계층 (테스트용 MockTransport 등)
        """
        self._api_url = api_url
        self._timeout_seconds = timeout_seconds
        self._transport = transport

        self._client: httpx.Client | None = None

        # 통계
        self._sent_count = 0
        self._error_count = 0
        self._total_latency_ms = 0.0

        self._logger = get_logger(__name__)

    @property
    def url(self) -> str:
        return self._api_url

    @property
    def running(self) -> bool:
        return self._client is not None

    @property
    def sent_count(self) -> int:
        """전송된 메시지 수."""
        return self._sent_count

    @property
    def error_count(self) -> int:
        """오류 수."""
        return self._error_count

    @property
    def avg_latency_ms(self) -> float:
        """평균 전송 지연 시간 (밀리초)."""
        if self._sent_count == 0:
            return 0.0
        return self._total_latency_ms / self._sent_count

    def start(self) -> None:
        """클라이언트를 시작합니다."""
        if self._client is not None:
            return

        self._client = httpx.Client(
            timeout=self._timeout_seconds,
            transport=self._transport,
        )
        self._logger.info("Slack 클라이언트 시작")

    def stop(self) -> None:
        """클라이언트를 중지합니다."""
        if self._client is None:
            return

        self._client.close()
        self._client = None
        self._logger.info("Slack 클라이언트 중지")

    def send(self, channel: str, message: FormattedMessage) -> None:
        """
        메시지를 동기적으로 전송합니다.

        Args:
            channel: 대상 채널 (메시지의 channel보다 우선)
            message: 전송할 메시지

        Raises:
            TransportError: 클라이언트 미시작, 네트워크 오류, 2xx 이외의 응답
        """
        if self._client is None:
            raise TransportError(
                ErrorCode.TRANSPORT_FAILED,
                "Slack 클라이언트가 실행 중이 아님",
                transport_type=TRANSPORT_TYPE,
            )

        payload = message.to_payload()
        payload["channel"] = channel
        start_time = time.perf_counter()

        try:
            response = self._client.post(
                self._api_url,
                data={"payload": orjson.dumps(payload).decode("utf-8")},
            )
        except httpx.TimeoutException as e:
            self._error_count += 1
            raise TransportError(
                ErrorCode.TRANSPORT_TIMEOUT,
                f"Slack 요청 타임아웃: {e}",
                transport_type=TRANSPORT_TYPE,
                details={"channel": channel},
            ) from e
        except httpx.HTTPError as e:
            self._error_count += 1
            raise TransportError(
                ErrorCode.TRANSPORT_FAILED,
                f"Slack 요청 오류: {e}",
                transport_type=TRANSPORT_TYPE,
                details={"channel": channel},
            ) from e

        if not response.is_success:
            self._error_count += 1
            raise TransportError(
                ErrorCode.TRANSPORT_FAILED,
                f"Http Status is {response.status_code}",
                transport_type=TRANSPORT_TYPE,
                status_code=response.status_code,
                details={"channel": channel, "response": response.text[:200]},
            )

        latency_ms = (time.perf_counter() - start_time) * 1000
        self._sent_count += 1
        self._total_latency_ms += latency_ms

        self._logger.debug(
            "Slack 전송 완료",
            channel=channel,
            latency_ms=f"{latency_ms:.1f}",
        )

    def get_stats(self) -> dict:
        """통계 정보 반환."""
        return {
            "running": self.running,
            "sent_count": self._sent_count,
            "error_count": self._error_count,
            "avg_latency_ms": self.avg_latency_ms,
        }

    def __enter__(self) -> SlackWebhookClient:
        """컨텍스트 매니저 진입."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """컨텍스트 매니저 종료."""
        self.stop()
