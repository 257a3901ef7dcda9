"""
폴링 루프

주기적으로 마커 디렉터리를 관측하고, 상태가 바뀌면 알림을 보냅니다.
루프가 기준 상태와 종료 플래그를 단독으로 소유하므로 잠금이 필요 없습니다.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Callable

from wildfly_monitor.application.monitor.differ import changed_markers, has_changed
from wildfly_monitor.application.monitor.sampler import sample
from wildfly_monitor.application.notify.dispatcher import NotificationDispatcher
from wildfly_monitor.common.errors import SamplingError
from wildfly_monitor.common.logging import BoundLogger, get_logger
from wildfly_monitor.domain.models.state import ObservedState

# 프로세스 종료 코드
EXIT_OK = 0
EXIT_ERROR = 1


class LoopState(str, Enum):
    """폴링 루프 상태"""

    IDLE = "IDLE"               # 대기 (sleep)
    SAMPLING = "SAMPLING"       # 디렉터리 관측
    COMPARING = "COMPARING"     # 기준 상태와 비교
    NOTIFYING = "NOTIFYING"     # 알림 전송
    STOPPED = "STOPPED"         # 종료


class MonitorLoop:
    """
    폴링 루프

    매 반복마다 대기 → 관측 → 비교 → (변경 시) 알림 순서로 진행합니다.

    - 첫 관측은 기준 상태로만 기록하고 알림을 보내지 않습니다.
    - 관측 실패(SamplingError)는 재시도하지 않고 EXIT_ERROR로 종료합니다.
    - stop()은 대기 중인 wait를 즉시 깨우므로 종료 지연은 폴링 주기와 무관합니다.
    - 알림 전송은 동기식이며 타임아웃을 걸지 않습니다. 응답 없는 싱크는 루프를 멈춥니다.

    Attributes:
        directory: 마커 디렉터리 경로
        interval_seconds: 폴링 주기 (초)
        order_sensitive: True면 마커 순서 변화도 상태 변경으로 판단

    Example:
        >>> loop = MonitorLoop("/opt/wildfly/standalone/deployments", 5, dispatcher)
        >>> signal.signal(signal.SIGTERM, lambda *_: loop.stop())
        >>> exit_code = loop.run()
    """

    def __init__(
        self,
        directory: str,
        interval_seconds: float,
        dispatcher: NotificationDispatcher,
        sampler: Callable[[str], ObservedState] = sample,
        logger: BoundLogger | None = None,
        order_sensitive: bool = False,
    ) -> None:
        self.directory = directory
        self.interval_seconds = interval_seconds
        self.order_sensitive = order_sensitive
        self._dispatcher = dispatcher
        self._sampler = sampler
        self._logger = (logger or get_logger(__name__)).bind(directory=directory)

        self._stop_event = threading.Event()
        self._baseline: ObservedState | None = None
        self.state = LoopState.IDLE

        # 통계
        self._poll_count = 0
        self._change_count = 0

    @property
    def baseline(self) -> ObservedState | None:
        """마지막으로 기록된 기준 상태"""
        return self._baseline

    @property
    def stopping(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        """
        루프 종료를 요청합니다.

        시그널 핸들러에서 호출해도 안전합니다.
        """
        self._stop_event.set()

    def run(self) -> int:
        """
        루프를 실행합니다. 종료될 때까지 반환하지 않습니다.

        Returns:
            EXIT_OK (종료 요청) 또는 EXIT_ERROR (관측 실패)
        """
        while not self._stop_event.is_set():
            self.state = LoopState.IDLE
            if self._stop_event.wait(self.interval_seconds):
                break

            self.state = LoopState.SAMPLING
            try:
                current = self._sampler(self.directory)
            except SamplingError as e:
                self._logger.error(e.message, code=e.code.value, **e.details)
                self.state = LoopState.STOPPED
                return EXIT_ERROR
            self._poll_count += 1

            if self._baseline is None:
                self._baseline = current
                self._logger.debug("기준 상태 기록", markers=current.names())
                continue

            self.state = LoopState.COMPARING
            if not has_changed(self._baseline, current, order_sensitive=self.order_sensitive):
                continue

            self.state = LoopState.NOTIFYING
            self._on_change(current)
            self._baseline = current

        self.state = LoopState.STOPPED
        return EXIT_OK

    def _on_change(self, current: ObservedState) -> None:
        self._change_count += 1
        self._logger.info("Change State")

        markers = changed_markers(current)
        for marker in markers:
            self._logger.info(
                "Change State",
                name=marker.name,
                description=marker.description,
            )
        self._dispatcher.dispatch(markers)

    def get_stats(self) -> dict:
        """통계 정보 반환."""
        return {
            "directory": self.directory,
            "state": self.state.value,
            "poll_count": self._poll_count,
            "change_count": self._change_count,
            "baseline": self._baseline.names() if self._baseline is not None else None,
        }
