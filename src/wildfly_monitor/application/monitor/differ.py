"""
상태 비교기

이전 관측 상태와 새 관측 상태를 비교해 변경 여부를 판단합니다.
변경이 있으면 새 상태의 마커 전체가 알림 후보가 됩니다 (최소 차분을 계산하지 않음).
"""

from __future__ import annotations

from wildfly_monitor.domain.models.marker import Marker
from wildfly_monitor.domain.models.state import ObservedState


def has_changed(
    previous: ObservedState,
    current: ObservedState,
    order_sensitive: bool = False,
) -> bool:
    """
    상태 변경 여부를 반환합니다.

    Args:
        previous: 기준 상태
        current: 새로 관측한 상태
        order_sensitive: True면 같은 마커라도 순서가 다르면 변경으로 판단
    """
    return not previous.same_as(current, order_sensitive=order_sensitive)


def changed_markers(current: ObservedState) -> list[Marker]:
    """변경 시 알림 후보가 되는 마커 목록 (현재 상태 전체)."""
    return list(current)
