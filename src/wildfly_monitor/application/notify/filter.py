"""
알림 필터

운영자가 알림을 원하는 마커 이름 집합입니다. 빈 집합이면 모든 마커를 알립니다.
"""

from __future__ import annotations

from typing import Iterable

from wildfly_monitor.common.errors import ConfigError, ErrorCode
from wildfly_monitor.domain.models.marker import MARKER_CATALOG, Marker, find_by_name

NotifyFilter = frozenset[str]

NOTIFY_ALL: NotifyFilter = frozenset()


def resolve_notify_filter(entries: Iterable[str]) -> NotifyFilter:
    """
    설정의 알림 마커 목록을 마커 이름 집합으로 변환합니다.

    각 항목은 확장자 토큰("failed") 또는 마커 이름("Failed")일 수 있습니다.

    Raises:
        ConfigError: 카탈로그에 없는 항목이 있는 경우 (시작 시 치명적)
    """
    names: set[str] = set()
    for entry in entries:
        marker = MARKER_CATALOG.get(entry) or find_by_name(entry)
        if marker is None:
            raise ConfigError(
                ErrorCode.MARKER_UNKNOWN,
                f"Error specify marker :{entry}",
                field_name="app.notify_marker",
                details={"marker": entry, "known": sorted(MARKER_CATALOG)},
            )
        names.add(marker.name)
    return frozenset(names)


def should_notify(marker: Marker, notify_filter: NotifyFilter) -> bool:
    if not notify_filter:
        return True
    return marker.name in notify_filter
