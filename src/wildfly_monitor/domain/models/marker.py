"""
마커 모델

WildFly가 배포 디렉터리에 기록하는 배포 마커 파일의 종류를 정의합니다.
마커 카탈로그는 빌드 시점에 고정되며 런타임에 확장되지 않습니다.
이 모듈은 외부 라이브러리에 의존하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class MarkerCategory(str, Enum):
    """
    마커 분류

    알림 메시지의 심각도 색상을 결정합니다.
    """

    START = "Start"     # 배포 시작/완료
    END = "End"         # 배포 해제/대기
    ERROR = "Error"     # 배포 실패


@dataclass(frozen=True)
class Marker:
    """
    배포 마커

    Attributes:
        name: 마커 식별자 (예: "Deployed")
        category: 마커 분류
        description: 알림에 표시할 설명
    """

    name: str
    category: MarkerCategory
    description: str


MARKER_CATALOG: Mapping[str, Marker] = MappingProxyType({
    "dodeploy": Marker("DoDeploy", MarkerCategory.START, "doing deploy"),
    "skipdeploy": Marker("SkipDeploy", MarkerCategory.END, "disable auto-deploy"),
    "isdeploying": Marker("IsDeploying", MarkerCategory.START, "deploying"),
    "deployed": Marker("Deployed", MarkerCategory.START, "deployed"),
    "failed": Marker("Failed", MarkerCategory.ERROR, "deploy failed"),
    "isundeploying": Marker("IsUnDeploying", MarkerCategory.END, "disabling deploy"),
    "undeployed": Marker("UnDeployed", MarkerCategory.END, "disable deploy"),
    "pending": Marker("Pending", MarkerCategory.END, "Pending deploy"),
})
"""확장자 토큰 → 마커 (읽기 전용)"""


def lookup(extension: str) -> Marker | None:
    """확장자 토큰에 해당하는 마커를 반환합니다. 없으면 None."""
    return MARKER_CATALOG.get(extension)


def find_by_name(name: str) -> Marker | None:
    """마커 이름(예: "Failed")으로 마커를 찾습니다."""
    for marker in MARKER_CATALOG.values():
        if marker.name == name:
            return marker
    return None
