"""
관측 상태 모델

한 번의 폴링에서 파일시스템이 알려준 마커 목록을 나타냅니다.
이 모듈은 외부 라이브러리에 의존하지 않습니다.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from wildfly_monitor.domain.models.marker import Marker


@dataclass(frozen=True)
class ObservedState:
    """
    관측 상태

    디렉터리 나열 순서대로 마커를 보관합니다. 같은 마커가 여러 번
    나타날 수 있습니다 (중복 제거 없음).

    기본 비교(==)는 순서까지 같아야 동일합니다.
    순서를 무시한 비교는 same_as(order_sensitive=False)를 사용합니다.
    """

    markers: tuple[Marker, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, markers: Iterable[Marker]) -> "ObservedState":
        return cls(tuple(markers))

    def __iter__(self) -> Iterator[Marker]:
        return iter(self.markers)

    def __len__(self) -> int:
        return len(self.markers)

    def names(self) -> list[str]:
        return [marker.name for marker in self.markers]

    def same_as(self, other: "ObservedState", order_sensitive: bool = False) -> bool:
        """
        두 상태가 같은지 비교합니다.

        Args:
            other: 비교 대상 상태
            order_sensitive: True면 순서까지 비교, False면 다중집합으로 비교
        """
        if order_sensitive:
            return self.markers == other.markers
        return Counter(self.markers) == Counter(other.markers)
