"""
상태 샘플러

마커 디렉터리를 나열하고, 인식되는 확장자를 마커로 변환합니다.
"""

from __future__ import annotations

import os
from typing import Callable

from wildfly_monitor.common.errors import SamplingError
from wildfly_monitor.domain.models.marker import Marker, lookup
from wildfly_monitor.domain.models.state import ObservedState

# 테스트에서 디렉터리 나열 순서를 고정할 때 교체합니다
ListDir = Callable[[str], list[str]]


def _scandir_names(directory: str) -> list[str]:
    with os.scandir(directory) as entries:
        return [entry.name for entry in entries]


def marker_for(file_name: str) -> Marker | None:
    """파일 이름의 마지막 '.' 뒤 토큰을 마커로 변환합니다."""
    extension = file_name.rsplit(".", 1)[-1]
    return lookup(extension)


def sample(directory: str, list_dir: ListDir = _scandir_names) -> ObservedState:
    """
    현재 디렉터리 상태를 관측합니다.

    결과는 디렉터리 나열 순서를 따르며 정렬하지 않습니다.
    같은 마커에 해당하는 파일이 여럿이면 모두 포함됩니다.

    Args:
        directory: 마커 디렉터리 경로
        list_dir: 디렉터리 항목 이름을 반환하는 함수

    Returns:
        관측 상태

    Raises:
        SamplingError: 디렉터리를 나열할 수 없는 경우
    """
    try:
        names = list_dir(directory)
    except OSError as e:
        raise SamplingError(
            f"마커 디렉터리를 읽을 수 없습니다: {directory}",
            directory=directory,
            details={"error": str(e)},
        ) from e

    markers = []
    for name in names:
        marker = marker_for(name)
        if marker is not None:
            markers.append(marker)
    return ObservedState.of(markers)
