"""
모니터링 패키지

상태 샘플링, 비교, 폴링 루프를 담당합니다.
"""

from wildfly_monitor.application.monitor.differ import changed_markers, has_changed
from wildfly_monitor.application.monitor.loop import EXIT_ERROR, EXIT_OK, LoopState, MonitorLoop
from wildfly_monitor.application.monitor.sampler import marker_for, sample

__all__ = [
    "EXIT_ERROR",
    "EXIT_OK",
    "LoopState",
    "MonitorLoop",
    "changed_markers",
    "has_changed",
    "marker_for",
    "sample",
]
