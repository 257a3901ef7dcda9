"""
설정 로더

config.yaml을 로드하고 Pydantic 스키마로 검증합니다.
알림 마커 목록은 이 단계에서 카탈로그와 대조해 NotifyFilter로 변환합니다.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from wildfly_monitor.application.notify.filter import NotifyFilter, resolve_notify_filter
from wildfly_monitor.common.errors import ConfigError, ErrorCode
from wildfly_monitor.common.logging import get_logger

from .schema import AppConfig

logger = get_logger(__name__)


class ConfigLoader:
    """config.yaml 로딩 및 변환을 담당합니다."""

    def __init__(self, default_path: str = "config.yaml") -> None:
        self._default_path = Path(default_path)

    def load_from_file(self, path: str | Path | None = None) -> AppConfig:
        """파일에서 설정을 로드하고 검증합니다."""
        target = Path(path) if path else self._default_path

        if not target.is_file():
            raise ConfigError(
                ErrorCode.CONFIG_NOT_FOUND,
                f"not found config file: {target}",
                config_path=str(target),
            )

        try:
            content = target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(
                ErrorCode.CONFIG_PARSE_ERROR,
                f"parse error config file: {target}",
                config_path=str(target),
                details={"error": str(e)},
            ) from e

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(
                ErrorCode.CONFIG_PARSE_ERROR,
                f"parse error config file: {target}",
                config_path=str(target),
                details={"error": str(e)},
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                ErrorCode.CONFIG_PARSE_ERROR,
                f"parse error config file: {target}",
                config_path=str(target),
                details={"error": "최상위 항목은 매핑이어야 합니다"},
            )

        return self.load_from_dict(data, config_path=str(target))

    def load_from_dict(
        self,
        data: dict[str, Any],
        config_path: str | None = None,
    ) -> AppConfig:
        """딕셔너리에서 설정을 검증합니다."""
        try:
            return AppConfig.model_validate(data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigError(
                ErrorCode.CONFIG_INVALID,
                "설정 검증에 실패했습니다",
                config_path=config_path,
                details={"errors": errors},
            ) from e

    def notify_filter(self, config: AppConfig) -> NotifyFilter:
        """
        알림 마커 설정을 NotifyFilter로 변환합니다.

        Raises:
            ConfigError: 카탈로그에 없는 마커가 지정된 경우
        """
        notify_filter = resolve_notify_filter(config.app.notify_marker)
        if notify_filter:
            logger.info("알림 마커 제한", markers=sorted(notify_filter))
        return notify_filter
