"""
설정 스키마 (Pydantic v2)

config.yaml을 검증하기 위한 스키마를 정의합니다.
"""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wildfly_monitor.domain.models.message import DEFAULT_ICON_URL, DEFAULT_USERNAME

# Pydantic 모델은 Interface Layer에서만 외부 라이브러리에 의존합니다.


class SlackConfig(BaseModel):
    """Slack 알림 설정 스키마."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    api_url: str = Field(..., description="incoming webhook URL")
    channel: str = Field(..., description="알림 채널")
    username: str = Field(DEFAULT_USERNAME, description="표시 이름")
    icon_url: str = Field(DEFAULT_ICON_URL, description="표시 아이콘 URL")
    timeout_seconds: float = Field(10.0, description="요청 타임아웃 (초)")

    @field_validator("api_url", "channel")
    @classmethod
    def not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("필수 필드는 비워둘 수 없습니다")
        return value

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout_seconds는 0보다 커야 합니다")
        return value


class WildflyConfig(BaseModel):
    """WildFly 배포 설정 스키마."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    war_path: str = Field(..., description="배포 아카이브 경로 (상위 디렉터리가 마커 디렉터리)")

    @field_validator("war_path")
    @classmethod
    def not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("war_path는 비워둘 수 없습니다")
        return value

    @property
    def marker_directory(self) -> str:
        """마커 파일이 기록되는 디렉터리"""
        return os.path.dirname(self.war_path) or "."


class AppSettings(BaseModel):
    """모니터 동작 설정 스키마."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    log_path: str = Field("", description="로그 파일 경로 (비우면 표준 출력)")
    log_level: str | None = Field(None, description="로그 레벨 (비우면 LOG_LEVEL 환경변수, 기본 INFO)")
    log_format: Literal["console", "json"] = Field("json", description="표준 출력 로그 포맷")
    duration: int = Field(5, description="폴링 주기 (초)")
    notify_marker: list[str] = Field(default_factory=list, description="알림 대상 마커 (비우면 전체)")
    order_sensitive: bool = Field(False, description="마커 순서 변화도 상태 변경으로 판단")

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        if value < 1:
            raise ValueError("duration은 1 이상이어야 합니다")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"}:
            raise ValueError(f"지원하지 않는 log_level: {value}")
        return value

    @field_validator("notify_marker", mode="before")
    @classmethod
    def none_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class AppConfig(BaseModel):
    """애플리케이션 전체 설정 스키마."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    slack: SlackConfig = Field(..., description="Slack 알림 설정")
    wildfly: WildflyConfig = Field(..., description="WildFly 설정")
    app: AppSettings = Field(default_factory=AppSettings, description="모니터 동작 설정")
