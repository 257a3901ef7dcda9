"""
에러 처리 모듈

wildfly_monitor 전체에서 사용하는 예외 클래스와 에러 코드를 정의합니다.
모든 예외는 MonitorError를 상속받아 일관된 에러 처리가 가능합니다.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    에러 코드 열거형

    로그의 구조화 필드와 종료 상태 판단에 사용됩니다.
    """

    # 설정 관련 (시작 시 치명적)
    CONFIG_INVALID = "CONFIG_INVALID"           # 설정 검증 실패
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"       # 설정 파일 없음
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"   # 설정 파싱 오류
    MARKER_UNKNOWN = "MARKER_UNKNOWN"           # 알 수 없는 알림 마커

    # 샘플링 관련 (실행 중 치명적)
    SAMPLING_FAILED = "SAMPLING_FAILED"         # 마커 디렉터리 조회 실패

    # 전송 관련 (복구 가능)
    TRANSPORT_FAILED = "TRANSPORT_FAILED"       # 알림 전송 실패
    TRANSPORT_TIMEOUT = "TRANSPORT_TIMEOUT"     # 전송 타임아웃

    # 일반
    INTERNAL_ERROR = "INTERNAL_ERROR"           # 내부 오류


class MonitorError(Exception):
    """
    wildfly_monitor 기본 예외 클래스

    모든 커스텀 예외의 부모 클래스입니다.
    에러 코드, 메시지, 상세 정보를 포함합니다.

    Attributes:
        code: 에러 코드 (ErrorCode)
        message: 사용자에게 표시할 메시지
        details: 추가 상세 정보 (디버깅용)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 변환합니다 (로그 필드용)."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class ConfigError(MonitorError):
    """
    설정 관련 예외

    설정 파일의 로드, 파싱, 검증 중 발생하는 오류를 나타냅니다.
    루프 진입 전에 발생하며 프로세스는 실패 상태로 종료됩니다.

    Attributes:
        config_path: 오류가 발생한 설정 파일 경로 (선택)
        field_name: 오류가 발생한 필드 이름 (선택)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        config_path: str | None = None,
        field_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.config_path = config_path
        self.field_name = field_name
        _details: dict[str, Any] = {}
        if config_path:
            _details["config_path"] = config_path
        if field_name:
            _details["field_name"] = field_name
        if details:
            _details.update(details)
        super().__init__(code, message, _details)


class SamplingError(MonitorError):
    """
    샘플링 관련 예외

    마커 디렉터리를 나열할 수 없을 때 발생합니다 (권한 없음, 삭제됨 등).
    재시도하지 않으며 폴링 루프를 실패 상태로 종료시킵니다.

    Attributes:
        directory: 조회에 실패한 디렉터리 경로
    """

    def __init__(
        self,
        message: str,
        directory: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.directory = directory
        _details: dict[str, Any] = {"directory": directory}
        if details:
            _details.update(details)
        super().__init__(ErrorCode.SAMPLING_FAILED, message, _details)


class TransportError(MonitorError):
    """
    전송 관련 예외

    알림 전송(Slack webhook) 중 발생하는 오류를 나타냅니다.
    디스패처가 기록만 하고 루프는 계속 진행합니다.

    Attributes:
        transport_type: 전송 타입 (slack)
        target_url: 대상 URL
        status_code: HTTP 응답 코드 (응답을 받은 경우)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        transport_type: str,
        target_url: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.transport_type = transport_type
        self.target_url = target_url
        self.status_code = status_code
        _details: dict[str, Any] = {"transport_type": transport_type}
        if target_url:
            _details["target_url"] = target_url
        if status_code is not None:
            _details["status_code"] = status_code
        if details:
            _details.update(details)
        super().__init__(code, message, _details)
