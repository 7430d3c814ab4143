"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
최상위 핸들러(FlowRunner, HeadlessRunner)는 `fatal`이 False인 오류를 경고로 보고하고
종료 코드 0으로 끝냅니다.

예외 계층 구조:
    CABRError (베이스)
    ├── MissingDependencyError (필수 라이브러리 누락)
    ├── RemoteUnavailableError (Graph API 호출/네트워크 실패)
    │   └── AuthError (로그인/토큰 획득 실패)
    ├── EmptyResultError (정책/이벤트 없음, fatal=False)
    ├── WriteError (내보내기 파일 쓰기 실패)
    ├── FlowError (대화형 플로우)
    │   └── UserCancelError
    ├── ConfigError (설정 관련)
    └── ValidationError (입력 검증)

Usage:
    from core.exceptions import RemoteUnavailableError

    try:
        response = http.get(url, timeout=60)
        response.raise_for_status()
    except requests.RequestException as e:
        raise RemoteUnavailableError.from_http_error("list_policies", e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class CABRError(Exception):
    """Conditional Access Block Report 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
        fatal: False면 최상위 핸들러가 경고만 출력하고 정상 종료
    """

    fatal = True

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "fatal": self.fatal,
            "details": self.details,
        }


# =============================================================================
# 의존성
# =============================================================================


class MissingDependencyError(CABRError):
    """필수 클라이언트 라이브러리가 설치되지 않은 경우"""

    def __init__(self, package: str, module: Optional[str] = None, cause: Optional[Exception] = None):
        message = f"필수 패키지가 설치되지 않았습니다 [{package}]. 'pip install {package}' 실행 후 다시 시도하세요"
        super().__init__(message, cause)
        self.package = package
        self.module = module or package
        self.details.update({"package": package, "module": self.module})


# =============================================================================
# 원격 호출
# =============================================================================


class RemoteUnavailableError(CABRError):
    """Graph API 호출 관련 예외

    requests 예외를 래핑하여 일관된 예외 처리를 제공합니다.
    재시도 없이 상위로 전파됩니다 (부분 감사 데이터는 차단 건수를 과소 보고함).
    """

    def __init__(
        self,
        operation: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"Graph {operation}"
        if status_code:
            message = f"{message} 실패 (HTTP {status_code})"
        else:
            message = f"{message} 실패"
        if error_code:
            message = f"{message} [{error_code}]"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.operation = operation
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "operation": operation,
                "status_code": status_code,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_http_error(cls, operation: str, error: Exception) -> "RemoteUnavailableError":
        """requests 예외로부터 생성

        HTTPError면 응답 본문의 Graph 에러 정보({"error": {"code", "message"}})를 파싱합니다.

        Args:
            operation: 작업 이름 (예: "list_policies")
            error: requests.RequestException

        Returns:
            RemoteUnavailableError 인스턴스
        """
        status_code = None
        error_code = None
        error_message = None

        response = getattr(error, "response", None)
        if response is not None:
            status_code = getattr(response, "status_code", None)
            try:
                body = response.json()
            except ValueError:
                body = {}
            if isinstance(body, dict):
                error_info = body.get("error") or {}
                if isinstance(error_info, dict):
                    error_code = error_info.get("code")
                    error_message = error_info.get("message")

        return cls(
            operation=operation,
            status_code=status_code,
            error_code=error_code,
            error_message=error_message,
            cause=error,
        )


class AuthError(RemoteUnavailableError):
    """로그인 또는 토큰 획득 실패"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(operation="authenticate", error_code=error_code, error_message=message, cause=cause)


# =============================================================================
# 결과 없음 (비치명적)
# =============================================================================


class EmptyResultError(CABRError):
    """조회 결과가 없는 경우

    scope:
        - "policies": 활성/보고 전용 상태의 정책이 없음 → 정상 종료
        - "events": 해당 정책에 차단 이벤트가 없음 → 다음 정책 진행
    """

    fatal = False

    def __init__(self, scope: str, message: Optional[str] = None, subject: Optional[str] = None):
        super().__init__(message or f"조회 결과 없음 [{scope}]")
        self.scope = scope
        self.subject = subject
        self.details["scope"] = scope
        if subject:
            self.details["subject"] = subject


# =============================================================================
# 내보내기
# =============================================================================


class WriteError(CABRError):
    """내보내기 파일 쓰기 실패 (내보내기 단계에서만 치명적)"""

    def __init__(self, path: str, cause: Optional[Exception] = None):
        super().__init__(f"파일 쓰기 실패 [{path}]", cause)
        self.path = path
        self.details["path"] = path


# =============================================================================
# UI 플로우 관련 예외
# =============================================================================


class FlowError(CABRError):
    """UI 플로우 관련 예외"""

    def __init__(
        self,
        step_name: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"플로우 오류 [{step_name}]: {message}"
        super().__init__(full_message, cause)
        self.step_name = step_name
        self.details["step_name"] = step_name


class UserCancelError(FlowError):
    """사용자가 작업을 취소한 경우"""

    def __init__(self, step_name: str = "unknown"):
        super().__init__(step_name, "사용자가 취소했습니다")


# =============================================================================
# 설정/검증
# =============================================================================


class ConfigError(CABRError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class ValidationError(CABRError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

ACCESS_DENIED_CODES = {
    "Authorization_RequestDenied",
    "Forbidden",
    "AccessDenied",
}

TOKEN_ERROR_CODES = {
    "InvalidAuthenticationToken",
    "ExpiredAuthenticationToken",
    "invalid_grant",
}


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        액세스 거부 오류이면 True
    """
    if isinstance(error, RemoteUnavailableError):
        return error.status_code == 403 or error.error_code in ACCESS_DENIED_CODES
    return False


def is_token_error(error: Exception) -> bool:
    """인증 토큰 오류인지 확인"""
    if isinstance(error, RemoteUnavailableError):
        return error.status_code == 401 or error.error_code in TOKEN_ERROR_CODES
    return False


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if is_access_denied(error):
        return f"{error} (권한이 없습니다. Policy.Read.All / AuditLog.Read.All 동의 여부를 확인하세요.)"

    if is_token_error(error):
        return f"{error} (인증 토큰이 유효하지 않습니다. 다시 로그인하세요.)"

    return str(error)
