"""
core/exceptions.py - 통합 예외 계층 구조

로더, 포함 판정 엔진, CLI에서 공통으로 사용하는 예외 클래스를 정의합니다.
모든 에러는 실패한 단계를 메시지에 포함합니다.

예외 계층 구조:
    RangesError (베이스)
    ├── NetworkError            (공개 문서 다운로드)
    ├── CacheIOError            (캐시 파일 읽기/쓰기/삭제)
    ├── ParseError              (문서, 조회값, 카탈로그 레코드)
    └── InconsistentDataError   (매칭 결과의 리전 불일치)

Usage:
    from core.exceptions import ParseError, RangesError

    try:
        result = lookup_services(catalog, "52.94.76.1")
    except ParseError as e:
        print(e.stage, e.value)
"""

from typing import Any, Dict, List, Optional

# =============================================================================
# Base exception
# =============================================================================


class RangesError(Exception):
    """aws-ranges 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 진단 정보
    """

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
        """딕셔너리로 변환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# Fetch / cache errors
# =============================================================================


class NetworkError(RangesError):
    """문서 다운로드 중 전송 실패 또는 2xx 이외 응답"""

    def __init__(
        self,
        url: str,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        full_message = f"fetch failed [{url}]: {message}"
        super().__init__(full_message, cause)
        self.url = url
        self.status_code = status_code
        self.details.update({"url": url, "status_code": status_code})


class CacheIOError(RangesError):
    """캐시 파일 읽기/쓰기/삭제 실패"""

    def __init__(
        self,
        path: str,
        operation: str,
        cause: Optional[Exception] = None,
    ):
        message = f"cache {operation} failed [{path}]"
        super().__init__(message, cause)
        self.path = path
        self.operation = operation
        self.details.update({"path": path, "operation": operation})


# =============================================================================
# Parse errors
# =============================================================================


class ParseError(RangesError):
    """잘못된 문서, 조회 문자열 또는 카탈로그 레코드

    ``stage``: ``"document"``, ``"query"``, ``"record"`` 중 하나
    """

    def __init__(
        self,
        stage: str,
        message: str,
        value: Any = None,
        cause: Optional[Exception] = None,
    ):
        full_message = f"parse error [{stage}]: {message}"
        super().__init__(full_message, cause)
        self.stage = stage
        self.value = value
        self.details.update({"stage": stage, "value": None if value is None else str(value)})


class InconsistentDataError(RangesError):
    """같은 조회에 매칭된 레코드들의 리전이 서로 다름"""

    def __init__(self, query: str, regions: List[str]):
        message = f"inconsistent regions for {query}: {', '.join(regions)}"
        super().__init__(message)
        self.query = query
        self.regions = regions
        self.details.update({"query": query, "regions": regions})


# =============================================================================
# Utilities
# =============================================================================


def format_error_for_user(error: Exception) -> str:
    """사용자 친화적 에러 메시지 생성

    Args:
        error: 예외 객체

    Returns:
        사용자에게 표시할 메시지
    """
    if isinstance(error, RangesError):
        return str(error)

    return f"{error.__class__.__name__}: {error}"
