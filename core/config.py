"""
core/config.py - 중앙 설정 관리

불변 설정값, 카탈로그 로드마다 사용하는 HTTP 클라이언트 설정,
로깅 설정과 환경변수 헬퍼를 제공합니다.

환경변수:
    LOG_LEVEL                    로그 레벨 (기본: WARNING)
    LOG_FORMAT                   로그 포맷 문자열
    AWS_RANGES_CONNECT_TIMEOUT   HTTP 연결 타임아웃 (초)
    AWS_RANGES_READ_TIMEOUT      HTTP 읽기 타임아웃 (초)
    AWS_RANGES_KEEP_ALIVE        커넥션 재사용 여부 (기본: false)
    AWS_RANGES_TRUST_ENV         프록시 환경변수 사용 여부 (기본: true)

Usage:
    from core.config import settings, HttpClientConfig

    config = HttpClientConfig.from_env(read_timeout=10)
    response = session.get(settings.AWS_RANGES_URL, timeout=config.timeout)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "aws-ranges"

# =============================================================================
# Settings
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정 (불변)"""

    AWS_RANGES_URL: str = "https://ip-ranges.amazonaws.com/ip-ranges.json"
    CACHE_FILE_NAME: str = ".aws-ranges.json"

    # 초 단위
    HTTP_CONNECT_TIMEOUT: float = 30
    HTTP_READ_TIMEOUT: float = 90


settings = Settings()


@dataclass(frozen=True)
class HttpClientConfig:
    """HTTP 클라이언트 설정 (카탈로그 로드마다 한 번 생성)

    Attributes:
        connect_timeout: TCP 연결 / TLS 핸드셰이크 타임아웃 (초)
        read_timeout: 응답 바이트 사이 유휴 타임아웃 (초)
        keep_alive: 커넥션 재사용 (False면 ``Connection: close`` 전송)
        trust_env: 프록시 환경변수 사용 (HTTPS_PROXY, NO_PROXY, ...)
        user_agent: User-Agent 헤더 값
    """

    connect_timeout: float = settings.HTTP_CONNECT_TIMEOUT
    read_timeout: float = settings.HTTP_READ_TIMEOUT
    keep_alive: bool = False
    trust_env: bool = True
    user_agent: str = DISTRIBUTION_NAME

    @classmethod
    def from_env(cls, read_timeout: float | None = None) -> HttpClientConfig:
        """환경변수 기반 설정 생성

        Args:
            read_timeout: 명시적 읽기 타임아웃 (환경변수보다 우선)
        """
        if read_timeout is None:
            read_timeout = get_env_int("AWS_RANGES_READ_TIMEOUT", int(settings.HTTP_READ_TIMEOUT))

        return cls(
            connect_timeout=get_env_int("AWS_RANGES_CONNECT_TIMEOUT", int(settings.HTTP_CONNECT_TIMEOUT)),
            read_timeout=read_timeout,
            keep_alive=get_env_bool("AWS_RANGES_KEEP_ALIVE", False),
            trust_env=get_env_bool("AWS_RANGES_TRUST_ENV", True),
        )

    @property
    def timeout(self) -> tuple[float, float]:
        """requests 형식의 (connect, read) 튜플"""
        return (self.connect_timeout, self.read_timeout)

    @property
    def headers(self) -> dict[str, str]:
        headers = {"User-Agent": self.user_agent}
        if not self.keep_alive:
            headers["Connection"] = "close"
        return headers


# =============================================================================
# Logging
# =============================================================================


@dataclass
class LogConfig:
    """로깅 설정"""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL / LOG_FORMAT 환경변수에서 로드 (없으면 기본값)"""
        default = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", default.level).upper(),
            format=os.environ.get("LOG_FORMAT", default.format),
        )

    def apply(self, verbose: bool = False, handler: logging.Handler | None = None) -> None:
        """루트 로거 설정 (``verbose``면 DEBUG 고정)

        handler를 넘기면 기존 포매터를 이 설정의 포맷으로 교체합니다.
        """
        level = logging.DEBUG if verbose else getattr(logging, self.level, logging.WARNING)
        handlers = None
        if handler is not None:
            handler.setFormatter(logging.Formatter(self.format, self.date_format))
            handlers = [handler]

        logging.basicConfig(
            level=level,
            format=self.format,
            datefmt=self.date_format,
            handlers=handlers,
            force=True,
        )
        # urllib3 연결 로그는 DEBUG에서만
        logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)


# =============================================================================
# Environment helpers
# =============================================================================


def get_env_bool(name: str, default: bool = False) -> bool:
    """불리언 환경변수 읽기 (true/1/yes/on, false/0/no/off)"""
    value = os.environ.get(name)
    if value is None:
        return default

    value = value.strip().lower()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


def get_env_int(name: str, default: int = 0) -> int:
    """정수 환경변수 읽기"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# =============================================================================
# Project paths / version
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 (``core/``를 포함하는 디렉토리)"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """버전 문자열 반환

    설치된 배포판 메타데이터에서 읽고, 설치되지 않은 소스 체크아웃이면
    프로젝트 루트의 ``version.txt``를 읽음
    """
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        version_file = get_project_root() / "version.txt"
        if version_file.exists():
            return version_file.read_text(encoding="utf-8").strip()
        return "0.0.0"
