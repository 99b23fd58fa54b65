"""
tests/core/test_core_config.py - core/config.py 단위 테스트
"""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from cli.ui.console import get_log_handler
from core.config import (
    HttpClientConfig,
    LogConfig,
    get_env_bool,
    get_env_int,
    get_project_root,
    get_version,
    settings,
)


@pytest.fixture
def restore_root_logger():
    """테스트 후 루트 로거 상태 복원"""
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


class TestSettings:
    """Settings 데이터클래스 테스트"""

    def test_settings_is_frozen(self):
        """불변 설정"""
        with pytest.raises(Exception):  # FrozenInstanceError
            settings.AWS_RANGES_URL = "https://example.com"

    def test_default_values(self):
        assert settings.AWS_RANGES_URL == "https://ip-ranges.amazonaws.com/ip-ranges.json"
        assert settings.CACHE_FILE_NAME == ".aws-ranges.json"
        assert settings.HTTP_CONNECT_TIMEOUT == 30
        assert settings.HTTP_READ_TIMEOUT == 90


class TestHttpClientConfig:
    """HttpClientConfig 테스트"""

    def test_defaults(self):
        config = HttpClientConfig()

        assert config.timeout == (30, 90)
        assert config.keep_alive is False
        assert config.trust_env is True

    def test_is_frozen(self):
        config = HttpClientConfig()
        with pytest.raises(Exception):
            config.read_timeout = 1

    def test_headers_without_keep_alive(self):
        headers = HttpClientConfig().headers

        assert headers["Connection"] == "close"
        assert headers["User-Agent"] == "aws-ranges"

    def test_headers_with_keep_alive(self):
        assert "Connection" not in HttpClientConfig(keep_alive=True).headers


class TestHttpClientConfigFromEnv:
    """HttpClientConfig.from_env 테스트"""

    def test_defaults_without_env(self):
        """환경변수가 없으면 기본값"""
        with patch.dict(os.environ, {}, clear=True):
            assert HttpClientConfig.from_env() == HttpClientConfig()

    def test_env_overrides(self):
        """타임아웃, keep-alive, 프록시 정책을 환경변수로 변경"""
        env = {
            "AWS_RANGES_CONNECT_TIMEOUT": "5",
            "AWS_RANGES_READ_TIMEOUT": "15",
            "AWS_RANGES_KEEP_ALIVE": "yes",
            "AWS_RANGES_TRUST_ENV": "off",
        }
        with patch.dict(os.environ, env, clear=True):
            config = HttpClientConfig.from_env()

        assert config.timeout == (5, 15)
        assert config.keep_alive is True
        assert config.trust_env is False
        assert "Connection" not in config.headers

    def test_explicit_read_timeout_wins(self):
        """명시적 read_timeout이 환경변수보다 우선"""
        with patch.dict(os.environ, {"AWS_RANGES_READ_TIMEOUT": "15"}, clear=True):
            assert HttpClientConfig.from_env(read_timeout=3).read_timeout == 3

    def test_invalid_values_fall_back(self):
        """잘못된 값은 기본값 사용"""
        env = {"AWS_RANGES_CONNECT_TIMEOUT": "soon", "AWS_RANGES_TRUST_ENV": "maybe"}
        with patch.dict(os.environ, env, clear=True):
            config = HttpClientConfig.from_env()

        assert config.connect_timeout == 30
        assert config.trust_env is True


class TestLogConfig:
    """LogConfig 테스트"""

    def test_default_values(self):
        config = LogConfig()
        assert config.level == "WARNING"
        assert "%(asctime)s" in config.format
        assert config.date_format == "%Y-%m-%d %H:%M:%S"

    def test_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug", "LOG_FORMAT": "%(message)s"}, clear=False):
            config = LogConfig.from_env()
            assert config.level == "DEBUG"
            assert config.format == "%(message)s"

    def test_apply_verbose(self, restore_root_logger):
        LogConfig().apply(verbose=True)
        assert restore_root_logger.level == logging.DEBUG
        LogConfig(level="ERROR").apply()
        assert restore_root_logger.level == logging.ERROR

    def test_log_format_reaches_rich_handler(self, restore_root_logger):
        """LOG_FORMAT이 CLI의 RichHandler 포매터에 반영됨"""
        with patch.dict(os.environ, {"LOG_FORMAT": "ranges %(message)s"}):
            LogConfig.from_env().apply(handler=get_log_handler())

        handler = restore_root_logger.handlers[0]
        assert handler.formatter._fmt == "ranges %(message)s"
        assert handler.formatter.datefmt == "%Y-%m-%d %H:%M:%S"

    def test_apply_replaces_existing_formatter(self, restore_root_logger):
        """handler에 이미 설정된 포매터도 교체"""
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))

        LogConfig(format="%(levelname)s %(message)s").apply(handler=handler)

        assert restore_root_logger.handlers == [handler]
        assert handler.formatter._fmt == "%(levelname)s %(message)s"


class TestEnvironmentHelpers:
    """환경변수 헬퍼 테스트"""

    def test_get_env_bool_true_values(self):
        for val in ["true", "1", "yes", "on", "TRUE", "Yes"]:
            with patch.dict(os.environ, {"TEST_BOOL": val}):
                assert get_env_bool("TEST_BOOL") is True

    def test_get_env_bool_false_values(self):
        for val in ["false", "0", "no", "off", "FALSE", "No"]:
            with patch.dict(os.environ, {"TEST_BOOL": val}):
                assert get_env_bool("TEST_BOOL", default=True) is False

    def test_get_env_bool_invalid(self):
        with patch.dict(os.environ, {"TEST_BOOL": "invalid"}):
            assert get_env_bool("TEST_BOOL", default=True) is True

    def test_get_env_int(self):
        with patch.dict(os.environ, {"TEST_INT": "42"}):
            assert get_env_int("TEST_INT", default=0) == 42
        with patch.dict(os.environ, {"TEST_INT": "not_a_number"}):
            assert get_env_int("TEST_INT", default=10) == 10
        with patch.dict(os.environ, {}, clear=True):
            assert get_env_int("NONEXISTENT", default=100) == 100


class TestProjectPaths:
    """프로젝트 경로 / 버전 테스트"""

    def test_get_project_root(self):
        root = get_project_root()
        assert isinstance(root, Path)
        assert (root / "core").exists()

    def test_version_format(self):
        """버전 형식 확인 (x.y.z)"""
        parts = get_version().split(".")
        assert len(parts) >= 2
        assert all(part.isdigit() for part in parts)
