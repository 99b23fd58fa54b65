"""
tests/conftest.py - 공유 pytest fixtures

샘플 ip-ranges 문서, 카탈로그, mock requests.Session을 제공합니다.

Usage:
    def test_something(catalog, mock_session, cache_path):
        # catalog: SAMPLE_DOCUMENT로 만든 Catalog
        # mock_session: SAMPLE_PAYLOAD를 반환하는 패치된 requests.Session
        # cache_path: tmp_path 아래 캐시 파일 경로 (생성 안 됨)
        pass
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.data.ip_ranges import Catalog, PrefixRecord, parse_catalog  # noqa: E402

# =============================================================================
# 샘플 데이터
# =============================================================================

SAMPLE_DOCUMENT = {
    "syncToken": "1700000000",
    "createDate": "2023-11-14-22-13-20",
    "prefixes": [
        {
            "ip_prefix": "3.5.140.0/22",
            "region": "ap-northeast-2",
            "service": "AMAZON",
            "network_border_group": "ap-northeast-2",
        },
        {
            "ip_prefix": "3.5.140.0/22",
            "region": "ap-northeast-2",
            "service": "EC2",
            "network_border_group": "ap-northeast-2",
        },
        {
            "ip_prefix": "13.32.0.0/15",
            "region": "GLOBAL",
            "service": "AMAZON",
            "network_border_group": "GLOBAL",
        },
        {
            "ip_prefix": "13.32.0.0/15",
            "region": "GLOBAL",
            "service": "CLOUDFRONT",
            "network_border_group": "GLOBAL",
        },
        {
            "ip_prefix": "52.94.76.0/22",
            "region": "us-west-2",
            "service": "S3",
            "network_border_group": "us-west-2",
        },
    ],
    "ipv6_prefixes": [
        {
            "ipv6_prefix": "2600:1f14::/35",
            "region": "us-west-2",
            "service": "EC2",
            "network_border_group": "us-west-2",
        },
    ],
}

SAMPLE_PAYLOAD = json.dumps(SAMPLE_DOCUMENT, indent=2).encode("utf-8")


# =============================================================================
# Catalog fixtures
# =============================================================================


@pytest.fixture
def sample_payload() -> bytes:
    """ip-ranges 원본 문서 바이트"""
    return SAMPLE_PAYLOAD


@pytest.fixture
def catalog() -> Catalog:
    """샘플 문서로 파싱한 Catalog"""
    return parse_catalog(SAMPLE_PAYLOAD)


def _build_catalog(*records: tuple[str, str, str]) -> Catalog:
    return Catalog(records=tuple(PrefixRecord(network=n, region=r, service=s) for n, r, s in records))


@pytest.fixture
def make_catalog():
    """(network, region, service) 튜플로 Catalog를 만드는 팩토리"""
    return _build_catalog


@pytest.fixture
def cache_path(tmp_path) -> str:
    """tmp_path 아래 캐시 파일 경로 (파일은 생성하지 않음)"""
    return str(tmp_path / ".aws-ranges.json")


# =============================================================================
# HTTP mock
# =============================================================================


def _build_response(content: bytes = SAMPLE_PAYLOAD, status_code: int = 200) -> MagicMock:
    """requests.Response 대역 객체"""
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


@pytest.fixture
def mock_session():
    """로더가 사용하는 requests.Session 패치

    테스트에서 ``return_value`` / ``side_effect``를 바꾸지 않으면
    ``mock_session.get``은 SAMPLE_PAYLOAD와 200 응답을 반환합니다.
    """
    with patch("core.data.ip_ranges.loader.requests.Session") as mock_session_class:
        session = MagicMock()
        mock_session_class.return_value.__enter__.return_value = session
        session.get.return_value = _build_response()
        yield session


@pytest.fixture
def make_response():
    """requests.Response 대역 객체 팩토리"""
    return _build_response
