"""
core/data/ip_ranges/loader.py - prefix 카탈로그 로더

공개된 AWS ip-ranges 문서로 Catalog를 생성합니다:
- 캐시 히트: 캐시 파일 바이트를 그대로 파싱 (TTL, 체크섬 없음)
- 캐시 미스: HTTP GET 1회, 응답 바이트를 파싱한 뒤 캐시 파일에 그대로 저장

두 경로 모두 parse_catalog()를 거치므로 캐시 로드 결과는 캐시를 만든
다운로드 결과와 같습니다.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import requests

from core.config import HttpClientConfig, settings
from core.exceptions import CacheIOError, NetworkError, ParseError

from .models import Catalog, PrefixRecord

logger = logging.getLogger(__name__)

# (배열 키, prefix 키) 쌍, 카탈로그 순서대로
_PREFIX_SECTIONS = (
    ("prefixes", "ip_prefix"),
    ("ipv6_prefixes", "ipv6_prefix"),
)

# =============================================================================
# Parsing
# =============================================================================


def _require_str(entry: dict[str, Any], key: str, section: str, index: int) -> str:
    value = entry.get(key)
    if not isinstance(value, str):
        reason = "missing" if value is None else "not a string"
        raise ParseError("document", f"{section}[{index}].{key} {reason}", value=entry)
    return value


def _parse_record(entry: Any, section: str, prefix_key: str, index: int) -> PrefixRecord:
    if not isinstance(entry, dict):
        raise ParseError("document", f"{section}[{index}] is not an object", value=entry)

    border_group = entry.get("network_border_group", "")
    if not isinstance(border_group, str):
        raise ParseError("document", f"{section}[{index}].network_border_group not a string", value=entry)

    return PrefixRecord(
        network=_require_str(entry, prefix_key, section, index),
        region=_require_str(entry, "region", section, index),
        service=_require_str(entry, "service", section, index),
        network_border_group=border_group,
    )


def parse_catalog(payload: bytes | str) -> Catalog:
    """
    ip-ranges 문서를 Catalog로 파싱

    Args:
        payload: 원본 문서 (네트워크 또는 캐시 파일의 바이트)

    Returns:
        IPv4 레코드 다음 IPv6 레코드 순서의 Catalog

    Raises:
        ParseError: 잘못된 JSON, 문서 구조 오류, prefix/region/service 누락
    """
    try:
        document = json.loads(payload)
    except ValueError as e:
        raise ParseError("document", "invalid JSON", cause=e) from e

    if not isinstance(document, dict):
        raise ParseError("document", "top-level value is not an object")
    if "prefixes" not in document:
        raise ParseError("document", "missing 'prefixes' array")

    records: list[PrefixRecord] = []
    for section, prefix_key in _PREFIX_SECTIONS:
        entries = document.get(section, [])
        if not isinstance(entries, list):
            raise ParseError("document", f"'{section}' is not an array")
        for index, entry in enumerate(entries):
            records.append(_parse_record(entry, section, prefix_key, index))

    # null 메타데이터는 빈 문자열
    sync_token = document.get("syncToken") or ""
    create_date = document.get("createDate") or ""

    return Catalog(
        records=tuple(records),
        sync_token=str(sync_token),
        create_date=str(create_date),
    )


# =============================================================================
# Network
# =============================================================================


def fetch_document(url: str = settings.AWS_RANGES_URL, http_config: HttpClientConfig | None = None) -> bytes:
    """
    ip-ranges 문서 다운로드

    Args:
        url: 문서 URL
        http_config: HTTP 클라이언트 설정 (기본: HttpClientConfig())

    Returns:
        변경하지 않은 응답 바이트

    Raises:
        NetworkError: 전송 실패 또는 2xx 이외 응답
    """
    config = http_config or HttpClientConfig()

    with requests.Session() as session:
        session.trust_env = config.trust_env
        try:
            response = session.get(url, timeout=config.timeout, headers=config.headers)
            if not 200 <= response.status_code < 300:
                raise NetworkError(url, f"HTTP {response.status_code}", status_code=response.status_code)
            content: bytes = response.content
        except requests.RequestException as e:
            raise NetworkError(url, "request failed", cause=e) from e

    logger.debug("Fetched %s (%d bytes)", url, len(content))
    return content


# =============================================================================
# Cache Management
# =============================================================================


def _read_cache(cache_path: str) -> bytes:
    try:
        with open(cache_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise CacheIOError(cache_path, "read", cause=e) from e


def _write_cache(cache_path: str, payload: bytes) -> None:
    try:
        directory = os.path.dirname(cache_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(cache_path, "wb") as f:
            f.write(payload)
    except OSError as e:
        raise CacheIOError(cache_path, "write", cause=e) from e

    logger.debug("Wrote %d bytes to cache %s", len(payload), cache_path)


@dataclass
class CacheStatus:
    """캐시 파일 상태"""

    path: str
    exists: bool
    modified: datetime | None = None
    size_bytes: int = 0
    prefix_count: int | None = None
    sync_token: str = ""


def get_cache_status(cache_path: str) -> CacheStatus:
    """
    캐시 파일 상태 조회

    Raises:
        CacheIOError: 파일이 있지만 읽을 수 없음
        ParseError: 유효한 문서가 아님
    """
    if not os.path.isfile(cache_path):
        return CacheStatus(path=cache_path, exists=False)

    try:
        stat = os.stat(cache_path)
    except OSError as e:
        raise CacheIOError(cache_path, "read", cause=e) from e

    catalog = parse_catalog(_read_cache(cache_path))
    return CacheStatus(
        path=cache_path,
        exists=True,
        modified=datetime.fromtimestamp(stat.st_mtime),
        size_bytes=stat.st_size,
        prefix_count=len(catalog),
        sync_token=catalog.sync_token,
    )


def clear_cache(cache_path: str) -> bool:
    """캐시 파일 삭제 (삭제했으면 True)"""
    if not os.path.lexists(cache_path):
        return False

    try:
        os.remove(cache_path)
    except OSError as e:
        raise CacheIOError(cache_path, "delete", cause=e) from e

    logger.debug("Removed cache %s", cache_path)
    return True


# =============================================================================
# Loader
# =============================================================================


def load_catalog(
    cache_path: str | None,
    url: str = settings.AWS_RANGES_URL,
    use_cache: bool = True,
    http_config: HttpClientConfig | None = None,
) -> Catalog:
    """
    캐시 파일 또는 네트워크에서 prefix 카탈로그 로드

    Args:
        cache_path: 캐시 파일 경로 (None이면 캐시 사용 안 함)
        url: 문서 URL
        use_cache: 캐시 파일이 있으면 사용
        http_config: 다운로드용 HTTP 클라이언트 설정

    Returns:
        전체 Catalog

    Raises:
        NetworkError: 다운로드 실패
        CacheIOError: 캐시 파일 읽기/쓰기 실패
        ParseError: 잘못된 문서
    """
    if use_cache and cache_path and os.path.isfile(cache_path):
        logger.debug("Loading catalog from cache %s", cache_path)
        return parse_catalog(_read_cache(cache_path))

    logger.debug("Fetching catalog from %s", url)
    payload = fetch_document(url, http_config)
    catalog = parse_catalog(payload)

    if cache_path:
        _write_cache(cache_path, payload)

    logger.debug("Loaded %d prefixes (syncToken=%s)", len(catalog), catalog.sync_token)
    return catalog
