"""
core/data/ip_ranges - AWS Public IP Ranges

공개된 AWS ip-ranges 문서의 prefix 카탈로그 로드와
주소/CIDR 포함 여부 판정.

Usage:
    from core.data.ip_ranges import (
        load_catalog,
        contains_address,
        contains_network,
        lookup_services,
    )
    from core.tools.cache import get_cache_path

    catalog = load_catalog(get_cache_path())

    contains_address(catalog, "3.5.140.1")       # True
    contains_network(catalog, "13.32.0.0/16")    # True
    lookup_services(catalog, "13.32.1.1")        # ServicesResult(region="GLOBAL", ...)
"""

from .engine import (
    contains,
    contains_address,
    contains_network,
    is_cidr,
    lookup_services,
    parse_address,
    parse_network,
)
from .loader import (
    CacheStatus,
    clear_cache,
    fetch_document,
    get_cache_status,
    load_catalog,
    parse_catalog,
)
from .models import Catalog, PrefixRecord, ServicesResult

__all__ = [
    # 데이터 타입
    "Catalog",
    "PrefixRecord",
    "ServicesResult",
    "CacheStatus",
    # 로더
    "load_catalog",
    "parse_catalog",
    "fetch_document",
    # 캐시 관리
    "get_cache_status",
    "clear_cache",
    # 엔진
    "contains",
    "contains_address",
    "contains_network",
    "lookup_services",
    "is_cidr",
    "parse_address",
    "parse_network",
]
