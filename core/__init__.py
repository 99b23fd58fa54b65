# core/__init__.py
"""
core - aws-ranges 라이브러리

Architecture:
    core/
    ├── data/ip_ranges/  # prefix 카탈로그, 로더, 포함 판정 엔진
    ├── tools/cache/     # 캐시 파일 위치
    ├── config.py        # 설정, HTTP 클라이언트, 로깅
    └── exceptions.py    # 예외 계층 구조

Usage:
    from core.data.ip_ranges import load_catalog, contains_address
    from core.tools.cache import get_cache_path

    catalog = load_catalog(get_cache_path())
    contains_address(catalog, "3.5.140.1")
"""
