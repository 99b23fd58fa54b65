"""
core/data - Data Services Layer

Modules:
    - ip_ranges: AWS 공개 IP 대역 (카탈로그, 로더, 포함 판정 엔진)

Usage:
    from core.data.ip_ranges import load_catalog, lookup_services
"""
