# core/tools - 공유 유틸리티
"""
공유 유틸리티

Subpackages:
    - cache: 캐시 파일 위치
"""
