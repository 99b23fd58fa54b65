"""
core/tools/cache - 카탈로그 캐시 경로

공개된 prefix 문서는 사용자 홈 디렉토리에 파일 하나로 캐시됩니다.

구조:
    ~/
    └── .aws-ranges.json    ← 마지막으로 받은 ip-ranges.json 원본 바이트

Usage:
    from core.tools.cache import get_cache_path

    cache_path = get_cache_path()
    # → /home/user/.aws-ranges.json
"""

__all__ = [
    "get_home_dir",
    "get_cache_path",
]


def __getattr__(name: str):
    """Lazy import - 사용 시점에만 모듈 로드"""
    if name in ("get_home_dir", "get_cache_path"):
        from .path import get_cache_path, get_home_dir

        if name == "get_home_dir":
            return get_home_dir
        elif name == "get_cache_path":
            return get_cache_path

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
