"""캐시 경로 유틸리티.

카탈로그 캐시는 실행 사용자의 홈 디렉토리에 파일 하나로 저장됩니다.
환경변수는 참조하지 않으며, 홈 디렉토리는 현재 사용자 기준으로 계산합니다.
"""

import os
from pathlib import Path

from core.config import settings


def get_home_dir() -> str:
    """실행 사용자의 홈 디렉토리를 반환합니다.

    Returns:
        홈 디렉토리 절대 경로 문자열.
    """
    return str(Path.home())


def get_cache_path(filename: str = settings.CACHE_FILE_NAME) -> str:
    """캐시 파일 경로 반환

    호출 시점의 홈 디렉토리 기준으로 계산합니다.

    Args:
        filename: 캐시 파일명 (기본: ``.aws-ranges.json``)

    Returns:
        캐시 파일 절대 경로 (파일은 생성하지 않음)

    Example:
        >>> get_cache_path()
        '/home/user/.aws-ranges.json'
    """
    return os.path.join(get_home_dir(), filename)
