# cli/ui - 콘솔 출력 (rich)
"""
CLI 명령어에서 사용하는 콘솔 출력 헬퍼
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    err_console,
    get_console,
    get_log_handler,
    print_error,
    print_info,
    print_success,
    print_table,
    print_warning,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_INFO",
    "SYMBOL_SUCCESS",
    "SYMBOL_WARNING",
    "console",
    "err_console",
    "get_console",
    "get_log_handler",
    "print_error",
    "print_info",
    "print_success",
    "print_table",
    "print_warning",
]
