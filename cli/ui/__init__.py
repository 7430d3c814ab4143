# cli/ui - TUI 컴포넌트 (questionary, rich)
"""
TUI 컴포넌트 모듈

CLI 전용 UI 컴포넌트들 (배너, 콘솔 출력 등)
"""

from .banner import print_banner
from .console import (
    BOX_STYLE,
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    get_console,
    get_logger,
    print_box_end,
    print_box_line,
    print_box_start,
    print_error,
    print_info,
    print_success,
    print_tool_complete,
    print_tool_start,
    print_warning,
)

__all__: list[str] = [
    "print_banner",
    "console",
    "get_console",
    "get_logger",
    # 표준 출력 심볼
    "SYMBOL_SUCCESS",
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "SYMBOL_INFO",
    # 메시지 출력
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    # 섹션 박스 UI
    "BOX_STYLE",
    "print_box_line",
    "print_box_end",
    "print_box_start",
    # 도구 실행
    "print_tool_start",
    "print_tool_complete",
]
