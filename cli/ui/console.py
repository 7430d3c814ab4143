"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력을 위한 함수들
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule

from cli.i18n import t


def get_console() -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        color_system="auto",
        highlight=True,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()


def get_logger(name: str = "cabr", level: int = logging.INFO) -> logging.Logger:
    """Rich 핸들러가 설정된 logger를 반환합니다.

    Args:
        name: logger 이름 (기본값: "cabr")
        level: 로그 레벨

    Returns:
        logging.Logger: 설정된 logger 인스턴스
    """
    logger = logging.getLogger(name)

    # 이미 핸들러가 설정되어 있으면 레벨만 갱신
    if logger.handlers:
        logger.setLevel(level)
        return logger

    logger.setLevel(level)
    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)

    return logger


# =============================================================================
# 표준 출력 스타일
# =============================================================================

SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"
SYMBOL_INFO = "•"


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크)"""
    console.print(f"[green]{SYMBOL_SUCCESS} {message}[/green]")


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)"""
    console.print(f"[red]{SYMBOL_ERROR} {message}[/red]")


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색 경고)"""
    console.print(f"[yellow]{SYMBOL_WARNING} {message}[/yellow]")


def print_info(message: str) -> None:
    """정보 메시지 출력 (파란색 정보)"""
    console.print(f"[blue]{SYMBOL_INFO} {message}[/blue]")


# =============================================================================
# 섹션 박스 UI 컴포넌트
# =============================================================================

BOX_STYLE = "#0078D4"  # Azure 블루 (배너와 통일)


def print_box_start(title: str, style: str = BOX_STYLE) -> None:
    """박스 상단만 출력합니다 (내용은 별도로 추가).

    Args:
        title: 박스 제목
        style: 테두리 색상
    """
    console.print()
    console.print(f"[bold {style}]┌─ {title}[/bold {style}]")
    console.print(f"[bold {style}]│[/bold {style}]")


def print_box_line(content: str = "", style: str = BOX_STYLE) -> None:
    """박스 내부 라인을 출력합니다.

    Args:
        content: 라인 내용 (빈 문자열이면 빈 라인)
        style: 테두리 색상
    """
    if content:
        console.print(f"[bold {style}]│[/bold {style}] {content}")
    else:
        console.print(f"[bold {style}]│[/bold {style}]")


def print_box_end(style: str = BOX_STYLE) -> None:
    """박스 하단을 출력합니다."""
    console.print(f"[bold {style}]└─[/bold {style}]")
    console.print()


# =============================================================================
# 도구 실행 UI 컴포넌트
# =============================================================================


def print_tool_start(tool_name: str, description: str = "") -> None:
    """도구 실행 시작 표시

    Args:
        tool_name: 도구 이름
        description: 도구 설명
    """
    console.print()
    console.print(f"[bold {BOX_STYLE}]▶ {tool_name}[/]")
    if description:
        console.print(f"  [dim]{description}[/]")
    console.print(Rule(style="dim"))


def print_tool_complete(message: str | None = None, elapsed: float | None = None) -> None:
    """도구 실행 완료 표시

    Args:
        message: 완료 메시지
        elapsed: 소요 시간 (초)
    """
    if message is None:
        message = t("common.completed")
    console.print()
    console.print(Rule(style="dim"))
    if elapsed:
        console.print(f"[green]* {message}[/] [dim]({elapsed:.1f}s)[/]")
    else:
        console.print(f"[green]* {message}[/]")
