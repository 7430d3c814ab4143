"""
cli/ui/banner.py - 배너 출력

도구 이름, 버전, 설명 표시
"""

import logging

from rich.console import Console
from rich.text import Text

from cli.i18n import get_lang
from core.config import get_version

logger = logging.getLogger(__name__)

# (style, ascii_art, suffix) 형식
LOGO_LINES: list[tuple[str, str, str]] = [
    ("#0078D4", "   ____    _   ", "  [bold white]Conditional Access Block Report[/] [dim]v{version}[/]"),
    ("#0078D4", "  / ___|  / \\  ", "  [dim]{description}[/]"),
    ("#005A9E", " | |___  / _ \\ ", ""),
    ("#004578", "  \\____|/_/ \\_\\", ""),
]


def get_tool_description() -> str:
    """analyzers 메타데이터에서 도구 설명 반환"""
    from analyzers.conditional_access import TOOLS

    tool = TOOLS[0]
    key = "description_en" if get_lang() == "en" else "description"
    return tool.get(key, tool["description"])


def print_banner(console: Console) -> None:
    """배너 출력

    Args:
        console: Rich Console 인스턴스
    """
    format_vars = {"version": get_version(), "description": get_tool_description()}

    console.print()
    for color, ascii_art, suffix in LOGO_LINES:
        text = Text()
        text.append(ascii_art, style=f"bold {color}")
        if suffix:
            console.print(text, suffix.format(**format_vars), end="")
            console.print()
        else:
            console.print(text)
    console.print()
