# cli/flow/steps/lookback.py
"""
조회 기간 Step

최근 N일 입력 후 기준 시각(cutoff) 계산.
"""

from analyzers.conditional_access.signins import cutoff_for_days
from analyzers.conditional_access.types import format_timestamp
from cli.i18n import t
from cli.ui.console import console, print_info
from core.config import MAX_LOOKBACK_DAYS

from ..context import ExecutionContext


def parse_days(answer: str, default: int) -> int | None:
    """입력값 → 일수 (빈 입력은 기본값, 잘못된 입력이나 상한 초과는 None)"""
    answer = answer.strip()
    if not answer:
        return default
    try:
        days = int(answer)
    except ValueError:
        return None
    return days if 0 < days <= MAX_LOOKBACK_DAYS else None


class LookbackStep:
    """조회 기간 Step"""

    def execute(self, ctx: ExecutionContext) -> ExecutionContext:
        """기간 입력 실행

        Returns:
            업데이트된 컨텍스트 (days, cutoff 설정)
        """
        default = ctx.settings.default_days

        console.print()
        console.print(f"[bold]{t('flow.lookback_title')}[/bold]")
        while True:
            answer = console.input(f"{t('flow.lookback_prompt', default=default)} > ")
            days = parse_days(answer, default)
            if days is not None:
                break
            console.print(f"[dim]{t('flow.lookback_invalid', max=MAX_LOOKBACK_DAYS)}[/dim]")

        ctx.days = days
        ctx.cutoff = cutoff_for_days(days)
        print_info(t("flow.lookback_summary", days=days, cutoff=format_timestamp(ctx.cutoff)))
        return ctx
