"""
analyzers/conditional_access/reporter.py - 콘솔 출력

정책별 집계 요약과 최근 이벤트 목록을 Rich 테이블로 출력합니다.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cli.i18n import t

from .types import AggregateSummary, BlockClassification, CorrelatedRecord, PolicyState

console = Console()

DEFAULT_RECENT_LIMIT = 50


def state_label(state: PolicyState) -> str:
    """정책 상태 표시 문자열"""
    if state is PolicyState.SIMULATION_ONLY:
        return t("flow.state_report_only")
    if state is PolicyState.ENABLED:
        return t("flow.state_enabled")
    return str(state)


def block_label(classification: BlockClassification) -> str:
    if classification is BlockClassification.SIMULATED_BLOCK:
        return f"[yellow]{t('report.block_simulated')}[/yellow]"
    return f"[red]{t('report.block_actual')}[/red]"


def _ranking_table(title: str, column: str, rows: Sequence[tuple[str, int]]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta", expand=True)
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column(column, overflow="fold")
    table.add_column(t("report.col_count"), justify="right")

    if not rows:
        table.add_row("", f"[dim]{t('common.none')}[/dim]", "")
    for i, (key, count) in enumerate(rows, 1):
        table.add_row(str(i), escape(key) if key else t("common.unknown"), str(count))
    return table


def render_summary(summary: AggregateSummary, top_n: int = 10, out: Console | None = None) -> None:
    """정책별 집계 요약 출력

    Args:
        summary: 집계 결과
        top_n: 표 제목에 표시할 N
        out: 출력 콘솔 (기본: 모듈 콘솔)
    """
    out = out or console
    name = summary.policy.display_name if summary.policy else ""

    lines = [
        f"[bold]{t('report.total_blocks', count=summary.total)}[/bold]",
        f"[red]{t('report.actual_blocks', count=summary.actual_blocks)}[/red]",
        f"[yellow]{t('report.simulated_blocks', count=summary.simulated_blocks)}[/yellow]",
    ]
    out.print()
    out.print(Panel("\n".join(lines), title=t("report.summary_title", name=escape(name)), border_style="blue"))

    out.print(
        Columns(
            [
                _ranking_table(t("report.top_users", n=top_n), t("report.col_user"), summary.top_users),
                _ranking_table(t("report.top_apps", n=top_n), t("report.col_app"), summary.top_apps),
                _ranking_table(t("report.top_countries", n=top_n), t("report.col_country"), summary.top_countries),
            ],
            expand=True,
            equal=True,
        )
    )


def recent(records: Sequence[CorrelatedRecord], limit: int = DEFAULT_RECENT_LIMIT) -> list[CorrelatedRecord]:
    """시간 내림차순 상위 limit건"""
    ordered = sorted(records, key=lambda r: r.event.timestamp, reverse=True)
    return ordered[: max(limit, 0)]


def render_recent(
    records: Sequence[CorrelatedRecord],
    limit: int = DEFAULT_RECENT_LIMIT,
    out: Console | None = None,
) -> list[CorrelatedRecord]:
    """최근 이벤트 목록 출력

    Returns:
        출력된 레코드 (시간 내림차순)
    """
    out = out or console
    shown = recent(records, limit)

    table = Table(
        title=t("report.recent_title", shown=len(shown), total=len(records)),
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column(t("report.col_time"), no_wrap=True)
    table.add_column(t("report.col_user"))
    table.add_column(t("report.col_app"))
    table.add_column(t("report.col_block_type"))
    table.add_column(t("report.col_ip"))
    table.add_column(t("report.col_location"))
    table.add_column(t("report.col_device"))
    table.add_column(t("report.col_status"), justify="right")

    for record in shown:
        event = record.event
        location = ", ".join(part for part in (event.city, event.country) if part)
        table.add_row(
            event.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            escape(event.user),
            escape(event.app),
            block_label(record.classification),
            escape(event.ip_address),
            escape(location),
            escape(event.device),
            str(event.status),
        )

    out.print(table)
    return shown
