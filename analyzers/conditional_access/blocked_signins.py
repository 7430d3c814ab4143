"""
analyzers/conditional_access/blocked_signins.py - 조건부 액세스 차단 로그인 분석

선택된 정책마다 다음 파이프라인을 순서대로 실행합니다:
    SignInFetcher → Correlator → Aggregator → Reporter

로그인 로그는 실행당 1회 조회하여 모든 정책에 재사용합니다.
한 정책에서 치명적 오류가 나면 남은 정책은 중단되지만 이미 출력된 결과는 유지됩니다.

플러그인 규약:
    - run(ctx): 필수. 실행 함수.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from cli.i18n import t
from core.exceptions import EmptyResultError

from .aggregator import summarize, to_export_rows
from .correlator import correlate
from .reporter import render_recent, render_summary, state_label
from .signins import SignInFetcher
from .types import AggregateSummary, CorrelatedRecord, Policy, SignInEvent, format_timestamp

if TYPE_CHECKING:
    from cli.flow.context import ExecutionContext

logger = logging.getLogger(__name__)
console = Console()

REQUIRED_PERMISSIONS = {
    "read": [
        "Policy.Read.All",
        "AuditLog.Read.All",
        "Directory.Read.All",
    ],
}


@dataclass
class PolicyResult:
    """정책 1개의 분석 결과"""

    policy: Policy
    records: list[CorrelatedRecord]
    summary: AggregateSummary


def analyze_policy(policy: Policy, events: Sequence[SignInEvent], top_n: int = 10) -> PolicyResult:
    """정책 1개에 대한 상관 분석 + 집계

    Raises:
        EmptyResultError: 차단 이벤트 없음 (scope="events", 비치명적)
    """
    records = correlate(policy, events)
    if not records:
        raise EmptyResultError("events", subject=policy.display_name)

    summary = summarize(records, top_n=top_n, policy=policy)
    logger.info(
        "%s: 영향 %d건 (차단 %d, 보고 전용 %d)",
        policy.display_name,
        summary.total,
        summary.actual_blocks,
        summary.simulated_blocks,
    )
    return PolicyResult(policy=policy, records=records, summary=summary)


def load_events(ctx: ExecutionContext) -> list[SignInEvent]:
    """컨텍스트의 cutoff 이후 로그인 이벤트 조회 (1회)"""
    if ctx.events is None:
        console.print(f"[dim]{t('flow.fetching_signins', since=format_timestamp(ctx.cutoff))}[/dim]")
        ctx.events = SignInFetcher(ctx.session).fetch_since(ctx.cutoff)
        console.print(f"[dim]{t('flow.signins_found', count=len(ctx.events))}[/dim]")
    return ctx.events


def run(ctx: ExecutionContext) -> list[PolicyResult]:
    """선택된 정책을 순서대로 분석하고 출력

    Raises:
        RemoteUnavailableError: 로그인 로그 조회 실패 (남은 처리 중단)
    """
    events = load_events(ctx)
    settings = ctx.settings

    for policy in ctx.selected_policies:
        console.print()
        console.rule(f"[bold]{t('report.analyzing', name=escape(policy.display_name))}[/bold]")
        console.print(f"[dim]{t('report.policy_state', state=state_label(policy.state))} | {escape(policy.id)}[/dim]")

        try:
            result = analyze_policy(policy, events, top_n=settings.top_n)
        except EmptyResultError:
            console.print(f"[yellow]! {t('report.no_events', name=escape(policy.display_name), days=ctx.days)}[/yellow]")
            continue

        render_summary(result.summary, top_n=settings.top_n, out=console)
        render_recent(result.records, limit=settings.recent_limit, out=console)

        ctx.results.append(result)
        ctx.export_rows.extend(to_export_rows(result.records))

    console.print()
    console.print(
        f"[green]* {t('report.run_summary', policies=len(ctx.selected_policies), records=ctx.total_records)}[/green]"
    )
    return ctx.results
