"""
cli/headless.py - Headless CLI Runner

CI/CD 파이프라인 및 자동화를 위한 비대화형 실행 모드입니다.
프롬프트 없이 로그인 → 정책 조회 → 분석/출력 → (선택) 내보내기를 수행하며,
조회된 테넌트는 확인 없이 그대로 사용합니다.

Usage:
    # 특정 정책 (이름 또는 ID, 다중 가능)
    cabr run --days 7 --policy "Block legacy auth" --policy 5f0c...

    # 적용 중/보고 전용 정책 전체 + CSV 내보내기
    cabr run --days 30 --all --export output/blocked.csv

    # 브라우저 없는 환경
    cabr run --all --device-code --login-hint admin@contoso.com

옵션:
    --days: 조회 기간 (일, 기본: CABR_DEFAULT_DAYS)
    --policy: 정책 이름 또는 ID (다중 가능)
    --all: 대상 정책 전체
    --export: 내보내기 경로 (.csv 또는 .xlsx)
    --login-hint: 로그인할 계정 (UPN)
    --device-code: device code flow 사용
    --recent: 최근 이벤트 표시 개수
"""

import logging
import traceback
from dataclasses import dataclass, field, replace

from rich.console import Console
from rich.markup import escape

from cli.flow.context import ExecutionContext
from cli.flow.runner import describe_non_fatal
from cli.i18n import t
from core.config import Settings, load_settings
from core.deps import check_required
from core.exceptions import (
    CABRError,
    MissingDependencyError,
    ValidationError,
    format_error_for_user,
)

logger = logging.getLogger(__name__)
console = Console()


@dataclass
class HeadlessConfig:
    """Headless 실행 설정"""

    # 대상
    days: int | None = None
    policies: list[str] = field(default_factory=list)  # 이름 또는 ID
    all_policies: bool = False

    # 인증
    login_hint: str | None = None
    device_code: bool = False

    # 출력
    export: str | None = None
    recent: int | None = None
    debug: bool = False


def match_policies(policies: list, names: list[str]) -> list:
    """이름/ID 목록 → 정책 목록 (지정 순서 유지, 중복 제거)

    ID는 정확히, 이름은 대소문자 무시로 비교합니다.

    Raises:
        ValidationError: 일치하는 정책이 없는 항목
    """
    selected = []
    for name in names:
        key = name.strip()
        match = next((p for p in policies if p.id == key), None)
        if match is None:
            match = next((p for p in policies if p.display_name.lower() == key.lower()), None)
        if match is None:
            raise ValidationError("policy", key, "적용 중/보고 전용 정책 이름 또는 ID")
        if match not in selected:
            selected.append(match)
    return selected


class HeadlessRunner:
    """Headless CLI Runner

    대화형 프롬프트 없이 분석을 실행합니다.
    """

    def __init__(self, config: HeadlessConfig, settings: Settings | None = None):
        self.config = config
        self.settings = settings or load_settings()
        if config.recent is not None:
            self.settings = replace(self.settings, recent_limit=config.recent)
        self.authenticator = None
        self._ctx: ExecutionContext | None = None

    def run(self) -> int:
        """Headless 실행

        Returns:
            0: 성공 (분석 대상 정책 없음 포함)
            1: 실패
        """
        self._ctx = ExecutionContext(
            settings=self.settings,
            login_hint=self.config.login_hint,
            days=self.config.days or self.settings.default_days,
        )
        try:
            check_required()
            self._execute(self._ctx)
            return 0

        except KeyboardInterrupt:
            console.print(f"\n[dim]{t('common.cancelled')}[/dim]")
            return 0
        except MissingDependencyError as e:
            console.print(f"[red]{t('cli.missing_dependency', package=e.package)}[/red]")
            return 1
        except CABRError as e:
            if not e.fatal:
                console.print(f"[yellow]! {describe_non_fatal(e)}[/yellow]")
                return 0
            console.print(f"[red]{t('common.error')}: {escape(format_error_for_user(e))}[/red]")
            if self.config.debug:
                traceback.print_exc()
            return 1
        except Exception as e:
            console.print(f"[red]{t('common.error')}: {escape(str(e))}[/red]")
            if self.config.debug:
                traceback.print_exc()
            return 1
        finally:
            if self.authenticator is not None and self._ctx.session is not None:
                self.authenticator.teardown(self._ctx.session)

    def _execute(self, ctx: ExecutionContext) -> None:
        from analyzers.conditional_access import blocked_signins
        from analyzers.conditional_access.catalog import PolicyCatalog
        from analyzers.conditional_access.export import export_rows
        from analyzers.conditional_access.signins import cutoff_for_days
        from analyzers.conditional_access.types import format_timestamp
        from core.auth.authenticator import GraphAuthenticator

        ctx.cutoff = cutoff_for_days(ctx.days)

        self.authenticator = GraphAuthenticator(self.settings, use_device_code=self.config.device_code)
        ctx.session = self.authenticator.authenticate(login_hint=ctx.login_hint)
        ctx.tenant = self.authenticator.resolve_tenant(ctx.session)

        console.print(f"[bold]{t('flow.tenant_label')}[/bold] {escape(ctx.tenant.label())}")
        console.print(f"[dim]{t('flow.lookback_summary', days=ctx.days, cutoff=format_timestamp(ctx.cutoff))}[/dim]")

        ctx.policies = PolicyCatalog(ctx.session).list_relevant_policies()
        if self.config.all_policies:
            ctx.selected_policies = list(ctx.policies)
        else:
            ctx.selected_policies = match_policies(ctx.policies, self.config.policies)

        blocked_signins.run(ctx)

        if self.config.export:
            if not ctx.export_rows:
                console.print(f"[dim]{t('flow.export_nothing')}[/dim]")
                return
            ctx.export_path = str(export_rows(ctx.export_rows, self.config.export))
            console.print(f"[green]* {t('flow.export_done', path=escape(str(ctx.export_path)), count=len(ctx.export_rows))}[/green]")


def run_headless(
    days: int | None = None,
    policies: list[str] | None = None,
    all_policies: bool = False,
    export: str | None = None,
    login_hint: str | None = None,
    device_code: bool = False,
    recent: int | None = None,
    debug: bool = False,
    settings: Settings | None = None,
) -> int:
    """Headless 실행 편의 함수

    Args:
        days: 조회 기간 (일)
        policies: 정책 이름 또는 ID 목록
        all_policies: 대상 정책 전체
        export: 내보내기 경로
        login_hint: 로그인할 계정
        device_code: device code flow 사용
        recent: 최근 이벤트 표시 개수
        debug: traceback 출력
        settings: 실행 설정 (없으면 환경변수에서 로드)

    Returns:
        0: 성공, 1: 실패
    """
    config = HeadlessConfig(
        days=days,
        policies=list(policies) if policies else [],
        all_policies=all_policies,
        export=export,
        login_hint=login_hint,
        device_code=device_code,
        recent=recent,
        debug=debug,
    )

    runner = HeadlessRunner(config, settings=settings)
    return runner.run()
