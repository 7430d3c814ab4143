# cli/flow/runner.py
"""
Flow Runner - 대화형 실행 흐름을 관리하는 핵심 모듈.

로그인 → 조회 기간 → 정책 선택 → 분석/출력 → 내보내기 순으로 1회 실행하고
종료 코드를 반환합니다. 세션 정리는 성공/실패와 무관하게 항상 수행합니다.
"""

import logging
import time
import traceback

from rich.markup import escape

from cli.i18n import get_lang, t
from cli.ui.console import console, print_error, print_tool_complete, print_tool_start, print_warning
from core.config import Settings, load_settings
from core.deps import check_required
from core.exceptions import (
    CABRError,
    EmptyResultError,
    MissingDependencyError,
    UserCancelError,
    WriteError,
    format_error_for_user,
)

from .context import ExecutionContext

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def describe_non_fatal(error: CABRError) -> str:
    """비치명적 오류(fatal=False)의 경고 문구"""
    if isinstance(error, EmptyResultError) and error.scope == "policies":
        return t("flow.no_policies")
    return escape(str(error))


class FlowRunner:
    """대화형 CLI Flow Runner

    Args:
        settings: 실행 설정 (없으면 환경변수에서 로드)
        use_device_code: 디바이스 코드 로그인 사용 여부
        login_hint: 로그인할 계정 (지정 시 입력 생략)
        debug: 예외 발생 시 traceback 출력
    """

    def __init__(
        self,
        settings: Settings | None = None,
        use_device_code: bool = False,
        login_hint: str | None = None,
        debug: bool = False,
    ):
        self.settings = settings or load_settings()
        self.use_device_code = use_device_code
        self.login_hint = login_hint
        self.debug = debug
        self.authenticator = None

    def run(self) -> int:
        """Flow 실행

        Returns:
            종료 코드 (정상 완료/사용자 중단 0, 오류 1)
        """
        ctx = ExecutionContext(settings=self.settings, login_hint=self.login_hint)
        started = time.monotonic()

        try:
            check_required()
            self._run_steps(ctx)
            print_tool_complete(elapsed=time.monotonic() - started)
            return EXIT_OK

        except (KeyboardInterrupt, UserCancelError):
            console.print()
            console.print(f"[dim]{t('common.cancelled')}[/dim]")
            return EXIT_OK
        except MissingDependencyError as e:
            print_error(t("cli.missing_dependency", package=e.package))
            return EXIT_ERROR
        except WriteError as e:
            # 이미 출력된 보고서는 유지
            console.print()
            print_error(t("flow.export_failed", error=escape(str(e))))
            return EXIT_ERROR
        except CABRError as e:
            console.print()
            if not e.fatal:
                print_warning(describe_non_fatal(e))
                return EXIT_OK
            print_error(f"{t('common.error')}: {escape(format_error_for_user(e))}")
            logger.debug("실행 실패: %s", e.to_dict())
            if self.debug:
                traceback.print_exc()
            return EXIT_ERROR
        except Exception as e:
            console.print()
            print_error(f"{t('common.error')}: {escape(str(e))}")
            if self.debug:
                traceback.print_exc()
            else:
                console.print(f"[dim]{t('common.debug_hint')}[/dim]")
            return EXIT_ERROR
        finally:
            self._teardown(ctx)

    def _run_steps(self, ctx: ExecutionContext) -> None:
        # requests/msal 의존 모듈은 의존성 확인 이후 로드
        from analyzers.conditional_access import TOOLS, blocked_signins
        from core.auth.authenticator import GraphAuthenticator

        from .steps import AuthStep, ExportStep, LookbackStep, PolicyStep

        self.authenticator = GraphAuthenticator(
            self.settings,
            use_device_code=self.use_device_code,
            on_device_code=_print_device_code,
        )

        ctx = AuthStep(self.authenticator).execute(ctx)
        ctx = LookbackStep().execute(ctx)
        ctx = PolicyStep().execute(ctx)

        tool = TOOLS[0]
        suffix = "_en" if get_lang() == "en" else ""
        print_tool_start(tool["name" + suffix], tool["description" + suffix])
        blocked_signins.run(ctx)

        ExportStep().execute(ctx)

    def _teardown(self, ctx: ExecutionContext) -> None:
        if self.authenticator is None or ctx.session is None:
            return
        console.print(f"[dim]{t('flow.teardown')}[/dim]")
        self.authenticator.teardown(ctx.session)


def _print_device_code(message: str) -> None:
    """디바이스 코드 안내 출력"""
    console.print()
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def create_flow_runner(**kwargs) -> FlowRunner:
    """FlowRunner 인스턴스 생성"""
    return FlowRunner(**kwargs)
