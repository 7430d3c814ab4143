# cli/flow/steps/auth.py
"""
로그인 Step

로그인 계정 입력 → Graph 로그인 → 테넌트 확인.
"""

import logging

import questionary
from rich.markup import escape

from cli.i18n import t
from cli.ui.console import console, print_box_end, print_box_line, print_box_start, print_success
from core.auth.authenticator import GraphAuthenticator
from core.exceptions import UserCancelError

from ..context import ExecutionContext

logger = logging.getLogger(__name__)


class AuthStep:
    """로그인 Step

    Args:
        authenticator: 세션을 생성하고 정리하는 GraphAuthenticator
    """

    def __init__(self, authenticator: GraphAuthenticator):
        self.authenticator = authenticator

    def _ask_identity(self, ctx: ExecutionContext) -> str | None:
        if ctx.login_hint:
            return ctx.login_hint

        answer = questionary.text(t("flow.identity_prompt")).ask()
        if answer is None:
            raise UserCancelError("identity")
        return answer.strip() or None

    def execute(self, ctx: ExecutionContext) -> ExecutionContext:
        """로그인 실행

        Args:
            ctx: 실행 컨텍스트

        Returns:
            업데이트된 컨텍스트 (session, tenant 설정)

        Raises:
            UserCancelError: 입력 취소 또는 테넌트 확인 거부
            AuthError: 로그인 실패
        """
        ctx.login_hint = self._ask_identity(ctx)

        with console.status(t("flow.authenticating")):
            ctx.session = self.authenticator.authenticate(login_hint=ctx.login_hint)
            ctx.tenant = self.authenticator.resolve_tenant(ctx.session)

        print_success(t("flow.auth_done", user=escape(ctx.session.username)))

        print_box_start(t("flow.auth_title"))
        print_box_line(f"[dim]{t('flow.tenant_label')}[/dim] [bold]{escape(ctx.tenant.label())}[/bold]")
        print_box_end()

        confirmed = questionary.confirm(t("flow.tenant_confirm"), default=True).ask()
        if not confirmed:
            console.print(f"[yellow]{t('flow.tenant_declined')}[/yellow]")
            raise UserCancelError("tenant")

        return ctx
