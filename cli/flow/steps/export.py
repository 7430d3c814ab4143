# cli/flow/steps/export.py
"""
내보내기 Step

내보내기 여부 확인 → 경로 입력 → CSV/Excel 저장.
"""

import questionary
from rich.markup import escape

from analyzers.conditional_access.export import default_export_path, export_rows
from cli.i18n import t
from cli.ui.console import console, print_success
from core.exceptions import UserCancelError

from ..context import ExecutionContext


class ExportStep:
    """내보내기 Step"""

    def execute(self, ctx: ExecutionContext) -> ExecutionContext:
        """내보내기 실행

        Returns:
            업데이트된 컨텍스트 (export_path 설정, 내보내지 않으면 None)

        Raises:
            UserCancelError: 경로 입력 취소
            WriteError: 파일 쓰기 실패
        """
        if not ctx.export_rows:
            console.print(f"[dim]{t('flow.export_nothing')}[/dim]")
            return ctx

        console.print()
        confirmed = questionary.confirm(t("flow.export_confirm"), default=False).ask()
        if not confirmed:
            return ctx

        default = str(default_export_path(ctx.tenant_label(), ctx.settings.output_dir))
        path = questionary.text(t("flow.export_path_prompt"), default=default).ask()
        if path is None:
            raise UserCancelError("export_path")
        path = path.strip() or default

        written = export_rows(ctx.export_rows, path)
        ctx.export_path = str(written)
        print_success(t("flow.export_done", path=escape(str(ctx.export_path)), count=len(ctx.export_rows)))
        return ctx
