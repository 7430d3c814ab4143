"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    cabr                    # 대화형 실행 (로그인 → 기간 → 정책 선택 → 보고서)
    cabr --version          # 버전 표시
    cabr --lang en          # 영어 출력
    cabr --debug            # 디버그 로그 + traceback
    cabr run ...            # 프롬프트 없이 실행 (자동화용)

아키텍처:
    1. cli(): Click 그룹 - 언어/로그 설정 후 서브명령이 없으면 FlowRunner 실행
    2. run_cmd(): headless 실행 (cli.headless.run_headless)

종료 코드:
    0: 정상 완료 또는 사용자 중단
    1: 처리되지 않은 오류

Usage:
    $ cabr
    $ cabr run --days 7 --all --export output/report.csv

    # 모듈로 실행
    $ python -m cli.app
"""

import logging

import click
from click import Context

from cli.i18n import SUPPORTED_LANGS, set_lang, t
from core.config import MAX_LOOKBACK_DAYS, get_version, load_settings
from core.exceptions import ConfigError

# WARNING 레벨로 설정하여 INFO 로그가 보고서 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

VERSION = get_version()

DEBUG_LOGGERS = ("cli", "core", "analyzers")


def _load_settings_or_exit():
    try:
        return load_settings()
    except ConfigError as e:
        click.echo(f"{t('common.error')}: {e}", err=True)
        raise SystemExit(1) from e


@click.group(invoke_without_command=True, help=t("cli.app_help"))
@click.version_option(VERSION, prog_name="cabr")
@click.option(
    "--lang",
    type=click.Choice(list(SUPPORTED_LANGS)),
    default=None,
    help=t("cli.lang_help"),
)
@click.option("--debug", is_flag=True, help=t("cli.debug_help"))
@click.pass_context
def cli(ctx: Context, lang: str | None, debug: bool) -> None:
    """CABR - Conditional Access Block Report"""
    settings = _load_settings_or_exit()

    # --lang가 없으면 CABR_LANG
    lang = lang or settings.lang
    set_lang(lang)

    if debug:
        # 프로젝트 로그는 Rich 핸들러로 출력
        from cli.ui.console import get_logger

        logging.getLogger().setLevel(logging.DEBUG)
        for name in DEBUG_LOGGERS:
            get_logger(name, logging.DEBUG).propagate = False

    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["debug"] = debug
    ctx.obj["settings"] = settings

    if ctx.invoked_subcommand is None:
        from cli.flow import create_flow_runner
        from cli.ui.banner import print_banner
        from cli.ui.console import console

        print_banner(console)
        runner = create_flow_runner(settings=settings, debug=debug)
        raise SystemExit(runner.run())


@cli.command("run", help=t("cli.run_help"))
@click.option("--days", type=click.IntRange(min=1, max=MAX_LOOKBACK_DAYS), default=None, help=t("cli.days_help"))
@click.option("--policy", "policies", multiple=True, help=t("cli.policy_help"))
@click.option("--all", "all_policies", is_flag=True, help=t("cli.all_help"))
@click.option("--export", "export", default=None, help=t("cli.export_help"))
@click.option("--login-hint", "login_hint", default=None, help=t("cli.login_hint_help"))
@click.option("--device-code", "device_code", is_flag=True, help=t("cli.device_code_help"))
@click.option("--recent", type=click.IntRange(min=1), default=None, help=t("cli.recent_help"))
@click.pass_context
def run_cmd(
    ctx: Context,
    days: int | None,
    policies: tuple[str, ...],
    all_policies: bool,
    export: str | None,
    login_hint: str | None,
    device_code: bool,
    recent: int | None,
) -> None:
    """프롬프트 없이 실행"""
    from cli.headless import run_headless

    # 정책 지정 검증
    if not policies and not all_policies:
        click.echo(t("cli.run_policy_required"), err=True)
        raise SystemExit(1)
    if policies and all_policies:
        click.echo(t("cli.run_policy_conflict"), err=True)
        raise SystemExit(1)

    exit_code = run_headless(
        days=days,
        policies=list(policies),
        all_policies=all_policies,
        export=export,
        login_hint=login_hint,
        device_code=device_code,
        recent=recent,
        debug=ctx.obj.get("debug", False),
        settings=ctx.obj.get("settings"),
    )
    raise SystemExit(exit_code)


if __name__ == "__main__":
    cli()
