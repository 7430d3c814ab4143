"""
tests/cli/test_flow_runner.py - FlowRunner 종료 코드/정리 테스트
"""

from unittest.mock import MagicMock, patch

import pytest

from cli.flow import runner as runner_module
from cli.flow.runner import EXIT_ERROR, EXIT_OK, FlowRunner
from cli.i18n import t
from core.exceptions import (
    CABRError,
    EmptyResultError,
    MissingDependencyError,
    RemoteUnavailableError,
    UserCancelError,
    WriteError,
)


@pytest.fixture(autouse=True)
def quiet_output():
    with patch.object(runner_module, "console", MagicMock()), patch.object(
        runner_module, "print_error"
    ) as mock_error, patch.object(runner_module, "print_warning"), patch.object(
        runner_module, "print_tool_complete"
    ):
        yield mock_error


def _make_runner(settings, side_effect=None) -> FlowRunner:
    runner = FlowRunner(settings=settings)
    session = MagicMock()

    def _steps(ctx):
        ctx.session = session
        runner.authenticator = MagicMock()
        if side_effect is not None:
            raise side_effect

    runner._run_steps = MagicMock(side_effect=_steps)
    return runner


class TestExitCodes:
    """종료 코드 테스트"""

    def test_success(self, settings):
        with patch.object(runner_module, "check_required"):
            assert _make_runner(settings).run() == EXIT_OK

    @pytest.mark.parametrize("error", [KeyboardInterrupt(), UserCancelError("tenant")])
    def test_operator_abort(self, settings, error):
        with patch.object(runner_module, "check_required"):
            assert _make_runner(settings, error).run() == EXIT_OK

    def test_no_policies_is_clean_exit(self, settings):
        with patch.object(runner_module, "check_required"):
            assert _make_runner(settings, EmptyResultError("policies")).run() == EXIT_OK

    def test_non_fatal_error_reported_as_warning(self, settings):
        """fatal=False 오류는 경고 출력 후 정상 종료"""

        class _Notice(CABRError):
            fatal = False

        with patch.object(runner_module, "check_required"), patch.object(runner_module, "print_warning") as mock_warning:
            assert _make_runner(settings, _Notice("audit log delayed")).run() == EXIT_OK

        assert "audit log delayed" in mock_warning.call_args.args[0]

    def test_no_policies_message(self, settings):
        with patch.object(runner_module, "check_required"), patch.object(runner_module, "print_warning") as mock_warning:
            _make_runner(settings, EmptyResultError("policies")).run()

        assert mock_warning.call_args.args[0] == t("flow.no_policies")

    @pytest.mark.parametrize(
        "error",
        [
            RemoteUnavailableError("list_signins", status_code=503),
            WriteError("out.csv"),
            RuntimeError("unexpected"),
        ],
    )
    def test_errors(self, settings, error):
        with patch.object(runner_module, "check_required"):
            assert _make_runner(settings, error).run() == EXIT_ERROR

    def test_write_error_reported(self, settings, quiet_output):
        with patch.object(runner_module, "check_required"):
            assert _make_runner(settings, WriteError("out/report.csv")).run() == EXIT_ERROR

        assert "out/report.csv" in quiet_output.call_args.args[0]

    def test_missing_dependency_before_remote_calls(self, settings, quiet_output):
        """의존성 누락 시 Step 실행 전에 종료"""
        runner = _make_runner(settings)

        with patch.object(runner_module, "check_required", side_effect=MissingDependencyError("msal")):
            assert runner.run() == EXIT_ERROR

        runner._run_steps.assert_not_called()
        assert "msal" in quiet_output.call_args.args[0]


class TestTeardown:
    """세션 정리는 모든 종료 경로에서 수행"""

    @pytest.mark.parametrize("error", [None, RemoteUnavailableError("x"), KeyboardInterrupt()])
    def test_teardown_always_runs(self, settings, error):
        runner = _make_runner(settings, error)

        with patch.object(runner_module, "check_required"):
            runner.run()

        runner.authenticator.teardown.assert_called_once()

    def test_no_session_no_teardown(self, settings):
        runner = FlowRunner(settings=settings)
        runner._run_steps = MagicMock(side_effect=UserCancelError("identity"))

        with patch.object(runner_module, "check_required"):
            assert runner.run() == EXIT_OK

        assert runner.authenticator is None


class TestPipelineOrder:
    def test_steps_in_order(self, settings):
        """로그인 → 기간 → 정책 → 분석 → 내보내기"""
        calls = []

        def _step(name):
            step = MagicMock()
            step.return_value.execute.side_effect = lambda ctx: calls.append(name) or ctx
            return step

        with patch("cli.flow.steps.AuthStep", _step("auth")), patch("cli.flow.steps.LookbackStep", _step("lookback")), patch(
            "cli.flow.steps.PolicyStep", _step("policy")
        ), patch("cli.flow.steps.ExportStep", _step("export")), patch(
            "analyzers.conditional_access.blocked_signins.run", side_effect=lambda ctx: calls.append("run")
        ), patch(
            "core.auth.authenticator.GraphAuthenticator"
        ), patch.object(
            runner_module, "print_tool_start"
        ):
            FlowRunner(settings=settings)._run_steps(runner_module.ExecutionContext(settings=settings))

        assert calls == ["auth", "lookback", "policy", "run", "export"]
