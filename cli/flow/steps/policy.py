# cli/flow/steps/policy.py
"""
정책 선택 Step

적용 중 / 보고 전용 정책 목록을 번호로 표시하고 하나, 여러 개 또는 전체를 선택.
"""

from rich.markup import escape

from analyzers.conditional_access.catalog import PolicyCatalog
from analyzers.conditional_access.reporter import state_label
from analyzers.conditional_access.types import Policy, PolicyState
from cli.i18n import t
from cli.ui.console import console, print_box_end, print_box_line, print_box_start, print_info

from ..context import ExecutionContext

ALL_KEYWORD = "all"


def parse_selection(answer: str, count: int) -> list[int]:
    """입력값 → 0 기반 인덱스 목록 (입력 순서 유지, 중복 제거)

    Args:
        answer: "all", "3", "1,4,2" 형식
        count: 정책 수

    Raises:
        ValueError: 숫자가 아니거나 범위를 벗어난 항목
    """
    answer = answer.strip().lower()
    if not answer:
        raise ValueError(answer)
    if answer == ALL_KEYWORD:
        return list(range(count))

    indexes: list[int] = []
    for part in answer.replace(" ", ",").split(","):
        if not part:
            continue
        num = int(part)
        if not 1 <= num <= count:
            raise ValueError(part)
        if num - 1 not in indexes:
            indexes.append(num - 1)

    if not indexes:
        raise ValueError(answer)
    return indexes


class PolicyStep:
    """정책 선택 Step"""

    def _load(self, ctx: ExecutionContext) -> list[Policy]:
        with console.status(t("flow.loading_policies")):
            return PolicyCatalog(ctx.session).list_relevant_policies()

    def execute(self, ctx: ExecutionContext) -> ExecutionContext:
        """정책 선택 실행

        Returns:
            업데이트된 컨텍스트 (policies, selected_policies 설정)

        Raises:
            RemoteUnavailableError: 정책 조회 실패
            EmptyResultError: 분석 대상 정책 없음
        """
        ctx.policies = self._load(ctx)

        print_box_start(t("flow.select_policy", count=len(ctx.policies)))
        for i, policy in enumerate(ctx.policies, 1):
            color = "yellow" if policy.state is PolicyState.SIMULATION_ONLY else "green"
            print_box_line(f"{i:>3}) {escape(policy.display_name)} [{color}]({state_label(policy.state)})[/{color}]")
        print_box_line()
        print_box_line(f"[dim]{t('flow.select_policy_hint')}[/dim]")
        print_box_end()

        while True:
            answer = console.input("> ")
            try:
                indexes = parse_selection(answer, len(ctx.policies))
                break
            except ValueError:
                console.print(f"[dim]{t('flow.policy_invalid', value=escape(answer.strip()))}[/dim]")

        ctx.selected_policies = [ctx.policies[i] for i in indexes]
        print_info(t("flow.selected_policies", count=len(ctx.selected_policies)))
        return ctx
