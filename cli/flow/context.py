# cli/flow/context.py
"""
실행 컨텍스트

대화형 플로우와 headless 실행이 공유하는 상태 데이터 클래스입니다.
각 Step이 필드를 채우고 분석기(run)가 읽습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from core.config import Settings

if TYPE_CHECKING:
    from analyzers.conditional_access.blocked_signins import PolicyResult
    from analyzers.conditional_access.types import FlatRow, Policy, SignInEvent
    from core.auth.session import GraphSession, TenantInfo


@dataclass
class ExecutionContext:
    """실행 컨텍스트

    Attributes:
        settings: 실행 설정
        login_hint: 로그인할 계정 (선택)
        session: 인증된 Graph 세션
        tenant: 확인된 테넌트
        days: 조회 기간 (일)
        cutoff: 조회 기준 시각 (UTC)
        policies: 분석 대상 후보 정책
        selected_policies: 선택된 정책 (선택 순서 유지)
        events: 조회된 로그인 이벤트
        results: 정책별 분석 결과
        export_rows: 내보내기 행 (드라이버만 추가)
        export_path: 내보낸 파일 경로
    """

    settings: Settings = field(default_factory=Settings)
    login_hint: str | None = None
    session: GraphSession | None = None
    tenant: TenantInfo | None = None
    days: int = 7
    cutoff: datetime | None = None
    policies: list[Policy] = field(default_factory=list)
    selected_policies: list[Policy] = field(default_factory=list)
    events: list[SignInEvent] | None = None
    results: list[PolicyResult] = field(default_factory=list)
    export_rows: list[FlatRow] = field(default_factory=list)
    export_path: str | None = None

    @property
    def total_records(self) -> int:
        return sum(len(r.records) for r in self.results)

    def tenant_label(self) -> str:
        if self.session is not None:
            return self.session.tenant_label
        return "tenant"
