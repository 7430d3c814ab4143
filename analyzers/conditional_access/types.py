"""
analyzers/conditional_access/types.py - 조건부 액세스 차단 분석 데이터 모델

Graph 응답을 파싱한 불변 데이터 클래스들입니다. 한 번 실행하는 동안만 메모리에 유지됩니다.

포함 항목:
    - PolicyState / Policy: 조건부 액세스 정책
    - EvaluationOutcome / PolicyEvaluation: 로그인 1건에 대한 정책별 평가 결과
    - SignInEvent: 로그인 감사 이벤트
    - BlockClassification / CorrelatedRecord: 정책과 매칭된 차단 이벤트
    - AggregateSummary: 정책별 집계 결과
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# 내보내기 컬럼 (순서 고정)
EXPORT_COLUMNS: list[str] = [
    "Timestamp",
    "User",
    "UserDisplayName",
    "App",
    "PolicyName",
    "PolicyState",
    "PolicyId",
    "BlockType",
    "Result",
    "GrantControls",
    "Country",
    "City",
    "IPAddress",
    "DeviceDetail",
    "Status",
]

FlatRow = dict[str, str]


# =============================================================================
# 정책
# =============================================================================


class PolicyState(Enum):
    """정책 상태

    - ENABLED: 적용 중
    - SIMULATION_ONLY: 보고 전용 (평가만 기록, 적용 안 함)
    - OTHER: 비활성 등 분석 대상 아님
    """

    ENABLED = "enabled"
    SIMULATION_ONLY = "enabledForReportingButNotEnforced"
    OTHER = "other"

    @classmethod
    def from_raw(cls, raw: str | None) -> PolicyState:
        if raw == cls.ENABLED.value:
            return cls.ENABLED
        if raw == cls.SIMULATION_ONLY.value:
            return cls.SIMULATION_ONLY
        return cls.OTHER

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Policy:
    """조건부 액세스 정책"""

    id: str
    display_name: str
    state: PolicyState
    raw_state: str = ""
    grant_controls: tuple[str, ...] = ()

    @property
    def is_relevant(self) -> bool:
        """적용 중 또는 보고 전용 상태인지"""
        return self.state in (PolicyState.ENABLED, PolicyState.SIMULATION_ONLY)

    @property
    def is_report_only(self) -> bool:
        return self.state is PolicyState.SIMULATION_ONLY

    @classmethod
    def from_graph(cls, data: dict[str, Any]) -> Policy:
        """conditionalAccessPolicy JSON에서 생성"""
        raw_state = data.get("state") or ""
        grant = data.get("grantControls") or {}
        return cls(
            id=data.get("id") or "",
            display_name=data.get("displayName") or "",
            state=PolicyState.from_raw(raw_state),
            raw_state=raw_state,
            grant_controls=tuple(grant.get("builtInControls") or ()),
        )


# =============================================================================
# 정책 평가 결과
# =============================================================================


class EvaluationOutcome(Enum):
    """로그인 1건에 대한 정책 평가 결과"""

    SUCCESS = "success"
    FAILURE = "failure"
    SIMULATED_FAILURE = "simulatedFailure"
    NOT_APPLIED = "notApplied"
    OTHER = "other"

    @classmethod
    def from_raw(cls, raw: str | None) -> EvaluationOutcome:
        return _OUTCOME_MAP.get(raw or "", cls.OTHER)


# appliedConditionalAccessPolicy.result 값 매핑
_OUTCOME_MAP: dict[str, EvaluationOutcome] = {
    "success": EvaluationOutcome.SUCCESS,
    "failure": EvaluationOutcome.FAILURE,
    "reportOnlyFailure": EvaluationOutcome.SIMULATED_FAILURE,
    "notApplied": EvaluationOutcome.NOT_APPLIED,
    "reportOnlyNotApplied": EvaluationOutcome.NOT_APPLIED,
    "notEnabled": EvaluationOutcome.NOT_APPLIED,
}


@dataclass(frozen=True)
class PolicyEvaluation:
    """appliedConditionalAccessPolicy 항목"""

    policy_id: str
    outcome: EvaluationOutcome
    raw_result: str = ""
    display_name: str = ""
    enforced_grant_controls: tuple[str, ...] = ()

    @classmethod
    def from_graph(cls, data: dict[str, Any]) -> PolicyEvaluation:
        raw_result = data.get("result") or ""
        return cls(
            policy_id=data.get("id") or "",
            outcome=EvaluationOutcome.from_raw(raw_result),
            raw_result=raw_result,
            display_name=data.get("displayName") or "",
            enforced_grant_controls=tuple(data.get("enforcedGrantControls") or ()),
        )


# =============================================================================
# 로그인 이벤트
# =============================================================================

# Graph는 소수점 이하 7자리까지 반환할 수 있음
_FRACTION_RE = re.compile(r"\.(\d+)")


def parse_timestamp(value: str) -> datetime:
    """ISO8601 문자열을 UTC aware datetime으로 변환

    Raises:
        ValueError: 형식이 잘못된 경우
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """UTC ISO8601 (Z) 문자열"""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class SignInEvent:
    """로그인 감사 이벤트 (auditLogs/signIns 항목)"""

    timestamp: datetime
    user: str
    user_display_name: str = ""
    app: str = ""
    ip_address: str = ""
    country: str | None = None
    city: str = ""
    device: str = ""
    status: int = 0
    evaluations: tuple[PolicyEvaluation, ...] = ()
    id: str = ""

    @classmethod
    def from_graph(cls, data: dict[str, Any]) -> SignInEvent:
        """signIn JSON에서 생성

        Raises:
            ValueError: createdDateTime이 없거나 형식이 잘못된 경우
        """
        created = data.get("createdDateTime")
        if not created:
            raise ValueError("createdDateTime 누락")

        location = data.get("location") or {}
        device = data.get("deviceDetail") or {}
        status = data.get("status") or {}
        country = (location.get("countryOrRegion") or "").strip() or None

        return cls(
            id=data.get("id") or "",
            timestamp=parse_timestamp(created),
            user=data.get("userPrincipalName") or "",
            user_display_name=data.get("userDisplayName") or "",
            app=data.get("appDisplayName") or "",
            ip_address=data.get("ipAddress") or "",
            country=country,
            city=location.get("city") or "",
            device=device.get("displayName") or "",
            status=int(status.get("errorCode") or 0),
            evaluations=tuple(
                PolicyEvaluation.from_graph(item) for item in data.get("appliedConditionalAccessPolicies") or ()
            ),
        )


# =============================================================================
# 상관 분석 결과
# =============================================================================


class BlockClassification(Enum):
    """차단 분류

    - ACTUAL_BLOCK: 실제 차단 (평가 결과 failure)
    - SIMULATED_BLOCK: 보고 전용 정책이었다면 차단 (reportOnlyFailure)
    """

    ACTUAL_BLOCK = "actual"
    SIMULATED_BLOCK = "simulated"

    @property
    def label(self) -> str:
        """내보내기 BlockType 값"""
        return _BLOCK_LABELS[self]


_BLOCK_LABELS = {
    BlockClassification.ACTUAL_BLOCK: "Blocked",
    BlockClassification.SIMULATED_BLOCK: "Would Block (Report-Only)",
}


@dataclass(frozen=True)
class CorrelatedRecord:
    """정책과 매칭된 차단 이벤트"""

    event: SignInEvent
    policy: Policy
    evaluation: PolicyEvaluation
    classification: BlockClassification

    @property
    def is_simulated(self) -> bool:
        return self.classification is BlockClassification.SIMULATED_BLOCK


@dataclass(frozen=True)
class AggregateSummary:
    """정책별 집계 결과

    top_* 항목은 (키, 건수) 튜플이며 건수 내림차순, 동률은 처음 등장한 순서입니다.
    """

    policy: Policy | None
    total: int
    actual_blocks: int
    simulated_blocks: int
    top_users: tuple[tuple[str, int], ...] = ()
    top_apps: tuple[tuple[str, int], ...] = ()
    top_countries: tuple[tuple[str, int], ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.total == 0
