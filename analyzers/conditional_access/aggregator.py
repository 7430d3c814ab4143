"""
analyzers/conditional_access/aggregator.py - 차단 이벤트 집계

사용자 / 앱 / 국가별 상위 N개 집계와 내보내기용 평면 행 변환을 담당합니다.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .types import (
    EXPORT_COLUMNS,
    AggregateSummary,
    BlockClassification,
    CorrelatedRecord,
    FlatRow,
    Policy,
    format_timestamp,
)

DEFAULT_TOP_N = 10
GRANT_CONTROL_SEPARATOR = ", "


def count_by(
    records: Sequence[CorrelatedRecord],
    key_fn: Callable[[CorrelatedRecord], str | None],
    top_n: int = DEFAULT_TOP_N,
) -> tuple[tuple[str, int], ...]:
    """키별 건수를 내림차순으로 상위 top_n개 반환

    key_fn이 None을 반환한 레코드는 제외합니다 (빈 문자열은 하나의 키로 집계).
    dict는 삽입 순서를 유지하고 sorted는 안정 정렬이므로 동률은 처음 등장한 순서입니다.
    """
    counts: dict[str, int] = {}
    for record in records:
        key = key_fn(record)
        if key is None:
            continue
        counts[key] = counts.get(key, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return tuple(ranked[:top_n])


def _country_key(record: CorrelatedRecord) -> str | None:
    return record.event.country or None


def summarize(
    records: Sequence[CorrelatedRecord],
    top_n: int = DEFAULT_TOP_N,
    policy: Policy | None = None,
) -> AggregateSummary:
    """정책별 집계

    Args:
        records: 상관 분석 결과
        top_n: 그룹별 최대 항목 수
        policy: 집계 대상 정책 (기본: 첫 레코드의 정책)
    """
    if policy is None and records:
        policy = records[0].policy

    actual = sum(1 for r in records if r.classification is BlockClassification.ACTUAL_BLOCK)

    return AggregateSummary(
        policy=policy,
        total=len(records),
        actual_blocks=actual,
        simulated_blocks=len(records) - actual,
        top_users=count_by(records, lambda r: r.event.user, top_n),
        top_apps=count_by(records, lambda r: r.event.app, top_n),
        top_countries=count_by(records, _country_key, top_n),
    )


def grant_controls_of(record: CorrelatedRecord) -> str:
    """평가 시 적용된 권한 부여 컨트롤 (없으면 정책 정의 값)"""
    controls = record.evaluation.enforced_grant_controls or record.policy.grant_controls
    return GRANT_CONTROL_SEPARATOR.join(controls)


def to_export_row(record: CorrelatedRecord) -> FlatRow:
    """CorrelatedRecord → 내보내기 행"""
    event = record.event
    row = {
        "Timestamp": format_timestamp(event.timestamp),
        "User": event.user,
        "UserDisplayName": event.user_display_name,
        "App": event.app,
        "PolicyName": record.policy.display_name,
        "PolicyState": record.policy.raw_state or str(record.policy.state),
        "PolicyId": record.policy.id,
        "BlockType": record.classification.label,
        "Result": record.evaluation.raw_result,
        "GrantControls": grant_controls_of(record),
        "Country": event.country or "",
        "City": event.city,
        "IPAddress": event.ip_address,
        "DeviceDetail": event.device,
        "Status": str(event.status),
    }
    return {column: row[column] for column in EXPORT_COLUMNS}


def to_export_rows(records: Sequence[CorrelatedRecord]) -> list[FlatRow]:
    """레코드당 정확히 1행"""
    return [to_export_row(r) for r in records]
