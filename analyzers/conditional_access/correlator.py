"""
analyzers/conditional_access/correlator.py - 정책/로그인 상관 분석

로그인 1건에는 여러 정책의 평가 결과가 함께 기록됩니다. 분석 대상 정책 ID와
일치하는 평가 항목만 보고, 첫 번째 항목을 가정하지 않습니다.

분류 규칙:
    failure            → ACTUAL_BLOCK
    reportOnlyFailure  → SIMULATED_BLOCK
    그 외 / 매칭 없음   → 제외
"""

from __future__ import annotations

from collections.abc import Iterable

from .types import (
    BlockClassification,
    CorrelatedRecord,
    EvaluationOutcome,
    Policy,
    PolicyEvaluation,
    SignInEvent,
)

_CLASSIFICATION = {
    EvaluationOutcome.FAILURE: BlockClassification.ACTUAL_BLOCK,
    EvaluationOutcome.SIMULATED_FAILURE: BlockClassification.SIMULATED_BLOCK,
}


def find_evaluation(event: SignInEvent, policy_id: str) -> PolicyEvaluation | None:
    """policy_id와 일치하는 첫 번째 평가 항목, 없으면 None

    빈 ID는 어떤 항목과도 매칭하지 않습니다.
    """
    if not policy_id:
        return None
    for evaluation in event.evaluations:
        if evaluation.policy_id and evaluation.policy_id == policy_id:
            return evaluation
    return None


def classify(outcome: EvaluationOutcome) -> BlockClassification | None:
    """평가 결과 → 차단 분류 (차단이 아니면 None)"""
    return _CLASSIFICATION.get(outcome)


def correlate(policy: Policy, events: Iterable[SignInEvent]) -> list[CorrelatedRecord]:
    """정책에 의해 차단(또는 보고 전용 차단)된 이벤트만 반환

    Args:
        policy: 분석 대상 정책
        events: 로그인 이벤트

    Returns:
        입력 순서를 유지한 CorrelatedRecord 목록
    """
    records: list[CorrelatedRecord] = []
    for event in events:
        evaluation = find_evaluation(event, policy.id)
        if evaluation is None:
            continue

        classification = classify(evaluation.outcome)
        if classification is None:
            continue

        records.append(
            CorrelatedRecord(
                event=event,
                policy=policy,
                evaluation=evaluation,
                classification=classification,
            )
        )
    return records
