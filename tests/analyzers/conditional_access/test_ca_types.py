"""
tests/analyzers/conditional_access/test_ca_types.py - Graph 응답 파싱 테스트
"""

from datetime import datetime, timezone

import pytest

from analyzers.conditional_access.types import (
    BlockClassification,
    EvaluationOutcome,
    Policy,
    PolicyEvaluation,
    PolicyState,
    SignInEvent,
    format_timestamp,
    parse_timestamp,
)


def _make_signin(**overrides) -> dict:
    data = {
        "id": "s-1",
        "createdDateTime": "2024-05-01T10:20:30.1234567Z",
        "userPrincipalName": "kim@contoso.com",
        "userDisplayName": "Kim",
        "appDisplayName": "Office 365 Exchange Online",
        "ipAddress": "203.0.113.10",
        "location": {"countryOrRegion": "KR", "city": "Seoul"},
        "deviceDetail": {"displayName": "LAPTOP-01"},
        "status": {"errorCode": 53003},
        "appliedConditionalAccessPolicies": [
            {"id": "p-1", "displayName": "Block legacy", "result": "failure", "enforcedGrantControls": ["Block"]},
        ],
    }
    data.update(overrides)
    return data


class TestPolicyState:
    """PolicyState 테스트"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("enabled", PolicyState.ENABLED),
            ("enabledForReportingButNotEnforced", PolicyState.SIMULATION_ONLY),
            ("disabled", PolicyState.OTHER),
            (None, PolicyState.OTHER),
        ],
    )
    def test_from_raw(self, raw, expected):
        assert PolicyState.from_raw(raw) is expected


class TestPolicy:
    """Policy 테스트"""

    def test_from_graph(self):
        """정책 JSON 파싱"""
        policy = Policy.from_graph(
            {
                "id": "p-1",
                "displayName": "Require MFA",
                "state": "enabledForReportingButNotEnforced",
                "grantControls": {"operator": "OR", "builtInControls": ["mfa"]},
            }
        )

        assert policy.id == "p-1"
        assert policy.display_name == "Require MFA"
        assert policy.state is PolicyState.SIMULATION_ONLY
        assert policy.raw_state == "enabledForReportingButNotEnforced"
        assert policy.grant_controls == ("mfa",)
        assert policy.is_relevant
        assert policy.is_report_only

    def test_disabled_not_relevant(self):
        """비활성 정책은 분석 대상 아님"""
        policy = Policy.from_graph({"id": "p-2", "displayName": "Off", "state": "disabled"})
        assert not policy.is_relevant
        assert policy.grant_controls == ()

    def test_missing_grant_controls(self):
        """grantControls가 null이어도 파싱"""
        policy = Policy.from_graph({"id": "p-3", "displayName": "x", "state": "enabled", "grantControls": None})
        assert policy.grant_controls == ()


class TestEvaluationOutcome:
    """EvaluationOutcome 매핑 테스트"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("failure", EvaluationOutcome.FAILURE),
            ("reportOnlyFailure", EvaluationOutcome.SIMULATED_FAILURE),
            ("success", EvaluationOutcome.SUCCESS),
            ("notApplied", EvaluationOutcome.NOT_APPLIED),
            ("reportOnlyNotApplied", EvaluationOutcome.NOT_APPLIED),
            ("notEnabled", EvaluationOutcome.NOT_APPLIED),
            ("reportOnlySuccess", EvaluationOutcome.OTHER),
            ("", EvaluationOutcome.OTHER),
            (None, EvaluationOutcome.OTHER),
        ],
    )
    def test_from_raw(self, raw, expected):
        assert EvaluationOutcome.from_raw(raw) is expected

    def test_evaluation_from_graph(self):
        evaluation = PolicyEvaluation.from_graph({"id": "p-1", "result": "reportOnlyFailure"})
        assert evaluation.policy_id == "p-1"
        assert evaluation.outcome is EvaluationOutcome.SIMULATED_FAILURE
        assert evaluation.raw_result == "reportOnlyFailure"
        assert evaluation.enforced_grant_controls == ()


class TestTimestamp:
    """타임스탬프 파싱/포맷 테스트"""

    def test_seven_digit_fraction(self):
        """Graph의 7자리 소수점 처리"""
        parsed = parse_timestamp("2024-05-01T10:20:30.1234567Z")
        assert parsed == datetime(2024, 5, 1, 10, 20, 30, 123456, tzinfo=timezone.utc)

    def test_no_fraction(self):
        parsed = parse_timestamp("2024-05-01T10:20:30Z")
        assert parsed.tzinfo is not None
        assert parsed.second == 30

    def test_offset_converted_to_utc(self):
        parsed = parse_timestamp("2024-05-01T19:00:00+09:00")
        assert parsed == datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_timestamp("not-a-date")

    def test_format(self):
        value = datetime(2024, 5, 1, 10, 0, 5, 999, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-05-01T10:00:05Z"


class TestSignInEvent:
    """SignInEvent 테스트"""

    def test_from_graph(self):
        event = SignInEvent.from_graph(_make_signin())

        assert event.id == "s-1"
        assert event.user == "kim@contoso.com"
        assert event.user_display_name == "Kim"
        assert event.app == "Office 365 Exchange Online"
        assert event.country == "KR"
        assert event.city == "Seoul"
        assert event.device == "LAPTOP-01"
        assert event.status == 53003
        assert len(event.evaluations) == 1
        assert event.evaluations[0].enforced_grant_controls == ("Block",)

    def test_missing_location(self):
        """location이 없으면 국가 None"""
        event = SignInEvent.from_graph(_make_signin(location=None))
        assert event.country is None
        assert event.city == ""

    def test_blank_country_is_none(self):
        event = SignInEvent.from_graph(_make_signin(location={"countryOrRegion": "  "}))
        assert event.country is None

    def test_missing_created(self):
        """createdDateTime 누락 시 ValueError"""
        with pytest.raises(ValueError):
            SignInEvent.from_graph(_make_signin(createdDateTime=None))

    def test_no_evaluations(self):
        event = SignInEvent.from_graph(_make_signin(appliedConditionalAccessPolicies=None))
        assert event.evaluations == ()


class TestBlockClassification:
    def test_labels(self):
        assert BlockClassification.ACTUAL_BLOCK.label == "Blocked"
        assert BlockClassification.SIMULATED_BLOCK.label == "Would Block (Report-Only)"
