"""
cli/i18n/messages/flow.py - Flow Step Messages

Contains translations for login, tenant confirmation, look-back window,
policy selection and export prompts.
"""

from __future__ import annotations

FLOW_MESSAGES = {
    # =========================================================================
    # Login
    # =========================================================================
    "auth_title": {
        "ko": "로그인",
        "en": "Sign in",
    },
    "identity_prompt": {
        "ko": "로그인할 계정 (UPN, 비워두면 계정 선택 창 표시):",
        "en": "Account to sign in as (UPN, leave empty to pick one):",
    },
    "authenticating": {
        "ko": "Microsoft Graph 로그인 중...",
        "en": "Signing in to Microsoft Graph...",
    },
    "auth_done": {
        "ko": "로그인: {user}",
        "en": "Signed in as {user}",
    },
    "tenant_label": {
        "ko": "테넌트:",
        "en": "Tenant:",
    },
    "tenant_confirm": {
        "ko": "이 테넌트가 맞습니까?",
        "en": "Is this the right tenant?",
    },
    "tenant_declined": {
        "ko": "테넌트가 확인되지 않아 종료합니다.",
        "en": "Tenant not confirmed. Exiting.",
    },
    # =========================================================================
    # Look-back window
    # =========================================================================
    "lookback_title": {
        "ko": "조회 기간",
        "en": "Look-back window",
    },
    "lookback_prompt": {
        "ko": "조회할 기간 (일, 기본 {default})",
        "en": "Days to look back (default {default})",
    },
    "lookback_invalid": {
        "ko": "1 ~ {max} 사이의 정수를 입력하세요",
        "en": "Enter a whole number from 1 to {max}",
    },
    "lookback_summary": {
        "ko": "기간: 최근 {days}일 ({cutoff} 이후)",
        "en": "Window: last {days} day(s) (since {cutoff})",
    },
    # =========================================================================
    # Policy selection
    # =========================================================================
    "loading_policies": {
        "ko": "조건부 액세스 정책 조회 중...",
        "en": "Loading Conditional Access policies...",
    },
    "select_policy": {
        "ko": "분석할 정책 선택 ({count}개)",
        "en": "Select policy to analyze ({count})",
    },
    "select_policy_hint": {
        "ko": "번호 입력 (쉼표로 여러 개, all = 전체)",
        "en": "Enter number(s), comma separated, or 'all'",
    },
    "policy_invalid": {
        "ko": "잘못된 선택: {value}",
        "en": "Invalid selection: {value}",
    },
    "selected_policies": {
        "ko": "선택: 정책 {count}개",
        "en": "Selected {count} policy(ies)",
    },
    "state_enabled": {
        "ko": "적용",
        "en": "Enabled",
    },
    "state_report_only": {
        "ko": "보고 전용",
        "en": "Report-only",
    },
    "no_policies": {
        "ko": "적용 중이거나 보고 전용인 조건부 액세스 정책이 없습니다.",
        "en": "No enabled or report-only Conditional Access policies found.",
    },
    # =========================================================================
    # Sign-in fetch
    # =========================================================================
    "fetching_signins": {
        "ko": "로그인 로그 조회 중 ({since} 이후)...",
        "en": "Fetching sign-in logs (since {since})...",
    },
    "signins_found": {
        "ko": "로그인 이벤트 {count}건",
        "en": "{count} sign-in event(s)",
    },
    # =========================================================================
    # Export
    # =========================================================================
    "export_confirm": {
        "ko": "결과를 파일로 내보내시겠습니까?",
        "en": "Export results to a file?",
    },
    "export_path_prompt": {
        "ko": "내보낼 파일 경로 (.csv 또는 .xlsx):",
        "en": "Export file path (.csv or .xlsx):",
    },
    "export_done": {
        "ko": "내보내기 완료: {path} ({count}건)",
        "en": "Exported {count} row(s) to {path}",
    },
    "export_nothing": {
        "ko": "내보낼 결과가 없습니다.",
        "en": "Nothing to export.",
    },
    "export_failed": {
        "ko": "내보내기 실패: {error}",
        "en": "Export failed: {error}",
    },
    "teardown": {
        "ko": "세션 정리 중...",
        "en": "Cleaning up session...",
    },
}
