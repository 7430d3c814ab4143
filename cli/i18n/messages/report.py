"""
cli/i18n/messages/report.py - Report Messages

Labels for the per-policy summary, recent-events table and run summary.
"""

from __future__ import annotations

REPORT_MESSAGES = {
    "analyzing": {
        "ko": "정책 분석: {name}",
        "en": "Analyzing policy: {name}",
    },
    "policy_state": {
        "ko": "상태: {state}",
        "en": "State: {state}",
    },
    "no_events": {
        "ko": "이 정책으로 차단된 로그인이 없습니다: {name} (최근 {days}일)",
        "en": "No sign-ins blocked by this policy: {name} (last {days} day(s))",
    },
    "summary_title": {
        "ko": "{name} 차단 요약",
        "en": "{name} block summary",
    },
    "total_blocks": {
        "ko": "영향받은 로그인: {count}건",
        "en": "Total affected sign-ins: {count}",
    },
    "actual_blocks": {
        "ko": "실제 차단: {count}건",
        "en": "Blocked: {count}",
    },
    "simulated_blocks": {
        "ko": "보고 전용 차단: {count}건",
        "en": "Would block (report-only): {count}",
    },
    "top_users": {
        "ko": "사용자별 상위 {n}",
        "en": "Top {n} users",
    },
    "top_apps": {
        "ko": "앱별 상위 {n}",
        "en": "Top {n} applications",
    },
    "top_countries": {
        "ko": "국가별 상위 {n}",
        "en": "Top {n} countries",
    },
    "col_user": {
        "ko": "사용자",
        "en": "User",
    },
    "col_app": {
        "ko": "앱",
        "en": "Application",
    },
    "col_country": {
        "ko": "국가",
        "en": "Country",
    },
    "col_count": {
        "ko": "건수",
        "en": "Count",
    },
    "recent_title": {
        "ko": "최근 이벤트 ({shown}/{total}건)",
        "en": "Recent events ({shown} of {total})",
    },
    "col_time": {
        "ko": "시간 (UTC)",
        "en": "Time (UTC)",
    },
    "col_block_type": {
        "ko": "유형",
        "en": "Type",
    },
    "col_ip": {
        "ko": "IP",
        "en": "IP",
    },
    "col_location": {
        "ko": "위치",
        "en": "Location",
    },
    "col_device": {
        "ko": "장치",
        "en": "Device",
    },
    "col_status": {
        "ko": "상태 코드",
        "en": "Status",
    },
    "block_actual": {
        "ko": "차단",
        "en": "Blocked",
    },
    "block_simulated": {
        "ko": "보고 전용",
        "en": "Report-only",
    },
    "run_summary": {
        "ko": "분석 완료: 정책 {policies}개, 영향받은 로그인 {records}건",
        "en": "Analysis complete: {policies} policy(ies), {records} affected sign-in(s)",
    },
}
