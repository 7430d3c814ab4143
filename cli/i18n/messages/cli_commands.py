"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Help text and validation messages for the click commands.
"""

from __future__ import annotations

CLI_MESSAGES = {
    "app_help": {
        "ko": "조건부 액세스 정책으로 차단된 로그인 보고서",
        "en": "Report sign-ins blocked by Conditional Access policies",
    },
    "lang_help": {
        "ko": "출력 언어 (ko, en)",
        "en": "Output language (ko, en)",
    },
    "debug_help": {
        "ko": "디버그 로그 출력",
        "en": "Enable debug logging",
    },
    "run_help": {
        "ko": "프롬프트 없이 실행 (자동화용)",
        "en": "Run without prompts (automation)",
    },
    "days_help": {
        "ko": "조회 기간 (일)",
        "en": "Days to look back",
    },
    "policy_help": {
        "ko": "정책 이름 또는 ID (여러 번 지정 가능)",
        "en": "Policy name or ID (repeatable)",
    },
    "all_help": {
        "ko": "분석 대상 정책 전체",
        "en": "Analyze every enabled/report-only policy",
    },
    "export_help": {
        "ko": "내보낼 파일 경로 (.csv 또는 .xlsx)",
        "en": "Export file path (.csv or .xlsx)",
    },
    "login_hint_help": {
        "ko": "로그인할 계정 (UPN)",
        "en": "Account to sign in as (UPN)",
    },
    "device_code_help": {
        "ko": "브라우저 대신 device code 로그인 사용",
        "en": "Use device code sign-in instead of a browser",
    },
    "recent_help": {
        "ko": "최근 이벤트 표시 개수",
        "en": "Number of recent events to show",
    },
    "run_policy_required": {
        "ko": "--policy 또는 --all 중 하나를 지정하세요.",
        "en": "Specify --policy or --all.",
    },
    "run_policy_conflict": {
        "ko": "--policy와 --all은 함께 사용할 수 없습니다.",
        "en": "--policy and --all cannot be combined.",
    },
    "missing_dependency": {
        "ko": "필수 패키지가 없습니다: {package}. 'pip install {package}' 실행 후 다시 시도하세요.",
        "en": "Required package missing: {package}. Run 'pip install {package}' and retry.",
    },
}
