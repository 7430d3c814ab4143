"""
analyzers/conditional_access - Conditional Access Block Analysis

Tools:
    - Blocked Sign-ins: 정책별 차단/보고 전용 차단 로그인 요약 및 내보내기
"""

CATEGORY = {
    "name": "conditional_access",
    "display_name": "Conditional Access",
    "description": "조건부 액세스 정책 차단 분석",
    "description_en": "Conditional Access block analysis",
    "aliases": ["ca"],
}

TOOLS = [
    {
        "name": "정책별 차단 로그인 보고서",
        "name_en": "Blocked Sign-ins by Policy",
        "description": "정책이 차단했거나 보고 전용 모드에서 차단했을 로그인을 사용자/앱/국가별로 집계",
        "description_en": "Summarize sign-ins blocked (or report-only blocked) by a policy per user/app/country",
        "permission": "read",
        "module": "blocked_signins",
    },
]
