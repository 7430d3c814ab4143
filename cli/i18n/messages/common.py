"""
cli/i18n/messages/common.py - Common Messages

Shared labels used across the flow, report and CLI layers.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    "error": {
        "ko": "오류",
        "en": "Error",
    },
    "completed": {
        "ko": "완료",
        "en": "Completed",
    },
    "cancelled": {
        "ko": "사용자가 취소했습니다.",
        "en": "Cancelled by user.",
    },
    "none": {
        "ko": "(없음)",
        "en": "(none)",
    },
    "unknown": {
        "ko": "(알 수 없음)",
        "en": "(unknown)",
    },
    "debug_hint": {
        "ko": "--debug 옵션으로 상세 정보를 확인할 수 있습니다.",
        "en": "Run with --debug for details.",
    },
}
