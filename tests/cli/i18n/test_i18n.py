# tests/cli/i18n/test_i18n.py
"""
tests for cli/i18n - Internationalization module

Tests cover:
- Translation function (t)
- Language context management
- Format string interpolation
- Message completeness
"""

import re

import pytest

from cli.i18n import DEFAULT_LANG, SUPPORTED_LANGS, get_lang, set_lang, t
from cli.i18n.messages import MESSAGES

# =============================================================================
# Language Context Tests
# =============================================================================


class TestLanguageContext:
    """Test language context management"""

    def test_default_language(self):
        assert DEFAULT_LANG == "ko"
        assert SUPPORTED_LANGS == ("ko", "en")

    def test_set_lang_english(self):
        set_lang("en")
        assert get_lang() == "en"

    def test_set_lang_invalid(self):
        """Invalid language defaults to Korean"""
        set_lang("fr")
        assert get_lang() == "ko"


# =============================================================================
# Translation Tests
# =============================================================================


class TestTranslate:
    def test_korean(self):
        assert t("common.error") == "오류"

    def test_lang_override(self):
        assert t("common.error", lang="en") == "Error"

    def test_interpolation(self):
        assert "12" in t("report.total_blocks", lang="en", count=12)

    def test_missing_key_returns_key(self):
        assert t("nope.missing") == "nope.missing"

    def test_missing_placeholder_keeps_template(self):
        """포맷 인자가 부족해도 예외 없이 원문 반환"""
        assert "{count}" in t("report.total_blocks", lang="en")


# =============================================================================
# Message Completeness Tests
# =============================================================================


class TestMessageCompleteness:
    @pytest.mark.parametrize("key", sorted(MESSAGES))
    def test_every_message_has_both_languages(self, key):
        assert MESSAGES[key]["ko"]
        assert MESSAGES[key]["en"]

    @pytest.mark.parametrize("key", sorted(MESSAGES))
    def test_placeholders_match(self, key):
        """ko/en 플레이스홀더 동일"""
        pattern = re.compile(r"\{(\w+)\}")
        ko = set(pattern.findall(MESSAGES[key]["ko"]))
        en = set(pattern.findall(MESSAGES[key]["en"]))
        assert ko == en

    def test_namespaces_registered(self):
        namespaces = {key.split(".")[0] for key in MESSAGES}
        assert {"common", "cli", "flow", "report"} <= namespaces
