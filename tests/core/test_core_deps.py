"""
tests/core/test_core_deps.py - 필수 라이브러리 확인 테스트
"""

from unittest.mock import patch

import pytest

from core import deps
from core.exceptions import MissingDependencyError


class TestRequire:
    def test_installed_module(self):
        module = deps.require("json")
        assert module.__name__ == "json"

    def test_missing_module(self):
        with pytest.raises(MissingDependencyError) as exc_info:
            deps.require("cabr_missing_module_xyz", package="cabr-missing")

        assert exc_info.value.package == "cabr-missing"
        assert exc_info.value.module == "cabr_missing_module_xyz"
        assert isinstance(exc_info.value.cause, ImportError)


class TestCheckRequired:
    def test_reports_first_missing(self):
        """누락된 패키지 이름으로 MissingDependencyError"""
        with patch.object(deps, "REQUIRED_PACKAGES", [("json", "json"), ("cabr_absent_msal", "msal")]):
            with pytest.raises(MissingDependencyError) as exc_info:
                deps.check_required()

        assert exc_info.value.package == "msal"

    def test_all_present(self):
        with patch.object(deps, "REQUIRED_PACKAGES", [("json", "json")]):
            deps.check_required()
