"""
tests/conftest.py - pytest 공통 픽스처

Graph 세션 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(graph_session, make_response):
        graph_session.http.get.return_value = make_response({"value": []})
"""

import os
from unittest.mock import MagicMock

import pytest

from cli.i18n import set_lang
from core.auth.session import GraphSession, TenantInfo
from core.config import Settings

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정

    CABR_* 환경 변수를 제거하고 언어를 한국어로 고정합니다.
    """
    for key in list(os.environ):
        if key.startswith("CABR_"):
            monkeypatch.delenv(key, raising=False)

    set_lang("ko")
    yield
    set_lang("ko")


# =============================================================================
# Graph 모킹 픽스처
# =============================================================================


@pytest.fixture
def make_response():
    """requests.Response 모킹 팩토리"""

    def _make(payload=None, status_code=200):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload if payload is not None else {}
        response.raise_for_status.return_value = None
        return response

    return _make


@pytest.fixture
def graph_session():
    """HTTP 세션이 모킹된 GraphSession"""
    return GraphSession(
        access_token="token",
        username="admin@contoso.com",
        tenant_id="tenant-0001",
        http=MagicMock(),
        graph_url="https://graph.example.test/v1.0",
        timeout=5,
        tenant=TenantInfo(id="tenant-0001", display_name="Contoso", default_domain="contoso.com"),
    )


@pytest.fixture
def settings(tmp_path):
    """출력 경로가 tmp_path인 Settings"""
    return Settings(output_dir=str(tmp_path / "output"))
