"""
tests/core/auth/test_graph_authenticator.py - msal 인증/세션 정리 테스트
"""

from unittest.mock import MagicMock, patch

import pytest

from core.auth.authenticator import GraphAuthenticator
from core.auth.session import GraphSession, TenantInfo
from core.config import Settings
from core.exceptions import AuthError, RemoteUnavailableError

TOKEN_RESULT = {
    "access_token": "abc",
    "id_token_claims": {"preferred_username": "admin@contoso.com", "tid": "tenant-0001"},
}


def _make_app(accounts=None, silent=None, interactive=None) -> MagicMock:
    app = MagicMock()
    app.get_accounts.return_value = accounts or []
    app.acquire_token_silent.return_value = silent
    app.acquire_token_interactive.return_value = interactive if interactive is not None else TOKEN_RESULT
    return app


class TestAuthenticate:
    """authenticate 테스트"""

    def test_interactive_with_login_hint(self):
        app = _make_app()
        auth = GraphAuthenticator(Settings(), app=app)

        session = auth.authenticate(login_hint="admin@contoso.com")

        kwargs = app.acquire_token_interactive.call_args.kwargs
        assert kwargs["login_hint"] == "admin@contoso.com"
        assert "prompt" not in kwargs
        assert session.username == "admin@contoso.com"
        assert session.tenant_id == "tenant-0001"
        assert session.http.headers["Authorization"] == "Bearer abc"

    def test_interactive_without_hint_prompts_account(self):
        app = _make_app()
        GraphAuthenticator(Settings(), app=app).authenticate()

        assert app.acquire_token_interactive.call_args.kwargs["prompt"] == "select_account"

    def test_silent_from_cache(self):
        account = {"username": "admin@contoso.com"}
        app = _make_app(accounts=[account], silent=TOKEN_RESULT)

        session = GraphAuthenticator(Settings(), app=app).authenticate(login_hint="admin@contoso.com")

        app.acquire_token_interactive.assert_not_called()
        assert session.account == account

    def test_device_code(self):
        app = _make_app()
        app.initiate_device_flow.return_value = {"user_code": "XYZ", "message": "Go to https://microsoft.com/devicelogin"}
        app.acquire_token_by_device_flow.return_value = TOKEN_RESULT
        shown = []

        GraphAuthenticator(Settings(), use_device_code=True, on_device_code=shown.append, app=app).authenticate()

        assert shown == ["Go to https://microsoft.com/devicelogin"]
        app.acquire_token_interactive.assert_not_called()

    def test_device_code_start_failure(self):
        app = _make_app()
        app.initiate_device_flow.return_value = {"error": "invalid_client", "error_description": "bad client"}

        with pytest.raises(AuthError) as exc_info:
            GraphAuthenticator(Settings(), use_device_code=True, app=app).authenticate()

        assert exc_info.value.error_code == "invalid_client"

    def test_token_failure(self):
        """토큰 없음 → AuthError"""
        app = _make_app(interactive={"error": "access_denied", "error_description": "User cancelled"})

        with pytest.raises(AuthError) as exc_info:
            GraphAuthenticator(Settings(), app=app).authenticate()

        assert exc_info.value.error_code == "access_denied"
        assert "User cancelled" in str(exc_info.value)


class TestResolveTenant:
    def test_sets_tenant(self, graph_session, make_response):
        graph_session.tenant = None
        graph_session.http.get.return_value = make_response(
            {
                "value": [
                    {
                        "id": "tenant-0001",
                        "displayName": "Contoso",
                        "verifiedDomains": [
                            {"name": "contoso.onmicrosoft.com", "isDefault": False},
                            {"name": "contoso.com", "isDefault": True},
                        ],
                    }
                ]
            }
        )

        tenant = GraphAuthenticator(Settings(), app=MagicMock()).resolve_tenant(graph_session)

        assert tenant.default_domain == "contoso.com"
        assert graph_session.tenant is tenant
        assert graph_session.tenant_label == "contoso.com"

    def test_empty_organization(self, graph_session, make_response):
        graph_session.http.get.return_value = make_response({"value": []})

        with pytest.raises(RemoteUnavailableError):
            GraphAuthenticator(Settings(), app=MagicMock()).resolve_tenant(graph_session)


class TestTeardown:
    """teardown 테스트 (best effort)"""

    def test_removes_account_and_closes(self, graph_session):
        app = MagicMock()
        graph_session.account = {"username": "admin@contoso.com"}

        GraphAuthenticator(Settings(), app=app).teardown(graph_session)

        app.remove_account.assert_called_once_with(graph_session.account)
        graph_session.http.close.assert_called_once()
        assert graph_session.closed

    def test_failures_not_raised(self, graph_session):
        app = MagicMock()
        app.remove_account.side_effect = RuntimeError("cache locked")
        graph_session.account = {"username": "admin@contoso.com"}
        graph_session.http.close.side_effect = OSError("socket")

        GraphAuthenticator(Settings(), app=app).teardown(graph_session)

    def test_none_session(self):
        GraphAuthenticator(Settings(), app=MagicMock()).teardown(None)


class TestSession:
    def test_tenant_label_fallbacks(self):
        session = GraphSession(access_token="t", username="u", tenant_id="tid", http=MagicMock())
        assert session.tenant_label == "tid"

        session.tenant = TenantInfo(id="tid", display_name="Contoso")
        assert session.tenant_label == "Contoso"

    def test_repr_hides_token(self):
        session = GraphSession(access_token="secret-token", username="u", tenant_id="tid", http=MagicMock())
        assert "secret-token" not in repr(session)

    def test_tenant_label_text(self):
        tenant = TenantInfo(id="tid", display_name="Contoso", default_domain="contoso.com")
        assert tenant.label() == "Contoso (contoso.com, tid)"


class TestAppFactory:
    def test_builds_public_client(self):
        settings = Settings(client_id="cid", authority="https://login.example/organizations")
        fake_msal = MagicMock()

        with patch("core.auth.authenticator.require", return_value=fake_msal):
            app = GraphAuthenticator(settings).app

        fake_msal.PublicClientApplication.assert_called_once_with(
            "cid", authority="https://login.example/organizations"
        )
        assert app is fake_msal.PublicClientApplication.return_value
