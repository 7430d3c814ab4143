# core/auth/authenticator.py
"""
core/auth/authenticator.py - msal 기반 Graph 인증

PublicClientApplication으로 위임 권한 토큰을 획득하고 GraphSession을 생성합니다.

인증 순서:
    1. msal 캐시에 login_hint와 일치하는 계정이 있으면 silent 획득
    2. 없으면 대화형 브라우저 로그인 (또는 device code flow)

Usage:
    from core.auth import GraphAuthenticator
    from core.config import load_settings

    auth = GraphAuthenticator(load_settings())
    session = auth.authenticate(login_hint="admin@contoso.com")
    tenant = auth.resolve_tenant(session)
    ...
    auth.teardown(session)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from rich.console import Console

from core.auth.session import GraphSession, TenantInfo
from core.config import Settings
from core.deps import require
from core.exceptions import AuthError, RemoteUnavailableError

logger = logging.getLogger(__name__)
console = Console()

# msal/urllib3 노이즈 로그 제한
logging.getLogger("msal").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)


class GraphAuthenticator:
    """Graph 인증 및 세션 정리

    Args:
        settings: 실행 설정 (client_id, authority, scopes 등)
        use_device_code: True면 브라우저 대신 device code flow 사용
        on_device_code: device code 안내 메시지 출력 함수 (기본: 콘솔 출력)
        app: 테스트용 msal 앱 주입
    """

    def __init__(
        self,
        settings: Settings,
        use_device_code: bool = False,
        on_device_code: Callable[[str], None] | None = None,
        app: Any = None,
    ):
        self.settings = settings
        self.use_device_code = use_device_code
        self.on_device_code = on_device_code or console.print
        self._app = app

    @property
    def app(self) -> Any:
        """msal PublicClientApplication (지연 생성)"""
        if self._app is None:
            msal = require("msal")
            self._app = msal.PublicClientApplication(
                self.settings.client_id,
                authority=self.settings.authority,
            )
        return self._app

    # =========================================================================
    # 토큰 획득
    # =========================================================================

    def _acquire_silent(self, login_hint: str | None) -> dict[str, Any] | None:
        """캐시된 계정으로 토큰 획득 시도"""
        accounts = self.app.get_accounts(username=login_hint) if login_hint else self.app.get_accounts()
        if not accounts:
            return None

        result = self.app.acquire_token_silent(self.settings.scopes, account=accounts[0])
        if result and "access_token" in result:
            logger.debug("캐시된 토큰 사용: %s", accounts[0].get("username"))
            return result
        return None

    def _acquire_device_code(self) -> dict[str, Any]:
        flow = self.app.initiate_device_flow(scopes=self.settings.scopes)
        if "user_code" not in flow:
            raise AuthError(
                flow.get("error_description", "device code flow 시작 실패"),
                error_code=flow.get("error"),
            )
        self.on_device_code(flow["message"])
        return self.app.acquire_token_by_device_flow(flow)

    def _acquire_interactive(self, login_hint: str | None) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"scopes": self.settings.scopes}
        if login_hint:
            kwargs["login_hint"] = login_hint
        else:
            kwargs["prompt"] = "select_account"
        return self.app.acquire_token_interactive(**kwargs)

    def authenticate(self, login_hint: str | None = None) -> GraphSession:
        """로그인 후 GraphSession 반환

        Args:
            login_hint: 로그인할 계정 (UPN, 선택)

        Returns:
            GraphSession

        Raises:
            MissingDependencyError: msal/requests 미설치
            AuthError: 토큰 획득 실패
        """
        requests = require("requests")

        result = self._acquire_silent(login_hint)
        if result is None:
            if self.use_device_code:
                result = self._acquire_device_code()
            else:
                result = self._acquire_interactive(login_hint)

        if not result or "access_token" not in result:
            result = result or {}
            raise AuthError(
                result.get("error_description") or "토큰을 획득하지 못했습니다",
                error_code=result.get("error"),
            )

        claims = result.get("id_token_claims") or {}
        username = claims.get("preferred_username") or login_hint or ""
        tenant_id = claims.get("tid", "")

        http = requests.Session()
        http.headers.update(
            {
                "Authorization": f"Bearer {result['access_token']}",
                "Accept": "application/json",
            }
        )

        account = None
        accounts = self.app.get_accounts(username=username) if username else []
        if accounts:
            account = accounts[0]

        logger.info("인증 완료: %s (tenant %s)", username, tenant_id)
        return GraphSession(
            access_token=result["access_token"],
            username=username,
            tenant_id=tenant_id,
            http=http,
            graph_url=self.settings.graph_url,
            timeout=self.settings.timeout,
            account=account,
        )

    # =========================================================================
    # 테넌트 확인
    # =========================================================================

    def resolve_tenant(self, session: GraphSession) -> TenantInfo:
        """/organization 조회로 테넌트 정보 확인

        Raises:
            RemoteUnavailableError: 조회 실패
        """
        from core.graph.client import GraphClient

        data = GraphClient(session).get("/organization", operation="get_organization")
        orgs = data.get("value") or []
        if not orgs:
            raise RemoteUnavailableError("get_organization", error_message="조직 정보가 없습니다")

        tenant = TenantInfo.from_graph(orgs[0])
        session.tenant = tenant
        return tenant

    # =========================================================================
    # 정리
    # =========================================================================

    def teardown(self, session: GraphSession | None) -> None:
        """세션 정리 (best effort)

        msal 캐시에서 계정을 제거하고 HTTP 세션을 닫습니다.
        실패해도 예외를 발생시키지 않습니다.
        """
        if session is None:
            return

        if session.account is not None and self._app is not None:
            try:
                self._app.remove_account(session.account)
            except Exception as e:  # noqa: BLE001 - 정리 실패는 로그만 남김
                logger.warning("계정 캐시 제거 실패: %s", e)

        try:
            session.close()
        except Exception as e:  # noqa: BLE001
            logger.warning("HTTP 세션 종료 실패: %s", e)
        logger.debug("세션 정리 완료: %s", session.username)
