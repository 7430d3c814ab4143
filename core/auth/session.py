# core/auth/session.py
"""
core/auth/session.py - Graph 세션 핸들

인증 결과를 담는 명시적 세션 객체입니다. 전역 상태 대신
PolicyCatalog / SignInFetcher 호출에 인자로 전달됩니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from core.config import DEFAULT_GRAPH_URL

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)


@dataclass
class TenantInfo:
    """테넌트 정보

    Attributes:
        id: 테넌트 ID (GUID)
        display_name: 조직 표시 이름
        default_domain: 기본 확인 도메인
    """

    id: str
    display_name: str
    default_domain: str = ""

    @classmethod
    def from_graph(cls, data: dict[str, Any]) -> TenantInfo:
        """/organization 응답 항목에서 생성"""
        default_domain = ""
        for domain in data.get("verifiedDomains") or []:
            if domain.get("isDefault"):
                default_domain = domain.get("name", "")
                break
        return cls(
            id=data.get("id", ""),
            display_name=data.get("displayName") or "",
            default_domain=default_domain,
        )

    def label(self) -> str:
        """콘솔 표시용 문자열"""
        name = self.display_name or self.id
        if self.default_domain:
            return f"{name} ({self.default_domain}, {self.id})"
        return f"{name} ({self.id})"


@dataclass
class GraphSession:
    """인증된 Graph 세션

    Attributes:
        access_token: Bearer 토큰
        username: 로그인 계정 (UPN)
        tenant_id: 토큰의 tid 클레임
        http: Authorization 헤더가 설정된 requests.Session
        graph_url: Graph API 기본 URL
        timeout: 요청 타임아웃 (초)
        tenant: 확인된 테넌트 정보 (resolve 후 설정)
        account: msal 캐시 계정 (teardown 시 사용)
    """

    access_token: str
    username: str
    tenant_id: str
    http: requests.Session
    graph_url: str = DEFAULT_GRAPH_URL
    timeout: int = 60
    tenant: TenantInfo | None = None
    account: dict[str, Any] | None = field(default=None, repr=False)
    closed: bool = False

    def __repr__(self) -> str:
        return f"GraphSession(username={self.username!r}, tenant_id={self.tenant_id!r}, closed={self.closed})"

    @property
    def tenant_label(self) -> str:
        """출력 경로/콘솔에 사용할 테넌트 식별자"""
        if self.tenant and self.tenant.default_domain:
            return self.tenant.default_domain
        if self.tenant and self.tenant.display_name:
            return self.tenant.display_name
        return self.tenant_id or "tenant"

    def close(self) -> None:
        """HTTP 세션 종료"""
        if self.closed:
            return
        self.http.close()
        self.closed = True
