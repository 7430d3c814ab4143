# core/graph/client.py
"""
core/graph/client.py - Microsoft Graph REST 클라이언트

GraphSession의 HTTP 세션으로 Graph API를 호출합니다.
@odata.nextLink를 끝까지 따라가 전체 결과를 반환합니다 (재시도 없음).

Usage:
    from core.graph import GraphClient

    client = GraphClient(session)
    policies = client.get_all("/identity/conditionalAccess/policies", operation="list_policies")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from core.exceptions import RemoteUnavailableError

if TYPE_CHECKING:
    from core.auth.session import GraphSession

logger = logging.getLogger(__name__)

NEXT_LINK = "@odata.nextLink"


class GraphClient:
    """Graph API 읽기 전용 클라이언트

    Args:
        session: 인증된 GraphSession
    """

    def __init__(self, session: GraphSession):
        self.session = session

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.session.graph_url.rstrip('/')}/{path.lstrip('/')}"

    def get(self, path: str, params: dict[str, Any] | None = None, operation: str = "get") -> dict[str, Any]:
        """단일 GET 요청

        Args:
            path: 상대 경로 또는 절대 URL (nextLink)
            params: 쿼리 파라미터
            operation: 에러 메시지용 작업 이름

        Returns:
            JSON 응답

        Raises:
            RemoteUnavailableError: HTTP/네트워크 오류 또는 JSON 파싱 실패
        """
        url = self._url(path)
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.http.get(url, params=params, timeout=self.session.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise RemoteUnavailableError.from_http_error(operation, e) from e
        except ValueError as e:
            raise RemoteUnavailableError(operation, error_message="잘못된 JSON 응답", cause=e) from e

        if not isinstance(data, dict):
            raise RemoteUnavailableError(operation, error_message="예상하지 못한 응답 형식")
        return data

    def get_all(self, path: str, params: dict[str, Any] | None = None, operation: str = "get") -> list[dict[str, Any]]:
        """페이지네이션을 끝까지 따라가 value 항목 전체를 반환

        nextLink에는 쿼리가 이미 포함되어 있으므로 params는 첫 요청에만 사용합니다.
        """
        items: list[dict[str, Any]] = []
        data = self.get(path, params=params, operation=operation)
        items.extend(data.get("value", []))
        page = 1

        next_link = data.get(NEXT_LINK)
        while next_link:
            page += 1
            logger.debug("%s: %d페이지 조회 (누적 %d건)", operation, page, len(items))
            data = self.get(next_link, operation=operation)
            items.extend(data.get("value", []))
            next_link = data.get(NEXT_LINK)

        logger.info("%s: %d건 (%d페이지)", operation, len(items), page)
        return items
