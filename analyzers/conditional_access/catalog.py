"""
analyzers/conditional_access/catalog.py - 조건부 액세스 정책 목록

전체 정책을 조회한 뒤 적용 중 / 보고 전용 상태만 남깁니다. 캐시 없이 실행당 1회 호출합니다.

필요 권한:
    Policy.Read.All
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from core.exceptions import EmptyResultError
from core.graph.client import GraphClient

from .types import Policy

if TYPE_CHECKING:
    from core.auth.session import GraphSession

logger = logging.getLogger(__name__)

POLICIES_PATH = "/identity/conditionalAccess/policies"


def filter_relevant(policies: list[Policy]) -> list[Policy]:
    """적용 중 또는 보고 전용 정책만 표시 이름 순으로 반환"""
    relevant = [p for p in policies if p.is_relevant]
    return sorted(relevant, key=lambda p: p.display_name.lower())


class PolicyCatalog:
    """정책 목록 조회

    Args:
        session: 인증된 GraphSession
    """

    def __init__(self, session: GraphSession):
        self.client = GraphClient(session)

    def list_all(self) -> list[Policy]:
        """모든 정책 조회

        Raises:
            RemoteUnavailableError: API 호출 실패
        """
        items = self.client.get_all(POLICIES_PATH, operation="list_policies")
        return [Policy.from_graph(item) for item in items]

    def list_relevant_policies(self) -> list[Policy]:
        """분석 대상 정책 조회

        Returns:
            적용 중 / 보고 전용 정책 목록

        Raises:
            RemoteUnavailableError: API 호출 실패
            EmptyResultError: 대상 정책이 없음 (비치명적)
        """
        policies = self.list_all()
        relevant = filter_relevant(policies)
        logger.info("정책 %d개 중 분석 대상 %d개", len(policies), len(relevant))

        if not relevant:
            raise EmptyResultError("policies", "적용 중이거나 보고 전용인 조건부 액세스 정책이 없습니다")
        return relevant
