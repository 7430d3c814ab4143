"""
analyzers/conditional_access/signins.py - 로그인 감사 로그 조회

기준 시각 이후의 로그인 이벤트를 모든 페이지에 걸쳐 조회합니다.
부분 데이터는 차단 건수를 과소 보고하므로 실패 시 재시도 없이 전파합니다.

필요 권한:
    AuditLog.Read.All
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from core.config import MAX_LOOKBACK_DAYS
from core.exceptions import ValidationError
from core.graph.client import GraphClient

from .types import SignInEvent, format_timestamp

if TYPE_CHECKING:
    from core.auth.session import GraphSession

logger = logging.getLogger(__name__)

SIGNINS_PATH = "/auditLogs/signIns"


def cutoff_for_days(days: int, now: datetime | None = None) -> datetime:
    """조회 기준 시각 계산

    Args:
        days: 조회 기간 (일, 1 ~ MAX_LOOKBACK_DAYS)
        now: 기준 현재 시각 (기본: UTC 현재)

    Raises:
        ValidationError: days가 범위를 벗어난 정수가 아님
    """
    if isinstance(days, bool) or not isinstance(days, int) or not 0 < days <= MAX_LOOKBACK_DAYS:
        raise ValidationError("days", days, f"1 ~ {MAX_LOOKBACK_DAYS} 사이의 정수")
    now = now or datetime.now(timezone.utc)
    return now - timedelta(days=days)


def build_filter(cutoff: datetime) -> str:
    """OData $filter 문자열"""
    return f"createdDateTime ge {format_timestamp(cutoff)}"


class SignInFetcher:
    """로그인 이벤트 조회

    Args:
        session: 인증된 GraphSession
    """

    def __init__(self, session: GraphSession):
        self.client = GraphClient(session)

    def fetch_since(self, cutoff: datetime) -> list[SignInEvent]:
        """cutoff 이후 생성된 로그인 이벤트 전체 조회

        Raises:
            RemoteUnavailableError: API 호출 실패 (치명적)
        """
        items = self.client.get_all(
            SIGNINS_PATH,
            params={"$filter": build_filter(cutoff)},
            operation="list_signins",
        )

        events: list[SignInEvent] = []
        skipped = 0
        for item in items:
            try:
                events.append(SignInEvent.from_graph(item))
            except ValueError as e:
                skipped += 1
                logger.debug("로그인 레코드 건너뜀 (%s): %s", item.get("id"), e)

        if skipped:
            logger.warning("파싱할 수 없는 로그인 레코드 %d건 건너뜀", skipped)
        return events
