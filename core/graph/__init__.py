# core/graph - Microsoft Graph REST 클라이언트
"""
Graph API 호출 모듈

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    requests는 실제 사용 시점에만 로드되어 누락 시 MissingDependencyError로 안내됩니다.
"""

__all__ = [
    "GraphClient",
    "NEXT_LINK",
]


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in __all__:
        from . import client

        return getattr(client, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
