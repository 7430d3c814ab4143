# core/auth/__init__.py
"""
Microsoft Graph 인증 모듈 (core/auth)

구성:
- GraphAuthenticator: msal 공용 클라이언트 로그인, 테넌트 확인, 세션 정리
- GraphSession: 인증 결과 핸들 (전역 상태 없이 호출 경로로 전달)
- TenantInfo: 확인된 테넌트 정보

사용 예시:
    from core.auth import GraphAuthenticator
    from core.config import load_settings

    auth = GraphAuthenticator(load_settings())
    session = auth.authenticate(login_hint="admin@contoso.com")
    tenant = auth.resolve_tenant(session)

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 하위 모듈이 로드되어 CLI 시작 시간을 최적화합니다.
"""

__all__ = [
    "GraphAuthenticator",
    "GraphSession",
    "TenantInfo",
]

_IMPORT_MAPPING = {
    "GraphAuthenticator": (".authenticator", "GraphAuthenticator"),
    "GraphSession": (".session", "GraphSession"),
    "TenantInfo": (".session", "TenantInfo"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
