# core/__init__.py
"""
core - Conditional Access Block Report 인프라

CLI와 분석기가 공유하는 인프라 패키지입니다.

아키텍처:
    core/
    ├── auth/           # msal 기반 Graph 인증 + 세션 핸들
    ├── graph/          # Graph REST 클라이언트 (페이지네이션)
    ├── config.py       # 환경 변수 기반 설정
    ├── deps.py         # 필수 라이브러리 확인
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import load_settings
    settings = load_settings()

    # 예외 처리
    from core.exceptions import RemoteUnavailableError, is_access_denied
    try:
        policies = catalog.list_relevant_policies()
    except RemoteUnavailableError as e:
        if is_access_denied(e):
            print("권한이 없습니다")

    # 인증
    from core.auth import GraphAuthenticator
    session = GraphAuthenticator(settings).authenticate(login_hint="admin@contoso.com")
"""

__all__: list[str] = [
    # 서브패키지
    "auth",
    "graph",
    # 모듈
    "config",
    "deps",
    "exceptions",
]
