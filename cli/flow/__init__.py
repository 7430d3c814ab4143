# cli/flow/__init__.py
"""
CLI Flow Module - 대화형 실행 흐름

구조:
    context.py      - ExecutionContext, 상태 관리 데이터 클래스
    runner.py       - FlowRunner, 전체 흐름 관리
    steps/          - 개별 Step 구현
        auth.py     - 로그인 + 테넌트 확인
        lookback.py - 조회 기간 입력
        policy.py   - 정책 선택
        export.py   - 내보내기

사용법:
    from cli.flow import create_flow_runner

    runner = create_flow_runner()
    exit_code = runner.run()

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    msal/requests가 없는 환경에서도 import 자체는 실패하지 않도록
    실제 사용 시점에만 하위 모듈을 로드합니다.
"""

__all__ = [
    "FlowRunner",
    "create_flow_runner",
    "ExecutionContext",
]

_IMPORT_MAPPING = {
    "ExecutionContext": (".context", "ExecutionContext"),
    "FlowRunner": (".runner", "FlowRunner"),
    "create_flow_runner": (".runner", "create_flow_runner"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
