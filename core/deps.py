"""
core/deps.py - 필수 라이브러리 확인

원격 호출 전에 필수 클라이언트 라이브러리(msal, requests)가 설치되어 있는지 확인합니다.
누락 시 설치 방법을 안내하는 MissingDependencyError를 발생시킵니다.
"""

from __future__ import annotations

import importlib
import logging
from types import ModuleType

from core.exceptions import MissingDependencyError

logger = logging.getLogger(__name__)

# (import 이름, PyPI 패키지 이름)
REQUIRED_PACKAGES: list[tuple[str, str]] = [
    ("msal", "msal"),
    ("requests", "requests"),
]


def require(module: str, package: str | None = None) -> ModuleType:
    """모듈을 import하고, 없으면 MissingDependencyError 발생

    Args:
        module: import 이름
        package: PyPI 패키지 이름 (기본: module과 동일)

    Returns:
        import된 모듈
    """
    try:
        return importlib.import_module(module)
    except ImportError as e:
        logger.debug("필수 모듈 import 실패: %s (%s)", module, e)
        raise MissingDependencyError(package or module, module=module, cause=e) from e


def check_required() -> None:
    """모든 필수 패키지 확인

    Raises:
        MissingDependencyError: 첫 번째로 누락된 패키지
    """
    for module, package in REQUIRED_PACKAGES:
        require(module, package)
