# cli/flow/steps/__init__.py
"""Flow Steps 모듈"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .auth import AuthStep
    from .export import ExportStep
    from .lookback import LookbackStep
    from .policy import PolicyStep

__all__ = [
    "AuthStep",
    "LookbackStep",
    "PolicyStep",
    "ExportStep",
]

_IMPORT_MAPPING = {
    "AuthStep": (".auth", "AuthStep"),
    "LookbackStep": (".lookback", "LookbackStep"),
    "PolicyStep": (".policy", "PolicyStep"),
    "ExportStep": (".export", "ExportStep"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
