"""
core/config.py - 실행 설정

환경 변수에서 설정을 읽어 Settings 데이터 클래스로 제공합니다.

환경 변수:
    CABR_CLIENT_ID      # 공용 클라이언트 앱 ID (기본: Microsoft Graph Command Line Tools)
    CABR_AUTHORITY      # 인증 authority URL
    CABR_GRAPH_URL      # Graph API 기본 URL
    CABR_TIMEOUT        # HTTP 요청 타임아웃 (초)
    CABR_DEFAULT_DAYS   # 기본 조회 기간 (일)
    CABR_TOP_N          # 상위 N개 집계
    CABR_RECENT_LIMIT   # 최근 이벤트 표시 개수
    CABR_OUTPUT_DIR     # 내보내기 기본 디렉토리
    CABR_LANG           # 언어 (ko, en)

Usage:
    from core.config import load_settings

    settings = load_settings()
    print(settings.graph_url)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from importlib import metadata
from pathlib import Path

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Microsoft Graph Command Line Tools (Connect-MgGraph와 동일한 공용 클라이언트)
DEFAULT_CLIENT_ID = "14d82eec-204b-4c2f-b7e8-296a70dab67e"
DEFAULT_AUTHORITY = "https://login.microsoftonline.com/organizations"
DEFAULT_GRAPH_URL = "https://graph.microsoft.com/v1.0"

GRAPH_SCOPES = [
    "Policy.Read.All",
    "AuditLog.Read.All",
    "Directory.Read.All",
]

DIST_NAME = "ca-block-report"
ENV_PREFIX = "CABR_"

# 조회 기간 상한 (일)
MAX_LOOKBACK_DAYS = 365


@dataclass
class Settings:
    """실행 설정

    Attributes:
        client_id: msal 공용 클라이언트 앱 ID
        authority: 인증 authority URL
        graph_url: Graph API 기본 URL
        scopes: 요청할 위임 권한
        timeout: HTTP 요청 타임아웃 (초)
        default_days: 기본 조회 기간 (일)
        top_n: 사용자/앱/국가별 상위 N개
        recent_limit: 최근 이벤트 표시 개수
        output_dir: 내보내기 기본 디렉토리
        lang: 언어 설정 ("ko" 또는 "en")
    """

    client_id: str = DEFAULT_CLIENT_ID
    authority: str = DEFAULT_AUTHORITY
    graph_url: str = DEFAULT_GRAPH_URL
    scopes: list[str] = field(default_factory=lambda: list(GRAPH_SCOPES))
    timeout: int = 60
    default_days: int = 7
    top_n: int = 10
    recent_limit: int = 50
    output_dir: str = "output"
    lang: str = "ko"


def _env_int(name: str, default: int, maximum: int | None = None) -> int:
    """정수 환경 변수 읽기 (양수만 허용)"""
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(ENV_PREFIX + name, f"정수가 아닙니다: {raw!r}", cause=e) from e
    if value <= 0:
        raise ConfigError(ENV_PREFIX + name, f"양수여야 합니다: {value}")
    if maximum is not None and value > maximum:
        raise ConfigError(ENV_PREFIX + name, f"{maximum} 이하여야 합니다: {value}")
    return value


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(ENV_PREFIX + name)
    return raw.strip() if raw and raw.strip() else default


def load_settings() -> Settings:
    """환경 변수에서 Settings 생성

    Raises:
        ConfigError: 정수 설정값이 잘못된 경우
    """
    settings = Settings(
        client_id=_env_str("CLIENT_ID", DEFAULT_CLIENT_ID),
        authority=_env_str("AUTHORITY", DEFAULT_AUTHORITY),
        graph_url=_env_str("GRAPH_URL", DEFAULT_GRAPH_URL).rstrip("/"),
        timeout=_env_int("TIMEOUT", 60),
        default_days=_env_int("DEFAULT_DAYS", 7, maximum=MAX_LOOKBACK_DAYS),
        top_n=_env_int("TOP_N", 10),
        recent_limit=_env_int("RECENT_LIMIT", 50),
        output_dir=_env_str("OUTPUT_DIR", "output"),
        lang=_env_str("LANG", "ko"),
    )
    logger.debug("설정 로드: graph_url=%s authority=%s", settings.graph_url, settings.authority)
    return settings


def get_version() -> str:
    """버전 문자열 반환

    프로젝트 루트의 version.txt 파일에서 읽어옴.
    설치된 배포본(version.txt 없음)은 패키지 메타데이터를 사용합니다.
    """
    version_file = Path(__file__).resolve().parent.parent / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.debug("Failed to read version file: %s", e)

    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"
