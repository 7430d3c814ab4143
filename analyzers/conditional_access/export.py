"""
analyzers/conditional_access/export.py - 결과 내보내기

내보내기 행을 CSV 또는 Excel 파일로 저장합니다. 도구가 다시 읽지 않는 스냅샷입니다.
"""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from core.exceptions import WriteError

from .types import EXPORT_COLUMNS, FlatRow

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def default_export_path(tenant: str, output_dir: str = "output", now: datetime | None = None) -> Path:
    """기본 내보내기 경로

    output/<tenant>/ca_blocked_signins_<YYYYmmdd_HHMMSS>.csv
    """
    now = now or datetime.now()
    safe_tenant = _UNSAFE_CHARS.sub("_", tenant).strip("_") or "tenant"
    filename = f"ca_blocked_signins_{now.strftime('%Y%m%d_%H%M%S')}.csv"
    return Path(output_dir) / safe_tenant / filename


def export_csv(rows: Sequence[FlatRow], path: str | Path) -> Path:
    """CSV 파일로 저장 (헤더 1행 + 데이터 행)

    Raises:
        WriteError: 디렉토리 생성 또는 파일 쓰기 실패
    """
    filepath = Path(path)
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", newline="", encoding="utf-8-sig") as f:
            writer = csv.writer(f)
            writer.writerow(EXPORT_COLUMNS)
            for row in rows:
                writer.writerow([row.get(column, "") for column in EXPORT_COLUMNS])
    except OSError as e:
        raise WriteError(str(filepath), cause=e) from e

    logger.info("CSV 저장: %s (%d행)", filepath, len(rows))
    return filepath


def export_excel(rows: Sequence[FlatRow], path: str | Path) -> Path:
    """Excel 파일로 저장 (헤더 고정, 자동 필터)

    Raises:
        WriteError: 파일 쓰기 실패
    """
    from openpyxl import Workbook
    from openpyxl.styles import Font, PatternFill

    filepath = Path(path)
    wb = Workbook()
    ws = wb.active
    ws.title = "BlockedSignIns"

    ws.append(EXPORT_COLUMNS)
    header_fill = PatternFill(start_color="305496", end_color="305496", fill_type="solid")
    for cell in ws[1]:
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = header_fill

    for row in rows:
        ws.append([row.get(column, "") for column in EXPORT_COLUMNS])

    for idx, column in enumerate(EXPORT_COLUMNS, 1):
        width = max([len(column)] + [len(str(row.get(column, ""))) for row in rows[:200]])
        ws.column_dimensions[ws.cell(row=1, column=idx).column_letter].width = min(width + 2, 50)
    ws.freeze_panes = "A2"
    ws.auto_filter.ref = ws.dimensions

    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        wb.save(filepath)
    except OSError as e:
        raise WriteError(str(filepath), cause=e) from e

    logger.info("Excel 저장: %s (%d행)", filepath, len(rows))
    return filepath


def export_rows(rows: Sequence[FlatRow], path: str | Path) -> Path:
    """확장자에 따라 CSV / Excel 선택"""
    if Path(path).suffix.lower() == ".xlsx":
        return export_excel(rows, path)
    return export_csv(rows, path)
