"""Application export – ExcelExporter (single-sheet .xlsx via ``openpyxl``)."""
from __future__ import annotations

import datetime as dt
import io
import json
import math
import re
from decimal import Decimal
from typing import Any, Mapping, Sequence

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from sp_export.application.export.columns import Record

__all__ = ["MAX_SHEET_NAME", "XLSX_MIME", "ExcelExporter", "to_cell_value"]

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
MAX_SHEET_NAME = 31
MIN_WIDTH = 10
MAX_WIDTH = 60
WIDTH_PADDING = 2

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_ISO_DATETIME = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})?$"
)
_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")
_SHEET_NAME_INVALID = re.compile(r"[\\/*?:\[\]]")


def _naive_utc(value: dt.datetime) -> dt.datetime:
    # Excel has no notion of a timezone.
    if value.tzinfo is None:
        return value
    return value.astimezone(dt.timezone.utc).replace(tzinfo=None)


def _parse_iso(text: str) -> dt.date | dt.datetime | None:
    m = _ISO_DATE.match(text)
    if m:
        try:
            return dt.date(int(m[1]), int(m[2]), int(m[3]))
        except ValueError:
            return None
    m = _ISO_DATETIME.match(text)
    if not m:
        return None
    micros = int((m[7] or "0")[:6].ljust(6, "0"))
    tz: dt.tzinfo | None = None
    if m[8] == "Z":
        tz = dt.timezone.utc
    elif m[8]:
        sign = -1 if m[8][0] == "-" else 1
        hours, minutes = int(m[8][1:3]), int(m[8][4:6])
        tz = dt.timezone(sign * dt.timedelta(hours=hours, minutes=minutes))
    try:
        value = dt.datetime(
            int(m[1]), int(m[2]), int(m[3]), int(m[4]), int(m[5]), int(m[6]), micros, tzinfo=tz
        )
    except ValueError:
        return None
    return _naive_utc(value)


def _parse_number(text: str) -> int | float | None:
    if not _NUMBER.match(text):
        return None
    stripped = text.strip()
    if re.fullmatch(r"[+-]?\d+", stripped):
        return int(stripped)
    number = float(stripped)
    return number if math.isfinite(number) else None


def _clean(text: str) -> str:
    # Control characters other than tab, LF and CR are not allowed in XML.
    return ILLEGAL_CHARACTERS_RE.sub("", text)


def to_cell_value(value: Any, auto_dates: bool = True) -> Any:
    """Coerce one record value into something a worksheet cell can hold."""
    if value is None:
        return ""
    if isinstance(value, dt.datetime):
        return _naive_utc(value)
    if isinstance(value, (bool, int, float, Decimal, dt.date, dt.time)):
        return value
    if isinstance(value, (Mapping, list, tuple)):
        return _clean(json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str))

    text = _clean(str(value))
    if auto_dates:
        parsed = _parse_iso(text)
        if parsed is not None:
            return parsed
    number = _parse_number(text)
    if number is not None:
        return number
    return text


def _rendered(value: Any) -> str:
    if isinstance(value, (dt.date, dt.time)):
        return value.isoformat()
    return str(value)


def _sheet_title(name: str) -> str:
    title = _SHEET_NAME_INVALID.sub("_", name or "")[:MAX_SHEET_NAME]
    return title or "Sheet1"


class ExcelExporter:
    """Exports rows to a one-sheet workbook."""

    mime = XLSX_MIME

    def build(
        self,
        rows: Sequence[Record],
        columns: Sequence[str],
        *,
        sheet_name: str = "Sheet1",
        auto_dates: bool = True,
        freeze_header: bool = True,
        col_formats: Mapping[str, str] | None = None,
    ) -> Workbook:
        wb = Workbook()
        ws = wb.active
        ws.title = _sheet_title(sheet_name)

        widths = [MIN_WIDTH] * len(columns)

        def _track(idx: int, value: Any) -> None:
            widths[idx] = max(widths[idx], min(MAX_WIDTH, len(_rendered(value)) + WIDTH_PADDING))

        for col_idx, name in enumerate(columns, start=1):
            cell = ws.cell(row=1, column=col_idx, value=_clean(name))
            cell.font = Font(bold=True)
            _track(col_idx - 1, name)

        for row_idx, row in enumerate(rows, start=2):
            row = row or {}
            for col_idx, name in enumerate(columns, start=1):
                value = to_cell_value(row.get(name), auto_dates)
                ws.cell(row=row_idx, column=col_idx, value=value)
                _track(col_idx - 1, value)

        for col_idx, width in enumerate(widths, start=1):
            ws.column_dimensions[get_column_letter(col_idx)].width = width

        if freeze_header:
            ws.freeze_panes = "A2"

        if col_formats:
            positions = {name: i for i, name in enumerate(columns, start=1)}
            for name, fmt in col_formats.items():
                col_idx = positions.get(name)
                if col_idx is None:
                    continue
                for row_idx in range(2, len(rows) + 2):
                    ws.cell(row=row_idx, column=col_idx).number_format = fmt

        return wb

    def encode(self, rows: Sequence[Record], columns: Sequence[str], **options: Any) -> bytes:
        """Return the workbook serialised as .xlsx bytes."""
        buf = io.BytesIO()
        self.build(rows, columns, **options).save(buf)
        return buf.getvalue()
