"""Application export – CsvExporter.

Quoting is minimal and explicit: a cell is wrapped in double quotes (with
inner quotes doubled) only when it contains a quote, CR, LF or the active
delimiter.  Line breaks inside cells are normalised to CRLF first.
"""
from __future__ import annotations

import json
import re
from typing import Any, Mapping, Sequence

from sp_export.application.export.columns import Record
from sp_export.kernel.errors import ExportError

__all__ = ["CSV_MIME", "CsvExporter"]

CSV_MIME = "text/csv;charset=utf-8"

_BOM = "\ufeff"
_NEWLINE = re.compile(r"\r?\n")


class CsvExporter:
    """Renders rows to CSV text (UTF-8, optional BOM for Excel)."""

    mime = CSV_MIME

    def __init__(
        self,
        delimiter: str = ",",
        *,
        eol: str = "\r\n",
        bom: bool = True,
    ) -> None:
        if len(delimiter) != 1 or delimiter in '"\r\n':
            raise ExportError(f"Invalid CSV delimiter: {delimiter!r}", export_format="csv")
        self._delimiter = delimiter
        self._eol = eol
        self._bom = bom

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def escape(self, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            text = "true" if value else "false"
        elif isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
            text = str(int(value))
        elif isinstance(value, (Mapping, list, tuple)):
            text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
        else:
            text = str(value)
        text = _NEWLINE.sub("\r\n", text)
        if '"' in text or "\r" in text or "\n" in text or self._delimiter in text:
            return '"' + text.replace('"', '""') + '"'
        return text

    def render(self, rows: Sequence[Record], columns: Sequence[str]) -> str:
        lines = [self._delimiter.join(self.escape(c) for c in columns)]
        for row in rows:
            row = row or {}
            lines.append(self._delimiter.join(self.escape(row.get(c)) for c in columns))
        text = self._eol.join(lines) + self._eol
        return _BOM + text if self._bom else text

    def encode(self, rows: Sequence[Record], columns: Sequence[str]) -> bytes:
        """Return the complete CSV content as UTF-8 bytes."""
        return self.render(rows, columns).encode("utf-8")
