"""Application export – JsonExporter."""
from __future__ import annotations

import json
from typing import Sequence

from sp_export.application.export.columns import Record, reconcile, reorder_rows

__all__ = ["JSON_MIME", "JsonExporter"]

JSON_MIME = "application/json"


class JsonExporter:
    """Serialises a whole Row Set as one JSON array."""

    mime = JSON_MIME

    def encode(
        self,
        rows: Sequence[Record],
        *,
        prefer_columns: Sequence[str] | None = None,
        pretty: bool = True,
    ) -> bytes:
        data: list = list(rows)
        if prefer_columns:
            data = reorder_rows(data, reconcile(data, prefer_columns))
        if pretty:
            text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
        else:
            text = json.dumps(data, separators=(",", ":"), ensure_ascii=False, default=str)
        return text.encode("utf-8")
