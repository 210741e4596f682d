"""Application export – timestamped filenames."""
from __future__ import annotations

import datetime as dt
import re

__all__ = ["stamped"]

_UNSAFE = re.compile(r"[^\w.-]+", re.ASCII)


def stamped(name: str, ext: str, now: dt.datetime | None = None) -> str:
    """``stamped("Tasks list", "csv")`` -> ``"Tasks_list-20240131-093005.csv"``."""
    moment = now or dt.datetime.now()
    safe = _UNSAFE.sub("_", name or "export")
    return f"{safe}-{moment:%Y%m%d-%H%M%S}.{ext}"
