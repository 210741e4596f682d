"""Application export – column reconciliation across heterogeneous rows."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

__all__ = ["DEFAULT_PREFERRED_COLUMNS", "Record", "reconcile", "reorder_rows"]

Record = Mapping[str, Any]

# Identifier-like columns promoted to the front of CSV / XLSX exports.
DEFAULT_PREFERRED_COLUMNS: tuple[str, ...] = ("ID", "Id", "id", "Matricula", "Operador", "DataHora")


def reconcile(rows: Iterable[Record | None], preferred: Sequence[str] = ()) -> list[str]:
    """Return the column order for *rows*.

    Preferred columns that occur in at least one row come first, in the
    order given; every other key follows in lexicographic order.
    """
    present: set[str] = set()
    for row in rows:
        if row:
            present.update(row.keys())

    head: list[str] = []
    for name in preferred:
        if name in present and name not in head:
            head.append(name)
    taken = set(head)
    return head + sorted(k for k in present if k not in taken)


def reorder_rows(rows: Iterable[Record | None], columns: Sequence[str]) -> list[dict[str, Any]]:
    """Rebuild each row with its keys in *columns* order (missing keys stay missing)."""
    out: list[dict[str, Any]] = []
    for row in rows:
        row = row or {}
        out.append({c: row[c] for c in columns if c in row})
    return out
