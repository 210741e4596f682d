"""Application export – ExportService, the caller-facing export entry points."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from sp_export.application.delivery import Payload, SaveDeliveryService, SaveOutcome
from sp_export.application.export.columns import DEFAULT_PREFERRED_COLUMNS, Record, reconcile
from sp_export.application.export.csv_export import CsvExporter
from sp_export.application.export.excel_export import ExcelExporter
from sp_export.application.export.json_export import JsonExporter
from sp_export.application.preferences import CsvModeSetting
from sp_export.observability.logging import get_logger

__all__ = ["ExportService"]

_log = get_logger(__name__)


class ExportService:
    """Encodes a Row Set and hands the payload to :class:`SaveDeliveryService`.

    An empty Row Set is not an error: nothing is encoded or saved and the
    call returns :attr:`SaveOutcome.CANCELLED`.
    """

    def __init__(
        self,
        delivery: SaveDeliveryService,
        csv_mode: CsvModeSetting | None = None,
    ) -> None:
        self._delivery = delivery
        self._csv_mode = csv_mode
        self._json = JsonExporter()
        self._excel = ExcelExporter()

    def _default_delimiter(self) -> str:
        return self._csv_mode.delimiter if self._csv_mode is not None else ","

    async def export_json(
        self,
        rows: Sequence[Record] | None,
        filename: str = "export.json",
        *,
        prefer_columns: Sequence[str] | None = None,
        pretty: bool = True,
    ) -> SaveOutcome:
        if not rows:
            _log.info("export.empty", format="json", filename=filename)
            return SaveOutcome.CANCELLED
        data = self._json.encode(rows, prefer_columns=prefer_columns, pretty=pretty)
        return await self._delivery.save_blob(filename, Payload(data, self._json.mime))

    async def save_json(
        self,
        filename: str,
        rows: Sequence[Record] | None,
        *,
        prefer_columns: Sequence[str] | None = None,
        pretty: bool = True,
    ) -> SaveOutcome:
        return await self.export_json(rows, filename, prefer_columns=prefer_columns, pretty=pretty)

    async def export_csv(
        self,
        rows: Sequence[Record] | None,
        *,
        filename: str = "export.csv",
        delimiter: str | None = None,
        prefer_columns: Sequence[str] | None = None,
        with_bom: bool = True,
        eol: str = "\r\n",
    ) -> SaveOutcome:
        if not rows:
            _log.info("export.empty", format="csv", filename=filename)
            return SaveOutcome.CANCELLED
        exporter = CsvExporter(
            delimiter if delimiter is not None else self._default_delimiter(),
            eol=eol,
            bom=with_bom,
        )
        columns = reconcile(
            rows, DEFAULT_PREFERRED_COLUMNS if prefer_columns is None else prefer_columns
        )
        data = exporter.encode(rows, columns)
        _log.debug("export.encoded", format="csv", rows=len(rows), columns=len(columns))
        return await self._delivery.save_blob(filename, Payload(data, exporter.mime))

    async def export_xlsx(
        self,
        rows: Sequence[Record] | None,
        *,
        filename: str = "export.xlsx",
        sheet_name: str = "Sheet1",
        prefer_columns: Sequence[str] | None = None,
        auto_dates: bool = True,
        freeze_header: bool = True,
        col_formats: Mapping[str, str] | None = None,
    ) -> SaveOutcome:
        if not rows:
            _log.info("export.empty", format="xlsx", filename=filename)
            return SaveOutcome.CANCELLED
        columns = reconcile(
            rows, DEFAULT_PREFERRED_COLUMNS if prefer_columns is None else prefer_columns
        )
        options: dict[str, Any] = {
            "sheet_name": sheet_name,
            "auto_dates": auto_dates,
            "freeze_header": freeze_header,
            "col_formats": col_formats,
        }
        data = self._excel.encode(rows, columns, **options)
        _log.debug("export.encoded", format="xlsx", rows=len(rows), columns=len(columns))
        return await self._delivery.save_blob(filename, Payload(data, self._excel.mime))
