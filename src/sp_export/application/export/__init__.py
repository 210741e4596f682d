"""Application export – JSON, CSV and XLSX encoders plus the export service."""
from sp_export.application.export.columns import (
    DEFAULT_PREFERRED_COLUMNS,
    Record,
    reconcile,
    reorder_rows,
)
from sp_export.application.export.csv_export import CSV_MIME, CsvExporter
from sp_export.application.export.excel_export import XLSX_MIME, ExcelExporter, to_cell_value
from sp_export.application.export.filename import stamped
from sp_export.application.export.json_export import JSON_MIME, JsonExporter
from sp_export.application.export.service import ExportService

__all__ = [
    "CSV_MIME",
    "DEFAULT_PREFERRED_COLUMNS",
    "JSON_MIME",
    "XLSX_MIME",
    "CsvExporter",
    "ExcelExporter",
    "ExportService",
    "JsonExporter",
    "Record",
    "reconcile",
    "reorder_rows",
    "stamped",
    "to_cell_value",
]
