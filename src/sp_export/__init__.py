"""
sp_export – export and save-delivery layer for the SharePoint desktop client.

Import path convention::

    from sp_export.application.export import ExportService
    from sp_export.application.delivery import DeliveryMode, SaveDeliveryService, SaveOutcome
    from sp_export.application.errors import normalize_error
    from sp_export.kernel.types import to_bytes
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
