"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from sp_export.config.validation import ConfigError, InvalidSettingValueError
from sp_export.kernel.errors import (
    ApplicationError,
    BackendError,
    BaseError,
    DeliveryError,
    ExportError,
    InfrastructureError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_is_chained(self) -> None:
        cause = OSError("disk full")
        err = BaseError("wrapper", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_json(self) -> None:
        err = BaseError("olá", code="x")
        parsed = json.loads(str(err))
        assert parsed["message"] == "olá"

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestHierarchy:
    @pytest.mark.parametrize(
        "err,parent,code",
        [
            (ExportError("bad"), ApplicationError, "export_error"),
            (BackendError("native_save_bytes"), InfrastructureError, "backend_error"),
            (DeliveryError("a.csv"), InfrastructureError, "delivery_error"),
            (ConfigError("bad"), ApplicationError, "config_error"),
        ],
    )
    def test_parents_and_codes(self, err: BaseError, parent: type, code: str) -> None:
        assert isinstance(err, parent)
        assert err.code == code

    def test_backend_error_default_message(self) -> None:
        err = BackendError("fetch_url_bytes")
        assert err.operation == "fetch_url_bytes"
        assert "fetch_url_bytes" in err.message

    def test_backend_error_keeps_backend_message(self) -> None:
        err = BackendError("fetch_url_bytes", "context deadline exceeded")
        assert err.message == "context deadline exceeded"

    def test_delivery_error_filename(self) -> None:
        assert DeliveryError("report.csv").filename == "report.csv"

    def test_export_error_format(self) -> None:
        assert ExportError("x", export_format="csv").export_format == "csv"

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("sp_dl_mode", "x", "expected one of: auto, dialog")
        assert err.setting_name == "sp_dl_mode"
        assert "'x'" in err.message
