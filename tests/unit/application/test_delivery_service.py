"""Unit tests for SaveDeliveryService."""

from __future__ import annotations

import asyncio
import base64
import binascii
import json
from pathlib import Path

import pytest

from sp_export.application.delivery import (
    DeliveryMode,
    DeliveryModeStore,
    DownloadTarget,
    Payload,
    SaveDeliveryService,
    SaveOutcome,
    suggested_filename,
)
from sp_export.application.preferences import InMemoryPreferenceStore
from sp_export.kernel.errors import BackendError
from sp_export.testing.fakes import FakeBackend


def _service(
    tmp_path: Path,
    mode: DeliveryMode = DeliveryMode.AUTO,
    backend: FakeBackend | None = None,
) -> tuple[SaveDeliveryService, FakeBackend]:
    backend = backend or FakeBackend()
    modes = DeliveryModeStore(InMemoryPreferenceStore({"sp_dl_mode": mode.value}))
    return SaveDeliveryService(backend, modes, DownloadTarget(tmp_path)), backend


def _files(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir())


# ---------------------------------------------------------------------------
# save_blob and wrappers
# ---------------------------------------------------------------------------


class TestSaveBlob:
    def test_auto_writes_locally(self, tmp_path: Path) -> None:
        svc, backend = _service(tmp_path)
        outcome = asyncio.run(svc.save_blob("a.txt", Payload(b"hi", "text/plain")))
        assert outcome is SaveOutcome.SAVED
        assert (tmp_path / "a.txt").read_bytes() == b"hi"
        assert backend.calls == []

    def test_auto_empty_filename(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path)
        asyncio.run(svc.save_blob("", Payload(b"x")))
        assert _files(tmp_path) == ["download.bin"]

    def test_dialog_saved(self, tmp_path: Path) -> None:
        svc, backend = _service(tmp_path, DeliveryMode.DIALOG)
        outcome = asyncio.run(svc.save_blob("a.csv", Payload(b"1,2", "text/csv")))
        assert outcome is SaveOutcome.SAVED
        assert backend.saved["a.csv"] == (b"1,2", "text/csv")
        assert _files(tmp_path) == []

    def test_dialog_cancelled(self, tmp_path: Path) -> None:
        svc, backend = _service(tmp_path, DeliveryMode.DIALOG, FakeBackend(save_path=""))
        outcome = asyncio.run(svc.save_blob("a.csv", Payload(b"1,2")))
        assert outcome is SaveOutcome.CANCELLED
        assert backend.methods() == ["native_save_bytes"]

    def test_dialog_empty_mime_defaults(self, tmp_path: Path) -> None:
        svc, backend = _service(tmp_path, DeliveryMode.DIALOG)
        asyncio.run(svc.save_blob("a.bin", Payload(b"x", "")))
        assert backend.saved["a.bin"][1] == "application/octet-stream"

    def test_backend_failure_propagates(self, tmp_path: Path) -> None:
        backend = FakeBackend().fail_with("context canceled")
        svc, _ = _service(tmp_path, DeliveryMode.DIALOG, backend)
        with pytest.raises(BackendError, match="context canceled"):
            asyncio.run(svc.save_blob("a.csv", Payload(b"x")))

    def test_mode_snapshot_survives_concurrent_set(self, tmp_path: Path) -> None:
        class _SlowBackend(FakeBackend):
            def __init__(self) -> None:
                super().__init__()
                self.started = asyncio.Event()
                self.release = asyncio.Event()

            async def native_save_bytes(self, filename: str, data: bytes, mime: str) -> str:
                self.started.set()
                await self.release.wait()
                return await super().native_save_bytes(filename, data, mime)

        async def _run() -> None:
            backend = _SlowBackend()
            svc, _ = _service(tmp_path, DeliveryMode.DIALOG, backend)
            first = asyncio.create_task(svc.save_blob("first.txt", Payload(b"1")))
            await backend.started.wait()
            svc.mode_store.set("auto")
            second = await svc.save_blob("second.txt", Payload(b"2"))
            backend.release.set()
            assert await first is SaveOutcome.SAVED
            assert second is SaveOutcome.SAVED
            assert "first.txt" in backend.saved
            assert _files(tmp_path) == ["second.txt"]

        asyncio.run(_run())


class TestSaveWrappers:
    def test_save_text_utf8(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path)
        asyncio.run(svc.save_text("nota.txt", "operação"))
        assert (tmp_path / "nota.txt").read_text(encoding="utf-8") == "operação"

    def test_save_json_pretty(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path)
        asyncio.run(svc.save_json("a.json", {"a": [1]}))
        assert (tmp_path / "a.json").read_text(encoding="utf-8") == '{\n  "a": [\n    1\n  ]\n}'

    def test_save_json_compact(self, tmp_path: Path) -> None:
        svc, backend = _service(tmp_path, DeliveryMode.DIALOG)
        asyncio.run(svc.save_json("a.json", {"a": 1, "b": None}, pretty=False))
        data, mime = backend.saved["a.json"]
        assert data == b'{"a":1,"b":null}'
        assert mime == "application/json"

    def test_save_bytes_base64(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path)
        asyncio.run(svc.save_bytes("x.bin", base64.b64encode(b"\x00\x01").decode()))
        assert (tmp_path / "x.bin").read_bytes() == b"\x00\x01"

    def test_save_bytes_int_list(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path)
        asyncio.run(svc.save_bytes("x.bin", [65, 66]))
        assert (tmp_path / "x.bin").read_bytes() == b"AB"

    def test_save_bytes_malformed_base64(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path)
        with pytest.raises(binascii.Error):
            asyncio.run(svc.save_bytes("x.bin", "%%%"))
        assert _files(tmp_path) == []


# ---------------------------------------------------------------------------
# Attachments and URLs
# ---------------------------------------------------------------------------


class TestSaveAttachment:
    def test_dialog_cancelled_no_download(self, tmp_path: Path) -> None:
        svc, backend = _service(tmp_path, DeliveryMode.DIALOG, FakeBackend(save_path=""))
        outcome = asyncio.run(svc.save_attachment("Tasks", 7, "report.pdf"))
        assert outcome is SaveOutcome.CANCELLED
        assert backend.methods() == ["native_save_attachment"]
        assert _files(tmp_path) == []

    def test_dialog_saved(self, tmp_path: Path) -> None:
        svc, backend = _service(tmp_path, DeliveryMode.DIALOG)
        assert asyncio.run(svc.save_attachment("Tasks", 7, "report.pdf")) is SaveOutcome.SAVED
        assert backend.calls[0].args == ("Tasks", 7, "report.pdf")

    def test_auto_fetches_and_writes(self, tmp_path: Path) -> None:
        backend = FakeBackend().add_attachment("Tasks", 7, "report.pdf", [37, 80, 68, 70])
        svc, _ = _service(tmp_path, backend=backend)
        assert asyncio.run(svc.save_attachment("Tasks", 7, "report.pdf")) is SaveOutcome.SAVED
        assert (tmp_path / "report.pdf").read_bytes() == b"%PDF"
        assert backend.methods() == ["fetch_attachment_bytes"]

    def test_auto_fetch_failure_propagates(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path)
        with pytest.raises(BackendError):
            asyncio.run(svc.save_attachment("Tasks", 7, "missing.pdf"))


class TestSaveByUrl:
    def test_auto_strips_query(self, tmp_path: Path) -> None:
        backend = FakeBackend().add_url("/sites/x/doc.pdf?v=2", base64.b64encode(b"pdf").decode())
        svc, _ = _service(tmp_path, backend=backend)
        assert asyncio.run(svc.save_by_url("/sites/x/doc.pdf?v=2")) is SaveOutcome.SAVED
        assert (tmp_path / "doc.pdf").read_bytes() == b"pdf"

    def test_dialog_delegates(self, tmp_path: Path) -> None:
        svc, backend = _service(tmp_path, DeliveryMode.DIALOG)
        assert asyncio.run(svc.save_by_url("https://h/a.txt")) is SaveOutcome.SAVED
        assert backend.methods() == ["native_save_by_url"]

    def test_dialog_cancelled(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path, DeliveryMode.DIALOG, FakeBackend(save_path=""))
        assert asyncio.run(svc.save_by_url("https://h/a.txt")) is SaveOutcome.CANCELLED

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("/sites/x/doc.pdf?v=2", "doc.pdf"),
            ("https://contoso.sharepoint.com/Shared%20Documents/a.xlsx", "a.xlsx"),
            ("plain.txt", "plain.txt"),
            ("/sites/x/", "download.bin"),
            ("?only=query", "download.bin"),
        ],
    )
    def test_suggested_filename(self, url: str, expected: str) -> None:
        assert suggested_filename(url) == expected


class TestPickFile:
    def test_dismissed_is_none(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path)
        assert asyncio.run(svc.pick_file()) is None

    def test_returns_path(self, tmp_path: Path) -> None:
        svc, _ = _service(tmp_path, backend=FakeBackend(open_path="/home/u/private.json"))
        assert asyncio.run(svc.pick_file()) == "/home/u/private.json"


class TestPayload:
    def test_from_text(self) -> None:
        payload = Payload.from_text("ç", "text/csv")
        assert payload.data == "ç".encode("utf-8")
        assert payload.mime == "text/csv"

    def test_json_default_mime(self) -> None:
        assert json.loads(Payload.from_text("[]").data) == []
        assert Payload(b"").mime == "application/octet-stream"
