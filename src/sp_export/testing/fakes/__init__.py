"""Testing fakes – in-memory doubles for the backend port."""
from sp_export.testing.fakes.backend import BackendCall, FakeBackend

__all__ = ["BackendCall", "FakeBackend"]
