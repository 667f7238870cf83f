"""
Tests for the ``python -m devconnector`` entry point.

uvicorn is replaced with a recorder so no server is started.
"""

import pytest

from devconnector import __main__ as entry
from devconnector.config import settings


@pytest.fixture
def uvicorn_calls(monkeypatch) -> list:
    """Record uvicorn.run calls instead of serving."""
    calls = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    return calls


class TestMain:
    """Startup database check."""

    def test_unreachable_database_exits_with_1(self, monkeypatch, tmp_path, uvicorn_calls):
        missing = tmp_path / "missing" / "devconnector.db"
        monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{missing}")

        assert entry.main() == 1
        assert uvicorn_calls == []

    def test_reachable_database_starts_server(self, monkeypatch, uvicorn_calls):
        monkeypatch.setattr(settings, "database_url", "sqlite+aiosqlite:///:memory:")

        assert entry.main() == 0
        assert len(uvicorn_calls) == 1

        args, kwargs = uvicorn_calls[0]
        assert args == ("devconnector.main:app",)
        assert kwargs["host"] == settings.host
        assert kwargs["port"] == settings.port
