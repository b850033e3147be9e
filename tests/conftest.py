from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.main import create_app
from app.observability.logging import reset_logging
from app.services.order_service import reset_order_store


_ENV_VARS = ("APP_NAME", "APP_ENV", "LOG_LEVEL", "LOG_JSON", "HTTPS_REDIRECT", "API_KEY", "HOST", "PORT")


class RecordingLogger:
    """Collects info() calls as (event, fields) pairs."""

    def __init__(self, sink: list[Any] | None = None) -> None:
        self.records: list[tuple[str, dict[str, Any]]] = []
        # Optional shared timeline so tests can check ordering against downstream calls.
        self.sink = sink

    def info(self, event: str, **fields: Any) -> None:
        self.records.append((event, fields))
        if self.sink is not None:
            self.sink.append(event)

    @property
    def events(self) -> list[str]:
        return [event for event, _ in self.records]


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_order_store()

    yield

    reset_order_store()
    get_settings.cache_clear()


@pytest.fixture
def request_log() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def app(request_log: RecordingLogger) -> FastAPI:
    return create_app(request_logger=request_log)


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    saved = {name: (lg.handlers[:], lg.level, lg.propagate) for name, lg in (
        ("", root),
        ("uvicorn", logging.getLogger("uvicorn")),
        ("uvicorn.error", logging.getLogger("uvicorn.error")),
        ("uvicorn.access", logging.getLogger("uvicorn.access")),
    )}

    yield

    reset_logging()
    for name, (handlers, level, propagate) in saved.items():
        lg = logging.getLogger(name or None)
        lg.handlers = handlers
        lg.setLevel(level)
        lg.propagate = propagate


@pytest.fixture
def make_request_log():
    return RecordingLogger
