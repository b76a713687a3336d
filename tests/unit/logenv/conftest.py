"""Fixtures for logenv unit tests."""

from __future__ import annotations

from typing import Callable

import pytest

from logenv import EnvFilterSink, InMemorySink, StructuredLogger
from logenv.metrics import reset_metrics


def pytest_collection_modifyitems(config, items):  # pragma: no cover - Pytest hook
    """Tag every test in this directory with the `logenv` marker."""

    for item in items:
        item.add_marker(pytest.mark.logenv)


@pytest.fixture(autouse=True)
def _reset_filter_metrics():
    """Reset filter metrics around each test."""

    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture(autouse=True)
def _clear_filter_env(monkeypatch):
    """Keep the developer's own LOG_FILTER out of the tests."""

    monkeypatch.delenv("LOG_FILTER", raising=False)


@pytest.fixture
def memory_sink() -> InMemorySink:
    """Record-capturing sink accepting every level."""

    return InMemorySink()


@pytest.fixture
def filter_env(monkeypatch) -> Callable[[str], None]:
    """Set LOG_FILTER for the duration of a test."""

    def _set(value: str) -> None:
        monkeypatch.setenv("LOG_FILTER", value)

    return _set


@pytest.fixture
def make_logger(memory_sink) -> Callable[..., StructuredLogger]:
    """Build a logger filtering into ``memory_sink`` with an explicit filter."""

    def _make(filter_text: str, **overrides) -> StructuredLogger:
        sink = EnvFilterSink.from_settings(
            memory_sink, env={"LOG_FILTER": filter_text}, **overrides
        )
        return StructuredLogger(sink)

    return _make
