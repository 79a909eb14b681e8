"""Shared fixtures: a small corpus, a recording fetcher and a wired-up server."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from starlette.testclient import TestClient

from ragblog.ext.mcp import Dispatcher, HTTPToolServer
from ragblog.foundation.config import RagBlogSettings, clear_settings_cache
from ragblog.foundation.registry import ToolRegistry
from ragblog.knowledge import Corpus
from ragblog.tools import build_registry
from ragblog.tests.fakes import CORPUS_DATA, FakeFetcher


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """No real credentials or RAGBLOG_* overrides leak into tests."""
    for var in ("SEARCH_API_KEY", "CUSTOM_SEARCH_ENGINE_ID"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Undo configure_logging() so caplog keeps working in later tests."""
    log = logging.getLogger("ragblog")
    handlers, level, propagate = list(log.handlers), log.level, log.propagate
    yield
    log.handlers[:] = handlers
    log.setLevel(level)
    log.propagate = propagate


@pytest.fixture
def search_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEARCH_API_KEY", "test-key")
    monkeypatch.setenv("CUSTOM_SEARCH_ENGINE_ID", "test-cx")


@pytest.fixture
def corpus() -> Corpus:
    return Corpus.from_mapping(CORPUS_DATA)


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def registry(corpus: Corpus, fetcher: FakeFetcher) -> ToolRegistry:
    return build_registry(corpus=corpus, fetcher=fetcher, settings=RagBlogSettings())


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> Dispatcher:
    return Dispatcher(registry)


@pytest.fixture
def client(dispatcher: Dispatcher) -> TestClient:
    return TestClient(HTTPToolServer(dispatcher).app)
