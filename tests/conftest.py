"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


# Keep a developer's shell or .env from leaking into the defaults under test
TEST_ENV = {
    "GENERIC_SEARCH_DEDUP_POLICY": "identity",
    "GENERIC_SEARCH_LOG_LEVEL": "info",
    "GENERIC_SEARCH_LOG_JSON": "true",
    "GENERIC_SEARCH_TRACING_ENABLED": "true",
}

for key, value in TEST_ENV.items():
    os.environ[key] = value
os.environ.pop("GENERIC_SEARCH_MAX_RESULTS", None)

from generic_search.config import get_settings
from generic_search.observability import tracing
from tests.fixtures.catalog import PRODUCT_PATHS, build_catalog


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset env vars and the cached settings around each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("GENERIC_SEARCH_MAX_RESULTS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def span_exporter():
    """Route spans to memory so tests can assert on them."""
    exporter = InMemorySpanExporter()
    tracing.init_tracing(service_name="generic-search-test", exporter=exporter)
    yield exporter
    exporter.clear()


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def product_paths():
    return list(PRODUCT_PATHS)
