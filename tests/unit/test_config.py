"""Unit tests for settings loading and bootstrap."""

from __future__ import annotations

import logging

from pydantic import ValidationError
import pytest

from generic_search import Settings, configure, get_settings
from generic_search.observability import tracing
from generic_search.observability.logging import JsonFormatter


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.dedup_policy == "identity"
        assert settings.max_results is None
        assert settings.log_json is True
        assert settings.tracing_enabled is True
        assert settings.service_name == "generic-search"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("GENERIC_SEARCH_DEDUP_POLICY", "value")
        monkeypatch.setenv("GENERIC_SEARCH_MAX_RESULTS", "10")

        settings = Settings()

        assert settings.dedup_policy == "value"
        assert settings.max_results == 10

    def test_rejects_unknown_dedup_policy(self, monkeypatch):
        monkeypatch.setenv("GENERIC_SEARCH_DEDUP_POLICY", "fuzzy")

        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_non_positive_max_results(self):
        with pytest.raises(ValidationError):
            Settings(max_results=0)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestConfigure:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_applies_logging_settings(self):
        configure(Settings(log_level="debug", log_json=True))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_plain_text_logging(self):
        configure(Settings(log_json=False))

        assert not isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_tracing_can_be_disabled(self):
        configure(Settings(tracing_enabled=False))

        with tracing.create_span("noop") as span:
            assert not span.get_span_context().is_valid

    def test_returns_settings_used(self):
        settings = Settings(max_results=3)

        assert configure(settings) is settings
