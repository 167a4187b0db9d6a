"""One-call setup of logging and tracing from ``Settings``."""

from __future__ import annotations

import logging

from generic_search.config import Settings, get_settings
from generic_search.observability.logging import configure_logging
from generic_search.observability.tracing import disable_tracing, init_tracing


logger = logging.getLogger(__name__)


def configure(settings: Settings | None = None) -> Settings:
    """Apply the logging and tracing settings; return the settings used."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)
    if settings.tracing_enabled:
        init_tracing(service_name=settings.service_name)
    else:
        disable_tracing()
    logger.info(
        "generic-search configured (dedup=%s, max_results=%s, tracing=%s)",
        settings.dedup_policy,
        settings.max_results,
        settings.tracing_enabled,
    )
    return settings
