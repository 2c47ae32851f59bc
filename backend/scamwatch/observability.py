"""Logfire tracing for generation calls and the dashboard API."""

import logging

import logfire
from fastapi import FastAPI

from scamwatch import __version__
from scamwatch.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings) -> bool:
    """
    Send Scamwatch traces to Logfire when a token is configured.

    Call once per process, before the first generation request. Each batch
    generation, executive summary and entry analysis becomes a pydantic-ai
    span; ``log.trace_prompts`` controls whether prompt and response text
    (which embeds generated entries) is attached to those spans. Gemini
    HTTP calls and stdlib log records are exported alongside them.

    Returns:
        True when tracing is active, False when it was skipped or failed.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - tracing disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="scamwatch",
            service_version=__version__,
            environment=settings.log.environment,
        )
        logfire.instrument_pydantic_ai(include_content=settings.log.trace_prompts)
        logfire.instrument_httpx()
        logging.getLogger().addHandler(logfire.LogfireLoggingHandler())

        logger.info(f"✓ Logfire tracing initialized (model: {settings.generation.model})")
        return True

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False


def instrument_api(app: FastAPI) -> None:
    """Trace dashboard API requests; research and analysis spans nest under them."""
    try:
        logfire.instrument_fastapi(app)
    except Exception as e:
        logger.warning(f"Failed to instrument dashboard API: {e}")
