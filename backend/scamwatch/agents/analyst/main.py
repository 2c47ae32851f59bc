"""Analyst Agent: free-text executive summaries and entry deep-dives."""

import logging
from collections.abc import Sequence

from scamwatch.agents.analyst.prompts import (
    ANALYSIS_FAILED,
    SUMMARY_FAILED,
    build_analysis_prompt,
    build_summary_prompt,
)
from scamwatch.dashboard import total_reported_loss
from scamwatch.models import IntelligenceEntry
from scamwatch.services.generation import GenerationClient

logger = logging.getLogger(__name__)


async def summarize_findings(
    client: GenerationClient,
    entries: Sequence[IntelligenceEntry],
    query_context: str = "",
    sample_size: int = 10,
) -> str:
    """Short synthesis of a batch, or SUMMARY_FAILED on any error.

    The loss total covers every entry, not only the sample embedded in the prompt.
    """
    total_loss = total_reported_loss(entries)
    prompt = build_summary_prompt(entries, query_context, total_loss, sample_size)

    result = await client.generate_text(prompt)
    if not result.ok:
        logger.error(f"Summary generation failed: {result.error}")
        return SUMMARY_FAILED

    return result.text


async def analyze_entry(
    client: GenerationClient,
    entry: IntelligenceEntry,
    query_context: str | None = None,
) -> str:
    """Multi-section narrative for one entry, or ANALYSIS_FAILED on any error."""
    logger.info(f"Analyzing entry {entry.id}")

    result = await client.generate_text(build_analysis_prompt(entry, query_context))
    if not result.ok:
        logger.error(f"Analysis failed for {entry.id}: {result.error}")
        return ANALYSIS_FAILED

    return result.text
