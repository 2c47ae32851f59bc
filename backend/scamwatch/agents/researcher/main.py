"""Researcher Agent: schema-constrained synthesis of intelligence entries."""

import logging
import time

from scamwatch.agents.researcher.prompts import build_generation_prompt
from scamwatch.models import IntelligenceBatch, IntelligenceEntry, SearchParams
from scamwatch.services.generation import GenerationClient

logger = logging.getLogger(__name__)


async def generate_intelligence(
    client: GenerationClient,
    params: SearchParams | None = None,
) -> list[IntelligenceEntry]:
    """Generate up to ``params.count`` entries matching the filters.

    Returns an empty list when the call fails or the response does not
    validate; an empty list means "no new intelligence".
    """
    params = params or SearchParams()
    start_time = time.time()
    logger.info(
        f"Generating {params.count} entries "
        f"(filters: {params.display_query() or 'none'})"
    )

    result = await client.generate_structured(
        build_generation_prompt(params), IntelligenceBatch
    )
    duration = time.time() - start_time

    if not result.ok:
        logger.error(f"Intelligence generation failed after {duration:.1f}s: {result.error}")
        return []

    entries = result.data.entries[: params.count]
    logger.info(f"Generated {len(entries)} entries in {duration:.1f}s")
    return entries
