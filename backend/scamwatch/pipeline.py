"""Research orchestration: Researcher -> store append -> Analyst summary."""

import logging
from dataclasses import dataclass, field

from scamwatch.agents.analyst import summarize_findings
from scamwatch.agents.researcher import generate_intelligence
from scamwatch.config import GenerationConfig
from scamwatch.models import IntelligenceEntry, SearchParams
from scamwatch.services.generation import GenerationClient
from scamwatch.store import IntelligenceStore

logger = logging.getLogger("scamwatch.pipeline")

NO_NEW_INTELLIGENCE = (
    "No specific new intelligence could be synthesized for these parameters. "
    "Try broadening your research scope."
)


class ResearchNotEligibleError(ValueError):
    """Research was requested without any query text or filter."""


@dataclass
class ResearchOutcome:
    summary: str
    entries: list[IntelligenceEntry] = field(default_factory=list)


async def run_initial_load(
    client: GenerationClient,
    store: IntelligenceStore,
    config: GenerationConfig,
) -> int:
    """Generate one unconstrained batch and append it when non-empty."""
    entries = await generate_intelligence(client, SearchParams(count=config.initial_count))
    if entries:
        store.append(entries)
    else:
        logger.warning("Initial load produced no entries; serving seed data only")
    return len(entries)


async def run_research(
    client: GenerationClient,
    store: IntelligenceStore,
    params: SearchParams,
    config: GenerationConfig,
) -> ResearchOutcome:
    """Run one research action from the research form."""
    if params.is_empty():
        raise ResearchNotEligibleError(
            "Provide a research query or at least one filter (category, platform, date range)"
        )

    entries = await generate_intelligence(client, params)
    if not entries:
        logger.info("Research produced no new intelligence")
        return ResearchOutcome(summary=NO_NEW_INTELLIGENCE)

    store.append(entries)
    summary = await summarize_findings(
        client,
        entries,
        params.display_query(),
        sample_size=config.summary_sample_size,
    )
    return ResearchOutcome(summary=summary, entries=entries)
