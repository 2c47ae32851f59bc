"""Prompt templates for executive summaries and entry deep-dives."""

import json
from collections.abc import Sequence

from scamwatch.dashboard import format_usd
from scamwatch.models import IntelligenceEntry

SUMMARY_FAILED = "Summary generation failed."
ANALYSIS_FAILED = "Analysis failed to load."


def _entries_json(entries: Sequence[IntelligenceEntry]) -> str:
    return json.dumps([e.model_dump(mode="json", by_alias=True) for e in entries])


def build_summary_prompt(
    entries: Sequence[IntelligenceEntry],
    query: str,
    total_loss: float,
    sample_size: int = 10,
) -> str:
    """Executive summary prompt embedding the first ``sample_size`` entries."""
    return f"""Based on the following {len(entries)} intelligence entries: {_entries_json(entries[:sample_size])},
and the user's research query: "{query}",
write a concise 3-4 sentence executive summary of the findings.
Specifically mention that the reported financial loss across these entries totals approximately {format_usd(total_loss)} USD.
Highlight the most critical threats and the geographic focus."""


def build_analysis_prompt(entry: IntelligenceEntry, query_context: str | None = None) -> str:
    """Five-section deep-dive prompt for a single entry."""
    context_line = (
        "Contextualize this analysis within the user's broader research objective: "
        f'"{query_context}".'
        if query_context
        else ""
    )
    reported = format_usd(entry.financial_impact.reported_loss_usd)

    return f"""Perform a professional OSINT deep-dive analysis on this intelligence entry: {entry.model_dump_json(by_alias=True)}.
{context_line}

Provide a breakdown including:
1. Behavioral Psychology: How the victim's trust is exploited.
2. Technical Infrastructure: Common tools (VPNs, VOIP, money mules) associated with this specific tactic in East Africa.
3. Strategic Mitigation: Specific advice for NGOs or local authorities to disrupt this pattern.
4. Syndicate Context: Link this behavior to known public-interest patterns of East African cybercrime clusters.
5. Financial Flows: Analyze the reported loss of {reported} and the laundering mechanisms likely used in the region."""
