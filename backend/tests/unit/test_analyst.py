"""Tests for executive summaries and entry analyses."""

import asyncio

from scamwatch.agents.analyst import (
    ANALYSIS_FAILED,
    SUMMARY_FAILED,
    analyze_entry,
    summarize_findings,
)
from scamwatch.models import IntelligenceEntry
from tests.fakes import ScriptedModel, make_entry_payload


def _entries(n: int) -> list[IntelligenceEntry]:
    return [IntelligenceEntry.model_validate(make_entry_payload(i)) for i in range(1, n + 1)]


def test_summary_total_covers_full_list_not_sample(make_client) -> None:
    entries = _entries(15)  # losses 1,000 .. 15,000 -> 120,000 total
    script = ScriptedModel(text="Summary text.")

    summary = asyncio.run(summarize_findings(make_client(script), entries, "Telegram"))

    assert summary == "Summary text."
    prompt = script.prompts[0]
    assert "approximately $120,000 USD" in prompt
    assert "Based on the following 15 intelligence entries" in prompt
    assert '"GEN-010"' in prompt
    assert '"GEN-011"' not in prompt


def test_summary_treats_missing_losses_as_zero(make_client) -> None:
    payload = make_entry_payload(2)
    payload["financial_impact"]["reported_loss_usd"] = None
    entries = _entries(1) + [IntelligenceEntry.model_validate(payload)]
    script = ScriptedModel(text="ok")

    asyncio.run(summarize_findings(make_client(script), entries, ""))

    assert "approximately $1,000 USD" in script.prompts[0]


def test_summary_failure_returns_fixed_string(make_client) -> None:
    script = ScriptedModel(text=RuntimeError("quota exceeded"))

    summary = asyncio.run(summarize_findings(make_client(script), _entries(3), "q"))

    assert summary == SUMMARY_FAILED


def test_analysis_embeds_entry_and_context(make_client) -> None:
    entry = _entries(1)[0]
    script = ScriptedModel(text="1. Behavioral Psychology ...")

    analysis = asyncio.run(analyze_entry(make_client(script), entry, "BEC recruitment"))

    assert analysis == "1. Behavioral Psychology ..."
    prompt = script.prompts[0]
    assert '"targetRegions"' in prompt
    assert 'broader research objective: "BEC recruitment"' in prompt
    assert "reported loss of $1,000" in prompt


def test_analysis_without_context_omits_context_line(make_client) -> None:
    script = ScriptedModel(text="ok")

    asyncio.run(analyze_entry(make_client(script), _entries(1)[0]))

    assert "broader research objective" not in script.prompts[0]


def test_analysis_failure_returns_fixed_string(make_client) -> None:
    script = ScriptedModel(text=ConnectionError("network down"))

    analysis = asyncio.run(analyze_entry(make_client(script), _entries(1)[0]))

    assert analysis == ANALYSIS_FAILED
