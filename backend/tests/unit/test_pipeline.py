"""Tests for the initial load and research actions."""

import asyncio

import pytest

from scamwatch.config import GenerationConfig
from scamwatch.models import SearchParams
from scamwatch.pipeline import (
    NO_NEW_INTELLIGENCE,
    ResearchNotEligibleError,
    run_initial_load,
    run_research,
)
from scamwatch.store import IntelligenceStore
from tests.fakes import ScriptedModel, batch_json, make_entry_payload


def test_whitespace_query_is_not_eligible(make_client) -> None:
    script = ScriptedModel()
    store = IntelligenceStore.seeded()

    with pytest.raises(ResearchNotEligibleError):
        asyncio.run(
            run_research(make_client(script), store, SearchParams(query="   "), GenerationConfig())
        )

    assert script.prompts == []
    assert len(store) == 3


def test_research_appends_batch_and_summarizes(make_client) -> None:
    script = ScriptedModel(
        batch=batch_json([make_entry_payload(1), make_entry_payload(2)]),
        text="Escalating activity on Telegram.",
    )
    store = IntelligenceStore.seeded()

    outcome = asyncio.run(
        run_research(
            make_client(script),
            store,
            SearchParams(count=2, query=" mobile money ", platform="Telegram"),
            GenerationConfig(),
        )
    )

    assert outcome.summary == "Escalating activity on Telegram."
    assert [e.id for e in outcome.entries] == ["GEN-001", "GEN-002"]
    assert len(store) == 5
    assert '"mobile money | Telegram"' in script.prompts[1]


def test_research_without_results_leaves_store_untouched(make_client) -> None:
    script = ScriptedModel(batch="{}")
    store = IntelligenceStore.seeded()

    outcome = asyncio.run(
        run_research(
            make_client(script), store, SearchParams(date_range="2024"), GenerationConfig()
        )
    )

    assert outcome.summary == NO_NEW_INTELLIGENCE
    assert outcome.entries == []
    assert len(store) == 3
    assert len(script.prompts) == 1


def test_initial_load_requests_configured_count(make_client) -> None:
    script = ScriptedModel(batch=batch_json([make_entry_payload(1)]))
    store = IntelligenceStore()

    added = asyncio.run(
        run_initial_load(make_client(script), store, GenerationConfig(initial_count=25))
    )

    assert added == 1
    assert len(store) == 1
    assert "Generate 25 distinct" in script.prompts[0]
