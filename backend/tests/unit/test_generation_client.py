"""Tests for the generation client request/result contract."""

import asyncio

import pytest
from pydantic_ai.exceptions import ModelHTTPError

from scamwatch.models import IntelligenceBatch
from scamwatch.services.generation import (
    GenerationClient,
    GenerationConfigError,
    GenerationRequest,
    create_generation_client,
)
from tests.fakes import ScriptedModel, batch_json, make_entry_payload


def test_missing_api_key_is_fatal_at_construction() -> None:
    with pytest.raises(GenerationConfigError):
        GenerationClient(api_key="")


def test_factory_uses_settings_key(settings) -> None:
    with pytest.raises(GenerationConfigError):
        create_generation_client(settings)


def test_text_request_returns_prose(make_client) -> None:
    client = make_client(ScriptedModel(text="Plain narrative."))

    result = asyncio.run(client.generate(GenerationRequest(instruction="Describe it.")))

    assert result.ok
    assert result.status == "text"
    assert result.text == "Plain narrative."


def test_structured_request_returns_validated_model(make_client) -> None:
    script = ScriptedModel(batch=batch_json([make_entry_payload(1)]))
    client = make_client(script)

    result = asyncio.run(
        client.generate_structured(
            "Generate 1 distinct, highly realistic intelligence entries", IntelligenceBatch
        )
    )

    assert result.status == "structured"
    assert isinstance(result.data, IntelligenceBatch)
    assert result.data.entries[0].id == "GEN-001"


def test_remote_error_becomes_failed_result(make_client) -> None:
    script = ScriptedModel(text=ModelHTTPError(status_code=429, model_name="gemini", body=None))

    result = asyncio.run(make_client(script).generate_text("hello"))

    assert not result.ok
    assert result.status == "failed"
    assert "429" in result.error


def test_invalid_structured_output_becomes_failed_result(make_client) -> None:
    client = make_client(ScriptedModel(batch='{"entries": [{"id": 1}]}'))

    result = asyncio.run(
        client.generate_structured(
            "Generate 1 distinct, highly realistic intelligence entries", IntelligenceBatch
        )
    )

    assert result.status == "failed"
    assert result.data is None


def test_agents_are_reused_per_schema(make_client) -> None:
    client = make_client(ScriptedModel())

    assert client._get_agent(None) is client._get_agent(None)
    assert client._get_agent(IntelligenceBatch) is not client._get_agent(None)


def test_agent_construction_error_becomes_failed_result(make_client, monkeypatch) -> None:
    client = make_client(ScriptedModel())

    def broken_agent(output_schema):
        raise TypeError("unexpected keyword argument 'output_retries'")

    monkeypatch.setattr(client, "_create_agent", broken_agent)

    result = asyncio.run(client.generate_text("hello"))

    assert result.status == "failed"
    assert "output_retries" in result.error


def test_scripted_model_is_named_after_its_function(make_client) -> None:
    client = make_client(ScriptedModel())

    assert "__call__" in client.model_label
