"""Shared fixtures for the scamwatch test suite."""

from collections.abc import Callable

import pytest

from scamwatch.config import Settings
from scamwatch.services.generation import GenerationClient
from tests.fakes import ScriptedModel, make_entry_payload


@pytest.fixture
def entry_payload() -> Callable[..., dict]:
    return make_entry_payload


@pytest.fixture
def make_client() -> Callable[[ScriptedModel], GenerationClient]:
    def _make(script: ScriptedModel) -> GenerationClient:
        return GenerationClient(model=script.as_model())

    return _make


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(_env_file=None, data_dir=tmp_path, gemini_api_key="")
