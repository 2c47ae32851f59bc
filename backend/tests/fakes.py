"""Test doubles: entry payloads and a scripted stand-in for the remote model."""

import json
import threading

from pydantic_ai.messages import ModelMessage, ModelResponse, TextPart, UserPromptPart
from pydantic_ai.models.function import AgentInfo, FunctionModel
from pydantic_ai.profiles import ModelProfile

GENERATION_MARKER = "distinct, highly realistic intelligence entries"


def make_entry_payload(index: int = 1, **overrides) -> dict:
    """Wire-format entry as the model would return it."""
    payload = {
        "id": f"GEN-{index:03d}",
        "category": "Impersonation",
        "platform": "Telegram",
        "tactic": "Fake customs officer",
        "description": "Callers pose as customs officials demanding release fees.",
        "targetRegions": ["Africa", "EU"],
        "severity": "Medium",
        "sourceType": "Police Advisory",
        "dateAdded": "2024-05-01",
        "signals": ["Spoofed caller ID", "Mobile money payment request"],
        "financial_impact": {
            "reported_loss_usd": 1000.0 * index,
            "estimated_loss_usd": {"min": 2000.0 * index, "max": 5000.0 * index},
            "time_period": "2024",
            "currency": "USD",
            "confidence": "Medium",
            "recovered_usd": 0,
            "notes": "Estimated from advisory case counts.",
        },
    }
    payload.update(overrides)
    return payload


def batch_json(entries: list[dict]) -> str:
    return json.dumps({"entries": entries})


def prompt_text(messages: list[ModelMessage]) -> str:
    """User prompt of the latest request sent to the model."""
    for part in reversed(messages[-1].parts):
        if isinstance(part, UserPromptPart):
            return str(part.content)
    return ""


class ScriptedModel:
    """Records prompts and answers generation and prose requests from fixed scripts.

    With a ``gate`` event, generation requests block until the event is set.
    """

    def __init__(
        self,
        batch: str | Exception = "",
        text: str | Exception = "ok",
        gate: threading.Event | None = None,
    ):
        self.batch = batch
        self.text = text
        self.gate = gate
        self.prompts: list[str] = []

    def __call__(self, messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        prompt = prompt_text(messages)
        self.prompts.append(prompt)

        is_generation = GENERATION_MARKER in prompt
        if is_generation and self.gate is not None:
            self.gate.wait(timeout=5)

        answer = self.batch if is_generation else self.text
        if isinstance(answer, Exception):
            raise answer
        return ModelResponse(parts=[TextPart(content=answer)])

    def as_model(self) -> FunctionModel:
        # FunctionModel names the model after the function, so pass the bound method
        return FunctionModel(
            self.__call__,
            profile=ModelProfile(
                supports_json_schema_output=True,
                supports_json_object_output=True,
            ),
        )
