"""Request/response contract for the remote generation capability."""

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel

ResultStatus = Literal["structured", "text", "failed"]


@dataclass(frozen=True)
class GenerationRequest:
    """Instruction text plus an optional output schema.

    With a schema the model must answer with JSON matching it; without one
    the answer is used verbatim as prose.
    """

    instruction: str
    output_schema: type[BaseModel] | None = None


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation call. Callers branch on ``ok``."""

    status: ResultStatus
    data: Any = None
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"

    @classmethod
    def structured(cls, data: BaseModel) -> "GenerationResult":
        return cls(status="structured", data=data)

    @classmethod
    def prose(cls, text: str) -> "GenerationResult":
        return cls(status="text", text=text)

    @classmethod
    def failure(cls, reason: str) -> "GenerationResult":
        return cls(status="failed", error=reason)
