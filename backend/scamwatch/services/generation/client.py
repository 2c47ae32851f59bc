"""Async client for schema-constrained and free-text generation.

Wraps pydantic-ai agents behind a single ``generate`` call that never raises
for remote or parsing failures: every such failure comes back as a failed
``GenerationResult`` carrying the reason. Each call is attempted exactly once.
"""

import logging

from pydantic import BaseModel
from pydantic_ai import Agent, NativeOutput, ToolOutput
from pydantic_ai.exceptions import ModelHTTPError, UnexpectedModelBehavior
from pydantic_ai.models import Model
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

from scamwatch.config import Settings
from scamwatch.llm_providers import get_model_string

from .config import GenerationServiceConfig
from .exceptions import GenerationConfigError
from .models import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


def describe_error(error: Exception) -> str:
    """Short reason string for a failed generation call."""
    if isinstance(error, ModelHTTPError):
        return f"remote error {error.status_code} from {error.model_name}"
    if isinstance(error, UnexpectedModelBehavior):
        return f"malformed response: {error.message}"
    return f"{type(error).__name__}: {error}"


class GenerationClient:
    """Single-request/single-response access to the generation model."""

    def __init__(
        self,
        api_key: str = "",
        config: GenerationServiceConfig | None = None,
        model: Model | None = None,
    ):
        self.config = config or GenerationServiceConfig()
        self.model = model or self._build_model(api_key)
        self._agents: dict[type[BaseModel] | None, Agent] = {}
        logger.info(f"Initialized GenerationClient ({self.model_label})")

    def _build_model(self, api_key: str) -> Model:
        if not api_key:
            raise GenerationConfigError(
                "GEMINI_API_KEY is not set. Add it to .env or the environment."
            )
        return GoogleModel(
            self.config.model_name,
            provider=GoogleProvider(api_key=api_key),
        )

    @property
    def model_label(self) -> str:
        if isinstance(self.model, GoogleModel):
            return get_model_string(self.config.model_name)
        return self.model.model_name

    def _get_agent(self, output_schema: type[BaseModel] | None) -> Agent:
        """Get or create the agent for an output schema (None for prose)."""
        if output_schema not in self._agents:
            self._agents[output_schema] = self._create_agent(output_schema)
        return self._agents[output_schema]

    def _create_agent(self, output_schema: type[BaseModel] | None) -> Agent:
        if output_schema is None:
            output_type = str
        elif self.config.output_mode == "native":
            output_type = NativeOutput(output_schema)
        else:
            output_type = ToolOutput(output_schema)

        return Agent(
            self.model,
            output_type=output_type,
            retries=0,
            output_retries=0,
        )

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Run one generation call and wrap its outcome."""
        kind = request.output_schema.__name__ if request.output_schema else "text"

        try:
            agent = self._get_agent(request.output_schema)
            result = await agent.run(request.instruction)
        except Exception as e:
            reason = describe_error(e)
            logger.error(f"Generation failed ({kind}): {reason}")
            return GenerationResult.failure(reason)

        if request.output_schema is None:
            return GenerationResult.prose(result.output)

        logger.debug(f"Generation succeeded ({kind})")
        return GenerationResult.structured(result.output)

    async def generate_text(self, instruction: str) -> GenerationResult:
        return await self.generate(GenerationRequest(instruction=instruction))

    async def generate_structured(
        self, instruction: str, output_schema: type[BaseModel]
    ) -> GenerationResult:
        return await self.generate(
            GenerationRequest(instruction=instruction, output_schema=output_schema)
        )


def create_generation_client(settings: Settings) -> GenerationClient:
    """Factory function to create a GenerationClient from application settings."""
    return GenerationClient(
        api_key=settings.gemini_api_key,
        config=GenerationServiceConfig(
            model_name=settings.generation.model,
            output_mode=settings.generation.output_mode,
        ),
    )
