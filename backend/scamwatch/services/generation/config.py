from typing import Literal

from pydantic import BaseModel

from scamwatch.llm_providers import GeminiModel


class GenerationServiceConfig(BaseModel):
    """Configuration for the generation client."""

    model_name: str = GeminiModel.GEMINI_3_FLASH_PREVIEW.value
    output_mode: Literal["native", "tool"] = "native"
