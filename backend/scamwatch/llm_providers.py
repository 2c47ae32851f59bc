"""LLM provider and model enums for model selection.

Keeps model identifiers in one place so the generation service and the
configuration layer agree on what can be requested.
"""

from enum import StrEnum


class LLMProvider(StrEnum):
    """Supported LLM providers."""

    GOOGLE = "google-gla"
    GOOGLE_VERTEX = "google-vertex"


class GeminiModel(StrEnum):
    """Gemini models available via the Generative Language API."""

    GEMINI_3_FLASH_PREVIEW = "gemini-3-flash-preview"
    GEMINI_3_PRO_PREVIEW = "gemini-3-pro-preview"
    GEMINI_2_5_FLASH = "gemini-2.5-flash"
    GEMINI_2_5_PRO = "gemini-2.5-pro"


# =============================================================================
# Helper Functions
# =============================================================================


def get_model_string(
    model: GeminiModel | str,
    provider: LLMProvider = LLMProvider.GOOGLE,
) -> str:
    """Get the pydantic-ai model string for a Gemini model.

    Plain strings are accepted so config files can name models that are not
    (yet) listed in the enum.
    """
    name = model.value if isinstance(model, GeminiModel) else str(model)
    if ":" in name:
        return name
    return f"{provider.value}:{name}"

