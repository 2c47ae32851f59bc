"""Remote generation service integration."""

from .client import GenerationClient, create_generation_client, describe_error
from .config import GenerationServiceConfig
from .exceptions import GenerationConfigError, GenerationError
from .models import GenerationRequest, GenerationResult

__all__ = [
    "GenerationClient",
    "create_generation_client",
    "describe_error",
    "GenerationServiceConfig",
    "GenerationError",
    "GenerationConfigError",
    "GenerationRequest",
    "GenerationResult",
]
