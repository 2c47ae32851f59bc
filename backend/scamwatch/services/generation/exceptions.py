"""Custom exceptions for the generation service."""


class GenerationError(Exception):
    """Base exception for generation service errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GenerationConfigError(GenerationError):
    """Client cannot be constructed (missing API key or unknown model)."""

    pass
