"""Researcher agent package: synthesizes intelligence entries."""

from scamwatch.agents.researcher.main import generate_intelligence
from scamwatch.agents.researcher.prompts import (
    build_constraints,
    build_generation_prompt,
    build_research_focus,
)

__all__ = [
    "generate_intelligence",
    "build_constraints",
    "build_generation_prompt",
    "build_research_focus",
]
