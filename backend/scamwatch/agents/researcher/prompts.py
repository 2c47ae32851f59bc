"""Prompt construction for intelligence generation."""

from scamwatch.models import SearchParams

RESEARCHER_SYSTEM_CONTEXT = """Act as an elite OSINT (Open Source Intelligence) Researcher specializing in East African cybercrime networks.
Your goal is to synthesize structured intelligence reports based on verifiable public patterns, law enforcement advisories, and investigative journalism.

MANDATORY FINANCIAL DATA REQUIREMENT:
For every entry, you MUST include financial loss data derived from public reports (FTC, FBI IC3, INTERPOL, UNODC, court filings).
1. Use aggregated/estimated USD values.
2. STRICTLY NO wallet addresses, bank accounts, or private individual attribution.
3. If exact values are unknown, provide realistic estimates based on similar case studies."""

BROAD_RESEARCH_FOCUS = (
    "Generate a broad cross-section of active scam ecosystems in East Africa "
    "including their financial impact."
)

CONSTRAINED_RESEARCH_HEADER = (
    "Strictly prioritize intelligence synthesis with the following constraints:"
)

GROUNDING_FOOTER = """Each entry must be grounded in realistic OSINT patterns seen in Somali and East African ecosystems.
Focus on technical signals (IOCs), social engineering tactics, and platform-specific behaviors.
Financial figures must be clearly labeled as reported or estimated."""


def build_constraints(params: SearchParams) -> list[str]:
    """One constraint clause per supplied filter parameter."""
    constraints: list[str] = []

    if params.query:
        constraints.append(f'Focus on the specific research query: "{params.query}"')
    if params.category_filter:
        constraints.append(
            f'Only generate entries for the category: "{params.category_filter}"'
        )
    if params.platform:
        constraints.append(
            f'Focus exclusively on operations active on the platform: "{params.platform}"'
        )
    if params.date_range:
        constraints.append(
            "The intelligence must reflect activity observed during the timeframe: "
            f'"{params.date_range}"'
        )

    return constraints


def build_research_focus(params: SearchParams) -> str:
    """Bullet list of constraints, or the broad cross-section instruction."""
    constraints = build_constraints(params)
    if not constraints:
        return BROAD_RESEARCH_FOCUS

    bullets = "\n".join(f"- {c}" for c in constraints)
    return f"{CONSTRAINED_RESEARCH_HEADER}\n{bullets}"


def build_generation_prompt(params: SearchParams) -> str:
    """Full instruction for one generation request."""
    return f"""{RESEARCHER_SYSTEM_CONTEXT}

Task: Generate {params.count} distinct, highly realistic intelligence entries with comprehensive financial impact data.
{build_research_focus(params)}

{GROUNDING_FOOTER}"""
