"""Analyst agent package: executive summaries and entry deep-dives."""

from scamwatch.agents.analyst.main import analyze_entry, summarize_findings
from scamwatch.agents.analyst.prompts import ANALYSIS_FAILED, SUMMARY_FAILED

__all__ = [
    "analyze_entry",
    "summarize_findings",
    "ANALYSIS_FAILED",
    "SUMMARY_FAILED",
]
