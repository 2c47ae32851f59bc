"""Dashboard aggregates, table filtering and currency formatting."""

from collections import Counter
from collections.abc import Sequence

from scamwatch.models import (
    ALL_CATEGORIES,
    CategoryLoss,
    DashboardStats,
    IntelligenceEntry,
    PlatformCount,
    ScamCategory,
)

TOP_PLATFORMS = 5


def _as_number(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value


def format_currency(value: float | None) -> str:
    """Compact dollar amount: $1.2M, $450.0K, or the literal value below 1000."""
    value = value or 0
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${value / 1_000:.1f}K"
    return f"${_as_number(value)}"


def format_usd(value: float | None) -> str:
    """Full dollar amount with thousands separators; missing values show as $0."""
    if value is None:
        return "$0"
    return f"${_as_number(value):,}"


def reported_loss(entry: IntelligenceEntry) -> float:
    return entry.financial_impact.reported_loss_usd or 0


def total_reported_loss(entries: Sequence[IntelligenceEntry]) -> float:
    """Sum of reported losses across every entry; missing figures count as zero."""
    return sum(reported_loss(e) for e in entries)


def total_recovered(entries: Sequence[IntelligenceEntry]) -> float:
    return sum(e.financial_impact.recovered_usd or 0 for e in entries)


def category_losses(entries: Sequence[IntelligenceEntry]) -> list[CategoryLoss]:
    """Reported loss per category, every category included, largest first."""
    losses = [
        CategoryLoss(
            name=category.value,
            value=sum(reported_loss(e) for e in entries if e.category == category),
        )
        for category in ScamCategory
    ]
    return sorted(losses, key=lambda c: c.value, reverse=True)


def platform_counts(
    entries: Sequence[IntelligenceEntry], limit: int = TOP_PLATFORMS
) -> list[PlatformCount]:
    """Entry counts for the first ``limit`` distinct platforms, in first-seen order."""
    counts = Counter(e.platform for e in entries)
    return [PlatformCount(name=name, count=n) for name, n in counts.items()][:limit]


def _most_common(values: list[str]) -> str | None:
    if not values:
        return None
    return Counter(values).most_common(1)[0][0]


def compute_stats(entries: Sequence[IntelligenceEntry]) -> DashboardStats:
    """Compute the dashboard aggregates for the given entries."""
    total_loss = total_reported_loss(entries)
    losses = category_losses(entries)

    return DashboardStats(
        total_entries=len(entries),
        total_reported_loss=total_loss,
        total_recovered=total_recovered(entries),
        average_loss=total_loss / len(entries) if entries else 0,
        category_losses=losses,
        platform_counts=platform_counts(entries),
        top_category=losses[0].name if entries else None,
        top_platform=_most_common([e.platform for e in entries]),
        most_targeted_region=_most_common(
            [region for e in entries for region in e.target_regions]
        ),
    )


def filter_entries(
    entries: Sequence[IntelligenceEntry],
    search_term: str = "",
    category: str | None = None,
) -> list[IntelligenceEntry]:
    """Case-insensitive search over id, tactic and platform, plus a category filter."""
    term = (search_term or "").lower()

    def matches(entry: IntelligenceEntry) -> bool:
        matches_search = (
            term in entry.id.lower()
            or term in entry.tactic.lower()
            or term in entry.platform.lower()
        )
        matches_category = (
            not category or category == ALL_CATEGORIES or entry.category == category
        )
        return matches_search and matches_category

    return [e for e in entries if matches(e)]
