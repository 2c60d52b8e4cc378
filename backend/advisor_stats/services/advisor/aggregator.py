"""
Aggregator - Folds check summaries into per-category totals.

The fold keeps the worst status seen per category and sums the resource
counters, counting an absent counter as zero. Both operations are
commutative, so the result does not depend on summary order.
"""
from typing import Dict, Iterable, Optional

from advisor_stats.schemas.support_api import CheckDescriptor, CheckSummary
from advisor_stats.services.advisor.errors import UnresolvedCheckId
from advisor_stats.services.advisor.models import CategoryAggregate
from advisor_stats.services.advisor.severity import parse_status, worst


def build_category_lookup(checks: Iterable[CheckDescriptor]) -> Dict[str, str]:
    """Map check id to category. A repeated id keeps the last category."""
    lookup = {}
    for check in checks:
        lookup[check.id] = check.category
    return lookup


def new_aggregates(lookup: Dict[str, str]) -> Dict[str, CategoryAggregate]:
    """Create one empty aggregate per distinct category."""
    return {category: CategoryAggregate() for category in dict.fromkeys(lookup.values())}


def _safe(value: Optional[int]) -> int:
    return value if value is not None else 0


def fold(aggregate: CategoryAggregate, summary: CheckSummary) -> None:
    """Fold one check summary into a category aggregate in place.

    Raises:
        UnknownStatusLabel: if the summary status is not a known severity
    """
    # Resolve before touching the aggregate so a bad label leaves it intact
    status = parse_status(summary.status)
    aggregate.category_status = worst(aggregate.category_status, status)

    counts = summary.resources_summary
    if counts is None:
        return

    aggregate.resources_processed += _safe(counts.resources_processed)
    aggregate.resources_flagged += _safe(counts.resources_flagged)
    aggregate.resources_ignored += _safe(counts.resources_ignored)
    aggregate.resources_suppressed += _safe(counts.resources_suppressed)


def aggregate_summaries(
    lookup: Dict[str, str],
    summaries: Iterable[CheckSummary]
) -> Dict[str, CategoryAggregate]:
    """Fold every summary into the aggregate of its check's category.

    Returns:
        Mapping of category to aggregate, including categories with no summaries

    Raises:
        UnresolvedCheckId: if a summary's check id is not in the lookup
        UnknownStatusLabel: if a summary status is not a known severity
    """
    aggregates = new_aggregates(lookup)

    for summary in summaries:
        category = lookup.get(summary.check_id)
        if category is None:
            raise UnresolvedCheckId(summary.check_id)
        fold(aggregates[category], summary)

    return aggregates
