"""
Report - Presentation of aggregated stats.
"""
from typing import Dict, List

from advisor_stats.schemas.stats_report import CategoryStats, StatsReport
from advisor_stats.services.advisor.models import CategoryAggregate
from advisor_stats.services.stats_runner import StatsResult


def format_counters(aggregate: CategoryAggregate) -> str:
    return (
        f"{{ResourcesProcessed: {aggregate.resources_processed}, "
        f"ResourcesFlagged: {aggregate.resources_flagged}, "
        f"ResourcesIgnored: {aggregate.resources_ignored}, "
        f"ResourcesSuppressed: {aggregate.resources_suppressed}}}"
    )


def format_category(category: str, aggregate: CategoryAggregate) -> str:
    """Format one report line: `<category> (<status>): <counters>`."""
    return f"{category} ({aggregate.category_status}): {format_counters(aggregate)}"


def render_lines(aggregates: Dict[str, CategoryAggregate]) -> List[str]:
    """Render one line per category, sorted by category name."""
    return [format_category(category, aggregates[category]) for category in sorted(aggregates)]


def build_report(result: StatsResult) -> StatsReport:
    """Convert a stats run into the API response schema."""
    categories = [
        CategoryStats(
            category=category,
            status=aggregate.category_status.value,
            resources_processed=aggregate.resources_processed,
            resources_flagged=aggregate.resources_flagged,
            resources_ignored=aggregate.resources_ignored,
            resources_suppressed=aggregate.resources_suppressed
        )
        for category, aggregate in sorted(result.aggregates.items())
    ]
    return StatsReport(
        language=result.language,
        generated_at=result.generated_at,
        check_count=result.check_count,
        categories=categories
    )
