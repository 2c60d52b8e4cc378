from dataclasses import dataclass

from advisor_stats.services.advisor.severity import Severity


@dataclass
class CategoryAggregate:
    """Running totals for one check category."""
    category_status: Severity = Severity.NOT_AVAILABLE
    resources_processed: int = 0
    resources_flagged: int = 0
    resources_ignored: int = 0
    resources_suppressed: int = 0
