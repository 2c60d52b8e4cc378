"""
Stats Runner - Main orchestrator for Trusted Advisor stats.

Coordinates catalog fetching, summary fetching, and aggregation.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

from advisor_stats.config import settings
from advisor_stats.logger import logger
from advisor_stats.services.advisor.aggregator import aggregate_summaries, build_category_lookup
from advisor_stats.services.advisor.errors import AdvisorStatsError
from advisor_stats.services.advisor.models import CategoryAggregate
from advisor_stats.services.support_client import SupportClient


@dataclass
class StatsResult:
    """Outcome of one stats run."""
    language: str
    generated_at: datetime
    check_count: int
    aggregates: Dict[str, CategoryAggregate] = field(default_factory=dict)


class StatsRunner:
    """Orchestrates a complete stats run."""
    
    def __init__(self, support_client: Optional[SupportClient] = None):
        self.support_client = support_client or SupportClient()
    
    def run(self, language: Optional[str] = None) -> StatsResult:
        """
        Run one stats pass.
        
        Args:
            language: Catalog language, defaults to ADVISOR_LANGUAGE
            
        Returns:
            StatsResult with one aggregate per catalog category
            
        Raises:
            AdvisorStatsError: if a Support API call or the aggregation fails
        """
        language = language or settings.ADVISOR_LANGUAGE
        logger.info(f"Starting Trusted Advisor stats run (language={language})")
        
        try:
            # 1. Map every check to its category
            checks = self.support_client.list_checks(language)
            lookup = build_category_lookup(checks)
            
            # 2. Summaries for every known check
            summaries = self.support_client.get_check_summaries(list(lookup))
            
            # 3. Fold into per-category totals
            aggregates = aggregate_summaries(lookup, summaries)
        except AdvisorStatsError as e:
            logger.error(f"Stats run failed: {e}")
            raise
        
        logger.info(
            f"Aggregated {len(summaries)} summaries into {len(aggregates)} categories"
        )
        
        return StatsResult(
            language=language,
            generated_at=datetime.now(timezone.utc),
            check_count=len(lookup),
            aggregates=aggregates
        )
