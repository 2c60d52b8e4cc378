"""
Stats API endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from advisor_stats.logger import logger
from advisor_stats.schemas.stats_report import StatsReport
from advisor_stats.services.advisor.errors import AdvisorStatsError, TransportError
from advisor_stats.services.report import build_report
from advisor_stats.services.stats_runner import StatsRunner

router = APIRouter(tags=["Stats"])


def get_runner() -> StatsRunner:
    return StatsRunner()


@router.get("", response_model=StatsReport)
def get_stats(
    language: Optional[str] = Query(None, description="Check catalog language, e.g. 'en'"),
    runner: StatsRunner = Depends(get_runner)
):
    """Run one stats pass and return per-category totals."""
    try:
        result = runner.run(language)
    except TransportError as e:
        raise HTTPException(status_code=502, detail=f"Support API unavailable: {e}")
    except AdvisorStatsError as e:
        # Provider data did not line up (unknown status or check id)
        logger.error(f"Inconsistent Trusted Advisor data: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    
    return build_report(result)
