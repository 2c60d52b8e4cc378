"""
Command-line entry point: prints per-category Trusted Advisor totals.
"""
import sys

from advisor_stats.logger import logger
from advisor_stats.services.advisor.errors import AdvisorStatsError
from advisor_stats.services.report import render_lines
from advisor_stats.services.stats_runner import StatsRunner


def main() -> int:
    runner = StatsRunner()
    try:
        result = runner.run()
    except AdvisorStatsError as e:
        logger.error(f"Trusted Advisor stats unavailable: {e}")
        return 1
    
    for line in render_lines(result.aggregates):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
