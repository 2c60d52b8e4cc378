"""
Check severities, ordered from least to most severe.
"""
from enum import Enum

from advisor_stats.services.advisor.errors import UnknownStatusLabel


class Severity(Enum):
    """Trusted Advisor check status.

    Declaration order is the severity order.
    """
    NOT_AVAILABLE = "not_available"
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __str__(self) -> str:
        return self.value


_RANKS = {severity: rank for rank, severity in enumerate(Severity)}


def worst(a: Severity, b: Severity) -> Severity:
    """Return the more severe of two severities."""
    return a if a.rank > b.rank else b


def parse_status(label: str) -> Severity:
    """Resolve a status label to a Severity.

    Raises:
        UnknownStatusLabel: if the label is not one of the four severities
    """
    try:
        return Severity(label)
    except ValueError:
        raise UnknownStatusLabel(label) from None
