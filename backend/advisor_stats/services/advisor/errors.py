"""
Errors raised while collecting and aggregating Trusted Advisor stats.
"""


class AdvisorStatsError(Exception):
    """Base class for all stats run failures."""


class TransportError(AdvisorStatsError):
    """A Support API call failed or returned an unusable payload."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed: {reason}")


class UnknownStatusLabel(AdvisorStatsError):
    """A check summary carries a status outside the known severities."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown check status label: {label!r}")


class UnresolvedCheckId(AdvisorStatsError):
    """A check summary references a check missing from the catalog."""

    def __init__(self, check_id: str):
        self.check_id = check_id
        super().__init__(f"Check {check_id!r} has no catalog category")
