"""
Shared fixtures: a fake boto3 Support client and sample payloads.
"""

import pytest


CATALOG = {
    "checks": [
        {"id": "c1", "name": "Low Utilization EC2", "category": "cost_optimizing",
         "description": "", "metadata": []},
        {"id": "c2", "name": "Idle Load Balancers", "category": "cost_optimizing",
         "description": "", "metadata": []},
        {"id": "c3", "name": "Security Groups", "category": "security",
         "description": "", "metadata": []},
    ]
}

SUMMARIES = {
    "summaries": [
        {"checkId": "c1", "timestamp": "2024-01-01T00:00:00Z", "status": "ok",
         "hasFlaggedResources": True, "resourcesSummary": {"resourcesFlagged": 2},
         "categorySpecificSummary": {}},
        {"checkId": "c2", "timestamp": "2024-01-01T00:00:00Z", "status": "warning",
         "hasFlaggedResources": True,
         "resourcesSummary": {"resourcesFlagged": 3, "resourcesProcessed": 10},
         "categorySpecificSummary": {}},
        {"checkId": "c3", "timestamp": "2024-01-01T00:00:00Z", "status": "error",
         "hasFlaggedResources": False, "resourcesSummary": {},
         "categorySpecificSummary": {}},
    ]
}


class FakeSupport:
    """Stands in for boto3.client("support")."""

    def __init__(self, catalog=None, summaries=None, error=None):
        self.catalog = CATALOG if catalog is None else catalog
        self.summaries = SUMMARIES if summaries is None else summaries
        self.error = error
        self.calls = []

    def describe_trusted_advisor_checks(self, language):
        self.calls.append(("describe_trusted_advisor_checks", {"language": language}))
        if self.error is not None:
            raise self.error
        return self.catalog

    def describe_trusted_advisor_check_summaries(self, checkIds):
        self.calls.append(("describe_trusted_advisor_check_summaries", {"checkIds": checkIds}))
        if self.error is not None:
            raise self.error
        return self.summaries


@pytest.fixture
def fake_support():
    return FakeSupport()


@pytest.fixture
def make_support():
    return FakeSupport
