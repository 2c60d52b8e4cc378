"""
Pydantic schemas for AWS Support API (Trusted Advisor) payloads.

Fields accept the API's camelCase keys as well as their snake_case names.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CheckDescriptor(BaseModel):
    """A Trusted Advisor check from the check catalog."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    category: str
    name: Optional[str] = None


class ResourcesSummary(BaseModel):
    """Resource counters of a check. Any counter may be missing."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resources_processed: Optional[int] = Field(None, alias="resourcesProcessed")
    resources_flagged: Optional[int] = Field(None, alias="resourcesFlagged")
    resources_ignored: Optional[int] = Field(None, alias="resourcesIgnored")
    resources_suppressed: Optional[int] = Field(None, alias="resourcesSuppressed")


class CheckSummary(BaseModel):
    """Latest result of a single check."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    check_id: str = Field(..., alias="checkId")
    status: str  # validated when folded
    resources_summary: Optional[ResourcesSummary] = Field(None, alias="resourcesSummary")
