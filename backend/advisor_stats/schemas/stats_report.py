"""
Pydantic schemas for stats responses.
"""

from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field


class CategoryStats(BaseModel):
    """Aggregated totals for one check category."""
    category: str
    status: Literal["not_available", "ok", "warning", "error"]
    resources_processed: int = Field(0, ge=0)
    resources_flagged: int = Field(0, ge=0)
    resources_ignored: int = Field(0, ge=0)
    resources_suppressed: int = Field(0, ge=0)


class StatsReport(BaseModel):
    """Complete stats response."""
    language: str
    generated_at: datetime
    check_count: int
    categories: list[CategoryStats] = []

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "language": "en",
                "generated_at": "2024-01-01T12:00:00Z",
                "check_count": 3,
                "categories": [
                    {
                        "category": "cost_optimizing",
                        "status": "warning",
                        "resources_processed": 10,
                        "resources_flagged": 5,
                        "resources_ignored": 0,
                        "resources_suppressed": 0
                    },
                    {
                        "category": "security",
                        "status": "error",
                        "resources_processed": 0,
                        "resources_flagged": 0,
                        "resources_ignored": 0,
                        "resources_suppressed": 0
                    }
                ]
            }
        }
    )
