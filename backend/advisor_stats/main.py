"""
Trusted Advisor Stats - FastAPI Application Entry Point
"""

from fastapi import FastAPI

from advisor_stats.config import settings
from advisor_stats.api.v1.endpoints import health, stats
from advisor_stats.logger import logger

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    description="Per-category Trusted Advisor check totals and worst-case status",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Include routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(stats.router, prefix="/api/v1/stats")


@app.on_event("startup")
async def startup():
    """Log on startup."""
    logger.info(f"Starting {settings.APP_NAME} (region={settings.AWS_REGION})...")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }
