"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_ready: bool = Field(..., description="Whether the cache store is connected")
    log_level: str = Field(..., description="Current cache log level")
