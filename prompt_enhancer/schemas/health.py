"""Schema for GET /health."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness answer; the enhancer has no external dependencies to check."""

    status: str = Field(default="ok", examples=["ok"])
