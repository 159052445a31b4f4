from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field


class StorageHealth(BaseModel):
    backend: str
    connected: bool
    message: str | None = None


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"]
    service: str = "helpdesk-backend"
    environment: str
    storage: StorageHealth
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ConnectionTestResponse(BaseModel):
    success: bool
    message: str
