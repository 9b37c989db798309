"""
Pydantic schemas for greeting and health endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Greeting(BaseModel):
    id: int
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
