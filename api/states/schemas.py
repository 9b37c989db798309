"""
Pydantic schemas for the states endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class State(BaseModel):
    id: int
    name: str
    abbreviation: str
    capital: str
