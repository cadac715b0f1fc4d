"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DirectionRequest(BaseModel):
    """Request body for POST /game/direction."""

    direction: str = Field(min_length=1, max_length=16)


class DifficultyRequest(BaseModel):
    """Request body for POST /game/difficulty."""

    level: str = Field(min_length=1, max_length=16)


class DifficultyLevel(BaseModel):
    """One row of the difficulty table."""

    level: str
    tick_interval_ms: int


class ControlResponse(BaseModel):
    """Outcome of a control operation plus the resulting state."""

    accepted: bool
    state: dict
