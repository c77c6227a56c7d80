"""Pydantic models for API request/response schemas."""

from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel, Field


class SessionStatus(str, enum.Enum):
    """Lifecycle states for a hosted session."""

    WAITING = "waiting"
    ACTIVE = "active"
    FINISHED = "finished"


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions. Omitted fields use game defaults."""

    grid_size: int | None = Field(default=None, ge=4, le=100)
    cell_size: int | None = Field(default=None, ge=4, le=64)
    start_direction: Literal["up", "down", "left", "right"] | None = None
    initial_tick_interval_ms: int | None = Field(default=None, ge=20, le=2000)
    min_tick_interval_ms: int | None = Field(default=None, ge=20, le=2000)
    speed_multiplier: float | None = Field(default=None, ge=1.0, le=10.0)
    initial_points_per_food: int | None = Field(default=None, ge=1)
    bonus_points_per_food: int | None = Field(default=None, ge=1)
    score_threshold: int | None = Field(default=None, ge=0)
    seed: int | None = None


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    status: SessionStatus
    grid_size: int
    cell_size: int
    tick_interval_ms: int
    score: int
