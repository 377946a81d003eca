"""Pydantic models for API request and response schemas."""

from datetime import date, datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AppointmentCreateRequest(BaseModel):
    """Request body for scheduling an appointment."""

    title: str = Field(..., max_length=200, description="Short description of the appointment.")
    scheduled_on: date = Field(..., description="Day the appointment takes place.")

    @field_validator("title", mode="after")
    @classmethod
    def validate_title_not_empty(cls, v: str) -> str:
        """Validate that title contains non-whitespace content."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Title is required and cannot be empty")
        return stripped


class AppointmentResponse(BaseModel):
    """A single appointment."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    scheduled_on: date
    created_at: datetime


class AppointmentListResponse(BaseModel):
    """Appointments matching a day."""

    items: List[AppointmentResponse]
    total: int
