"""
Request and response schemas for the HTTP API.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator


class GenerateRequest(BaseModel):
    """Body of POST /generate."""

    prompt: StrictStr = Field(
        ...,
        description="Free-form text representing the user request",
        json_schema_extra={"example": "Hello, world!"},
    )
    instructions: StrictStr = Field(
        "",
        description="Free-form text modifying how the prompt is processed",
        json_schema_extra={"example": "Example"},
    )

    @field_validator("instructions", mode="before")
    @classmethod
    def _null_instructions_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class GenerateResponse(BaseModel):
    """Processed response returned by POST /generate."""

    content: str = Field(..., description="Processed prompt text")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error type or code")
    detail: str = Field(..., description="Human-readable error description")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
