"""Pydantic schemas for API request/response models."""

from typing import Any

from pydantic import BaseModel, Field


class RoleConfigResponse(BaseModel):
    """An assessable role."""

    role: str
    prompt_key: str
    max_tokens: int
    title: str


class AssessmentSummary(BaseModel):
    """Headline figures of an assessment, tolerant of missing fields."""

    score: int = 0
    summary: str = "No summary available"
    strengths: list[str] = Field(default_factory=list)
    development_areas: list[str] = Field(default_factory=list)
    identified_skills_count: int = 0
    essential_skills_count: int = 0
    missing_essential_skills: list[str] = Field(default_factory=list)
    optional_skills_count: int = 0


class AssessmentResponse(BaseModel):
    """Response from the assessment endpoint."""

    success: bool
    role: str
    title: str
    cv_filename: str | None = None
    assessment: dict[str, Any] | None = None
    summary: AssessmentSummary | None = None
    raw_response: str | None = None
    error: str | None = None


class RoleIdentificationResponse(BaseModel):
    """Response from the role identification endpoint."""

    success: bool
    cv_filename: str | None = None
    result: dict[str, Any] | None = None
    raw_response: str | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
