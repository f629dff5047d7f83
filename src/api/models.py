"""Pydantic models for API request/response.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── auth ─────────────────────────────────────────────────────


class RegisterRequest(CamelModel):
    """Request model for user registration. Blank fields are rejected by the route."""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""


class LoginRequest(CamelModel):
    email: str = ""
    password: str = ""


class UserSummaryResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str


class AuthResponse(CamelModel):
    """Response model for register and login."""
    success: bool
    message: str
    token: Optional[str] = None
    user: Optional[UserSummaryResponse] = None


class MessageResponse(CamelModel):
    success: bool
    message: str


# ── profile ──────────────────────────────────────────────────


class ProfileResponse(CamelModel):
    """Applicant profile. Never includes the password hash."""
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    location: Optional[str] = None
    job_title: Optional[str] = None
    about_me: Optional[str] = None
    resume_file_url: Optional[str] = None
    job_preferences: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class UpdateProfileRequest(CamelModel):
    """Omitted names keep their stored value; other omitted fields are cleared."""
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=255)
    job_title: Optional[str] = Field(None, max_length=255)
    about_me: Optional[str] = Field(None, max_length=5000)
    resume_file_url: Optional[str] = Field(None, max_length=500)
    job_preferences: Optional[str] = Field(None, max_length=5000)


class ApplicantResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    location: Optional[str] = None
    email: str


# ── jobs ─────────────────────────────────────────────────────


class JobResponse(CamelModel):
    id: Optional[int] = None
    title: str
    location: Optional[str] = None
    snippet: Optional[str] = None
    salary: Optional[str] = None
    source: Optional[str] = None
    link: str
    updated: Optional[str] = None
    job_type: Optional[str] = Field(None, description="Employment type, e.g. Full-time")


class JobSearchRequest(CamelModel):
    keywords: str = ""
    location: str = ""


# ── cover letters ────────────────────────────────────────────


class GenerateCoverLetterRequest(CamelModel):
    job_description: str = ""
    user_profile: str = ""


class CoverLetterResponse(CamelModel):
    cover_letter: str


class CoverLetterFromJobRequest(CamelModel):
    job_id: int = 0
    custom_user_profile: Optional[str] = Field(None, description="Used when the account has no profile")


class CoverLetterFromJobResponse(CamelModel):
    cover_letter: str
    job_title: str
    job_location: Optional[str] = None
    user_profile: str


class SaveCoverLetterRequest(CamelModel):
    email: str = ""
    cover_letter: str = ""
    name: Optional[str] = None
    job_title: Optional[str] = None
    company_name: Optional[str] = None


class SaveCoverLetterResponse(CamelModel):
    blob_name: str
    message: str


# ── email ────────────────────────────────────────────────────


class SendEmailRequest(CamelModel):
    email: str = ""
    name: str = ""
    cover_letter: str = ""
    job_title: Optional[str] = None
    company_name: Optional[str] = None


class SendEmailResponse(CamelModel):
    success: bool
    message: str
    recipient: str
    timestamp: datetime
