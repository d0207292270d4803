"""Training application schemas."""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal

from traininghub.models.training import ApplicationType, ApplicationStatus, ApplicationPriority
from traininghub.schemas.user import UserSummary


class TrainingApplicationBase(BaseModel):
    """Fields supplied by the applicant."""
    application_type: ApplicationType
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    priority: ApplicationPriority = ApplicationPriority.MEDIUM
    justification: str = Field(..., min_length=1)
    expected_outcome: Optional[str] = None
    preferred_dates: Optional[List[date]] = None
    duration: Optional[str] = Field(None, max_length=100)
    budget: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    participants: Optional[int] = Field(None, ge=1)
    location: Optional[str] = Field(None, max_length=200)
    provider: Optional[str] = Field(None, max_length=200)


class TrainingApplicationCreate(TrainingApplicationBase):
    """Submit a training request or workshop proposal."""
    pass


class TrainingApplicationStatusUpdate(BaseModel):
    """
    Reviewer update. Every field is optional and only provided fields are
    written; null clears an approval flag or the comments. No transition or
    approval-consistency rules are applied.
    """
    status: Optional[ApplicationStatus] = None
    manager_approval: Optional[bool] = None
    hr_approval: Optional[bool] = None
    admin_comments: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("status")
    @classmethod
    def status_not_null(cls, value: Optional[ApplicationStatus]) -> ApplicationStatus:
        if value is None:
            raise ValueError("cannot be null")
        return value


class TrainingApplicationResponse(TrainingApplicationBase):
    """Training application with reviewer fields and applicant summary."""
    id: int
    user_id: int
    status: ApplicationStatus
    manager_approval: Optional[bool] = None
    hr_approval: Optional[bool] = None
    admin_comments: Optional[str] = None
    submitted_at: datetime
    updated_at: Optional[datetime] = None
    user: UserSummary

    model_config = ConfigDict(from_attributes=True)
