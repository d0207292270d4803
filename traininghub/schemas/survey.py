"""Survey schemas."""
from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import Optional, List
from datetime import datetime

from traininghub.models.survey import QuestionType, SurveyStatus
from traininghub.schemas.user import UserMini


# Question schemas
class QuestionBase(BaseModel):
    """Base question schema."""
    title: str = Field(..., min_length=1)
    type: QuestionType
    options: Optional[List[str]] = None
    required: bool = False


class QuestionCreate(QuestionBase):
    """Create question. Order is taken from the position in the survey payload."""

    @model_validator(mode="after")
    def check_options(self) -> "QuestionCreate":
        if self.type.is_choice:
            if not self.options:
                raise ValueError(f"{self.type.value} questions need at least one option")
            if any(not option.strip() for option in self.options):
                raise ValueError("Options cannot be blank")
        elif self.options:
            raise ValueError(f"{self.type.value} questions do not take options")
        return self


class QuestionResponse(QuestionBase):
    """Question response."""
    id: int
    survey_id: int
    order: int

    model_config = ConfigDict(from_attributes=True)


# Survey schemas
class SurveyBase(BaseModel):
    """Base survey schema."""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None


class SurveyCreate(SurveyBase):
    """Create survey with questions."""
    status: SurveyStatus = SurveyStatus.DRAFT
    questions: List[QuestionCreate] = Field(..., min_length=1)


class SurveyStatusUpdate(BaseModel):
    """Change survey status."""
    status: SurveyStatus


class SurveySummary(SurveyBase):
    """Survey fields shared by list and detail views."""
    id: int
    status: SurveyStatus
    created_by_id: int
    created_by: UserMini
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SurveyListResponse(SurveySummary):
    """Survey list row with counts (no questions)."""
    response_count: int = 0
    question_count: int = 0


class SurveyDetailResponse(SurveySummary):
    """Survey with its ordered questions."""
    questions: List[QuestionResponse] = []
