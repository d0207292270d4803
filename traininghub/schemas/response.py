"""Survey response schemas."""
from pydantic import BaseModel, ConfigDict
from typing import Any, Optional, List
from datetime import datetime

from traininghub.models.response import ResponseStatus
from traininghub.schemas.survey import QuestionResponse
from traininghub.schemas.user import RespondentSummary

# Free-form JSON answer: text, number, rating, date, selected options or an object
AnswerValue = Any


class AnswerCreate(BaseModel):
    """Answer to one question."""
    question_id: int
    answer: AnswerValue = None


class SurveyResponseCreate(BaseModel):
    """Submit a response to a survey."""
    answers: List[AnswerCreate]


class AnswerResponse(BaseModel):
    """Stored answer."""
    id: int
    response_id: int
    question_id: int
    answer: AnswerValue = None

    model_config = ConfigDict(from_attributes=True)


class AnswerDetail(AnswerResponse):
    """Answer with the question it refers to."""
    question: QuestionResponse


class SurveyResponseOut(BaseModel):
    """Created survey response with its answers."""
    id: int
    survey_id: int
    user_id: int
    status: ResponseStatus
    created_at: datetime
    updated_at: Optional[datetime] = None
    answers: List[AnswerResponse] = []

    model_config = ConfigDict(from_attributes=True)


class SurveyResponseDetail(SurveyResponseOut):
    """Response as seen by reviewers: respondent and questions embedded."""
    user: RespondentSummary
    answers: List[AnswerDetail] = []
