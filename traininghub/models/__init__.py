"""Database models."""
from traininghub.models.user import User, UserRole, has_at_least
from traininghub.models.survey import Survey, SurveyStatus, Question, QuestionType
from traininghub.models.response import SurveyResponse, Answer, ResponseStatus
from traininghub.models.training import (
    TrainingApplication,
    ApplicationType,
    ApplicationStatus,
    ApplicationPriority,
)

__all__ = [
    "User",
    "UserRole",
    "has_at_least",
    "Survey",
    "SurveyStatus",
    "Question",
    "QuestionType",
    "SurveyResponse",
    "Answer",
    "ResponseStatus",
    "TrainingApplication",
    "ApplicationType",
    "ApplicationStatus",
    "ApplicationPriority",
]
