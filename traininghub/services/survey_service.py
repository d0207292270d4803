"""Survey service."""
import logging
from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from traininghub.repositories.survey_repository import SurveyRepository
from traininghub.models.survey import Survey, SurveyStatus
from traininghub.schemas.survey import SurveyCreate, SurveyListResponse, SurveySummary

logger = logging.getLogger(__name__)


class SurveyService:
    """Survey business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.survey_repo = SurveyRepository(db)

    def create_survey(self, survey_data: SurveyCreate, created_by_id: int) -> Survey:
        """
        Create a new survey with its questions.

        Question order is the position in the submitted list.
        """
        questions = [
            {
                "title": question.title,
                "type": question.type,
                "options": question.options if question.type.is_choice else None,
                "required": question.required,
                "order": index,
            }
            for index, question in enumerate(survey_data.questions)
        ]

        survey = self.survey_repo.create(
            title=survey_data.title,
            description=survey_data.description,
            status=survey_data.status,
            created_by_id=created_by_id,
            questions=questions,
        )
        logger.info(
            "Survey %s created by user %s with %d questions",
            survey.id, created_by_id, len(questions),
        )
        return survey

    def get_survey(self, survey_id: int) -> Survey:
        """
        Get survey by ID with ordered questions.

        Raises:
            HTTPException: If survey not found
        """
        survey = self.survey_repo.get_by_id(survey_id)

        if not survey:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Survey not found"
            )

        return survey

    def get_surveys(self, skip: int = 0, limit: int = 100,
                    status: Optional[SurveyStatus] = None) -> List[SurveyListResponse]:
        """Get surveys with response and question counts."""
        rows = self.survey_repo.get_all_with_counts(skip=skip, limit=limit, status=status)
        return [
            SurveyListResponse(
                **SurveySummary.model_validate(survey).model_dump(),
                response_count=response_count,
                question_count=question_count,
            )
            for survey, response_count, question_count in rows
        ]

    def update_status(self, survey_id: int, new_status: SurveyStatus) -> Survey:
        """
        Change survey status.

        Raises:
            HTTPException: If survey not found
        """
        survey = self.survey_repo.update_status(survey_id, new_status)

        if not survey:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Survey not found"
            )

        logger.info("Survey %s status set to %s", survey_id, new_status.value)
        return survey
