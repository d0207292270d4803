"""Survey response service."""
import logging
from typing import List
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from traininghub.repositories.response_repository import ResponseRepository
from traininghub.repositories.survey_repository import SurveyRepository
from traininghub.models.response import SurveyResponse
from traininghub.schemas.response import SurveyResponseCreate

logger = logging.getLogger(__name__)

DUPLICATE_RESPONSE_MESSAGE = "Response already submitted"


class ResponseService:
    """Survey response business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.response_repo = ResponseRepository(db)
        self.survey_repo = SurveyRepository(db)

    def submit_response(self, survey_id: int, response_data: SurveyResponseCreate,
                        user_id: int) -> SurveyResponse:
        """
        Submit the caller's response to a survey.

        One response per (survey, user). The look-up gives the usual error;
        when two submissions race past it, the unique constraint rejects the
        second insert and it is reported the same way.

        Answers are stored as given: required questions and question
        membership are not checked.

        Raises:
            HTTPException: 404 if the survey does not exist, 400 if the
                caller already responded
        """
        if not self.survey_repo.exists(survey_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Survey not found"
            )

        if self.response_repo.get_by_survey_and_user(survey_id, user_id):
            logger.warning("Duplicate response to survey %s by user %s", survey_id, user_id)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=DUPLICATE_RESPONSE_MESSAGE
            )

        try:
            response = self.response_repo.create_with_answers(
                survey_id=survey_id,
                user_id=user_id,
                answers=[answer.model_dump() for answer in response_data.answers],
            )
        except IntegrityError:
            self.db.rollback()
            if self.response_repo.get_by_survey_and_user(survey_id, user_id):
                logger.warning("Concurrent duplicate response to survey %s by user %s", survey_id, user_id)
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=DUPLICATE_RESPONSE_MESSAGE
                )
            raise

        logger.info(
            "Response %s submitted to survey %s by user %s (%d answers)",
            response.id, survey_id, user_id, len(response.answers),
        )
        return response

    def get_survey_responses(self, survey_id: int, skip: int = 0,
                             limit: int = 100) -> List[SurveyResponse]:
        """
        Get all responses for a survey.

        Raises:
            HTTPException: If survey not found
        """
        if not self.survey_repo.exists(survey_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Survey not found"
            )

        return self.response_repo.get_by_survey(survey_id, skip=skip, limit=limit)

    def count_survey_responses(self, survey_id: int) -> int:
        return self.response_repo.count_by_survey(survey_id)
