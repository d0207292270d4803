"""Response repository."""
from typing import Optional, List
from sqlalchemy.orm import Session, joinedload, selectinload

from traininghub.models.response import SurveyResponse, Answer, ResponseStatus


class ResponseRepository:
    """Survey response data access layer."""

    def __init__(self, db: Session):
        self.db = db

    def create_with_answers(self, survey_id: int, user_id: int, answers: List[dict],
                            status: ResponseStatus = ResponseStatus.COMPLETED) -> SurveyResponse:
        """
        Insert a response and all of its answers as one unit.

        Raises:
            sqlalchemy.exc.IntegrityError: if a response for (survey, user)
                already exists; the caller owns the rollback
        """
        response = SurveyResponse(
            survey_id=survey_id,
            user_id=user_id,
            status=status,
        )
        response.answers = [
            Answer(question_id=answer["question_id"], answer=answer["answer"])
            for answer in answers
        ]
        self.db.add(response)
        self.db.commit()
        return self.get_by_id(response.id)

    def get_by_id(self, response_id: int) -> Optional[SurveyResponse]:
        """Get response by ID with answers."""
        return self.db.query(SurveyResponse)\
            .options(selectinload(SurveyResponse.answers))\
            .filter(SurveyResponse.id == response_id)\
            .first()

    def get_by_survey_and_user(self, survey_id: int, user_id: int) -> Optional[SurveyResponse]:
        """Get the caller's response to a survey, if any."""
        return self.db.query(SurveyResponse)\
            .filter(SurveyResponse.survey_id == survey_id, SurveyResponse.user_id == user_id)\
            .first()

    def get_by_survey(self, survey_id: int, skip: int = 0, limit: int = 100) -> List[SurveyResponse]:
        """Get all responses for a survey with respondent, answers and questions."""
        return self.db.query(SurveyResponse)\
            .options(
                joinedload(SurveyResponse.user),
                selectinload(SurveyResponse.answers).joinedload(Answer.question),
            )\
            .filter(SurveyResponse.survey_id == survey_id)\
            .order_by(SurveyResponse.created_at.asc(), SurveyResponse.id.asc())\
            .offset(skip).limit(limit)\
            .all()

    def count_by_survey(self, survey_id: int) -> int:
        """Count responses for a survey."""
        return self.db.query(SurveyResponse)\
            .filter(SurveyResponse.survey_id == survey_id)\
            .count()
