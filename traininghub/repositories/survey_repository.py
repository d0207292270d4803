"""Survey repository."""
from typing import Optional, List, Tuple
from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy import select, func

from traininghub.models.survey import Survey, SurveyStatus, Question
from traininghub.models.response import SurveyResponse


class SurveyRepository:
    """Survey data access layer."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, title: str, description: Optional[str], status: SurveyStatus,
               created_by_id: int, questions: List[dict]) -> Survey:
        """
        Create a survey and its questions in one commit.

        Each question dict carries title, type, options, required and order.
        """
        survey = Survey(
            title=title,
            description=description,
            status=status,
            created_by_id=created_by_id,
        )
        survey.questions = [Question(**question) for question in questions]
        self.db.add(survey)
        self.db.commit()
        return self.get_by_id(survey.id)

    def get_by_id(self, survey_id: int, include_questions: bool = True) -> Optional[Survey]:
        """Get survey by ID with creator and optional questions."""
        query = self.db.query(Survey).options(joinedload(Survey.created_by))

        if include_questions:
            query = query.options(selectinload(Survey.questions))

        return query.filter(Survey.id == survey_id).first()

    def exists(self, survey_id: int) -> bool:
        return self.db.query(Survey.id).filter(Survey.id == survey_id).first() is not None

    def get_all_with_counts(self, skip: int = 0, limit: int = 100,
                            status: Optional[SurveyStatus] = None) -> List[Tuple[Survey, int, int]]:
        """Surveys newest first, each with (response_count, question_count)."""
        response_count = (
            select(func.count(SurveyResponse.id))
            .where(SurveyResponse.survey_id == Survey.id)
            .correlate(Survey)
            .scalar_subquery()
        )
        question_count = (
            select(func.count(Question.id))
            .where(Question.survey_id == Survey.id)
            .correlate(Survey)
            .scalar_subquery()
        )

        query = self.db.query(
            Survey,
            response_count.label("response_count"),
            question_count.label("question_count"),
        ).options(joinedload(Survey.created_by))

        if status is not None:
            query = query.filter(Survey.status == status)

        rows = (
            query.order_by(Survey.created_at.desc(), Survey.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [(row[0], row[1] or 0, row[2] or 0) for row in rows]

    def update_status(self, survey_id: int, status: SurveyStatus) -> Optional[Survey]:
        """Set survey status."""
        survey = self.get_by_id(survey_id, include_questions=False)
        if not survey:
            return None

        survey.status = status
        self.db.commit()
        return self.get_by_id(survey_id)

