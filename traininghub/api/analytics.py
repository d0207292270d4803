"""Analytics endpoints."""
from fastapi import APIRouter, Response
from sqlalchemy import func

from traininghub.api.dependencies import AnyUser, DbSession
from traininghub.models.user import User
from traininghub.models.survey import Survey, SurveyStatus
from traininghub.models.response import SurveyResponse

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/dashboard")
def get_dashboard(
    db: DbSession,
    principal: AnyUser,
    response: Response,
):
    """
    Return the dashboard summary.

    Each figure comes from its own query; they are not read in one
    transaction, so a response landing mid-request may show up in one
    figure and not another.
    """
    response.headers["Cache-Control"] = "private, max-age=60"

    total_users = db.query(func.count(User.id)).scalar() or 0
    total_surveys = db.query(func.count(Survey.id)).scalar() or 0
    active_surveys = (
        db.query(func.count(Survey.id))
        .filter(Survey.status == SurveyStatus.ACTIVE)
        .scalar()
        or 0
    )
    total_responses = db.query(func.count(SurveyResponse.id)).scalar() or 0

    users_by_department = (
        db.query(User.department, func.count(User.id).label("total"))
        .filter(User.department != None)  # noqa: E711
        .group_by(User.department)
        .order_by(func.count(User.id).desc(), User.department.asc())
        .all()
    )

    completion_rates = (
        db.query(
            Survey.id.label("id"),
            Survey.title.label("title"),
            func.count(SurveyResponse.id).label("response_count"),
        )
        .outerjoin(SurveyResponse, SurveyResponse.survey_id == Survey.id)
        .filter(Survey.status == SurveyStatus.ACTIVE)
        .group_by(Survey.id, Survey.title)
        .order_by(func.count(SurveyResponse.id).desc(), Survey.id.asc())
        .limit(5)
        .all()
    )

    recent_activity = (
        db.query(
            SurveyResponse.id.label("id"),
            SurveyResponse.survey_id.label("survey_id"),
            SurveyResponse.user_id.label("user_id"),
            SurveyResponse.status.label("status"),
            SurveyResponse.created_at.label("created_at"),
            User.first_name.label("first_name"),
            User.last_name.label("last_name"),
            Survey.title.label("survey_title"),
        )
        .join(User, User.id == SurveyResponse.user_id)
        .join(Survey, Survey.id == SurveyResponse.survey_id)
        .order_by(SurveyResponse.created_at.desc(), SurveyResponse.id.desc())
        .limit(10)
        .all()
    )

    return {
        "stats": {
            "totalUsers": total_users,
            "totalSurveys": total_surveys,
            "activeSurveys": active_surveys,
            "totalResponses": total_responses,
        },
        "usersByDepartment": [
            {"department": r.department, "count": r.total}
            for r in users_by_department
        ],
        "surveyCompletionRates": [
            {"id": r.id, "title": r.title, "responseCount": r.response_count}
            for r in completion_rates
        ],
        "recentActivity": [
            {
                "id": r.id,
                "surveyId": r.survey_id,
                "userId": r.user_id,
                "status": r.status.value,
                "createdAt": r.created_at.isoformat() if r.created_at else None,
                "user": {"firstName": r.first_name, "lastName": r.last_name},
                "survey": {"title": r.survey_title},
            }
            for r in recent_activity
        ],
    }


@router.get("/training-needs")
def get_training_needs(principal: AnyUser):
    """
    Training needs analysis.

    Placeholder: always returns the empty structure the dashboard expects.
    """
    return {
        "byDepartment": {},
        "bySkill": {},
        "priority": {
            "high": 0,
            "medium": 0,
            "low": 0,
        },
    }
