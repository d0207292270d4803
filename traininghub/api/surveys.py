"""Survey router."""
from typing import List, Optional
from fastapi import APIRouter, Query, Response

from traininghub.services.survey_service import SurveyService
from traininghub.services.response_service import ResponseService
from traininghub.schemas.survey import (
    SurveyCreate,
    SurveyDetailResponse,
    SurveyListResponse,
    SurveyStatusUpdate,
)
from traininghub.schemas.response import SurveyResponseCreate, SurveyResponseDetail, SurveyResponseOut
from traininghub.models.survey import SurveyStatus
from traininghub.api.dependencies import AnyUser, DbSession, ManagerUser

router = APIRouter(prefix="/surveys", tags=["Surveys"])


@router.get("", response_model=List[SurveyListResponse])
def list_surveys(
    db: DbSession,
    principal: AnyUser,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    status: Optional[SurveyStatus] = None,
):
    """
    List surveys, newest first, with response and question counts.
    """
    service = SurveyService(db)
    return service.get_surveys(skip=skip, limit=limit, status=status)


@router.post("", response_model=SurveyDetailResponse, status_code=201)
def create_survey(
    survey_data: SurveyCreate,
    db: DbSession,
    principal: ManagerUser,
):
    """
    Create a survey with its questions (Manager or Admin).
    """
    service = SurveyService(db)
    return service.create_survey(survey_data, principal.user_id)


@router.get("/{survey_id}", response_model=SurveyDetailResponse)
def get_survey(
    survey_id: int,
    db: DbSession,
    principal: AnyUser,
):
    """
    Get survey with questions in display order.
    """
    service = SurveyService(db)
    return service.get_survey(survey_id)


@router.put("/{survey_id}/status", response_model=SurveyDetailResponse)
def update_survey_status(
    survey_id: int,
    body: SurveyStatusUpdate,
    db: DbSession,
    principal: ManagerUser,
):
    """
    Change survey status, e.g. publish a draft as ACTIVE (Manager or Admin).
    """
    service = SurveyService(db)
    return service.update_status(survey_id, body.status)


@router.post("/{survey_id}/responses", response_model=SurveyResponseOut, status_code=201)
def submit_response(
    survey_id: int,
    response_data: SurveyResponseCreate,
    db: DbSession,
    principal: AnyUser,
):
    """
    Submit the caller's response. Each user may respond to a survey once.
    """
    service = ResponseService(db)
    return service.submit_response(survey_id, response_data, principal.user_id)


@router.get("/{survey_id}/responses", response_model=List[SurveyResponseDetail])
def list_responses(
    survey_id: int,
    db: DbSession,
    principal: ManagerUser,
    response: Response,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """
    Get all responses to a survey with respondents and answered questions
    (Manager or Admin).
    """
    service = ResponseService(db)
    responses = service.get_survey_responses(survey_id, skip=skip, limit=limit)
    response.headers["X-Total-Count"] = str(service.count_survey_responses(survey_id))
    return responses
