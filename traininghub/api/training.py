"""Training application router."""
from typing import List, Optional
from fastapi import APIRouter, Query, Response

from traininghub.services.training_service import TrainingService
from traininghub.schemas.training import (
    TrainingApplicationCreate,
    TrainingApplicationResponse,
    TrainingApplicationStatusUpdate,
)
from traininghub.models.training import ApplicationType, ApplicationStatus, ApplicationPriority
from traininghub.api.dependencies import AnyUser, DbSession, ManagerUser

router = APIRouter(prefix="/training", tags=["Training"])


@router.get("/applications", response_model=List[TrainingApplicationResponse])
def list_applications(
    db: DbSession,
    principal: AnyUser,
    response: Response,
    status: Optional[ApplicationStatus] = None,
    application_type: Optional[ApplicationType] = Query(None, alias="type"),
    priority: Optional[ApplicationPriority] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """
    List training applications, newest first.

    Employees only see their own applications; managers and admins see all.
    Paged with skip/limit; X-Total-Count carries the unpaged total.
    """
    service = TrainingService(db)
    filters = {"status": status, "application_type": application_type, "priority": priority}
    response.headers["X-Total-Count"] = str(service.count_applications(principal, **filters))
    return service.list_applications(principal, skip=skip, limit=limit, **filters)


@router.post("/applications", response_model=TrainingApplicationResponse, status_code=201)
def create_application(
    data: TrainingApplicationCreate,
    db: DbSession,
    principal: AnyUser,
):
    """
    Submit a training request or workshop proposal.
    """
    service = TrainingService(db)
    return service.create_application(data, principal.user_id)


@router.get("/applications/{application_id}", response_model=TrainingApplicationResponse)
def get_application(
    application_id: int,
    db: DbSession,
    principal: AnyUser,
):
    """
    Get a training application. Employees may only read their own.
    """
    service = TrainingService(db)
    return service.get_application(application_id, principal)


@router.put("/applications/{application_id}/status", response_model=TrainingApplicationResponse)
def update_application_status(
    application_id: int,
    update: TrainingApplicationStatusUpdate,
    db: DbSession,
    principal: ManagerUser,
):
    """
    Review an application: status, manager/HR approval, comments
    (Manager or Admin).
    """
    service = TrainingService(db)
    return service.update_status(application_id, update, principal)


@router.delete("/applications/{application_id}")
def delete_application(
    application_id: int,
    db: DbSession,
    principal: AnyUser,
):
    """
    Delete a pending application. Employees may only delete their own.
    """
    service = TrainingService(db)
    service.delete_application(application_id, principal)
    return {"message": "Application deleted successfully"}


@router.get("/statistics")
def get_statistics(
    db: DbSession,
    principal: ManagerUser,
):
    """
    Application counts by status, type and priority plus the ten most
    recent applications (Manager or Admin).
    """
    service = TrainingService(db)
    return service.get_statistics()
