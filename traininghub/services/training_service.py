"""Training application service."""
import logging
from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from traininghub.repositories.training_repository import TrainingApplicationRepository
from traininghub.models.training import (
    TrainingApplication,
    ApplicationType,
    ApplicationStatus,
    ApplicationPriority,
)
from traininghub.models.user import UserRole, has_at_least
from traininghub.schemas.training import (
    TrainingApplicationCreate,
    TrainingApplicationResponse,
    TrainingApplicationStatusUpdate,
)
from traininghub.schemas.user import TokenData

logger = logging.getLogger(__name__)


class TrainingService:
    """Training application business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.application_repo = TrainingApplicationRepository(db)

    @staticmethod
    def _is_reviewer(principal: TokenData) -> bool:
        return has_at_least(principal.role, UserRole.MANAGER)

    def _owner_scope(self, principal: TokenData) -> Optional[int]:
        return None if self._is_reviewer(principal) else principal.user_id

    def _get_visible(self, application_id: int, principal: TokenData) -> TrainingApplication:
        """Load an application the principal is allowed to see or touch."""
        application = self.application_repo.get_by_id(application_id)

        if not application:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Application not found"
            )

        if not self._is_reviewer(principal) and application.user_id != principal.user_id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied"
            )

        return application

    def create_application(self, data: TrainingApplicationCreate, user_id: int) -> TrainingApplication:
        """Create a PENDING application owned by the caller."""
        fields = data.model_dump()
        if data.preferred_dates is not None:
            fields["preferred_dates"] = [day.isoformat() for day in data.preferred_dates]

        application = self.application_repo.create(user_id=user_id, **fields)
        logger.info(
            "Training application %s (%s) submitted by user %s",
            application.id, application.application_type.value, user_id,
        )
        return application

    def list_applications(self, principal: TokenData,
                          status: Optional[ApplicationStatus] = None,
                          application_type: Optional[ApplicationType] = None,
                          priority: Optional[ApplicationPriority] = None,
                          skip: int = 0, limit: int = 100) -> List[TrainingApplication]:
        """
        List applications matching the filters.

        Employees only ever see their own submissions; reviewers see all.
        """
        return self.application_repo.get_all(
            skip=skip,
            limit=limit,
            user_id=self._owner_scope(principal),
            status=status,
            application_type=application_type,
            priority=priority,
        )

    def count_applications(self, principal: TokenData,
                           status: Optional[ApplicationStatus] = None,
                           application_type: Optional[ApplicationType] = None,
                           priority: Optional[ApplicationPriority] = None) -> int:
        """Number of applications ``list_applications`` would page through."""
        return self.application_repo.count_all(
            user_id=self._owner_scope(principal),
            status=status,
            application_type=application_type,
            priority=priority,
        )

    def get_application(self, application_id: int, principal: TokenData) -> TrainingApplication:
        """
        Get application by ID.

        Raises:
            HTTPException: 404 if absent, 403 if an employee asks for
                someone else's application
        """
        return self._get_visible(application_id, principal)

    def update_status(self, application_id: int,
                      update: TrainingApplicationStatusUpdate,
                      reviewer: TokenData) -> TrainingApplication:
        """
        Apply a reviewer update. Only provided fields are written and any
        status may follow any other.

        Raises:
            HTTPException: If application not found
        """
        changes = update.model_dump(exclude_unset=True)
        application = self.application_repo.update(application_id, **changes)

        if not application:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Application not found"
            )

        logger.info(
            "Training application %s updated by user %s (%s): %s",
            application_id, reviewer.user_id, reviewer.role.value, changes,
        )
        return application

    def delete_application(self, application_id: int, principal: TokenData) -> None:
        """
        Delete an application while it is still PENDING.

        Raises:
            HTTPException: 404 if absent, 403 if not the owner (employees),
                400 if the application is no longer pending
        """
        application = self._get_visible(application_id, principal)

        if application.status != ApplicationStatus.PENDING:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Cannot delete application that is not pending"
            )

        self.application_repo.delete(application)
        logger.info("Training application %s deleted by user %s", application_id, principal.user_id)

    def get_statistics(self, recent_limit: int = 10) -> dict:
        """Counts by status, type and priority plus the newest applications."""
        by_type = self.application_repo.count_by_type()
        by_priority = self.application_repo.count_by_priority()
        recent = self.application_repo.get_recent(limit=recent_limit)

        return {
            "stats": {
                "totalApplications": self.application_repo.count(),
                "pendingApplications": self.application_repo.count(ApplicationStatus.PENDING),
                "approvedApplications": self.application_repo.count(ApplicationStatus.APPROVED),
                "rejectedApplications": self.application_repo.count(ApplicationStatus.REJECTED),
            },
            "applicationsByType": [
                {"applicationType": application_type.value, "count": count}
                for application_type, count in by_type.items()
            ],
            "applicationsByPriority": [
                {"priority": priority.value, "count": count}
                for priority, count in by_priority.items()
            ],
            "recentApplications": [
                TrainingApplicationResponse.model_validate(application).model_dump(mode="json")
                for application in recent
            ],
        }
