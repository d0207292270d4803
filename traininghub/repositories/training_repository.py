"""Training application repository."""
from typing import Optional, List, Dict
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import func

from traininghub.models.training import (
    TrainingApplication,
    ApplicationType,
    ApplicationStatus,
    ApplicationPriority,
)


class TrainingApplicationRepository:
    """Training application data access layer."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: int, **fields) -> TrainingApplication:
        """Create a new application owned by ``user_id``."""
        application = TrainingApplication(user_id=user_id, **fields)
        self.db.add(application)
        self.db.commit()
        return self.get_by_id(application.id)

    def get_by_id(self, application_id: int) -> Optional[TrainingApplication]:
        """Get application by ID with its applicant."""
        return self.db.query(TrainingApplication)\
            .options(joinedload(TrainingApplication.user))\
            .filter(TrainingApplication.id == application_id)\
            .first()

    def _filtered(self, query, user_id: Optional[int] = None,
                  status: Optional[ApplicationStatus] = None,
                  application_type: Optional[ApplicationType] = None,
                  priority: Optional[ApplicationPriority] = None):
        if user_id is not None:
            query = query.filter(TrainingApplication.user_id == user_id)
        if status is not None:
            query = query.filter(TrainingApplication.status == status)
        if application_type is not None:
            query = query.filter(TrainingApplication.application_type == application_type)
        if priority is not None:
            query = query.filter(TrainingApplication.priority == priority)
        return query

    def get_all(self, skip: int = 0, limit: int = 100, **filters) -> List[TrainingApplication]:
        """Get applications newest first; the ``user_id`` filter restricts to one applicant."""
        query = self.db.query(TrainingApplication).options(joinedload(TrainingApplication.user))
        return self._filtered(query, **filters)\
            .order_by(TrainingApplication.submitted_at.desc(), TrainingApplication.id.desc())\
            .offset(skip).limit(limit)\
            .all()

    def count_all(self, **filters) -> int:
        """Count applications matching the same filters as ``get_all``."""
        return self._filtered(self.db.query(func.count(TrainingApplication.id)), **filters).scalar() or 0

    def update(self, application_id: int, **kwargs) -> Optional[TrainingApplication]:
        """Write every supplied field; None clears the column."""
        application = self.get_by_id(application_id)
        if not application:
            return None

        for key, value in kwargs.items():
            if hasattr(application, key):
                setattr(application, key, value)

        self.db.commit()
        return self.get_by_id(application_id)

    def delete(self, application: TrainingApplication) -> None:
        """Hard delete."""
        self.db.delete(application)
        self.db.commit()

    # Statistics
    def count(self, status: Optional[ApplicationStatus] = None) -> int:
        query = self.db.query(func.count(TrainingApplication.id))
        if status is not None:
            query = query.filter(TrainingApplication.status == status)
        return query.scalar() or 0

    def count_by_type(self) -> Dict[ApplicationType, int]:
        rows = self.db.query(TrainingApplication.application_type, func.count(TrainingApplication.id))\
            .group_by(TrainingApplication.application_type)\
            .all()
        return {application_type: count for application_type, count in rows}

    def count_by_priority(self) -> Dict[ApplicationPriority, int]:
        rows = self.db.query(TrainingApplication.priority, func.count(TrainingApplication.id))\
            .group_by(TrainingApplication.priority)\
            .all()
        return {priority: count for priority, count in rows}

    def get_recent(self, limit: int = 10) -> List[TrainingApplication]:
        return self.get_all(limit=limit)
