"""Training application model."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Numeric, Enum as SQLEnum, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from enum import Enum

from traininghub.core.database import Base


class ApplicationType(str, Enum):
    """Kind of training application."""
    TRAINING_REQUEST = "TRAINING_REQUEST"
    WORKSHOP_PROPOSAL = "WORKSHOP_PROPOSAL"


class ApplicationStatus(str, Enum):
    """Review status of a training application."""
    PENDING = "PENDING"
    UNDER_REVIEW = "UNDER_REVIEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"


class ApplicationPriority(str, Enum):
    """Requested priority."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class TrainingApplication(Base):
    """
    Training request or workshop proposal submitted by an employee.

    Flow:
      Employee  →  submits (status: PENDING)  →  may delete while PENDING
      Manager / Admin  →  sets status, manager/HR approval flags, comments

    Status, approval flags and comments are written independently; nothing
    ties manager_approval / hr_approval to status = APPROVED.
    """

    __tablename__ = "training_applications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    application_type = Column(SQLEnum(ApplicationType), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False)
    priority = Column(SQLEnum(ApplicationPriority), nullable=False, default=ApplicationPriority.MEDIUM, index=True)
    justification = Column(Text, nullable=False)
    expected_outcome = Column(Text, nullable=True)
    preferred_dates = Column(JSON, nullable=True)  # list of ISO dates
    duration = Column(String, nullable=True)
    budget = Column(Numeric(12, 2), nullable=True)
    participants = Column(Integer, nullable=True)
    location = Column(String, nullable=True)
    provider = Column(String, nullable=True)
    status = Column(SQLEnum(ApplicationStatus), nullable=False, default=ApplicationStatus.PENDING, index=True)
    manager_approval = Column(Boolean, nullable=True)
    hr_approval = Column(Boolean, nullable=True)
    admin_comments = Column(Text, nullable=True)
    submitted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="training_applications")

    def __repr__(self):
        return f"<TrainingApplication(id={self.id}, user_id={self.user_id}, status={self.status})>"
