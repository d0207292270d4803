"""User model."""
from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from enum import Enum

from traininghub.core.database import Base


class UserRole(str, Enum):
    """User roles, ordered from least to most capable."""
    EMPLOYEE = "EMPLOYEE"
    MANAGER = "MANAGER"
    ADMIN = "ADMIN"

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]


_ROLE_RANK = {
    UserRole.EMPLOYEE: 0,
    UserRole.MANAGER: 1,
    UserRole.ADMIN: 2,
}


def has_at_least(role: UserRole, required: UserRole) -> bool:
    """True when ``role`` carries every capability of ``required``."""
    return UserRole(role).rank >= UserRole(required).rank


class User(Base):
    """User model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    role = Column(SQLEnum(UserRole), nullable=False, default=UserRole.EMPLOYEE)
    department = Column(String, nullable=True, index=True)
    position = Column(String, nullable=True)
    location = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    surveys = relationship("Survey", back_populates="created_by")
    survey_responses = relationship("SurveyResponse", back_populates="user")
    training_applications = relationship("TrainingApplication", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
