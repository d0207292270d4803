"""Survey models."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Enum as SQLEnum, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from enum import Enum

from traininghub.core.database import Base


class SurveyStatus(str, Enum):
    """Survey lifecycle status."""
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    ARCHIVED = "ARCHIVED"


class QuestionType(str, Enum):
    """Question types supported by the system."""
    TEXT = "TEXT"
    TEXTAREA = "TEXTAREA"
    SINGLE_CHOICE = "SINGLE_CHOICE"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    RATING = "RATING"
    DATE = "DATE"

    @property
    def is_choice(self) -> bool:
        return self in (QuestionType.SINGLE_CHOICE, QuestionType.MULTIPLE_CHOICE)


class Survey(Base):
    """Survey model - a named, ordered set of questions."""

    __tablename__ = "surveys"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    status = Column(SQLEnum(SurveyStatus), nullable=False, default=SurveyStatus.DRAFT, index=True)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    created_by = relationship("User", back_populates="surveys")
    questions = relationship(
        "Question",
        back_populates="survey",
        cascade="all, delete-orphan",
        order_by="Question.order",
    )
    responses = relationship("SurveyResponse", back_populates="survey", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Survey(id={self.id}, title={self.title}, status={self.status})>"


class Question(Base):
    """Question model - belongs to exactly one survey."""

    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    survey_id = Column(Integer, ForeignKey("surveys.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    type = Column(SQLEnum(QuestionType), nullable=False)
    options = Column(JSON, nullable=True)  # list of option labels, choice types only
    required = Column(Boolean, default=False, nullable=False)
    order = Column(Integer, nullable=False)  # Display order, not unique

    # Relationships
    survey = relationship("Survey", back_populates="questions")
    answers = relationship("Answer", back_populates="question")

    def __repr__(self):
        return f"<Question(id={self.id}, type={self.type}, title={self.title[:30]})>"
