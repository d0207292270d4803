"""User repository."""
from typing import Optional, List
from sqlalchemy.orm import Session

from traininghub.models.user import User, UserRole


class UserRepository:
    """User data access layer."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, hashed_password: str, first_name: str, last_name: str,
               role: UserRole = UserRole.EMPLOYEE, department: Optional[str] = None,
               position: Optional[str] = None, location: Optional[str] = None) -> User:
        """Create a new user."""
        user = User(
            email=email,
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
            role=role,
            department=department,
            position=position,
            location=location,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def get_all(self, skip: int = 0, limit: int = 100,
                role: Optional[UserRole] = None,
                department: Optional[str] = None) -> List[User]:
        """Get users with optional filtering."""
        query = self.db.query(User)

        if role is not None:
            query = query.filter(User.role == role)

        if department:
            query = query.filter(User.department == department)

        return query.order_by(User.created_at.desc(), User.id.desc()).offset(skip).limit(limit).all()

    def update(self, user_id: int, **kwargs) -> Optional[User]:
        """Write every supplied field; None clears the column."""
        user = self.get_by_id(user_id)
        if not user:
            return None

        for key, value in kwargs.items():
            if hasattr(user, key):
                setattr(user, key, value)

        self.db.commit()
        self.db.refresh(user)
        return user

    def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with this email."""
        return self.db.query(User).filter(User.email == email).first() is not None
