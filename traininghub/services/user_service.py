"""User service."""
from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from traininghub.repositories.user_repository import UserRepository
from traininghub.models.user import User, UserRole
from traininghub.schemas.user import ProfileUpdate


class UserService:
    """User business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def get_user(self, user_id: int) -> User:
        """
        Get user by ID.

        Raises:
            HTTPException: If user not found
        """
        user = self.user_repo.get_by_id(user_id)

        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )

        return user

    def get_users(self, skip: int = 0, limit: int = 100,
                  role: Optional[UserRole] = None,
                  department: Optional[str] = None) -> List[User]:
        """Get list of users with optional filters."""
        return self.user_repo.get_all(skip=skip, limit=limit, role=role, department=department)

    def update_profile(self, user_id: int, profile: ProfileUpdate) -> User:
        """
        Update the caller's own profile attributes.

        Raises:
            HTTPException: If user not found
        """
        user = self.user_repo.update(user_id, **profile.model_dump(exclude_unset=True))

        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )

        return user
