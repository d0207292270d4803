"""Authentication service."""
import logging
from typing import Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from traininghub.core.config import Settings
from traininghub.core.security import verify_password, get_password_hash, create_access_token
from traininghub.repositories.user_repository import UserRepository
from traininghub.models.user import User, UserRole
from traininghub.schemas.user import LoginResponse, UserRegister, UserResponse

logger = logging.getLogger(__name__)


class AuthService:
    """Authentication business logic."""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings
        self.user_repo = UserRepository(db)

    def authenticate_user(self, email: str, password: str) -> Optional[User]:
        """
        Authenticate user by email and password.

        Returns:
            User if authentication successful, None otherwise
        """
        user = self.user_repo.get_by_email(email)

        if not user:
            return None

        if not verify_password(password, user.hashed_password):
            return None

        return user

    def issue_token(self, user: User) -> LoginResponse:
        """Build the login payload for an authenticated user."""
        access_token = create_access_token(
            data={"sub": str(user.id), "role": user.role.value},
            settings=self.settings,
        )
        return LoginResponse(
            access_token=access_token,
            token_type="bearer",
            user=UserResponse.model_validate(user),
        )

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Login user and return JWT token with user data.

        Raises:
            HTTPException: If authentication fails
        """
        user = self.authenticate_user(email, password)

        if not user:
            logger.warning("Failed login for %s", email)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"code": "authentication_failed", "message": "Incorrect email or password"},
                headers={"WWW-Authenticate": "Bearer"},
            )

        return self.issue_token(user)

    def register(self, data: UserRegister) -> LoginResponse:
        """
        Create an EMPLOYEE account and log it in.

        Raises:
            HTTPException: If email already exists
        """
        if self.user_repo.exists_by_email(data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered"
            )

        user = self.user_repo.create(
            email=data.email,
            hashed_password=get_password_hash(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            role=UserRole.EMPLOYEE,
            department=data.department,
            position=data.position,
            location=data.location,
        )
        logger.info("Registered user %s (id=%s)", user.email, user.id)

        return self.issue_token(user)
