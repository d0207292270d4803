"""User router."""
from typing import List, Optional
from fastapi import APIRouter, Query

from traininghub.services.user_service import UserService
from traininghub.schemas.user import ProfileUpdate, UserResponse
from traininghub.models.user import UserRole
from traininghub.api.dependencies import AdminUser, AnyUser, DbSession

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserResponse])
def list_users(
    db: DbSession,
    principal: AdminUser,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    role: Optional[UserRole] = None,
    department: Optional[str] = Query(None, max_length=100),
):
    """
    List users with optional filters (Admin only).
    """
    service = UserService(db)
    return service.get_users(skip=skip, limit=limit, role=role, department=department)


@router.get("/profile", response_model=UserResponse)
def get_profile(
    db: DbSession,
    principal: AnyUser,
):
    """
    Get current user profile.
    """
    service = UserService(db)
    return service.get_user(principal.user_id)


@router.put("/profile", response_model=UserResponse)
def update_profile(
    profile: ProfileUpdate,
    db: DbSession,
    principal: AnyUser,
):
    """
    Update own profile (any authenticated user).

    Email and role are not editable here.
    """
    service = UserService(db)
    return service.update_profile(principal.user_id, profile)
