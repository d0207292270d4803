"""Authentication router."""
from fastapi import APIRouter, Request

from traininghub.core.limiter import limiter, login_rate_limit
from traininghub.services.auth_service import AuthService
from traininghub.services.user_service import UserService
from traininghub.schemas.user import LoginResponse, UserLogin, UserRegister, UserResponse
from traininghub.api.dependencies import AnyUser, AppSettings, DbSession

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
@limiter.limit(login_rate_limit)
def login(
    request: Request,
    body: UserLogin,
    db: DbSession,
    settings: AppSettings,
):
    """
    Login with email and password.

    Returns a bearer token with the user's profile.
    """
    auth_service = AuthService(db, settings)
    return auth_service.login(body.email, body.password)


@router.post("/register", response_model=LoginResponse, status_code=201)
def register(
    body: UserRegister,
    db: DbSession,
    settings: AppSettings,
):
    """
    Create an employee account and return a bearer token for it.
    """
    auth_service = AuthService(db, settings)
    return auth_service.register(body)


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    db: DbSession,
    principal: AnyUser,
):
    """
    Get the authenticated user's profile.
    """
    service = UserService(db)
    return service.get_user(principal.user_id)
