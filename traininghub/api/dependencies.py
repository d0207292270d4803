"""API dependencies for authentication and authorization."""
from typing import Annotated, Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError
from sqlalchemy.orm import Session

from traininghub.core.config import Settings
from traininghub.core.database import get_db
from traininghub.core.security import decode_access_token
from traininghub.models.user import UserRole, has_at_least
from traininghub.schemas.user import TokenData

# Security scheme; missing headers are reported by get_current_principal as 401
security = HTTPBearer(auto_error=False)


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"code": "authentication_failed", "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_current_principal(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenData:
    """
    Dependency to get the authenticated principal.

    Verifies the bearer token's signature and expiry and decodes the
    ``sub``/``role`` claims. The database is not consulted.

    Raises:
        HTTPException: 401 if the token is absent, malformed, expired,
            badly signed or lacks the expected claims
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("No token provided")

    payload = decode_access_token(credentials.credentials, settings=settings)

    try:
        return TokenData(user_id=payload.get("sub"), role=payload.get("role"))
    except ValidationError:
        raise _unauthorized("Invalid token")


def require_role(minimum: UserRole):
    """
    Dependency factory for role-based access control.

    Roles are ordered EMPLOYEE < MANAGER < ADMIN; a principal passes when its
    role is at least ``minimum``.

    Usage:
        @router.get("/admin-only")
        def admin_endpoint(principal: AdminUser):
            ...
    """
    def role_checker(principal: Annotated[TokenData, Depends(get_current_principal)]) -> TokenData:
        if not has_at_least(principal.role, minimum):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail={
                    "code": "permission_denied",
                    "message": f"{minimum.value.capitalize()} access required",
                },
            )
        return principal

    return role_checker


# Common dependencies
DbSession = Annotated[Session, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]
AnyUser = Annotated[TokenData, Depends(get_current_principal)]
ManagerUser = Annotated[TokenData, Depends(require_role(UserRole.MANAGER))]
AdminUser = Annotated[TokenData, Depends(require_role(UserRole.ADMIN))]
