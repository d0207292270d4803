"""User schemas."""
from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from traininghub.models.user import UserRole


# Authentication schemas
class UserLogin(BaseModel):
    """Login request."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserRegister(BaseModel):
    """Self-service signup. Accounts are always created as EMPLOYEE."""
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    department: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=100)


class TokenData(BaseModel):
    """Decoded bearer token principal."""
    user_id: int
    role: UserRole


# User schemas
class UserResponse(BaseModel):
    """User profile (never includes the password hash)."""
    id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole
    department: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Token plus the authenticated user's profile."""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class ProfileUpdate(BaseModel):
    """
    Self-service profile update. Only provided fields are written; null
    clears department, position or location.
    """
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    department: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=100)

    model_config = ConfigDict(extra="forbid")

    @field_validator("first_name", "last_name")
    @classmethod
    def name_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("cannot be null")
        return value


class UserMini(BaseModel):
    """Minimal user info embedded in other resources."""
    first_name: str
    last_name: str

    model_config = ConfigDict(from_attributes=True)


class UserSummary(UserMini):
    """User display fields embedded in training applications."""
    email: str
    department: Optional[str] = None
    position: Optional[str] = None


class RespondentSummary(UserMini):
    """User display fields embedded in survey responses."""
    department: Optional[str] = None
    position: Optional[str] = None
