"""Auth API schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator

EMAIL_MAX_LENGTH = 255


class RegisterRequest(BaseModel):
    """Request body for public registration."""

    email: EmailStr = Field(...)
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)

    @field_validator("email")
    @classmethod
    def _email_fits_column(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
        return v

    @field_validator("first_name", "last_name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class LoginRequest(BaseModel):
    """Request body for login."""

    email: EmailStr = Field(...)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Bearer token plus the identity it was issued for."""

    token: str
    email: str
    user_id: str
