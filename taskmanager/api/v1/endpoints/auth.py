"""Auth API: register and login, both returning a bearer token.

Uses only injected dependencies; the service normalizes email, hashes the
password and issues the token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from taskmanager.api.v1.dependencies import get_auth_service, get_auth_service_for_write
from taskmanager.application.services.auth_service import AuthService
from taskmanager.core.limiter import limit_auth
from taskmanager.schemas.auth import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
@limit_auth
async def register(
    request: Request,
    body: RegisterRequest,
    auth_svc: Annotated[AuthService, Depends(get_auth_service_for_write)],
):
    """Register a new user (public endpoint). 409 if the email is already registered."""
    result = await auth_svc.register(
        email=body.email,
        password=body.password,
        first_name=body.first_name,
        last_name=body.last_name,
    )
    return AuthResponse(token=result.token, email=result.email, user_id=result.user_id)


@router.post("/login", response_model=AuthResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    auth_svc: Annotated[AuthService, Depends(get_auth_service)],
):
    """Authenticate with email and password; return a bearer token.

    Unknown email and wrong password both answer 401 with the same message.
    """
    result = await auth_svc.login(email=body.email, password=body.password)
    return AuthResponse(token=result.token, email=result.email, user_id=result.user_id)
