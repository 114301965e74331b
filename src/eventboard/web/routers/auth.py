from fastapi import APIRouter
from pydantic import BaseModel, Field

from eventboard.web.deps import AppDep, BearerTokenDep
from eventboard.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Authentication request."""

    password: str = Field(..., description="Shared admin password")


class LoginResponse(BaseModel):
    """Authentication response."""

    token: str = Field(..., description="Authentication token for subsequent requests")


class AuthStatusResponse(BaseModel):
    authenticated: bool = Field(..., description="Whether the presented token belongs to a live session")


class LogoutResponse(BaseModel):
    ok: bool = Field(True, description="Always true")


@router.post(
    "/auth/login",
    summary="Authenticate admin",
    description="Exchange the shared admin password for a session token valid for 24 hours.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        401: {"model": ErrorResponse, "description": "Invalid password"},
    },
)
async def login(login_data: LoginRequest, app: AppDep) -> LoginResponse:
    token = app.login(login_data.password)
    return LoginResponse(token=token)


@router.get(
    "/auth/me",
    summary="Report authentication status",
    description="Reports whether the bearer token, if any, is valid. Never fails with 401.",
    operation_id="getAuthStatus",
    responses={200: {"description": "Authentication status"}},
)
async def me(app: AppDep, auth_token: BearerTokenDep) -> AuthStatusResponse:
    return AuthStatusResponse(authenticated=app.is_auth_token_valid(auth_token))


@router.post(
    "/auth/logout",
    summary="End session",
    description="Invalidate the presented session token. Succeeds even without a token or with an expired one.",
    operation_id="logout",
    responses={200: {"description": "Session ended"}},
)
async def logout(app: AppDep, auth_token: BearerTokenDep) -> LogoutResponse:
    app.logout(auth_token)
    return LogoutResponse(ok=True)
