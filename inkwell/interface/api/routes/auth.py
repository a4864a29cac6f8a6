"""Authentication routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    SignInRequest,
    SignInUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from inkwell.config import Settings
from inkwell.domain.error import NotFoundError
from inkwell.domain.value import UserRole
from inkwell.interface.api.auth import clear_auth_cookie, set_auth_cookie
from inkwell.interface.error import to_http_exception
from inkwell.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class SignUpAPIRequest(BaseModel):
    """API request for creating an account."""

    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1, max_length=200)
    name: str | None = Field(default=None, max_length=100)


class SignInAPIRequest(BaseModel):
    """API request for signing in."""

    email: str
    password: str


class SessionResponse(BaseModel):
    """Signed-in user. The token itself travels in the cookie only."""

    user_id: str
    email: str
    name: str | None
    role: UserRole
    created_at: datetime | None = None


class SignOutResponse(BaseModel):
    """Sign-out response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


@router.post(
    "/signup", response_model=SessionResponse, status_code=status.HTTP_201_CREATED
)
async def sign_up(
    request: SignUpAPIRequest,
    response: Response,
    sign_up_use_case: FromDishka[SignUpUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Create an account and sign it in.

    Returns:
        The new account; the auth cookie is set on the response

    Raises:
        HTTPException: 400 for an invalid email or weak password,
            409 if the email is already registered
    """
    try:
        result = await sign_up_use_case.execute(
            SignUpRequest(
                email=request.email, password=request.password, name=request.name
            )
        )
    except Exception as e:
        raise to_http_exception(e, "sign up")

    set_auth_cookie(response, result.token, settings)
    return SessionResponse(
        user_id=result.user_id,
        email=result.email,
        name=result.name,
        role=result.role,
        created_at=result.created_at,
    )


@router.post("/signin", response_model=SessionResponse)
async def sign_in(
    request: SignInAPIRequest,
    response: Response,
    sign_in_use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Sign in with email and password.

    Raises:
        HTTPException: 401 if the credentials are wrong
    """
    try:
        result = await sign_in_use_case.execute(
            SignInRequest(email=request.email, password=request.password)
        )
    except Exception as e:
        raise to_http_exception(e, "sign in")

    set_auth_cookie(response, result.token, settings)
    return SessionResponse(
        user_id=result.user_id,
        email=result.email,
        name=result.name,
        role=result.role,
    )


@router.post("/signout", response_model=SignOutResponse)
async def sign_out(
    response: Response,
    settings: FromDishka[Settings],
) -> SignOutResponse:
    """Sign out by clearing the auth cookie."""
    clear_auth_cookie(response, settings)
    return SignOutResponse(success=True, message="Successfully signed out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it will return
    authenticated=false instead of raising an error. This allows the frontend
    to check authentication state without generating errors in logs.
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except JWTError:
        # Invalid or expired token - this is expected behavior, not an error
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # JWT valid but user not found in database (orphaned token)
        return AuthStatusResponse(authenticated=False)
    except ValueError:
        # user_id claim is not a UUID
        return AuthStatusResponse(authenticated=False)
