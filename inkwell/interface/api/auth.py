"""Auth cookie helpers shared by the routes."""

from fastapi import HTTPException, Response, status

from inkwell.config import Settings
from inkwell.domain.service import JWTService

AUTH_COOKIE = "auth_token"


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """User ID from the auth cookie.

    Raises:
        HTTPException: 401 if the cookie is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Set the HTTP-only auth cookie.

    Production serves the API and frontend from different subdomains, which
    needs samesite=none and a secure cookie. Development is same-origin.
    """
    is_production = settings.is_production
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        domain=settings.auth.cookie_domain if is_production else None,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_auth_cookie(response: Response, settings: Settings) -> None:
    # Same domain and path as when it was set
    response.delete_cookie(
        key=AUTH_COOKIE,
        domain=settings.auth.cookie_domain if settings.is_production else None,
        path="/",
    )
