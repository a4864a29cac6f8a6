"""Sign-up use case."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.service import AuthService, JWTService
from inkwell.domain.value import Email, UserRole


class SignUpRequest(BaseModel):
    """Sign-up request."""

    email: str
    password: str
    name: str | None = None


class SignUpResponse(BaseModel):
    """Sign-up response.

    The token is set as the auth cookie by the route and is not part of the
    JSON body.
    """

    token: str
    user_id: str
    email: str
    name: str | None
    role: UserRole
    created_at: datetime


class SignUpUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize sign-up use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignUpRequest) -> SignUpResponse:
        """Execute sign-up flow.

        Steps:
        1. Normalize the email (raises ValueError if malformed)
        2. Register the account (checks password policy and uniqueness)
        3. Issue a JWT for the new account

        Raises:
            ValueError: If the email or password is invalid
            AlreadyExistsError: If the email is already registered
        """
        email = Email(request.email)
        user = await self.auth_service.register(
            email=email, password=request.password, name=request.name
        )
        token = self.jwt_service.create_token_for_user(user)

        return SignUpResponse(
            token=token,
            user_id=str(user.id),
            email=user.email.root,
            name=user.name,
            role=user.role,
            created_at=user.created_at,
        )
