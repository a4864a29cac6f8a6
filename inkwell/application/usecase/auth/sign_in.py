"""Sign-in use case."""

import logfire
from pydantic import BaseModel, ValidationError

from inkwell.domain.error import AuthenticationError
from inkwell.domain.service import AuthService, JWTService
from inkwell.domain.value import Email, UserRole


class SignInRequest(BaseModel):
    """Sign-in request."""

    email: str
    password: str


class SignInResponse(BaseModel):
    """Sign-in response."""

    token: str
    user_id: str
    email: str
    name: str | None
    role: UserRole


class SignInUseCase:
    """Use case for signing in with email and password."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize sign-in use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute sign-in flow.

        A malformed email is reported the same way as wrong credentials so
        the response doesn't reveal which part was wrong.

        Raises:
            AuthenticationError: If the credentials don't match an account
        """
        try:
            email = Email(request.email)
        except ValidationError:
            logfire.info("Sign-in with malformed email")
            raise AuthenticationError()

        user = await self.auth_service.authenticate(email, request.password)
        token = self.jwt_service.create_token_for_user(user)

        return SignInResponse(
            token=token,
            user_id=str(user.id),
            email=user.email.root,
            name=user.name,
            role=user.role,
        )
