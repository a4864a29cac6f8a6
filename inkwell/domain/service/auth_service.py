"""Authentication domain service.

Accounts sign in with email and password. Passwords are stored as werkzeug
hashes; a successful sign-in is turned into a JWT cookie by the caller.
"""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from inkwell.config import AuthSettings
from inkwell.domain.error import (
    AlreadyExistsError,
    AuthenticationError,
    IncorrectPasswordError,
    NotFoundError,
)
from inkwell.domain.model import User
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import Email, UserId, UserRole
from inkwell.util.password import hash_password, verify_password

from .base import Service


class AuthService(Service):
    """Domain service for account registration and credential checks."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (password policy)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self,
        email: Email,
        password: str,
        name: str | None = None,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create a new account.

        Args:
            email: Normalized email
            password: Plain-text password
            name: Optional display name
            role: Account role

        Returns:
            Created user

        Raises:
            ValueError: If the password is too short
            AlreadyExistsError: If the email is already registered
        """
        with logfire.span("auth_service.register", role=role.value):
            self._check_password_policy(password)

            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.warn("Sign-up with registered email")
                raise AlreadyExistsError("User", email.root)

            user = User(
                id=UserId(uuid4()),
                email=email,
                name=name,
                password_hash=hash_password(password),
                role=role,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race with a concurrent sign-up
                logfire.warn("Duplicate email on insert")
                raise AlreadyExistsError("User", email.root)

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check credentials.

        Args:
            email: Normalized email
            password: Plain-text password

        Returns:
            The matching user

        Raises:
            AuthenticationError: If no account matches the credentials
        """
        with logfire.span("auth_service.authenticate"):
            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(user.password_hash, password):
                logfire.warn("Sign-in failed")
                raise AuthenticationError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def change_password(
        self, user_id: UserId, current_password: str, new_password: str
    ) -> User:
        """Replace a user's password after checking the current one.

        Raises:
            NotFoundError: If user not found
            IncorrectPasswordError: If the current password doesn't match
            ValueError: If the new password is too short
        """
        with logfire.span("auth_service.change_password", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise NotFoundError("User", str(user_id))

            if not verify_password(user.password_hash, current_password):
                logfire.warn("Password change with wrong current password")
                raise IncorrectPasswordError()

            self._check_password_policy(new_password)

            updated = user.model_copy(
                update={
                    "password_hash": hash_password(new_password),
                    "updated_at": utcnow(),
                }
            )
            saved = await self.user_repository.save(updated)
            logfire.info("Password changed", user_id=str(user_id))
            return saved

    def _check_password_policy(self, password: str) -> None:
        if len(password) < self.auth_settings.password_min_length:
            raise ValueError(
                "Password must be at least "
                f"{self.auth_settings.password_min_length} characters"
            )
