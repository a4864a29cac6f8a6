"""User entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import Email, UserId, UserRole


class User(DomainModel):
    """A reader account.

    The password hash never leaves the domain/persistence layers; API
    responses are built from explicit fields.
    """

    id: UserId
    email: Email
    name: Optional[str] = Field(default=None, max_length=100)
    image: Optional[str] = None
    password_hash: str
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def display_name(self) -> str:
        """Name shown next to the user's content."""
        return self.name or self.email.root.split("@")[0]
