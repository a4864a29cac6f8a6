"""Tests for AuthService, JWTService and UserService."""

import pytest

from inkwell.domain.error import (
    AlreadyExistsError,
    AuthenticationError,
    IncorrectPasswordError,
)
from inkwell.domain.service import AuthService, JWTService, UserService
from inkwell.domain.value import Email, UserRole
from inkwell.util.jwt import JWTError
from tests.factories import DEFAULT_PASSWORD, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAuthService:
    """Tests for registration and sign-in."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        user = await make_user(unit_env, email="  Reader@Example.COM ")

        assert user.email == Email("reader@example.com")
        assert user.password_hash != DEFAULT_PASSWORD
        assert user.role == UserRole.USER

    @pytest.mark.asyncio
    async def test_register_duplicate_email_rejected(self, unit_env):
        await make_user(unit_env, email="reader@example.com")

        with pytest.raises(AlreadyExistsError):
            await make_user(unit_env, email="READER@example.com")

    @pytest.mark.asyncio
    async def test_register_short_password_rejected(self, unit_env):
        service = await unit_env.get(AuthService)

        with pytest.raises(ValueError, match="at least"):
            await service.register(Email("reader@example.com"), "short")

    @pytest.mark.asyncio
    async def test_authenticate(self, unit_env):
        user = await make_user(unit_env)
        service = await unit_env.get(AuthService)

        found = await service.authenticate(Email("reader@example.com"), DEFAULT_PASSWORD)

        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_authenticate_wrong_password(self, unit_env):
        await make_user(unit_env)
        service = await unit_env.get(AuthService)

        with pytest.raises(AuthenticationError):
            await service.authenticate(Email("reader@example.com"), "not-the-password")

    @pytest.mark.asyncio
    async def test_authenticate_unknown_email(self, unit_env):
        service = await unit_env.get(AuthService)

        with pytest.raises(AuthenticationError):
            await service.authenticate(Email("nobody@example.com"), DEFAULT_PASSWORD)

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        user = await make_user(unit_env)
        service = await unit_env.get(AuthService)

        await service.change_password(user.id, DEFAULT_PASSWORD, "new-long-password")

        found = await service.authenticate(
            Email("reader@example.com"), "new-long-password"
        )
        assert found.id == user.id
        with pytest.raises(AuthenticationError):
            await service.authenticate(Email("reader@example.com"), DEFAULT_PASSWORD)

    @pytest.mark.asyncio
    async def test_change_password_wrong_current_password(self, unit_env):
        user = await make_user(unit_env)
        service = await unit_env.get(AuthService)

        with pytest.raises(IncorrectPasswordError):
            await service.change_password(
                user.id, "not-the-password", "new-long-password"
            )

    @pytest.mark.asyncio
    async def test_change_password_too_short(self, unit_env):
        user = await make_user(unit_env)
        service = await unit_env.get(AuthService)

        with pytest.raises(ValueError, match="at least"):
            await service.change_password(user.id, DEFAULT_PASSWORD, "short")


class TestJWTService:
    """Tests for auth tokens."""

    @pytest.mark.asyncio
    async def test_token_round_trip(self, unit_env):
        user = await make_user(unit_env, role=UserRole.ADMIN)
        service = await unit_env.get(JWTService)

        payload = service.verify_token(service.create_token_for_user(user))

        assert payload.user_id == str(user.id)
        assert payload.email == "reader@example.com"
        assert payload.role == "admin"

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        service = await unit_env.get(JWTService)

        with pytest.raises(JWTError):
            service.verify_token("not-a-token")
        assert service.get_payload_from_token("not-a-token") is None
        assert service.get_payload_from_token(None) is None


class TestUserService:
    """Tests for profile updates."""

    @pytest.mark.asyncio
    async def test_update_profile_keeps_unset_fields(self, unit_env):
        user = await make_user(unit_env, name="Reader")
        service = await unit_env.get(UserService)

        updated = await service.update_profile(
            user.id, image="https://cdn.example.com/a.png"
        )

        assert updated.name == "Reader"
        assert updated.image == "https://cdn.example.com/a.png"
        assert (await service.get_by_id(user.id)).image == updated.image
