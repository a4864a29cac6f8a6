"""Tests for RatingService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import NotFoundError
from inkwell.domain.service import ComicService, RatingService
from inkwell.domain.value import ComicId
from tests.factories import make_comic, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRatingService:
    """Tests for rating comics and the comic's average."""

    @pytest.mark.asyncio
    async def test_rating_updates_comic_average(self, unit_env):
        # Arrange
        alice = await make_user(unit_env, email="alice@example.com")
        bob = await make_user(unit_env, email="bob@example.com")
        comic = await make_comic(unit_env)
        service = await unit_env.get(RatingService)
        comic_service = await unit_env.get(ComicService)

        # Act
        await service.rate_comic(alice.id, comic.id, 5)
        await service.rate_comic(bob.id, comic.id, 4, review="Solid")

        # Assert
        stats = await service.get_rating_stats(comic.id)
        assert stats.total_ratings == 2
        assert stats.average_rating == 4.5
        refreshed = await comic_service.get_by_id(comic.id)
        assert refreshed.rating == 4.5

    @pytest.mark.asyncio
    async def test_rating_again_replaces_previous(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        service = await unit_env.get(RatingService)

        first = await service.rate_comic(user.id, comic.id, 2)
        second = await service.rate_comic(user.id, comic.id, 5, review="Grew on me")

        assert second.id == first.id
        stats = await service.get_rating_stats(comic.id)
        assert stats.total_ratings == 1
        assert stats.average_rating == 5.0
        stored = await service.get_user_rating(user.id, comic.id)
        assert stored.review == "Grew on me"

    @pytest.mark.asyncio
    async def test_out_of_range_rating_rejected(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        service = await unit_env.get(RatingService)

        with pytest.raises(ValueError):
            await service.rate_comic(user.id, comic.id, 6)

    @pytest.mark.asyncio
    async def test_rating_unknown_comic_raises_not_found(self, unit_env):
        user = await make_user(unit_env)
        service = await unit_env.get(RatingService)

        with pytest.raises(NotFoundError):
            await service.rate_comic(user.id, ComicId(uuid4()), 3)

    @pytest.mark.asyncio
    async def test_delete_rating_resets_average(self, unit_env):
        user = await make_user(unit_env)
        comic = await make_comic(unit_env)
        service = await unit_env.get(RatingService)
        comic_service = await unit_env.get(ComicService)
        await service.rate_comic(user.id, comic.id, 3)

        assert await service.delete_rating(user.id, comic.id) is True
        assert await service.delete_rating(user.id, comic.id) is False

        stats = await service.get_rating_stats(comic.id)
        assert stats.total_ratings == 0
        assert (await comic_service.get_by_id(comic.id)).rating == 0.0
