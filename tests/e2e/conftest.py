"""Fixtures for end-to-end tests.

Each test gets an app wired to its own in-memory container, so rows created
through one request are visible to the next and nothing leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from inkwell.interface.api.app import create_app
from tests.di import build_test_container
from tests.factories import promote_to_admin, sign_up


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def app(container):
    return create_app(container=container)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def admin_client(app, container):
    """Separate client signed in as an admin."""
    admin = TestClient(app)
    session = sign_up(admin, "admin@example.com", name="Admin")
    promote_to_admin(container, session["user_id"])
    return admin


@pytest.fixture
def published_chapter(admin_client):
    """A comic with one chapter, created through the admin API.

    Returns:
        Tuple of (comic JSON, chapter JSON)
    """
    comic = admin_client.post(
        "/admin/comics", json={"title": "Night Shift", "description": "Ghosts at work"}
    )
    assert comic.status_code == 201, comic.text
    comic = comic.json()
    chapter = admin_client.post(
        f"/admin/comics/{comic['comic_id']}/chapters",
        json={
            "chapter_number": 1,
            "title": "Clocking In",
            "image_urls": ["https://cdn.example.com/night-shift/1/1.jpg"],
        },
    )
    assert chapter.status_code == 201, chapter.text
    return comic, chapter.json()
