"""End-to-end tests for a reader's bookmarks, ratings and progress."""

from uuid import uuid4

from fastapi.testclient import TestClient

from tests.factories import sign_up


class TestBookmarks:
    """End-to-end tests for bookmarks."""

    def test_bookmark_lifecycle(self, client, published_chapter):
        # Arrange
        comic, chapter = published_chapter
        sign_up(client, "reader@example.com")

        # Act
        added = client.post(
            "/bookmarks", json={"comic_id": comic["comic_id"], "status": "Plan to Read"}
        )
        duplicate = client.post("/bookmarks", json={"comic_id": comic["comic_id"]})
        status = client.get(f"/bookmarks/{comic['comic_id']}")
        updated = client.patch(
            f"/bookmarks/{comic['comic_id']}",
            json={"status": "Reading", "last_read_chapter_id": chapter["chapter_id"]},
        )
        listed = client.get("/bookmarks")
        removed = client.delete(f"/bookmarks/{comic['comic_id']}")

        # Assert
        assert added.status_code == 201
        assert added.json()["status"] == "Plan to Read"
        assert duplicate.status_code == 409
        assert status.json() == {
            "comic_id": comic["comic_id"],
            "is_bookmarked": True,
            "status": "Plan to Read",
        }
        assert updated.json()["last_read_chapter_id"] == chapter["chapter_id"]
        assert listed.json()["total"] == 1
        assert listed.json()["bookmarks"][0]["comic_title"] == "Night Shift"
        assert removed.status_code == 204
        assert client.get(f"/bookmarks/{comic['comic_id']}").json()["is_bookmarked"] is False

    def test_filter_by_status(self, client, published_chapter):
        comic, _ = published_chapter
        sign_up(client, "reader@example.com")
        client.post("/bookmarks", json={"comic_id": comic["comic_id"], "status": "Dropped"})

        reading = client.get("/bookmarks", params={"status": "Reading"})
        dropped = client.get("/bookmarks", params={"status": "Dropped"})

        assert reading.json()["total"] == 0
        assert dropped.json()["total"] == 1

    def test_bookmarks_are_private(self, client, app, published_chapter):
        comic, _ = published_chapter
        sign_up(client, "reader@example.com")
        client.post("/bookmarks", json={"comic_id": comic["comic_id"]})
        other = TestClient(app)
        sign_up(other, "other@example.com")

        assert other.get("/bookmarks").json()["total"] == 0

    def test_requires_auth(self, client):
        assert client.get("/bookmarks").status_code == 401

    def test_bookmark_unknown_comic(self, client):
        sign_up(client, "reader@example.com")

        response = client.post("/bookmarks", json={"comic_id": str(uuid4())})

        assert response.status_code == 404


class TestRatings:
    """End-to-end tests for ratings."""

    def test_rate_and_rerate(self, client, app, published_chapter):
        # Arrange
        comic, _ = published_chapter
        sign_up(client, "alice@example.com")
        bob = TestClient(app)
        sign_up(bob, "bob@example.com")

        # Act
        client.put(f"/ratings/{comic['comic_id']}", json={"rating": 2})
        bob.put(f"/ratings/{comic['comic_id']}", json={"rating": 5})
        rerated = client.put(
            f"/ratings/{comic['comic_id']}", json={"rating": 4, "review": "Better later"}
        )
        mine = client.get(f"/ratings/{comic['comic_id']}")

        # Assert
        assert rerated.status_code == 200
        assert rerated.json()["average_rating"] == 4.5
        assert rerated.json()["total_ratings"] == 2
        assert mine.json()["user_rating"] == 4
        assert mine.json()["user_review"] == "Better later"
        assert client.get(f"/comics/{comic['slug']}").json()["user_rating"] == 4

    def test_anonymous_sees_stats_only(self, client, app, published_chapter):
        comic, _ = published_chapter
        rater = TestClient(app)
        sign_up(rater, "rater@example.com")
        rater.put(f"/ratings/{comic['comic_id']}", json={"rating": 3})

        response = client.get(f"/ratings/{comic['comic_id']}")

        assert response.status_code == 200
        assert response.json()["average_rating"] == 3.0
        assert response.json()["user_rating"] is None

    def test_out_of_range_rejected(self, client, published_chapter):
        comic, _ = published_chapter
        sign_up(client, "reader@example.com")

        response = client.put(f"/ratings/{comic['comic_id']}", json={"rating": 0})

        assert response.status_code == 422

    def test_delete_rating(self, client, published_chapter):
        comic, _ = published_chapter
        sign_up(client, "reader@example.com")
        client.put(f"/ratings/{comic['comic_id']}", json={"rating": 3})

        first = client.delete(f"/ratings/{comic['comic_id']}")
        second = client.delete(f"/ratings/{comic['comic_id']}")

        assert first.status_code == 204
        assert second.status_code == 404
        assert client.get(f"/ratings/{comic['comic_id']}").json()["total_ratings"] == 0


class TestProgress:
    """End-to-end tests for reading progress."""

    def test_save_and_continue_reading(self, client, published_chapter):
        # Arrange
        comic, chapter = published_chapter
        sign_up(client, "reader@example.com")

        # Act
        saved = client.put(
            f"/progress/{comic['comic_id']}",
            json={
                "chapter_id": chapter["chapter_id"],
                "page_number": 4,
                "scroll_position": 50,
                "progress_percent": 25,
            },
        )
        single = client.get(f"/progress/{comic['comic_id']}")
        listing = client.get("/progress")

        # Assert
        assert saved.status_code == 200
        assert saved.json()["page_number"] == 4
        assert saved.json()["completed_at"] is None
        assert single.json()["progress_percent"] == 25
        items = listing.json()["items"]
        assert [item["comic_slug"] for item in items] == ["night-shift"]

    def test_finishing_marks_completed(self, client, published_chapter):
        comic, chapter = published_chapter
        sign_up(client, "reader@example.com")

        response = client.put(
            f"/progress/{comic['comic_id']}",
            json={"chapter_id": chapter["chapter_id"], "progress_percent": 100},
        )

        assert response.json()["completed_at"] is not None

    def test_chapter_of_other_comic_rejected(self, client, admin_client, published_chapter):
        _, chapter = published_chapter
        other = admin_client.post("/admin/comics", json={"title": "Day Off"}).json()
        sign_up(client, "reader@example.com")

        response = client.put(
            f"/progress/{other['comic_id']}", json={"chapter_id": chapter["chapter_id"]}
        )

        assert response.status_code == 400

    def test_missing_progress_and_delete(self, client, published_chapter):
        comic, chapter = published_chapter
        sign_up(client, "reader@example.com")

        missing = client.get(f"/progress/{comic['comic_id']}")
        client.put(f"/progress/{comic['comic_id']}", json={"chapter_id": chapter["chapter_id"]})
        deleted = client.delete(f"/progress/{comic['comic_id']}")
        deleted_again = client.delete(f"/progress/{comic['comic_id']}")

        assert missing.status_code == 404
        assert deleted.status_code == 204
        assert deleted_again.status_code == 404
