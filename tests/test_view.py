"""Tests for the view projector."""

from gallery_sync.domain.view import SortKey, ViewStatus
from gallery_sync.services.view import project, view_status
from tests.fakes import make_photo


def _collection():
    return [
        make_photo("Crypt", minutes=5, likes_count=3, category="haunted"),
        make_photo(
            "Whispers",
            minutes=30,
            description="Voices in the dark",
            category="supernatural",
            tags=("night", "Fog"),
        ),
        make_photo("Ritual", minutes=10, likes_count=None, category="occult"),
        make_photo("Bones", minutes=20, likes_count=7, category="gore"),
    ]


def test_default_projection_sorts_newest_first_without_dropping() -> None:
    photos = _collection()

    result = project(photos, "", "all", "newest")

    assert [p.name for p in result] == ["Whispers", "Bones", "Ritual", "Crypt"]
    assert len(result) == len(photos)


def test_projection_does_not_mutate_input() -> None:
    photos = _collection()
    snapshot = list(photos)

    project(photos, "r", "all", SortKey.OLDEST)

    assert photos == snapshot


def test_search_matches_name_description_and_tags_case_insensitively() -> None:
    photos = _collection()

    assert [p.name for p in project(photos, "CRYPT", "all", "newest")] == ["Crypt"]
    assert [p.name for p in project(photos, "voices", "all", "newest")] == [
        "Whispers"
    ]
    assert [p.name for p in project(photos, "fog", "all", "newest")] == ["Whispers"]
    assert project(photos, "zombie", "all", "newest") == []


def test_search_skips_missing_description_and_tags() -> None:
    photo = make_photo("Shade", description=None, tags=None)

    assert project([photo], "none", "all", "newest") == []
    assert project([photo], "sha", "all", "newest") == [photo]


def test_category_filter_combines_with_search() -> None:
    photos = _collection()

    assert [p.name for p in project(photos, "", "gore", "newest")] == ["Bones"]
    assert project(photos, "crypt", "gore", "newest") == []


def test_sort_oldest_and_likes() -> None:
    photos = _collection()

    oldest = project(photos, "", "all", "oldest")
    by_likes = project(photos, "", "all", "likes")

    assert [p.name for p in oldest] == ["Crypt", "Ritual", "Bones", "Whispers"]
    assert [p.name for p in by_likes][:2] == ["Bones", "Crypt"]
    assert {p.name for p in by_likes[2:]} == {"Whispers", "Ritual"}


def test_likes_sort_keeps_original_order_for_ties() -> None:
    first = make_photo("First", minutes=1)
    second = make_photo("Second", minutes=2, likes_count=0)

    assert project([first, second], "", "all", "likes") == [first, second]
    assert project([second, first], "", "all", "likes") == [second, first]


def test_newest_sort_is_stable_for_equal_timestamps() -> None:
    first = make_photo("First", minutes=3)
    second = make_photo("Second", minutes=3)

    assert project([first, second], "", "all", "newest") == [first, second]


def test_projection_is_idempotent() -> None:
    photos = _collection()

    once = project(photos, "i", "all", "likes")
    twice = project(list(reversed(once)), "i", "all", "likes")

    assert project(once, "i", "all", "likes") == once
    assert [p.likes_count or 0 for p in twice] == [p.likes_count or 0 for p in once]


def test_view_status_distinguishes_empty_from_no_results() -> None:
    assert view_status(total=0, visible=0) is ViewStatus.EMPTY
    assert view_status(total=3, visible=0) is ViewStatus.NO_RESULTS
    assert view_status(total=3, visible=2) is ViewStatus.READY
    assert view_status(total=0, visible=0, loading=True) is ViewStatus.LOADING
