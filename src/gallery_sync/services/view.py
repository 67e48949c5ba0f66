"""Pure projection of the photo collection into the displayed view."""

from collections.abc import Sequence

from gallery_sync.domain.categories import ALL_CATEGORIES
from gallery_sync.domain.photos import Photo
from gallery_sync.domain.view import SortKey, ViewStatus


def project(
    photos: Sequence[Photo],
    search_term: str,
    category: str,
    sort_key: SortKey | str,
) -> list[Photo]:
    """Return the filtered and sorted photos to display.

    The input sequence is never modified. Sorting is stable, so photos that
    compare equal keep their incoming order.
    """
    term = search_term.lower()
    visible = [
        photo
        for photo in photos
        if _matches_search(photo, term) and _matches_category(photo, category)
    ]
    key = SortKey(sort_key)
    if key is SortKey.OLDEST:
        return sorted(visible, key=lambda photo: photo.created_at)
    if key is SortKey.LIKES:
        return sorted(visible, key=lambda photo: photo.likes_count or 0, reverse=True)
    return sorted(visible, key=lambda photo: photo.created_at, reverse=True)


def view_status(total: int, visible: int, loading: bool = False) -> ViewStatus:
    """Classify what the gallery should present for the current view."""
    if loading:
        return ViewStatus.LOADING
    if total == 0:
        return ViewStatus.EMPTY
    if visible == 0:
        return ViewStatus.NO_RESULTS
    return ViewStatus.READY


def _matches_search(photo: Photo, term: str) -> bool:
    if term in photo.name.lower():
        return True
    if photo.description and term in photo.description.lower():
        return True
    return bool(photo.tags) and any(term in tag.lower() for tag in photo.tags)


def _matches_category(photo: Photo, category: str) -> bool:
    return category == ALL_CATEGORIES or photo.category == category
