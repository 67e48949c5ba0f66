"""Domain models for the derived gallery view."""

from dataclasses import dataclass
from enum import Enum

from gallery_sync.domain.categories import ALL_CATEGORIES


class SortKey(str, Enum):
    """Supported orderings of the gallery view."""

    NEWEST = "newest"
    OLDEST = "oldest"
    LIKES = "likes"


class ViewStatus(str, Enum):
    """What the gallery view should present."""

    LOADING = "loading"
    EMPTY = "empty"
    NO_RESULTS = "no_results"
    READY = "ready"


@dataclass(frozen=True)
class ViewState:
    """Ephemeral filter and sort selection; never persisted."""

    search_term: str = ""
    category: str = ALL_CATEGORIES
    sort_key: SortKey = SortKey.NEWEST
