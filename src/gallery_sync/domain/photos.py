"""Domain models for photos, likes and comments."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Photo:
    """Represents a photo metadata record."""

    id: str
    name: str
    description: str | None
    image_url: str
    created_at: datetime
    likes_count: int | None = None
    category: str | None = None
    tags: tuple[str, ...] | None = None


@dataclass(frozen=True)
class PhotoDraft:
    """Metadata for a photo that has not been persisted yet."""

    name: str
    description: str
    image_url: str
    category: str
    tags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Comment:
    """Represents an append-only comment on a photo."""

    id: str
    photo_id: str
    user_name: str
    comment: str
    created_at: datetime


@dataclass(frozen=True)
class LikeSnapshot:
    """Photo ids liked by a session."""

    photo_ids: frozenset[str]
    degraded: bool = False


@dataclass(frozen=True)
class CommentSnapshot:
    """Comments for a photo, oldest first."""

    photo_id: str
    comments: tuple[Comment, ...]
    degraded: bool = False
    failed: bool = False
