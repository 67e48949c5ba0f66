"""Pydantic models for gallery API payloads."""

from datetime import datetime

from pydantic import BaseModel, Field

from gallery_sync.domain.photos import Comment, Photo


class CategoryOut(BaseModel):
    """Category option."""

    value: str
    label: str
    icon: str


class PhotoOut(BaseModel):
    """Photo as presented to the browser."""

    id: str
    name: str
    description: str | None = None
    image_url: str
    created_at: datetime
    likes_count: int = 0
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    liked: bool = False

    @classmethod
    def from_photo(cls, photo: Photo, liked: bool) -> "PhotoOut":
        return cls(
            id=photo.id,
            name=photo.name,
            description=photo.description,
            image_url=photo.image_url,
            created_at=photo.created_at,
            likes_count=photo.likes_count or 0,
            category=photo.category,
            tags=list(photo.tags or ()),
            liked=liked,
        )


class GalleryPage(BaseModel):
    """Projected gallery view."""

    status: str
    total: int
    photos: list[PhotoOut]
    likes_available: bool


class CommentIn(BaseModel):
    """Comment submission payload."""

    author: str
    body: str


class CommentOut(BaseModel):
    """Comment as presented to the browser."""

    id: str
    user_name: str
    comment: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentOut":
        return cls(
            id=comment.id,
            user_name=comment.user_name,
            comment=comment.comment,
            created_at=comment.created_at,
        )


class CommentThread(BaseModel):
    """Comments for the inspected photo."""

    photo_id: str
    phase: str
    comments_available: bool
    comments: list[CommentOut]


class LikeState(BaseModel):
    """Like membership after a toggle."""

    photo_id: str
    liked: bool


class ActionResult(BaseModel):
    """Outcome of an action that may carry a warning."""

    status: str = "ok"
    warning: str | None = None
