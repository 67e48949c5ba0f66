"""Remote gateway over the photo, like and comment tables and the blob store."""

import asyncio
import logging
import mimetypes
import time
from dataclasses import dataclass
from typing import Protocol

from gallery_sync.domain.errors import CapabilityUnavailable, RemoteError
from gallery_sync.domain.photos import (
    Comment,
    CommentSnapshot,
    LikeSnapshot,
    Photo,
    PhotoDraft,
)
from gallery_sync.services.identity import random_token

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photo metadata."""

    def list_photos(self) -> list[Photo]:
        """Return all photos, newest first."""

    def create_photo(self, draft: PhotoDraft) -> Photo:
        """Create a photo metadata record and return it."""

    def delete_photo(self, photo_id: str) -> None:
        """Delete a photo metadata record."""


class LikeRepository(Protocol):
    """Persistence interface for like relations."""

    def list_liked_photo_ids(self, session_id: str) -> set[str]:
        """Return ids of photos liked by a session."""

    def add_like(self, photo_id: str, session_id: str) -> None:
        """Insert a like relation."""

    def remove_like(self, photo_id: str, session_id: str) -> None:
        """Delete a like relation."""


class CommentRepository(Protocol):
    """Persistence interface for comments."""

    def list_comments(self, photo_id: str) -> list[Comment]:
        """Return comments for a photo, oldest first."""

    def create_comment(self, photo_id: str, user_name: str, comment: str) -> Comment:
        """Insert a comment and return it."""


class BlobStore(Protocol):
    """Object storage for image bytes."""

    def upload(self, name: str, content: bytes, content_type: str) -> str:
        """Store bytes under a name with a MIME type and return a public URL."""

    def remove(self, name: str) -> None:
        """Delete a stored object by name."""


@dataclass
class RemoteGateway:
    """Async operations against the remote store.

    Repository calls block, so each one runs in a worker thread and the
    caller's event loop stays responsive.
    """

    photo_repository: PhotoRepository
    like_repository: LikeRepository
    comment_repository: CommentRepository
    blob_store: BlobStore

    async def list_photos(self) -> list[Photo]:
        """Return photos newest first."""
        return await asyncio.to_thread(self.photo_repository.list_photos)

    async def list_likes(self, session_id: str) -> LikeSnapshot:
        """Return photo ids liked by a session, degrading when likes are absent."""
        try:
            photo_ids = await asyncio.to_thread(
                self.like_repository.list_liked_photo_ids, session_id
            )
        except CapabilityUnavailable:
            logger.info("Likes table not yet created - likes functionality disabled")
            return LikeSnapshot(photo_ids=frozenset(), degraded=True)
        return LikeSnapshot(photo_ids=frozenset(photo_ids))

    async def list_comments(self, photo_id: str) -> CommentSnapshot:
        """Return comments oldest first; failures yield an empty thread."""
        try:
            comments = await asyncio.to_thread(
                self.comment_repository.list_comments, photo_id
            )
        except CapabilityUnavailable:
            logger.info(
                "Comments table not yet created - comments functionality disabled"
            )
            return CommentSnapshot(photo_id=photo_id, comments=(), degraded=True)
        except RemoteError:
            logger.exception("Error loading comments for photo %s", photo_id)
            return CommentSnapshot(photo_id=photo_id, comments=(), failed=True)
        return CommentSnapshot(photo_id=photo_id, comments=tuple(comments))

    async def insert_photo(self, draft: PhotoDraft) -> Photo:
        """Persist photo metadata."""
        return await asyncio.to_thread(self.photo_repository.create_photo, draft)

    async def delete_photo(self, photo_id: str) -> None:
        """Delete photo metadata by id."""
        await asyncio.to_thread(self.photo_repository.delete_photo, photo_id)

    async def toggle_like(
        self, photo_id: str, session_id: str, currently_liked: bool
    ) -> None:
        """Remove the like when present, otherwise add it."""
        if currently_liked:
            await asyncio.to_thread(
                self.like_repository.remove_like, photo_id, session_id
            )
        else:
            await asyncio.to_thread(self.like_repository.add_like, photo_id, session_id)

    async def insert_comment(self, photo_id: str, author: str, body: str) -> Comment:
        """Append a comment to a photo."""
        return await asyncio.to_thread(
            self.comment_repository.create_comment, photo_id, author, body
        )

    async def upload_blob(
        self, content: bytes, extension: str, content_type: str | None = None
    ) -> str:
        """Store image bytes under a fresh name and return the public URL.

        Without an explicit `content_type` the type is guessed from the
        extension.
        """
        name = blob_name(extension)
        resolved_type = content_type or guess_content_type(extension)
        return await asyncio.to_thread(
            self.blob_store.upload, name, content, resolved_type
        )

    async def delete_blob(self, public_url: str) -> bool:
        """Remove the blob behind a public URL; failures are only logged."""
        name = public_url.rsplit("/", 1)[-1]
        if not name:
            return False
        try:
            await asyncio.to_thread(self.blob_store.remove, name)
        except RemoteError:
            logger.exception("Error deleting image %s from storage", name)
            return False
        return True


def blob_name(extension: str) -> str:
    """Return a collision-resistant object name keeping the original extension."""
    return f"{time.time_ns() // 1_000_000}-{random_token()}.{extension}"


def guess_content_type(extension: str) -> str:
    """Return the MIME type for a file extension, defaulting to raw bytes."""
    content_type, _ = mimetypes.guess_type(f"upload.{extension}")
    return content_type or "application/octet-stream"
