"""Gallery controller owning all client state."""

import asyncio
import logging
from collections.abc import Coroutine
from dataclasses import dataclass, field, replace

from gallery_sync.domain.categories import ALL_CATEGORIES, is_known_category
from gallery_sync.domain.errors import (
    CapabilityUnavailable,
    PartialFailure,
    RemoteError,
    ValidationError,
)
from gallery_sync.domain.gallery import (
    Advisory,
    AdvisoryKind,
    CommentDraft,
    CommentPhase,
    GalleryState,
    UploadForm,
)
from gallery_sync.domain.photos import Photo
from gallery_sync.domain.view import SortKey, ViewState, ViewStatus
from gallery_sync.services.gateway import RemoteGateway
from gallery_sync.services.identity import IdentityProvider
from gallery_sync.services.uploads import UploadOrchestrator
from gallery_sync.services.view import project, view_status

logger = logging.getLogger(__name__)

LIKES_UNAVAILABLE = "Likes are not enabled yet. Run the database setup script first."
COMMENTS_UNAVAILABLE = (
    "Comments are not enabled yet. Run the database setup script first."
)


@dataclass
class GalleryController:
    """Applies user actions and completed remote calls to `GalleryState`.

    Every mutation of `state` happens in one of the transition methods below,
    each of which appends its name to `state.transitions`. User actions
    return `None` on success or the advisory they surfaced.
    """

    gateway: RemoteGateway
    identity: IdentityProvider
    uploader: UploadOrchestrator
    state: GalleryState = field(default_factory=GalleryState)
    _tasks: set[asyncio.Task[object]] = field(
        default_factory=set, init=False, repr=False
    )

    async def start(self) -> None:
        """Load the photo list and this session's likes."""
        self._record("start")
        await self.refresh_photos()
        await self.load_likes()

    async def refresh_photos(self) -> bool:
        """Re-fetch all photos; on failure the previous list is kept."""
        self._record("refresh_photos")
        self.state.loading = True
        try:
            photos = await self.gateway.list_photos()
        except RemoteError:
            logger.exception("Error loading photos")
            return False
        finally:
            self.state.loading = False
        self.state.photos = photos
        inspected = self.state.inspected
        if inspected is not None:
            self.state.inspected = next(
                (photo for photo in photos if photo.id == inspected.id), inspected
            )
        return True

    async def load_likes(self) -> None:
        """Load the set of photos liked by this session."""
        self._record("load_likes")
        session_id = self.identity.get_or_create_session()
        try:
            snapshot = await self.gateway.list_likes(session_id)
        except RemoteError:
            logger.exception("Error loading likes")
            return
        self.state.likes_available = not snapshot.degraded
        self.state.liked_ids = set(snapshot.photo_ids)

    async def inspect(self, photo: Photo) -> None:
        """Open a photo and load its comment thread."""
        self._record("inspect")
        self.state.inspected = photo
        self.state.comments = []
        await self._load_comments(photo.id)

    def close_inspection(self) -> None:
        self._record("close_inspection")
        self.state.inspected = None
        self.state.comment_phase = CommentPhase.IDLE
        self.state.comments = []

    async def toggle_like(self, photo: Photo) -> Advisory | None:
        """Flip this session's like, then refresh counts in the background."""
        self._record("toggle_like")
        session_id = self.identity.get_or_create_session()
        liked = photo.id in self.state.liked_ids
        try:
            await self.gateway.toggle_like(photo.id, session_id, liked)
        except CapabilityUnavailable:
            logger.info("Like toggle rejected: likes table missing")
            return self._advise(AdvisoryKind.CAPABILITY_UNAVAILABLE, LIKES_UNAVAILABLE)
        except RemoteError:
            logger.exception("Error toggling like on photo %s", photo.id)
            return self._advise(AdvisoryKind.REMOTE_ERROR, "Could not update the like.")
        if liked:
            self.state.liked_ids = self.state.liked_ids - {photo.id}
        else:
            self.state.liked_ids = self.state.liked_ids | {photo.id}
        self._spawn(self.refresh_photos())
        return None

    async def submit_comment(
        self, photo: Photo, author: str, body: str
    ) -> Advisory | None:
        """Post a comment and reload the thread for that photo."""
        self._record("submit_comment")
        author, body = author.strip(), body.strip()
        if not author or not body:
            return self._advise(
                AdvisoryKind.VALIDATION, "A name and a comment are required."
            )
        try:
            await self.gateway.insert_comment(photo.id, author, body)
        except CapabilityUnavailable:
            logger.info("Comment rejected: comments table missing")
            return self._advise(
                AdvisoryKind.CAPABILITY_UNAVAILABLE, COMMENTS_UNAVAILABLE
            )
        except RemoteError:
            logger.exception("Error adding comment to photo %s", photo.id)
            return self._advise(AdvisoryKind.REMOTE_ERROR, "Could not add the comment.")
        self.state.comment_draft = CommentDraft(author=author, body="")
        await self._load_comments(photo.id)
        return None

    async def delete_photo(self, photo: Photo) -> Advisory | None:
        """Delete the metadata record, then make a best-effort blob removal."""
        self._record("delete_photo")
        try:
            await self.gateway.delete_photo(photo.id)
        except RemoteError:
            logger.exception("Error deleting photo %s from database", photo.id)
            return self._advise(
                AdvisoryKind.REMOTE_ERROR, "Could not delete the photo."
            )
        blob_removed = await self.gateway.delete_blob(photo.image_url)
        self.state.photos = [p for p in self.state.photos if p.id != photo.id]
        self.state.liked_ids = self.state.liked_ids - {photo.id}
        if self.state.inspected is not None and self.state.inspected.id == photo.id:
            self.close_inspection()
        if not blob_removed:
            logger.warning("Photo %s deleted but its image was not removed", photo.id)
            return self._advise(
                AdvisoryKind.PARTIAL_FAILURE,
                "The photo was deleted but its image could not be removed.",
            )
        return None

    async def upload(self, form: UploadForm | None = None) -> Advisory | None:
        """Submit the upload form, then refresh the list in the background."""
        self._record("upload")
        form = form or self.state.upload_form
        self.state.uploading = True
        try:
            await self.uploader.submit(form)
        except ValidationError as error:
            return self._advise(AdvisoryKind.VALIDATION, str(error))
        except PartialFailure:
            return self._advise(AdvisoryKind.REMOTE_ERROR, "Could not save the photo.")
        except RemoteError:
            logger.exception("Error uploading image")
            return self._advise(
                AdvisoryKind.REMOTE_ERROR, "Could not upload the image."
            )
        finally:
            self.state.uploading = False
        self.state.upload_form = UploadForm()
        self._spawn(self.refresh_photos())
        return None

    def set_search(self, search_term: str) -> None:
        self._record("set_search")
        self.state.view = replace(self.state.view, search_term=search_term)

    def set_category(self, category: str) -> Advisory | None:
        self._record("set_category")
        if category != ALL_CATEGORIES and not is_known_category(category):
            return self._advise(
                AdvisoryKind.VALIDATION, f"Unknown category: {category}"
            )
        self.state.view = replace(self.state.view, category=category)
        return None

    def set_sort(self, sort_key: str) -> Advisory | None:
        self._record("set_sort")
        try:
            key = SortKey(sort_key)
        except ValueError:
            return self._advise(AdvisoryKind.VALIDATION, f"Unknown sort: {sort_key}")
        self.state.view = replace(self.state.view, sort_key=key)
        return None

    def apply_view(
        self, search_term: str, category: str, sort_key: str
    ) -> Advisory | None:
        """Replace the whole view selection; invalid input leaves it unchanged."""
        self._record("apply_view")
        if category != ALL_CATEGORIES and not is_known_category(category):
            return self._advise(
                AdvisoryKind.VALIDATION, f"Unknown category: {category}"
            )
        try:
            key = SortKey(sort_key)
        except ValueError:
            return self._advise(AdvisoryKind.VALIDATION, f"Unknown sort: {sort_key}")
        self.state.view = ViewState(
            search_term=search_term, category=category, sort_key=key
        )
        return None

    def visible_photos(self) -> list[Photo]:
        """Return the photos selected by the current view state."""
        view = self.state.view
        return project(
            self.state.photos, view.search_term, view.category, view.sort_key
        )

    def view_status(self) -> ViewStatus:
        return view_status(
            total=len(self.state.photos),
            visible=len(self.visible_photos()),
            loading=self.state.loading,
        )

    def find_photo(self, photo_id: str) -> Photo | None:
        return next((p for p in self.state.photos if p.id == photo_id), None)

    async def wait_idle(self) -> None:
        """Wait for background refreshes started by earlier actions."""
        while self._tasks:
            await asyncio.gather(*self._tasks)

    async def _load_comments(self, photo_id: str) -> None:
        if self.state.inspected is not None and self.state.inspected.id == photo_id:
            self.state.comment_phase = CommentPhase.LOADING_COMMENTS
        snapshot = await self.gateway.list_comments(photo_id)
        inspected = self.state.inspected
        if inspected is None or inspected.id != snapshot.photo_id:
            logger.debug("Discarding stale comments for photo %s", snapshot.photo_id)
            return
        self._record("comments_loaded")
        self.state.comments = list(snapshot.comments)
        self.state.comment_phase = CommentPhase.READY
        self.state.comments_available = not snapshot.degraded
        if snapshot.failed:
            self._advise(AdvisoryKind.REMOTE_ERROR, "Could not load comments.")

    def _spawn(self, coroutine: Coroutine[object, object, object]) -> None:
        task = asyncio.create_task(coroutine)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _advise(self, kind: AdvisoryKind, message: str) -> Advisory:
        advisory = Advisory(kind=kind, message=message)
        self.state.advisories.append(advisory)
        return advisory

    def _record(self, name: str) -> None:
        self.state.transitions.append(name)
