"""Gallery API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile, status

from gallery_sync.api.models import (
    ActionResult,
    CategoryOut,
    CommentIn,
    CommentOut,
    CommentThread,
    GalleryPage,
    LikeState,
    PhotoOut,
)
from gallery_sync.domain.categories import ALL_CATEGORIES, CATEGORIES, DEFAULT_CATEGORY
from gallery_sync.domain.gallery import Advisory, AdvisoryKind, UploadForm
from gallery_sync.domain.gallery import UploadFile as FormFile

if TYPE_CHECKING:
    from gallery_sync.domain.photos import Photo
    from gallery_sync.services.gallery import GalleryController

router = APIRouter(tags=["gallery"])

_ADVISORY_STATUS = {
    AdvisoryKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    AdvisoryKind.CAPABILITY_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    AdvisoryKind.REMOTE_ERROR: status.HTTP_502_BAD_GATEWAY,
}


def _controller(request: Request) -> GalleryController:
    return request.app.state.container.controller


def _require_photo(controller: GalleryController, photo_id: str) -> Photo:
    photo = controller.find_photo(photo_id)
    if photo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return photo


def _raise_for(advisory: Advisory | None) -> ActionResult:
    """Turn an advisory into an HTTP error, or a result carrying a warning."""
    if advisory is None:
        return ActionResult()
    code = _ADVISORY_STATUS.get(advisory.kind)
    if code is None:
        return ActionResult(warning=advisory.message)
    raise HTTPException(status_code=code, detail=advisory.message)


@router.get("/categories")
async def list_categories() -> list[CategoryOut]:
    """Return the selectable categories."""
    return [
        CategoryOut(value=c.value, label=c.label, icon=c.icon) for c in CATEGORIES
    ]


@router.get("/photos")
async def list_photos(
    request: Request,
    search: str = "",
    category: str = ALL_CATEGORIES,
    sort: str = "newest",
) -> GalleryPage:
    """Return the filtered, sorted gallery view."""
    controller = _controller(request)
    _raise_for(controller.apply_view(search, category, sort))
    liked_ids = controller.state.liked_ids
    return GalleryPage(
        status=controller.view_status().value,
        total=len(controller.state.photos),
        photos=[
            PhotoOut.from_photo(photo, photo.id in liked_ids)
            for photo in controller.visible_photos()
        ],
        likes_available=controller.state.likes_available,
    )


@router.post("/photos/refresh")
async def refresh_photos(request: Request) -> ActionResult:
    """Re-fetch photos and likes from the remote store."""
    controller = _controller(request)
    if not await controller.refresh_photos():
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not load photos.",
        )
    await controller.load_likes()
    return ActionResult()


@router.post("/photos", status_code=status.HTTP_201_CREATED)
async def upload_photo(  # noqa: PLR0913
    request: Request,
    file: UploadFile | None = File(default=None),
    name: str = Form(default=""),
    description: str = Form(default=""),
    category: str = Form(default=DEFAULT_CATEGORY),
    tags: str = Form(default=""),
) -> ActionResult:
    """Upload an image and create its photo record."""
    form_file = None
    if file is not None and file.filename:
        form_file = FormFile(
            filename=file.filename,
            content=await file.read(),
            content_type=file.content_type,
        )
    form = UploadForm(
        name=name,
        description=description,
        category=category,
        tags=tags,
        file=form_file,
    )
    return _raise_for(await _controller(request).upload(form))


@router.delete("/photos/{photo_id}")
async def delete_photo(photo_id: str, request: Request) -> ActionResult:
    """Delete a photo and, best effort, its image."""
    controller = _controller(request)
    photo = _require_photo(controller, photo_id)
    return _raise_for(await controller.delete_photo(photo))


@router.post("/photos/{photo_id}/like")
async def toggle_like(photo_id: str, request: Request) -> LikeState:
    """Toggle this session's like on a photo."""
    controller = _controller(request)
    photo = _require_photo(controller, photo_id)
    _raise_for(await controller.toggle_like(photo))
    return LikeState(photo_id=photo_id, liked=photo_id in controller.state.liked_ids)


@router.get("/photos/{photo_id}/comments")
async def inspect_photo(photo_id: str, request: Request) -> CommentThread:
    """Inspect a photo and return its comment thread."""
    controller = _controller(request)
    photo = _require_photo(controller, photo_id)
    await controller.inspect(photo)
    return _thread(controller, photo_id)


@router.post("/photos/{photo_id}/comments", status_code=status.HTTP_201_CREATED)
async def add_comment(
    photo_id: str, payload: CommentIn, request: Request
) -> CommentThread:
    """Add a comment to a photo and return the reloaded thread."""
    controller = _controller(request)
    photo = _require_photo(controller, photo_id)
    if controller.state.inspected is None or controller.state.inspected.id != photo_id:
        await controller.inspect(photo)
    _raise_for(await controller.submit_comment(photo, payload.author, payload.body))
    return _thread(controller, photo_id)


@router.delete("/inspection")
async def close_inspection(request: Request) -> ActionResult:
    """Close the currently inspected photo."""
    _controller(request).close_inspection()
    return ActionResult()


def _thread(controller: GalleryController, photo_id: str) -> CommentThread:
    state = controller.state
    return CommentThread(
        photo_id=photo_id,
        phase=state.comment_phase.value,
        comments_available=state.comments_available,
        comments=[CommentOut.from_comment(comment) for comment in state.comments],
    )
