"""Application state owned by the gallery controller."""

from dataclasses import dataclass, field
from enum import Enum

from gallery_sync.domain.categories import DEFAULT_CATEGORY
from gallery_sync.domain.photos import Comment, Photo
from gallery_sync.domain.view import ViewState


class CommentPhase(str, Enum):
    """Lifecycle of the comment thread for the inspected photo."""

    IDLE = "idle"
    LOADING_COMMENTS = "loading_comments"
    READY = "ready"


class AdvisoryKind(str, Enum):
    """Categories of user-visible advisories."""

    VALIDATION = "validation"
    CAPABILITY_UNAVAILABLE = "capability_unavailable"
    REMOTE_ERROR = "remote_error"
    PARTIAL_FAILURE = "partial_failure"


@dataclass(frozen=True)
class Advisory:
    """A message surfaced to the user after a failed or degraded action."""

    kind: AdvisoryKind
    message: str


@dataclass(frozen=True)
class UploadFile:
    """An image chosen for upload."""

    filename: str
    content: bytes
    content_type: str | None = None

    @property
    def extension(self) -> str:
        """Return the text after the last dot, or the whole name without one."""
        return self.filename.rsplit(".", 1)[-1]


@dataclass(frozen=True)
class UploadForm:
    """Fields of the upload form."""

    name: str = ""
    description: str = ""
    category: str = DEFAULT_CATEGORY
    tags: str = ""
    file: UploadFile | None = None


@dataclass(frozen=True)
class CommentDraft:
    """Fields of the comment form."""

    author: str = ""
    body: str = ""


@dataclass
class GalleryState:
    """All mutable client state, changed only through controller transitions."""

    photos: list[Photo] = field(default_factory=list)
    liked_ids: set[str] = field(default_factory=set)
    inspected: Photo | None = None
    comment_phase: CommentPhase = CommentPhase.IDLE
    comments: list[Comment] = field(default_factory=list)
    view: ViewState = field(default_factory=ViewState)
    upload_form: UploadForm = field(default_factory=UploadForm)
    comment_draft: CommentDraft = field(default_factory=CommentDraft)
    loading: bool = False
    uploading: bool = False
    likes_available: bool = True
    comments_available: bool = True
    advisories: list[Advisory] = field(default_factory=list)
    transitions: list[str] = field(default_factory=list)
