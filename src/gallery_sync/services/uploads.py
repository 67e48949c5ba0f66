"""Upload orchestration: blob first, then the metadata record."""

import logging
from dataclasses import dataclass

from gallery_sync.domain.categories import is_known_category
from gallery_sync.domain.errors import PartialFailure, RemoteError, ValidationError
from gallery_sync.domain.gallery import UploadForm
from gallery_sync.domain.photos import Photo, PhotoDraft
from gallery_sync.services.gateway import RemoteGateway

logger = logging.getLogger(__name__)


@dataclass
class UploadOrchestrator:
    """Sequences blob upload and metadata creation for a new photo."""

    gateway: RemoteGateway

    async def submit(self, form: UploadForm) -> Photo:
        """Upload the form's image and create its photo record.

        Raises `ValidationError` before any network call when the file or
        name is missing. A metadata failure after a successful upload raises
        `PartialFailure`; the uploaded blob is left in place.
        """
        if form.file is None:
            raise ValidationError("An image file is required")
        if not form.name.strip():
            raise ValidationError("A name is required")
        if not is_known_category(form.category):
            raise ValidationError(f"Unknown category: {form.category}")

        image_url = await self.gateway.upload_blob(
            form.file.content, form.file.extension, form.file.content_type
        )
        draft = PhotoDraft(
            name=form.name,
            description=form.description,
            image_url=image_url,
            category=form.category,
            tags=parse_tags(form.tags),
        )
        try:
            return await self.gateway.insert_photo(draft)
        except RemoteError as error:
            logger.warning(
                "Photo metadata insert failed; uploaded blob %s left orphaned",
                image_url,
            )
            raise PartialFailure(
                "insert photo", str(error), orphan_url=image_url
            ) from error


def parse_tags(raw: str) -> tuple[str, ...]:
    """Split comma-separated tags, trimming and dropping empty entries."""
    return tuple(tag.strip() for tag in raw.split(",") if tag.strip())
