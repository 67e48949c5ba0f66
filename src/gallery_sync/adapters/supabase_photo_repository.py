"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from gallery_sync.adapters.supabase_errors import parse_rows, translate_errors
from gallery_sync.domain.errors import RemoteError
from gallery_sync.domain.photos import Photo, PhotoDraft
from gallery_sync.services.gateway import PhotoRepository


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo metadata persistence."""

    client: Client
    table: str = "horror_photos"

    def list_photos(self) -> list[Photo]:
        """Return all photos, newest first."""
        with translate_errors("list photos"):
            response = (
                self.client.table(self.table)
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        return parse_rows("list photos", response.data or [], _row_to_photo)

    def create_photo(self, draft: PhotoDraft) -> Photo:
        """Create a photo metadata row and return it."""
        with translate_errors("insert photo"):
            response = (
                self.client.table(self.table)
                .insert(
                    {
                        "name": draft.name,
                        "description": draft.description,
                        "image_url": draft.image_url,
                        "category": draft.category,
                        "tags": list(draft.tags),
                    }
                )
                .execute()
            )
        if not response.data:
            raise RemoteError("insert photo", "no row returned")
        return parse_rows("insert photo", response.data[:1], _row_to_photo)[0]

    def delete_photo(self, photo_id: str) -> None:
        """Delete a photo metadata row."""
        with translate_errors("delete photo"):
            self.client.table(self.table).delete().eq("id", photo_id).execute()


def _row_to_photo(row: dict[str, object]) -> Photo:
    tags = row.get("tags")
    likes_count = row.get("likes_count")
    return Photo(
        id=str(row["id"]),
        name=str(row["name"]),
        description=row.get("description"),
        image_url=str(row["image_url"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        likes_count=int(likes_count) if likes_count is not None else None,
        category=row.get("category"),
        tags=tuple(str(tag) for tag in tags) if tags is not None else None,
    )
