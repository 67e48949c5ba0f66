"""Supabase-backed comment repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from gallery_sync.adapters.supabase_errors import parse_rows, translate_errors
from gallery_sync.domain.errors import RemoteError
from gallery_sync.domain.photos import Comment
from gallery_sync.services.gateway import CommentRepository

_CAPABILITY = "comments"


@dataclass
class SupabaseCommentRepository(CommentRepository):
    """Supabase implementation for photo comments."""

    client: Client
    table: str = "photo_comments"

    def list_comments(self, photo_id: str) -> list[Comment]:
        """Return comments for a photo, oldest first."""
        with translate_errors("list comments", capability=_CAPABILITY):
            response = (
                self.client.table(self.table)
                .select("*")
                .eq("photo_id", photo_id)
                .order("created_at", desc=False)
                .execute()
            )
        return parse_rows("list comments", response.data or [], _row_to_comment)

    def create_comment(self, photo_id: str, user_name: str, comment: str) -> Comment:
        """Insert a comment and return it."""
        with translate_errors("insert comment", capability=_CAPABILITY):
            response = (
                self.client.table(self.table)
                .insert(
                    {"photo_id": photo_id, "user_name": user_name, "comment": comment}
                )
                .execute()
            )
        if not response.data:
            raise RemoteError("insert comment", "no row returned")
        return parse_rows("insert comment", response.data[:1], _row_to_comment)[0]


def _row_to_comment(row: dict[str, object]) -> Comment:
    return Comment(
        id=str(row["id"]),
        photo_id=str(row["photo_id"]),
        user_name=str(row["user_name"]),
        comment=str(row["comment"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
