"""Supabase-backed like repository."""

from dataclasses import dataclass

from supabase import Client

from gallery_sync.adapters.supabase_errors import parse_rows, translate_errors
from gallery_sync.services.gateway import LikeRepository

_CAPABILITY = "likes"


@dataclass
class SupabaseLikeRepository(LikeRepository):
    """Supabase implementation for (photo, session) like relations."""

    client: Client
    table: str = "photo_likes"

    def list_liked_photo_ids(self, session_id: str) -> set[str]:
        """Return ids of photos liked by a session."""
        with translate_errors("list likes", capability=_CAPABILITY):
            response = (
                self.client.table(self.table)
                .select("photo_id")
                .eq("user_session", session_id)
                .execute()
            )
        return set(parse_rows("list likes", response.data or [], _row_to_photo_id))

    def add_like(self, photo_id: str, session_id: str) -> None:
        """Insert a like relation."""
        with translate_errors("add like", capability=_CAPABILITY):
            self.client.table(self.table).insert(
                {"photo_id": photo_id, "user_session": session_id}
            ).execute()

    def remove_like(self, photo_id: str, session_id: str) -> None:
        """Delete a like relation."""
        with translate_errors("remove like", capability=_CAPABILITY):
            self.client.table(self.table).delete().eq("photo_id", photo_id).eq(
                "user_session", session_id
            ).execute()


def _row_to_photo_id(row: dict[str, object]) -> str:
    return str(row["photo_id"])
