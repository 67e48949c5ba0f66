"""Supabase Storage blob store."""

from dataclasses import dataclass

from supabase import Client

from gallery_sync.adapters.supabase_errors import translate_errors
from gallery_sync.services.gateway import BlobStore


@dataclass
class SupabaseBlobStore(BlobStore):
    """Stores image bytes in a public Supabase Storage bucket."""

    client: Client
    bucket: str = "horror-images"

    def upload(self, name: str, content: bytes, content_type: str) -> str:
        """Store bytes under `name` and return the public URL."""
        bucket = self.client.storage.from_(self.bucket)
        with translate_errors("upload blob"):
            bucket.upload(name, content, {"content-type": content_type})
            return bucket.get_public_url(name)

    def remove(self, name: str) -> None:
        """Delete a stored object by name."""
        with translate_errors("delete blob"):
            self.client.storage.from_(self.bucket).remove([name])
