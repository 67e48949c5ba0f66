"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from gallery_sync.adapters.json_file_store import JsonFileStore
from gallery_sync.adapters.supabase_blob_store import SupabaseBlobStore
from gallery_sync.adapters.supabase_comment_repository import (
    SupabaseCommentRepository,
)
from gallery_sync.adapters.supabase_like_repository import SupabaseLikeRepository
from gallery_sync.adapters.supabase_photo_repository import SupabasePhotoRepository
from gallery_sync.config import Settings
from gallery_sync.services.gallery import GalleryController
from gallery_sync.services.gateway import RemoteGateway
from gallery_sync.services.identity import IdentityProvider
from gallery_sync.services.uploads import UploadOrchestrator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gateway: RemoteGateway
    identity: IdentityProvider
    controller: GalleryController
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_anon_key
    )
    gateway = RemoteGateway(
        photo_repository=SupabasePhotoRepository(
            supabase_client, resolved_settings.photos_table
        ),
        like_repository=SupabaseLikeRepository(
            supabase_client, resolved_settings.likes_table
        ),
        comment_repository=SupabaseCommentRepository(
            supabase_client, resolved_settings.comments_table
        ),
        blob_store=SupabaseBlobStore(
            supabase_client, resolved_settings.storage_bucket
        ),
    )
    identity = IdentityProvider(
        JsonFileStore(resolved_settings.resolved_session_store_path())
    )
    controller = GalleryController(
        gateway=gateway,
        identity=identity,
        uploader=UploadOrchestrator(gateway),
    )

    async def close_resources() -> None:
        await controller.wait_idle()

    return AppContainer(
        settings=resolved_settings,
        gateway=gateway,
        identity=identity,
        controller=controller,
        close_resources=close_resources,
    )
