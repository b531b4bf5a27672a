"""Hook specifications for the release-uploader plugin system."""

from __future__ import annotations

from pluggy import HookimplMarker, HookspecMarker

from ..core.errors import ReleaseApiError
from ..core.models import Artifact, RemoteAsset

hookspec = HookspecMarker("release_uploader")
hookimpl = HookimplMarker("release_uploader")


class ReleaseUploaderHookSpecs:
    """Hook specifications for observing an upload batch."""

    @hookspec
    def release_uploader_asset_deleted(
        self, asset: RemoteAsset, release_id: int
    ) -> None:
        """Called after a remote asset was deleted from the release.

        Args:
            asset: The deleted asset
            release_id: Release the asset belonged to
        """

    @hookspec
    def release_uploader_artifact_uploaded(
        self, artifact: Artifact, release_id: int, attempts: int
    ) -> None:
        """Called after an artifact was uploaded.

        Args:
            artifact: The uploaded artifact
            release_id: Target release
            attempts: Number of upload attempts it took (1 means no retry)
        """

    @hookspec
    def release_uploader_upload_failed(
        self,
        artifact: Artifact,
        release_id: int,
        error: ReleaseApiError,
        will_retry: bool,
    ) -> None:
        """Called after each failed upload attempt.

        Args:
            artifact: The artifact being uploaded
            release_id: Target release
            error: Failure reported by the store
            will_retry: False when this failure is terminal for the artifact
        """
