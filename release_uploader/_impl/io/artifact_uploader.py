"""Artifact uploading for a single release.

This module owns the upload lifecycle of a batch: clearing conflicting (or
all) remote assets, then uploading each artifact in order with retry and
exponential backoff on server errors.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

import pluggy

from ...core.errors import ArtifactUploadError, ReleaseApiError
from ...core.models import Artifact, ReleaseRef, UploadReport
from ...core.store import ReleaseArtifactStore

logger = logging.getLogger("ReleaseUploader")

DEFAULT_MAX_RETRIES = 4
DEFAULT_RETRY_DELAY = 8


def _as_api_error(error: Exception) -> ReleaseApiError:
    """Normalize store failures so every error exposes ``status`` and ``message``."""
    if isinstance(error, ReleaseApiError):
        return error
    status = getattr(error, "status", None)
    wrapped = ReleaseApiError(status if isinstance(status, int) else None, str(error))
    wrapped.__cause__ = error
    return wrapped


def _close_stream(data: object) -> None:
    """Close a stream produced by a byte source; plain bytes are left alone."""
    close = getattr(data, "close", None)
    if callable(close):
        close()


class ArtifactUploader:
    """Upload release artifacts through a :class:`ReleaseArtifactStore`."""

    def __init__(
        self,
        store: ReleaseArtifactStore,
        *,
        replaces_existing_artifacts: bool = True,
        remove_artifacts: bool = False,
        throws_upload_errors: bool = False,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
        hooks: pluggy.PluginManager | None = None,
    ) -> None:
        self.store = store
        self.replaces_existing_artifacts = replaces_existing_artifacts
        self.remove_artifacts = remove_artifacts
        self.throws_upload_errors = throws_upload_errors
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._sleep = sleep
        self.hooks = hooks

    async def upload_artifacts(
        self,
        artifacts: Sequence[Artifact],
        release_id: int,
        upload_url: str,
    ) -> UploadReport:
        """Upload *artifacts* to a release, one after another.

        Failures while listing or deleting remote assets are not caught and
        abort the batch. Upload failures are retried on 5xx responses and
        then either raised or recorded, depending on ``throws_upload_errors``.
        """
        report = UploadReport()
        if self.replaces_existing_artifacts:
            await self._delete_updated_artifacts(artifacts, release_id, report)
        if self.remove_artifacts:
            await self._delete_all_artifacts(release_id, report)
        for artifact in artifacts:
            await self._upload_artifact(artifact, release_id, upload_url, report)
        return report

    async def upload_to_release(
        self, artifacts: Sequence[Artifact], release: ReleaseRef
    ) -> UploadReport:
        return await self.upload_artifacts(artifacts, release.release_id, release.upload_url)

    async def _upload_artifact(
        self,
        artifact: Artifact,
        release_id: int,
        upload_url: str,
        report: UploadReport,
    ) -> None:
        retry = self.max_retries
        retry_delay = self.retry_delay
        attempts = 0
        while True:
            attempts += 1
            try:
                logger.debug(f"Uploading artifact {artifact.name}...")
                data = artifact.read()
                try:
                    await self.store.upload_artifact(
                        upload_url,
                        artifact.content_length,
                        artifact.content_type,
                        data,
                        artifact.name,
                        release_id,
                    )
                finally:
                    _close_stream(data)
            except Exception as exc:
                e = _as_api_error(exc)
                will_retry = e.is_transient and retry > 0
                self._notify_failure(artifact, release_id, e, will_retry)
                if not will_retry:
                    self._handle_terminal_failure(artifact, e, report)
                    return
                logger.warning(
                    f"Failed to upload artifact {artifact.name}. {e.message}. "
                    f"Retrying after {retry_delay} seconds..."
                )
                await self._sleep(retry_delay)
                # A partial upload may have left a conflicting asset behind
                await self._delete_updated_artifacts([artifact], release_id, report)
                retry -= 1
                retry_delay *= 2
            else:
                report.uploaded.append(artifact.name)
                if self.hooks is not None:
                    self.hooks.hook.release_uploader_artifact_uploaded(
                        artifact=artifact, release_id=release_id, attempts=attempts
                    )
                return

    def _handle_terminal_failure(
        self, artifact: Artifact, error: ReleaseApiError, report: UploadReport
    ) -> None:
        message = f"Failed to upload artifact {artifact.name}. {error.message}."
        if self.throws_upload_errors:
            raise ArtifactUploadError(artifact.name, message) from error
        logger.warning(message)
        report.failed[artifact.name] = error.message

    def _notify_failure(
        self,
        artifact: Artifact,
        release_id: int,
        error: ReleaseApiError,
        will_retry: bool,
    ) -> None:
        if self.hooks is None:
            return
        self.hooks.hook.release_uploader_upload_failed(
            artifact=artifact, release_id=release_id, error=error, will_retry=will_retry
        )

    async def _delete_updated_artifacts(
        self,
        artifacts: Sequence[Artifact],
        release_id: int,
        report: UploadReport,
    ) -> None:
        release_assets = await self.store.list_artifacts_for_release(release_id)
        asset_by_name = {asset.name: asset for asset in release_assets}
        for artifact in artifacts:
            asset = asset_by_name.get(artifact.name)
            if asset is None:
                continue
            logger.debug(f"Deleting existing artifact {artifact.name}...")
            await self.store.delete_artifact(asset.id)
            report.deleted.append(asset.name)
            if self.hooks is not None:
                self.hooks.hook.release_uploader_asset_deleted(
                    asset=asset, release_id=release_id
                )

    async def _delete_all_artifacts(self, release_id: int, report: UploadReport) -> None:
        release_assets = await self.store.list_artifacts_for_release(release_id)
        for asset in release_assets:
            logger.debug(f"Deleting existing artifact {asset.name}...")
            await self.store.delete_artifact(asset.id)
            report.deleted.append(asset.name)
            if self.hooks is not None:
                self.hooks.hook.release_uploader_asset_deleted(
                    asset=asset, release_id=release_id
                )
