"""Release artifact store: the remote operations the uploader depends on."""

from __future__ import annotations

import asyncio
from typing import Any, Protocol, runtime_checkable

from .client import ReleasesClient
from .models import ArtifactData, RemoteAsset


@runtime_checkable
class ReleaseArtifactStore(Protocol):
    """List, delete and upload the assets attached to a release."""

    async def list_artifacts_for_release(self, release_id: int) -> list[RemoteAsset]:
        ...

    async def delete_artifact(self, asset_id: int) -> None:
        ...

    async def upload_artifact(
        self,
        upload_url: str,
        content_length: int,
        content_type: str,
        data: ArtifactData,
        name: str,
        release_id: int,
    ) -> dict[str, Any]:
        ...


class GithubReleaseStore:
    """Store backed by :class:`ReleasesClient`.

    The client is synchronous; each call runs in a worker thread so the
    caller's event loop is free while the request is in flight.
    """

    def __init__(self, client: ReleasesClient) -> None:
        self.client = client

    async def list_artifacts_for_release(self, release_id: int) -> list[RemoteAsset]:
        raw = await asyncio.to_thread(self.client.list_release_assets, release_id)
        return [RemoteAsset.from_dict(item) for item in raw]

    async def delete_artifact(self, asset_id: int) -> None:
        await asyncio.to_thread(self.client.delete_release_asset, asset_id)

    async def upload_artifact(
        self,
        upload_url: str,
        content_length: int,
        content_type: str,
        data: ArtifactData,
        name: str,
        release_id: int,
    ) -> dict[str, Any]:
        # The upload URL already encodes the release; release_id is kept for
        # stores that address releases explicitly.
        return await asyncio.to_thread(
            self.client.upload_release_asset,
            upload_url,
            name=name,
            data=data,
            content_type=content_type,
            content_length=content_length,
        )
