"""Test fixtures for release-uploader test suite."""

from __future__ import annotations

import itertools
from typing import Any

import pytest

from release_uploader.core.errors import ReleaseApiError
from release_uploader.core.models import RemoteAsset


class FakeStore:
    """In-memory release store.

    Records every call in ``calls`` and lets tests queue upload failures per
    artifact name with ``fail_uploads``.
    """

    def __init__(self, assets: list[str] | None = None) -> None:
        self._ids = itertools.count(100)
        self.assets: dict[int, RemoteAsset] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.uploaded_data: dict[str, list[bytes]] = {}
        self._failures: dict[str, list[ReleaseApiError]] = {}
        for name in assets or []:
            self.add_asset(name)

    def add_asset(self, name: str) -> RemoteAsset:
        asset = RemoteAsset(id=next(self._ids), name=name)
        self.assets[asset.id] = asset
        return asset

    def fail_uploads(self, name: str, *statuses: int) -> None:
        self._failures.setdefault(name, []).extend(
            ReleaseApiError(status, f"HTTP {status}") for status in statuses
        )

    @property
    def asset_names(self) -> list[str]:
        return sorted(asset.name for asset in self.assets.values())

    def call_names(self, kind: str) -> list[Any]:
        return [call[1] for call in self.calls if call[0] == kind]

    async def list_artifacts_for_release(self, release_id: int) -> list[RemoteAsset]:
        self.calls.append(("list", release_id))
        return list(self.assets.values())

    async def delete_artifact(self, asset_id: int) -> None:
        self.calls.append(("delete", self.assets[asset_id].name))
        del self.assets[asset_id]

    async def upload_artifact(
        self,
        upload_url: str,
        content_length: int,
        content_type: str,
        data: Any,
        name: str,
        release_id: int,
    ) -> dict[str, Any]:
        self.calls.append(("upload", name))
        self.uploaded_data.setdefault(name, []).append(data)
        pending = self._failures.get(name)
        if pending:
            raise pending.pop(0)
        asset = self.add_asset(name)
        return {"id": asset.id, "name": name}


class RecordingSleep:
    """Awaitable replacement for asyncio.sleep that only records delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()

