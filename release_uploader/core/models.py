"""Data models for release artifacts and remote assets."""

from __future__ import annotations

import mimetypes
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Union

DEFAULT_CONTENT_TYPE = "application/octet-stream"

ArtifactData = Union[bytes, IO[bytes]]
ByteSource = Callable[[], ArtifactData]


@dataclass(frozen=True)
class Artifact:
    """A local build output to be attached to a release.

    ``source`` is invoked once per upload attempt so that every retry reads
    the content from the start.
    """

    name: str
    content_type: str
    content_length: int
    source: ByteSource = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Artifact 'name' must not be empty.")
        if self.content_length < 0:
            raise ValueError("Artifact 'content_length' must be >= 0.")

    def read(self) -> ArtifactData:
        return self.source()

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        name: str | None = None,
        content_type: str | None = None,
    ) -> Artifact:
        """Build an artifact backed by a file on disk."""
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")
        final_name = name or file_path.name
        guessed, _ = mimetypes.guess_type(final_name)
        return cls(
            name=final_name,
            content_type=content_type or guessed or DEFAULT_CONTENT_TYPE,
            content_length=int(file_path.stat().st_size),
            source=file_path.read_bytes,
        )

    @classmethod
    def from_bytes(
        cls, name: str, data: bytes, content_type: str | None = None
    ) -> Artifact:
        guessed, _ = mimetypes.guess_type(name)
        payload = bytes(data)
        return cls(
            name=name,
            content_type=content_type or guessed or DEFAULT_CONTENT_TYPE,
            content_length=len(payload),
            source=lambda: payload,
        )


@dataclass(frozen=True)
class RemoteAsset:
    """An asset already attached to a release on the remote service."""

    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RemoteAsset:
        return cls(id=int(data["id"]), name=str(data["name"]))


@dataclass(frozen=True)
class ReleaseRef:
    """Identifies the release to upload to and where uploads are sent."""

    release_id: int
    upload_url: str


@dataclass
class UploadReport:
    """Outcome of a best-effort batch upload."""

    uploaded: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    deleted: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed
