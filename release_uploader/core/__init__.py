"""Core models, errors and remote access for release-uploader."""

from .client import ReleasesClient
from .errors import (
    ArtifactUploadError,
    ConfigurationError,
    ReleaseApiError,
    ReleaseUploaderError,
)
from .models import Artifact, ReleaseRef, RemoteAsset, UploadReport
from .store import GithubReleaseStore, ReleaseArtifactStore

__all__ = [
    "Artifact",
    "ArtifactUploadError",
    "ConfigurationError",
    "GithubReleaseStore",
    "ReleaseApiError",
    "ReleaseArtifactStore",
    "ReleaseRef",
    "ReleaseUploaderError",
    "ReleasesClient",
    "RemoteAsset",
    "UploadReport",
]
