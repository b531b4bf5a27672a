"""Release Uploader - upload build artifacts to GitHub releases."""

from __future__ import annotations

from release_uploader._impl.io import ArtifactUploader
from release_uploader.config import UploaderConfig, resolve_options
from release_uploader.core.artifacts import collect_artifacts, parse_artifact_list
from release_uploader.core.client import ReleasesClient
from release_uploader.core.errors import (
    ArtifactUploadError,
    ConfigurationError,
    ReleaseApiError,
    ReleaseUploaderError,
)
from release_uploader.core.models import Artifact, ReleaseRef, RemoteAsset, UploadReport
from release_uploader.core.store import GithubReleaseStore, ReleaseArtifactStore

# Version info
__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Orchestration
    "ArtifactUploader",
    # Models
    "Artifact",
    "ReleaseRef",
    "RemoteAsset",
    "UploadReport",
    # Remote access
    "GithubReleaseStore",
    "ReleaseArtifactStore",
    "ReleasesClient",
    # Errors
    "ArtifactUploadError",
    "ConfigurationError",
    "ReleaseApiError",
    "ReleaseUploaderError",
    # Configuration
    "UploaderConfig",
    "collect_artifacts",
    "parse_artifact_list",
    "resolve_options",
]
