"""Upload orchestration (private API)."""

from .artifact_uploader import ArtifactUploader

__all__ = ["ArtifactUploader"]
