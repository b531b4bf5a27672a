"""Exception types raised by release-uploader."""

from __future__ import annotations


class ReleaseUploaderError(Exception):
    """Base class for all release-uploader failures."""


class ReleaseApiError(ReleaseUploaderError):
    """A call to the release-hosting service failed.

    ``status`` is the HTTP status code, or ``None`` when no response was
    received (connection errors, timeouts).
    """

    def __init__(self, status: int | None, message: str) -> None:
        super().__init__(f"{status}: {message}" if status is not None else message)
        self.status = status
        self.message = message

    @property
    def is_transient(self) -> bool:
        """Server-side failures (5xx) are expected to resolve on retry."""
        return self.status is not None and self.status >= 500


class ArtifactUploadError(ReleaseUploaderError):
    """An artifact could not be uploaded and the batch was aborted."""

    def __init__(self, artifact_name: str, message: str) -> None:
        super().__init__(message)
        self.artifact_name = artifact_name


class ConfigurationError(ReleaseUploaderError):
    """Settings are missing or invalid."""
