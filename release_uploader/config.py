"""Configuration system for release-uploader."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field
from typing import Any

from .core.artifacts import parse_artifact_list
from .core.client import DEFAULT_API_BASE, default_upload_url
from .core.errors import ConfigurationError
from .utils import parse_bool


@dataclass
class UploaderConfig:
    """Configuration for an upload run."""

    # Connection settings
    token: str | None = None
    repository: str | None = None
    api_base: str = DEFAULT_API_BASE
    timeout_s: float = 30.0

    # Target release
    release_id: int | None = None
    upload_url: str | None = None

    # Artifacts
    artifacts: list[str] = field(default_factory=list)
    artifact_content_type: str | None = None

    # Upload policy
    replaces_artifacts: bool = True
    remove_artifacts: bool = False
    artifact_errors_fail_build: bool = False

    verbose: bool = False

    def validate(self) -> None:
        """Raise ConfigurationError when a required setting is missing."""
        if not self.token:
            raise ConfigurationError(
                "A GitHub token is required (set INPUT_TOKEN or GITHUB_TOKEN)."
            )
        if not self.repository or self.repository.count("/") != 1:
            raise ConfigurationError(
                f"Repository must be given as 'owner/repo', got {self.repository!r}."
            )
        if self.release_id is None:
            raise ConfigurationError("A release id is required (set INPUT_RELEASEID).")

    def resolved_upload_url(self) -> str:
        if self.upload_url:
            return self.upload_url
        if not self.repository or self.release_id is None:
            raise ConfigurationError("Cannot derive upload URL without repository and release id.")
        return default_upload_url(self.repository, self.release_id)


def register_options(parser: argparse.ArgumentParser) -> None:
    """Register command line options."""
    group = parser.add_argument_group("release", "Target release")
    group.add_argument("--token", default=None, help="GitHub token used for API calls")
    group.add_argument(
        "--repository", default=None, help="Repository as owner/repo (default: GITHUB_REPOSITORY)"
    )
    group.add_argument("--api-base", default=None, help="GitHub API base URL")
    group.add_argument("--release-id", type=int, default=None, help="Release to upload to")
    group.add_argument(
        "--upload-url",
        default=None,
        help="Upload URL of the release (may include the {?name,label} template)",
    )
    group.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")

    group = parser.add_argument_group("artifacts", "Artifacts and upload policy")
    group.add_argument(
        "artifacts",
        nargs="*",
        help="Files or glob patterns to upload (default: INPUT_ARTIFACTS)",
    )
    group.add_argument(
        "--content-type", default=None, help="Content type for every artifact"
    )
    group.add_argument(
        "--no-replace",
        dest="replaces_artifacts",
        action="store_const",
        const=False,
        default=None,
        help="Keep remote assets whose names match uploaded artifacts",
    )
    group.add_argument(
        "--remove-artifacts",
        action="store_const",
        const=True,
        default=None,
        help="Delete every remote asset of the release before uploading",
    )
    group.add_argument(
        "--fail-on-error",
        dest="artifact_errors_fail_build",
        action="store_const",
        const=True,
        default=None,
        help="Abort on the first artifact that cannot be uploaded",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def resolve_options(args: argparse.Namespace | None = None) -> UploaderConfig:
    """Resolve configuration from CLI arguments, environment, and defaults.

    Priority: CLI > ENV > defaults. Environment names follow the GitHub
    Actions convention for step inputs (``INPUT_<NAME>``).
    """

    def get_option(
        name: str,
        env_names: tuple[str, ...],
        default: Any = None,
        type_func: Any = None,
    ) -> Any:
        """Get option value with priority: CLI > ENV > default."""
        cli_value = getattr(args, name, None) if args is not None else None
        if cli_value is not None and cli_value != []:
            return cli_value

        for env_name in env_names:
            env_value = os.getenv(env_name)
            if env_value is None or env_value == "":
                continue
            if type_func:
                try:
                    if type_func is bool:
                        return parse_bool(env_value)
                    return type_func(env_value)
                except (ValueError, TypeError):
                    return default
            return env_value

        return default

    artifacts = get_option("artifacts", ("INPUT_ARTIFACTS",), "")
    if isinstance(artifacts, str):
        artifacts = parse_artifact_list(artifacts)

    return UploaderConfig(
        token=get_option("token", ("INPUT_TOKEN", "GITHUB_TOKEN")),
        repository=get_option("repository", ("INPUT_REPOSITORY", "GITHUB_REPOSITORY")),
        api_base=get_option("api_base", ("GITHUB_API_URL",), DEFAULT_API_BASE),
        timeout_s=get_option("timeout", ("RELEASE_UPLOADER_TIMEOUT",), 30.0, float),
        release_id=get_option("release_id", ("INPUT_RELEASEID",), type_func=int),
        upload_url=get_option("upload_url", ("INPUT_UPLOADURL",)),
        artifacts=list(artifacts),
        artifact_content_type=get_option("content_type", ("INPUT_ARTIFACTCONTENTTYPE",)),
        replaces_artifacts=get_option(
            "replaces_artifacts", ("INPUT_REPLACESARTIFACTS",), True, bool
        ),
        remove_artifacts=get_option(
            "remove_artifacts", ("INPUT_REMOVEARTIFACTS",), False, bool
        ),
        artifact_errors_fail_build=get_option(
            "artifact_errors_fail_build", ("INPUT_ARTIFACTERRORSFAILBUILD",), False, bool
        ),
        verbose=bool(getattr(args, "verbose", False))
        or parse_bool(os.getenv("RUNNER_DEBUG")),
    )
