"""Collect release artifacts from file paths and glob patterns."""

from __future__ import annotations

import glob
import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import ConfigurationError
from .models import Artifact

logger = logging.getLogger("ReleaseUploader")


def parse_artifact_list(text: str | None) -> list[str]:
    """Split a comma or newline separated list of patterns."""
    if not text:
        return []
    patterns: list[str] = []
    for line in text.splitlines():
        for item in line.split(","):
            item = item.strip()
            if item:
                patterns.append(item)
    return patterns


def collect_artifacts(
    patterns: Iterable[str],
    *,
    content_type: str | None = None,
    errors_fail_build: bool = False,
) -> list[Artifact]:
    """Expand *patterns* into artifacts, preserving order and dropping duplicates.

    Artifact names must be unique within a batch: a second file with an
    already-used basename is skipped. Both that and a pattern matching no
    file are reported as warnings, or raise :class:`ConfigurationError` when
    ``errors_fail_build`` is set.
    """
    artifacts: list[Artifact] = []
    seen: set[Path] = set()
    names: dict[str, Path] = {}
    for pattern in patterns:
        matches = sorted(glob.glob(pattern, recursive=True))
        files = [Path(match) for match in matches if Path(match).is_file()]
        if not files:
            message = f"Artifact pattern {pattern!r} did not match any files"
            if errors_fail_build:
                raise ConfigurationError(message)
            logger.warning(message)
            continue
        for file in files:
            resolved = file.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            if file.name in names:
                message = (
                    f"Artifact name {file.name!r} is used by both {names[file.name]} and {file}"
                )
                if errors_fail_build:
                    raise ConfigurationError(message)
                logger.warning(f"{message}; skipping {file}")
                continue
            names[file.name] = file
            artifacts.append(Artifact.from_path(file, content_type=content_type))
    return artifacts
