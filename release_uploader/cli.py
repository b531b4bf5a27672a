"""Command line entry point: upload artifacts to a GitHub release."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from ._impl.io import ArtifactUploader
from .config import UploaderConfig, register_options, resolve_options
from .core.artifacts import collect_artifacts
from .core.client import ReleasesClient
from .core.errors import ReleaseUploaderError
from .core.models import ReleaseRef, UploadReport
from .core.store import GithubReleaseStore
from .hooks import get_plugin_manager
from .utils import sanitize_log

logger = logging.getLogger("ReleaseUploader")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="release-uploader",
        description="Upload build artifacts to a GitHub release.",
    )
    register_options(parser)
    return parser


def write_step_summary(report: UploadReport) -> None:
    """Append a markdown table of the batch outcome to the job summary, if any."""
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_path:
        return
    lines = ["### Release artifacts\n\n", "| Artifact | Result |\n", "| --- | --- |\n"]
    lines.extend(f"| {name} | uploaded |\n" for name in report.uploaded)
    lines.extend(f"| {name} | failed: {message} |\n" for name, message in report.failed.items())
    with Path(summary_path).open("a", encoding="utf-8") as handle:
        handle.writelines(lines)


async def run(config: UploaderConfig) -> UploadReport:
    config.validate()
    artifacts = collect_artifacts(
        config.artifacts,
        content_type=config.artifact_content_type,
        errors_fail_build=config.artifact_errors_fail_build,
    )
    if not artifacts:
        logger.warning("No artifacts to upload")

    client = ReleasesClient(
        config.repository or "",
        config.token,
        base_url=config.api_base,
        timeout_s=config.timeout_s,
    )
    try:
        uploader = ArtifactUploader(
            GithubReleaseStore(client),
            replaces_existing_artifacts=config.replaces_artifacts,
            remove_artifacts=config.remove_artifacts,
            throws_upload_errors=config.artifact_errors_fail_build,
            hooks=get_plugin_manager(),
        )
        release = ReleaseRef(int(config.release_id or 0), config.resolved_upload_url())
        return await uploader.upload_to_release(artifacts, release)
    finally:
        client.close()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = resolve_options(args)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        report = asyncio.run(run(config))
    except ReleaseUploaderError as e:
        logger.error(sanitize_log(str(e)))
        return 1

    write_step_summary(report)
    if report.ok:
        logger.info(f"Uploaded {len(report.uploaded)} artifact(s)")
    else:
        logger.warning(
            f"Uploaded {len(report.uploaded)} artifact(s), "
            f"{len(report.failed)} failed: {', '.join(report.failed)}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
