"""GitHub Releases API client"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Literal, cast

import requests

from .errors import ReleaseApiError
from .models import ArtifactData

logger = logging.getLogger("ReleaseUploaderClient")

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_UPLOADS_BASE = "https://uploads.github.com"
ASSETS_PAGE_SIZE = 100

# GitHub returns upload URLs as RFC 6570 templates, e.g. ".../assets{?name,label}"
_URL_TEMPLATE_SUFFIX = re.compile(r"\{\?[^}]*\}$")


def strip_url_template(url: str) -> str:
    """Drop a trailing ``{?name,label}`` expression from an upload URL."""
    return _URL_TEMPLATE_SUFFIX.sub("", url)


def default_upload_url(repository: str, release_id: int) -> str:
    return f"{DEFAULT_UPLOADS_BASE}/repos/{repository}/releases/{int(release_id)}/assets"


class ReleasesClient:
    """Pure client for the release asset endpoints of the GitHub REST API."""

    DEFAULT_HEADERS: Mapping[str, str] = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": "release-uploader-0.1.0/client",
    }

    def __init__(
        self,
        repository: str,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_API_BASE,
        timeout_s: float = 30.0,
    ) -> None:
        self.repository = repository.strip("/")
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = requests.Session()
        self.session.headers.update(dict(self.DEFAULT_HEADERS))
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    # ============================== Helpers ===============================
    def _url(self, path: str) -> str:
        return (
            f"{self.base_url}{path}"
            if path.startswith("/")
            else f"{self.base_url}/{path}"
        )

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract the API's ``message`` field, falling back to text or reason."""
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return (response.text or "").strip() or str(response.reason or "")

    def _request(
        self,
        method: Literal["GET", "POST", "DELETE"],
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        data: ArtifactData | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> requests.Response:
        merged_headers = dict(self.session.headers)
        if headers:
            merged_headers.update(headers)
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=data,
                headers=merged_headers,
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise ReleaseApiError(None, f"{method} {url} failed: {e}") from e
        if response.status_code >= 400:
            raise ReleaseApiError(response.status_code, self._error_message(response))
        return response

    # ============================ Assets ==============================
    def list_release_assets(self, release_id: int) -> list[dict[str, Any]]:
        """List every asset of a release, following pagination."""
        url = self._url(f"/repos/{self.repository}/releases/{int(release_id)}/assets")
        assets: list[dict[str, Any]] = []
        page = 1
        while True:
            response = self._request(
                "GET", url, params={"per_page": ASSETS_PAGE_SIZE, "page": page}
            )
            batch = cast(list[dict[str, Any]], response.json() or [])
            assets.extend(batch)
            if len(batch) < ASSETS_PAGE_SIZE:
                return assets
            page += 1

    def delete_release_asset(self, asset_id: int) -> None:
        """Delete an asset. An already-absent asset is not an error."""
        url = self._url(f"/repos/{self.repository}/releases/assets/{int(asset_id)}")
        try:
            self._request("DELETE", url)
        except ReleaseApiError as e:
            if e.status != 404:
                raise
            logger.debug(f"Asset {asset_id} already deleted")

    def upload_release_asset(
        self,
        upload_url: str,
        *,
        name: str,
        data: ArtifactData,
        content_type: str,
        content_length: int,
    ) -> dict[str, Any]:
        """Upload raw bytes as a named release asset and return the asset JSON."""
        response = self._request(
            "POST",
            strip_url_template(upload_url),
            params={"name": name},
            data=data,
            headers={
                "Content-Type": content_type,
                "Content-Length": str(int(content_length)),
            },
        )
        try:
            return cast(dict[str, Any], response.json())
        except ValueError:
            return {"name": name, "status_code": response.status_code}

    def close(self) -> None:
        self.session.close()
