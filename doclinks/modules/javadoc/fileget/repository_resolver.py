"""Resolve artifacts from the local Maven repository or remote repositories."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

import httpx

from doclinks.modules.javadoc.domain import ArtifactCoordinate, ResolvedArtifact
from doclinks.modules.javadoc.util.exceptions import ArtifactResolutionError
from doclinks.settings import Settings


class ArtifactResolver(Protocol):
    def resolve(self, coordinate: ArtifactCoordinate) -> ResolvedArtifact:
        ...


def build_http_client(settings: Settings) -> httpx.Client:
    kwargs = {"timeout": settings.http_timeout, "follow_redirects": True}
    if settings.http_proxy:
        kwargs["proxy"] = settings.http_proxy
    return httpx.Client(**kwargs)


class RepositoryArtifactResolver:
    """Fetch artifacts in Maven 2 layout into the local repository cache."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings
        self.local_repository = Path(settings.local_repository).expanduser()
        self.remote_repositories: Sequence[str] = [
            url.rstrip("/") for url in settings.remote_repositories if url and url.strip()
        ]
        self.log = logging.getLogger(self.__class__.__name__)
        auth = None
        if settings.repository_username and settings.repository_password:
            auth = (settings.repository_username, settings.repository_password)
        self._auth = auth
        self._client = client or build_http_client(settings)

    def close(self) -> None:
        self._client.close()

    def _build_artifact_url(self, coords: ArtifactCoordinate, base_url: str) -> str:
        path = "/".join(coords.path_segments)
        return f"{base_url.rstrip('/')}/{path}"

    def local_path(self, coords: ArtifactCoordinate) -> Path:
        return self.local_repository.joinpath(*coords.path_segments)

    def resolve(self, coordinate: ArtifactCoordinate) -> ResolvedArtifact:
        if not coordinate.version:
            raise ArtifactResolutionError(coordinate, "no version specified")

        target = self.local_path(coordinate)
        if target.exists():
            self.log.debug("Reusing cached artifact %s -> %s", coordinate, target)
            return ResolvedArtifact(coordinate=coordinate, file=target)

        failures: List[str] = []
        for base_url in self.remote_repositories:
            url = self._build_artifact_url(coordinate, base_url)
            try:
                self._download(coordinate, url, target)
            except httpx.HTTPStatusError as exc:
                failures.append(f"{base_url} ({exc.response.status_code})")
                self.log.debug("%s not available from %s: %s", coordinate, url, exc)
                continue
            except httpx.HTTPError as exc:
                failures.append(f"{base_url} ({exc.__class__.__name__})")
                self.log.debug("Transfer of %s from %s failed", coordinate, url, exc_info=True)
                continue
            return ResolvedArtifact(coordinate=coordinate, file=target)

        if not failures:
            raise ArtifactResolutionError(coordinate, "no remote repositories configured")
        raise ArtifactResolutionError(
            coordinate, f"could not find artifact in {', '.join(failures)}"
        )

    def _download(self, coords: ArtifactCoordinate, url: str, target: Path) -> Path:
        self.log.info("Downloading %s from %s", coords, url)
        start_time = time.time()
        downloaded = 0
        partial = target.with_name(target.name + ".part")
        with self._client.stream("GET", url, auth=self._auth) as response:
            response.raise_for_status()
            target.parent.mkdir(parents=True, exist_ok=True)
            try:
                with open(partial, "wb") as fh:
                    for chunk in response.iter_bytes(65536):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        downloaded += len(chunk)
            except BaseException:
                partial.unlink(missing_ok=True)
                raise
        partial.replace(target)
        elapsed = max(time.time() - start_time, 1e-3)
        self.log.info(
            "Downloaded %s -> %s (%d bytes, %.2fs)",
            coords,
            target,
            downloaded,
            elapsed,
        )
        return target
