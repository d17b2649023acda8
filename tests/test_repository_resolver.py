import base64

import httpx
import pytest

from doclinks.modules.javadoc.domain import coordinate_from_gav
from doclinks.modules.javadoc.fileget import RepositoryArtifactResolver
from doclinks.modules.javadoc.util import ArtifactResolutionError
from doclinks.settings import Settings


def build_settings(tmp_path, **overrides) -> Settings:
    defaults = {
        "local_repository": str(tmp_path / "m2"),
        "remote_repositories": ["https://repo.example.com/maven2"],
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


def test_resolve_downloads_into_local_repository(tmp_path):
    coords = coordinate_from_gav("com.example:lib-a:jar:javadoc:1.2.3")
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        return httpx.Response(200, content=b"jar-bytes")

    client = httpx.Client(transport=httpx.MockTransport(handler))
    resolver = RepositoryArtifactResolver(build_settings(tmp_path), client=client)

    artifact = resolver.resolve(coords)

    assert requested == ["/maven2/com/example/lib-a/1.2.3/lib-a-1.2.3-javadoc.jar"]
    assert artifact.file == tmp_path / "m2" / "com/example/lib-a/1.2.3/lib-a-1.2.3-javadoc.jar"
    assert artifact.file.read_bytes() == b"jar-bytes"
    assert not artifact.file.with_name(artifact.file.name + ".part").exists()


def test_resolve_reuses_cached_artifact(tmp_path):
    coords = coordinate_from_gav("com.example:lib-a:jar:javadoc:1.2.3")

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("network should not be used")

    resolver = RepositoryArtifactResolver(
        build_settings(tmp_path), client=httpx.Client(transport=httpx.MockTransport(handler))
    )
    cached = resolver.local_path(coords)
    cached.parent.mkdir(parents=True)
    cached.write_bytes(b"cached")

    assert resolver.resolve(coords).file == cached


def test_resolve_tries_repositories_in_order(tmp_path):
    coords = coordinate_from_gav("org.acme:tool:jar:javadoc:2.0")

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "first.example.com":
            return httpx.Response(404)
        return httpx.Response(200, content=b"second")

    settings = build_settings(
        tmp_path,
        remote_repositories=["https://first.example.com/repo/", "https://second.example.com/repo"],
    )
    resolver = RepositoryArtifactResolver(settings, client=httpx.Client(transport=httpx.MockTransport(handler)))

    assert resolver.resolve(coords).file.read_bytes() == b"second"


def test_resolve_failure_names_repositories(tmp_path):
    coords = coordinate_from_gav("org.acme:tool:jar:javadoc:2.0")

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "down.example.com":
            raise httpx.ConnectError("refused", request=request)
        return httpx.Response(404)

    settings = build_settings(
        tmp_path,
        remote_repositories=["https://repo.example.com/maven2", "https://down.example.com/maven2"],
    )
    resolver = RepositoryArtifactResolver(settings, client=httpx.Client(transport=httpx.MockTransport(handler)))

    with pytest.raises(ArtifactResolutionError) as excinfo:
        resolver.resolve(coords)

    message = str(excinfo.value)
    assert "https://repo.example.com/maven2 (404)" in message
    assert "https://down.example.com/maven2 (ConnectError)" in message
    assert not resolver.local_path(coords).exists()


def test_basic_auth_is_sent_when_configured(tmp_path):
    coords = coordinate_from_gav("org.acme:tool:jar:javadoc:2.0")
    headers = []

    def handler(request: httpx.Request) -> httpx.Response:
        headers.append(request.headers.get("authorization"))
        return httpx.Response(200, content=b"ok")

    settings = build_settings(tmp_path, repository_username="user", repository_password="secret")
    resolver = RepositoryArtifactResolver(settings, client=httpx.Client(transport=httpx.MockTransport(handler)))

    resolver.resolve(coords)

    assert headers == ["Basic " + base64.b64encode(b"user:secret").decode("ascii")]


def test_snapshot_path_uses_base_version_directory(tmp_path):
    coords = coordinate_from_gav("org.acme:tool:jar:javadoc:2.0-20240101.120000-4")

    resolver = RepositoryArtifactResolver(build_settings(tmp_path), client=httpx.Client())

    assert resolver.local_path(coords).parts[-2:] == ("2.0-SNAPSHOT", "tool-2.0-20240101.120000-4-javadoc.jar")
