from .index_fetcher import IndexListFetcher, jar_url
from .repository_resolver import ArtifactResolver, RepositoryArtifactResolver, build_http_client

__all__ = [
    "ArtifactResolver",
    "IndexListFetcher",
    "RepositoryArtifactResolver",
    "build_http_client",
    "jar_url",
]
