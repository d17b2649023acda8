"""Runtime configuration for the javadoc link goals."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MAVEN_CENTRAL = "https://repo.maven.apache.org/maven2"


class LinkConfig(BaseModel):
    """A ``<link/>`` or ``<offlinelink/>`` entry: artifact patterns plus URL template."""

    artifact: str
    url: Optional[str] = None


class Settings(BaseSettings):
    """Configuration values mapped from ``DOCLINKS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOCLINKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    skip: bool = Field(False)
    include_dependency_management: bool = Field(True)

    # Link rules
    links: List[LinkConfig] = Field(default_factory=list)
    offlinelinks: List[LinkConfig] = Field(default_factory=list)

    # Repository configuration
    local_repository: str = Field("~/.m2/repository")
    remote_repositories: List[str] = Field(default_factory=lambda: [MAVEN_CENTRAL])
    repository_username: Optional[str] = Field(None)
    repository_password: Optional[str] = Field(None)
    http_proxy: Optional[str] = Field(None)
    http_timeout: float = Field(30.0)

    # Output locations
    options_output_directory: str = Field("target/javadoc-options")
    offline_links_output_directory: str = Field("target/offline-links")
    javadoc_map_output_directory: str = Field("target")
    javadoc_map_file_name: str = Field("javadoc-map.properties")

    log_level: str = Field("INFO")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
