"""Wire settings into the default collaborators and create goals."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Type

import httpx

from doclinks.logging_config import configure_logging
from doclinks.modules.javadoc.archive import OfflineIndexExtractor, ZipArchiveReader
from doclinks.modules.javadoc.domain import ProjectModel, load_project_descriptor
from doclinks.modules.javadoc.fileget import (
    IndexListFetcher,
    RepositoryArtifactResolver,
    build_http_client,
)
from doclinks.modules.javadoc.service import (
    AbstractJavadocGoal,
    GenerateJavadocMapGoal,
    GenerateOfflineLinkOptionsFileGoal,
    GenerateOptionsFileGoal,
    JavadocMapBuilder,
    OptionsAssembler,
)
from doclinks.settings import Settings, get_settings

log = logging.getLogger(__name__)

GOALS: Dict[str, Type[AbstractJavadocGoal]] = {
    goal.name: goal
    for goal in (GenerateOptionsFileGoal, GenerateOfflineLinkOptionsFileGoal, GenerateJavadocMapGoal)
}


@dataclass
class ServiceContainer:
    """Container that wires the goal collaborators with shared settings."""

    settings: Settings
    client: Optional[httpx.Client] = None
    resolver: RepositoryArtifactResolver = field(init=False)
    fetcher: IndexListFetcher = field(init=False)
    archive_reader: ZipArchiveReader = field(init=False)
    _owns_client: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = build_http_client(self.settings)
            self._owns_client = True
        self.resolver = RepositoryArtifactResolver(self.settings, client=self.client)
        self.fetcher = IndexListFetcher(client=self.client)
        self.archive_reader = ZipArchiveReader()

    def create_goal(self, name: str) -> AbstractJavadocGoal:
        try:
            goal = GOALS[name]
        except KeyError:
            raise ValueError(f"Unknown goal {name!r}; expected one of {sorted(GOALS)}") from None
        if goal is GenerateJavadocMapGoal:
            return goal(self.settings, self.resolver, builder=JavadocMapBuilder(self.fetcher))
        assembler = OptionsAssembler(OfflineIndexExtractor(self.archive_reader))
        return goal(self.settings, self.resolver, assembler=assembler)

    def close(self) -> None:
        if self._owns_client and self.client is not None:
            self.client.close()

    def __enter__(self) -> "ServiceContainer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def run_goal(
    name: str,
    project: ProjectModel | Path,
    settings: Optional[Settings] = None,
) -> Optional[Path]:
    """Execute goal ``name`` for ``project`` (a model or a JSON descriptor path)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    if not isinstance(project, ProjectModel):
        project = load_project_descriptor(Path(project))
    log.info("Running %s for %d dependencies", name, len(project.dependencies))
    with ServiceContainer(settings) as container:
        return container.create_goal(name).execute(project)
