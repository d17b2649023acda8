"""Build goals: javadoc options file, offline link options file and javadoc map."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from doclinks.modules.javadoc.domain import LinkRule, OfflineLinkRule, ProjectModel, build_rules
from doclinks.modules.javadoc.fileget import ArtifactResolver
from doclinks.modules.javadoc.output import write_options, write_properties
from doclinks.modules.javadoc.util.exceptions import (
    DocLinksError,
    GoalError,
    GoalExecutionError,
    GoalFailureError,
)
from doclinks.settings import Settings

from .assembler import JavadocMapBuilder, OptionsAssembler
from .resolution import OfflineResolutionEngine, ResolvedOfflineMap, collect_link_urls

OPTIONS_FILE_NAME = "options"
OFFLINE_OPTIONS_FILE_NAME = "OPTIONS"


class AbstractJavadocGoal:
    """Common ``skip`` handling and error reporting for the goals."""

    name = "javadoc"
    skip_message = "Skipping."

    def __init__(
        self,
        settings: Settings,
        resolver: ArtifactResolver,
        *,
        links: Optional[Sequence[LinkRule]] = None,
        offlinelinks: Optional[Sequence[LinkRule]] = None,
    ) -> None:
        self.settings = settings
        self.links = list(links) if links is not None else build_rules(settings.links, LinkRule)
        self.offlinelinks = (
            list(offlinelinks)
            if offlinelinks is not None
            else build_rules(settings.offlinelinks, OfflineLinkRule)
        )
        self.engine = OfflineResolutionEngine(resolver)
        self.log = logging.getLogger(self.__class__.__name__)

    @property
    def include_dependency_management(self) -> bool:
        return self.settings.include_dependency_management

    def execute(self, project: ProjectModel) -> Optional[Path]:
        if self.settings.skip:
            self.log.info(self.skip_message)
            return None
        try:
            return self.run(project)
        except GoalError as exc:
            self.log.error("%s", exc, exc_info=True)
            raise
        except DocLinksError as exc:
            self.log.error("%s", exc, exc_info=True)
            raise GoalFailureError(str(exc)) from exc
        except Exception as exc:  # noqa: BLE001
            self.log.error("%s", exc, exc_info=True)
            raise GoalExecutionError(str(exc)) from exc

    def run(self, project: ProjectModel) -> Path:
        raise NotImplementedError

    def resolve_offline_links(self, project: ProjectModel) -> ResolvedOfflineMap:
        return self.engine.resolve(self.offlinelinks, project, self.include_dependency_management)


class GenerateOptionsFileGoal(AbstractJavadocGoal):
    """Write ``-link``/``-linkoffline`` options for the javadoc tool."""

    name = "generate-options-file"
    skip_message = "Skipping javadoc options file generation."

    def __init__(
        self,
        settings: Settings,
        resolver: ArtifactResolver,
        assembler: Optional[OptionsAssembler] = None,
        **kwargs,
    ) -> None:
        super().__init__(settings, resolver, **kwargs)
        self.assembler = assembler or OptionsAssembler()
        self.output_directory = Path(settings.options_output_directory)

    def run(self, project: ProjectModel) -> Path:
        links = collect_link_urls(self.links, project, self.include_dependency_management)
        offline = self.resolve_offline_links(project)
        self.output_directory.mkdir(parents=True, exist_ok=True)
        lines = self.assembler.assemble(links, offline, self.output_directory)
        return write_options(self.output_directory / OPTIONS_FILE_NAME, lines)


class GenerateOfflineLinkOptionsFileGoal(AbstractJavadocGoal):
    """Write only the ``-linkoffline`` options, extracting each index locally."""

    name = "generate-offline-link-options-file"
    skip_message = "Skipping offline link options file generation"

    def __init__(
        self,
        settings: Settings,
        resolver: ArtifactResolver,
        assembler: Optional[OptionsAssembler] = None,
        **kwargs,
    ) -> None:
        super().__init__(settings, resolver, **kwargs)
        self.assembler = assembler or OptionsAssembler()
        self.output_directory = Path(settings.offline_links_output_directory)

    def run(self, project: ProjectModel) -> Path:
        offline = self.resolve_offline_links(project)
        if not offline:
            self.log.warning("No offline links configured")
        self.output_directory.mkdir(parents=True, exist_ok=True)
        lines = self.assembler.assemble([], offline, self.output_directory)
        return write_options(self.output_directory / OFFLINE_OPTIONS_FILE_NAME, lines)


class GenerateJavadocMapGoal(AbstractJavadocGoal):
    """Write the package -> javadoc root property map."""

    name = "generate-javadoc-map"
    skip_message = "Skipping javadoc map generation."

    def __init__(
        self,
        settings: Settings,
        resolver: ArtifactResolver,
        builder: Optional[JavadocMapBuilder] = None,
        **kwargs,
    ) -> None:
        super().__init__(settings, resolver, **kwargs)
        self.builder = builder or JavadocMapBuilder()
        self.output_path = Path(settings.javadoc_map_output_directory) / settings.javadoc_map_file_name

    def run(self, project: ProjectModel) -> Path:
        offline = self.resolve_offline_links(project)
        links = collect_link_urls(self.links, project, self.include_dependency_management)
        properties = self.builder.build(links, offline)
        return write_properties(self.output_path, properties)
