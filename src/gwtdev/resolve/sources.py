"""Source path collection.

GWT compiles from Java sources, so the source roots of every selected project
are needed, together with those of the sibling gwt-lib projects (or sibling
projects depended upon through their "sources" artifact) they depend on,
transitively. Ordinary binary dependencies contribute no source roots.
"""

import logging
from typing import Dict, List, Sequence, Set

from ..reactor.graph import ProjectGraph
from ..reactor.models import GWT_LIB_PACKAGING, SOURCES_CLASSIFIER, Project
from ..reactor.scopes import ScopeFilter

logger = logging.getLogger(__name__)


class SourceCollector:
    """Walks dependency references between reactor projects to gather source roots.

    Each project is traversed at most once, so diamond and cyclic reference
    graphs terminate and yield every source root once, in first-seen order.
    """

    def __init__(self, graph: ProjectGraph, scope_filter: ScopeFilter):
        self.graph = graph
        self.scope_filter = scope_filter
        self._sources: Dict[str, None] = {}
        self._visited: Set[str] = set()

    @property
    def sources(self) -> List[str]:
        return list(self._sources)

    def add_sources(self, project: Project) -> None:
        """Add the source roots of a project and of the sibling projects it depends on."""
        if project.key in self._visited:
            return
        self._visited.add(project.key)
        logger.debug(f"Adding sources for {project.id}")

        effective = project.execution_project if project.execution_project is not None else project
        for root in effective.compile_source_roots:
            self._sources.setdefault(root, None)

        for artifact in effective.dependency_artifacts:
            if not artifact.added_to_classpath:
                continue
            if not self.scope_filter.includes(artifact):
                continue
            if artifact.type != GWT_LIB_PACKAGING and artifact.classifier != SOURCES_CLASSIFIER:
                logger.debug(f"Ignoring {artifact.id}; neither a gwt-lib or jar:sources.")
                continue
            reference = self.graph.reference(effective, artifact)
            if reference is None:
                logger.debug(f"Ignoring {artifact.id}; no corresponding project reference.")
                continue
            self.add_sources(reference)


def collect_sources(projects: Sequence[Project], scope_filter: ScopeFilter, graph: ProjectGraph) -> List[str]:
    """Collect the ordered, duplicate-free source directories of the selected projects.

    Args:
        projects: Selected projects
        scope_filter: Filter dependencies must pass to be followed
        graph: Reactor used to resolve dependency references

    Returns:
        Source directories in discovery order
    """
    collector = SourceCollector(graph, scope_filter)
    for project in projects:
        collector.add_sources(project)
    return collector.sources
