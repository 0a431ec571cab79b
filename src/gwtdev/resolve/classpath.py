"""Classpath assembly."""

from typing import Dict, List, Sequence

from ..errors import UnresolvedArtifactError
from ..reactor.models import Project
from ..reactor.scopes import ScopeFilter


def build_classpath(
    projects: Sequence[Project],
    scope_filter: ScopeFilter,
    prepend_sources: bool,
    sources: Sequence[str],
) -> List[str]:
    """Build the ordered, duplicate-free classpath of the selected projects.

    Args:
        projects: Selected projects
        scope_filter: Filter resolved artifacts must pass
        prepend_sources: Whether source directories lead the classpath
        sources: Collected source directories

    Returns:
        Classpath entries: sources (when prepended), then for each project its
        output directory followed by its resolved artifact files.

    Raises:
        UnresolvedArtifactError: If an included artifact has no resolved file.
    """
    classpath: Dict[str, None] = {}
    if prepend_sources:
        classpath.update(dict.fromkeys(sources))

    for project in projects:
        classpath.setdefault(project.output_directory, None)
        for artifact in project.artifacts:
            if not artifact.added_to_classpath:
                continue
            if not scope_filter.includes(artifact):
                continue
            if artifact.file is None:
                raise UnresolvedArtifactError(artifact.id)
            classpath.setdefault(artifact.file, None)

    return list(classpath)
