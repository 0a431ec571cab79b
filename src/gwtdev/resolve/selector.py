"""Reactor project selection.

Picks the projects a launch runs against. Without an explicit list, a
single-project reactor selects its only project and a multi-project reactor
selects every gwt-app project. An explicit list names projects by
`artifactId`, `:artifactId` or `groupId:artifactId`; identifiers claimed by
more than one project are ambiguous and must be qualified further.
"""

import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..errors import AmbiguousProjectError, NoProjectError, ProjectNotFoundError
from ..reactor.models import GWT_APP_PACKAGING, Project

logger = logging.getLogger(__name__)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def split_comma_list(value: str) -> List[str]:
    """Split a comma-delimited option value, dropping empty entries."""
    return [token.strip() for token in value.split(",") if token.strip()]


def build_project_lookup(projects: Sequence[Project]) -> Tuple[Dict[str, Project], Set[str]]:
    """Index projects by every identifier form they can be selected with.

    Args:
        projects: Reactor projects

    Returns:
        (lookup, ambiguous) where lookup maps unambiguous identifiers to their
        project and ambiguous holds identifiers claimed by several projects.
    """
    lookup: Dict[str, Project] = {}
    ambiguous: Set[str] = set()
    for project in projects:
        for key in (project.artifact_id, f":{project.artifact_id}", project.key):
            if key in ambiguous:
                continue
            if key in lookup:
                del lookup[key]
                ambiguous.add(key)
            else:
                lookup[key] = project
    return lookup, ambiguous


def select_projects(projects: Sequence[Project], explicit_ids: Optional[str] = None) -> List[Project]:
    """Select the reactor projects to run.

    Args:
        projects: All reactor projects, in reactor order
        explicit_ids: Optional comma-delimited project identifiers

    Returns:
        Selected projects; in token order when identifiers were given

    Raises:
        AmbiguousProjectError: If an identifier matches several projects
        ProjectNotFoundError: If an identifier matches no project
        NoProjectError: If nothing was selected
    """
    selected: List[Project] = []
    if is_blank(explicit_ids):
        if len(projects) == 1:
            selected.append(projects[0])
        else:
            selected.extend(p for p in projects if p.packaging == GWT_APP_PACKAGING)
    else:
        assert explicit_ids is not None
        lookup, ambiguous = build_project_lookup(projects)
        seen: Set[str] = set()
        for token in split_comma_list(explicit_ids):
            project = lookup.get(token)
            if project is None:
                if token in ambiguous:
                    raise AmbiguousProjectError(token)
                raise ProjectNotFoundError(token)
            if project.key in seen:
                continue
            seen.add(project.key)
            selected.append(project)

    if not selected:
        raise NoProjectError()

    logger.debug(f"Selected projects: {', '.join(p.key for p in selected)}")
    return selected
