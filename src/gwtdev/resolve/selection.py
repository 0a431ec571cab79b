"""Resolved selection - everything a launch derives from the reactor.

Design:
    resolve_selection() runs the resolution steps in a fixed order:
    1. Select projects
    2. Discover modules
    3. Collect source directories
    4. Build the classpath
    The first failing step raises and nothing later runs.
"""

from dataclasses import dataclass
from typing import Optional

from ..reactor.graph import ProjectGraph
from ..reactor.models import DEFAULT_PLUGIN_KEY, Project
from ..reactor.scopes import ScopeFilter
from .classpath import build_classpath
from .modules import discover_modules
from .selector import select_projects
from .sources import collect_sources


@dataclass(frozen=True)
class ResolvedSelection:
    """Result of resolving a launch against the reactor.

    Attributes:
        projects: Selected projects
        modules: GWT module names, in the order they are passed to GWT
        sources: Source directories, duplicate-free
        classpath: Classpath entries, duplicate-free
    """

    projects: tuple[Project, ...]
    modules: tuple[str, ...]
    sources: tuple[str, ...]
    classpath: tuple[str, ...]


def resolve_selection(
    graph: ProjectGraph,
    scope_filter: ScopeFilter,
    projects: Optional[str] = None,
    modules: Optional[str] = None,
    prepend_sources: bool = False,
    plugin_key: str = DEFAULT_PLUGIN_KEY,
) -> ResolvedSelection:
    """Resolve projects, modules, sources and classpath.

    Args:
        graph: Reactor project graph
        scope_filter: Scope filter for dependencies
        projects: Optional comma-delimited project identifiers
        modules: Optional comma-delimited module names
        prepend_sources: Whether source directories lead the classpath
        plugin_key: Plugin whose configuration declares module names

    Returns:
        The resolved selection
    """
    selected = select_projects(graph.projects, projects)
    module_list = discover_modules(selected, modules, plugin_key)
    sources = collect_sources(selected, scope_filter, graph)
    classpath = build_classpath(selected, scope_filter, prepend_sources, sources)
    return ResolvedSelection(
        projects=tuple(selected),
        modules=tuple(module_list),
        sources=tuple(sources),
        classpath=tuple(classpath),
    )
