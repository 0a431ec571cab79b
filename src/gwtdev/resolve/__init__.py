"""Project, module, source and classpath resolution."""

from .classpath import build_classpath
from .modules import discover_modules
from .selection import ResolvedSelection, resolve_selection
from .selector import select_projects
from .sources import SourceCollector, collect_sources

__all__ = [
    "ResolvedSelection",
    "SourceCollector",
    "build_classpath",
    "collect_sources",
    "discover_modules",
    "resolve_selection",
    "select_projects",
]
