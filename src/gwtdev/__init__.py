"""gwtdev - Run GWT DevMode and the Super Dev Mode CodeServer for multi-module builds.

Resolves which reactor projects and GWT modules to run, collects their
source directories through inter-project references, assembles the
classpath, and launches the GWT tool with the derived arguments.
"""

__version__ = "0.1.0"

from gwtdev.errors import GwtDevError  # noqa: E402
from gwtdev.launch import CodeServerRunner, DevModeRunner, LaunchConfig  # noqa: E402
from gwtdev.reactor import ProjectGraph, load_reactor  # noqa: E402
from gwtdev.resolve import ResolvedSelection, resolve_selection  # noqa: E402

__all__ = [
    "CodeServerRunner",
    "DevModeRunner",
    "GwtDevError",
    "LaunchConfig",
    "ProjectGraph",
    "ResolvedSelection",
    "__version__",
    "load_reactor",
    "resolve_selection",
]
