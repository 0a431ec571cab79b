"""Reactor project graph.

The build tool hands over the reactor as an ordered list of projects whose
dependency references point at each other by key. ProjectGraph keeps the
projects in reactor order and indexes them by key so references can be
followed without the records holding each other directly.

Reactor file format (JSON):

    {
        "root": "com.example:parent",
        "projects": [ {<Project.to_dict()>}, ... ]
    }

"root" is optional and defaults to the first project. Relative paths are
resolved against the directory holding the reactor file.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence

from ..errors import ConfigError
from .models import Artifact, Project


class ProjectGraph:
    """Ordered, key-indexed arena of reactor projects."""

    def __init__(self, projects: Sequence[Project], root_key: Optional[str] = None):
        """
        Initialize the graph.

        Args:
            projects: Reactor projects in build order
            root_key: Key of the project the launch runs in (defaults to the first project)

        Raises:
            ConfigError: If the reactor is empty, a key repeats, or root_key is unknown.
        """
        if not projects:
            raise ConfigError("The reactor contains no project")
        self._projects: tuple[Project, ...] = tuple(projects)
        self._by_key: Dict[str, Project] = {}
        for project in self._projects:
            if project.key in self._by_key:
                raise ConfigError(f"Duplicate project in the reactor: {project.key}")
            self._by_key[project.key] = project
        if root_key is None:
            root_key = self._projects[0].key
        if root_key not in self._by_key:
            raise ConfigError(f"Root project is not part of the reactor: {root_key}")
        self._root_key = root_key

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    @property
    def root(self) -> Project:
        """Project whose build directory hosts the launch."""
        return self._by_key[self._root_key]

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(self._projects)

    def get(self, key: str) -> Optional[Project]:
        return self._by_key.get(key)

    def reference(self, project: Project, artifact: Artifact) -> Optional[Project]:
        """Return the sibling project a dependency of `project` resolves to.

        Returns None when the dependency is an external artifact, or when the
        referenced key is not part of this reactor.
        """
        ref_key = project.project_references.get(artifact.key)
        if ref_key is None:
            return None
        return self._by_key.get(ref_key)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "root": self._root_key,
            "projects": [p.to_dict() for p in self._projects],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> "ProjectGraph":
        """Deserialize from dictionary, anchoring relative paths at base_dir when given.

        Raises:
            ConfigError: If a required field is missing or has the wrong type.
        """
        try:
            projects: List[Project] = [Project.from_dict(p) for p in data["projects"]]
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid reactor description: {e!r}") from e
        if base_dir is not None:
            projects = [p.with_base_dir(base_dir) for p in projects]
        return cls(projects, root_key=data.get("root"))


def load_reactor(path: Path) -> ProjectGraph:
    """Load a reactor file.

    Args:
        path: Path to the JSON reactor file

    Returns:
        The project graph described by the file

    Raises:
        ConfigError: If the file cannot be read or is not a valid reactor description.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read reactor file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Reactor file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Reactor file {path} must contain a JSON object")
    return ProjectGraph.from_dict(data, base_dir=path.parent)
