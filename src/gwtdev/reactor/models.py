"""Data models for the reactor project graph.

Defines the read-only records supplied by the build tool:
- ArtifactScope: Enum of dependency scopes
- Artifact: A resolved dependency with scope and packaging metadata
- Project: A buildable module of the multi-module build

All records are frozen. The resolution code derives new collections from
them and never mutates them.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

# Packaging of the projects run by default when no project is named
GWT_APP_PACKAGING = "gwt-app"

# Packaging of sibling projects whose sources are added to the source path
GWT_LIB_PACKAGING = "gwt-lib"

SOURCES_CLASSIFIER = "sources"

# Plugin whose configuration declares a project's GWT module name
DEFAULT_PLUGIN_KEY = "net.ltgt.gwt.maven:gwt-maven-plugin"

MODULE_NAME_KEY = "moduleName"


def versionless_key(group_id: str, artifact_id: str) -> str:
    """Return the `group:artifact` key shared by projects and artifacts."""
    return f"{group_id}:{artifact_id}"


def absolute_path(path: str, base_dir: Path) -> str:
    """Anchor a relative path at base_dir; absolute and empty paths are returned unchanged."""
    if not path or Path(path).is_absolute():
        return path
    return str((base_dir / path).absolute())


class ArtifactScope(Enum):
    """Visibility classification of a dependency."""

    SYSTEM = "system"
    PROVIDED = "provided"
    COMPILE = "compile"
    RUNTIME = "runtime"
    TEST = "test"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Artifact:
    """A dependency artifact as resolved by the build tool.

    Attributes:
        group_id: Group coordinate (e.g. "com.google.gwt")
        artifact_id: Artifact coordinate (e.g. "gwt-user")
        version: Version string
        scope: Dependency scope
        type: Packaging/handler kind (e.g. "jar", "gwt-lib")
        classifier: Optional classifier (e.g. "sources")
        added_to_classpath: Whether the handler contributes this artifact to the classpath
        file: Resolved file path, None when the artifact has not been resolved
    """

    group_id: str
    artifact_id: str
    version: str
    scope: ArtifactScope = ArtifactScope.COMPILE
    type: str = "jar"
    classifier: Optional[str] = None
    added_to_classpath: bool = True
    file: Optional[str] = None

    @property
    def key(self) -> str:
        """Versionless key used to look up project references."""
        return versionless_key(self.group_id, self.artifact_id)

    @property
    def id(self) -> str:
        """Full identifier, `group:artifact:type[:classifier]:version`."""
        parts = [self.group_id, self.artifact_id, self.type]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "group_id": self.group_id,
            "artifact_id": self.artifact_id,
            "version": self.version,
            "scope": self.scope.value,
            "type": self.type,
            "classifier": self.classifier,
            "added_to_classpath": self.added_to_classpath,
            "file": self.file,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Artifact":
        """Deserialize from dictionary."""
        return cls(
            group_id=data["group_id"],
            artifact_id=data["artifact_id"],
            version=data["version"],
            scope=ArtifactScope(data.get("scope", "compile")),
            type=data.get("type", "jar"),
            classifier=data.get("classifier"),
            added_to_classpath=data.get("added_to_classpath", True),
            file=data.get("file"),
        )

    def with_base_dir(self, base_dir: Path) -> "Artifact":
        """Return a copy whose relative file path is anchored at base_dir."""
        if self.file is None:
            return self
        return replace(self, file=absolute_path(self.file, base_dir))


@dataclass(frozen=True)
class Project:
    """A project of the reactor.

    Attributes:
        group_id: Group coordinate
        artifact_id: Artifact coordinate
        version: Version string
        packaging: Packaging kind (e.g. "gwt-app", "gwt-lib", "jar")
        compile_source_roots: Ordered source directories
        output_directory: Directory compiled classes are written to
        build_directory: Directory holding all build outputs
        dependency_artifacts: Direct dependencies
        artifacts: Fully resolved (transitive) dependencies
        project_references: Dependency key -> key of the sibling project it resolves to
        plugin_configuration: Plugin key -> configuration values
        execution_project: Substitute project used to resolve source roots
    """

    group_id: str
    artifact_id: str
    version: str
    packaging: str = "jar"
    compile_source_roots: Tuple[str, ...] = ()
    output_directory: str = ""
    build_directory: str = ""
    dependency_artifacts: Tuple[Artifact, ...] = ()
    artifacts: Tuple[Artifact, ...] = ()
    project_references: Mapping[str, str] = field(default_factory=dict)
    plugin_configuration: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    execution_project: Optional["Project"] = None

    @property
    def key(self) -> str:
        """Versionless `group:artifact` key, unique within a reactor."""
        return versionless_key(self.group_id, self.artifact_id)

    @property
    def id(self) -> str:
        """Full identifier, `group:artifact:packaging:version`."""
        return f"{self.group_id}:{self.artifact_id}:{self.packaging}:{self.version}"

    def get_plugin_configuration(self, plugin_key: str) -> Optional[Mapping[str, str]]:
        """Return the configuration stored for a plugin, or None if the plugin is not configured."""
        return self.plugin_configuration.get(plugin_key)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "group_id": self.group_id,
            "artifact_id": self.artifact_id,
            "version": self.version,
            "packaging": self.packaging,
            "compile_source_roots": list(self.compile_source_roots),
            "output_directory": self.output_directory,
            "build_directory": self.build_directory,
            "dependency_artifacts": [a.to_dict() for a in self.dependency_artifacts],
            "artifacts": [a.to_dict() for a in self.artifacts],
            "project_references": dict(self.project_references),
            "plugin_configuration": {k: dict(v) for k, v in self.plugin_configuration.items()},
            "execution_project": self.execution_project.to_dict() if self.execution_project else None,
        }

    def with_base_dir(self, base_dir: Path) -> "Project":
        """Return a copy whose relative paths are anchored at base_dir.

        Covers source roots, output and build directories, artifact files and
        the execution project, so the paths stay valid whatever directory the
        GWT process runs in.
        """
        return replace(
            self,
            compile_source_roots=tuple(absolute_path(root, base_dir) for root in self.compile_source_roots),
            output_directory=absolute_path(self.output_directory, base_dir),
            build_directory=absolute_path(self.build_directory, base_dir),
            dependency_artifacts=tuple(a.with_base_dir(base_dir) for a in self.dependency_artifacts),
            artifacts=tuple(a.with_base_dir(base_dir) for a in self.artifacts),
            execution_project=self.execution_project.with_base_dir(base_dir) if self.execution_project else None,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        """Deserialize from dictionary.

        Raises:
            KeyError: If a coordinate or the output directory is missing.
            ValueError: If the output directory is blank or a scope is unknown.
        """
        output_directory = data["output_directory"]
        if not output_directory or not str(output_directory).strip():
            raise ValueError(f"Project {data['group_id']}:{data['artifact_id']} has no output directory")
        execution_project = data.get("execution_project")
        return cls(
            group_id=data["group_id"],
            artifact_id=data["artifact_id"],
            version=data["version"],
            packaging=data.get("packaging", "jar"),
            compile_source_roots=tuple(data.get("compile_source_roots", [])),
            output_directory=output_directory,
            build_directory=data.get("build_directory", ""),
            dependency_artifacts=tuple(Artifact.from_dict(a) for a in data.get("dependency_artifacts", [])),
            artifacts=tuple(Artifact.from_dict(a) for a in data.get("artifacts", [])),
            project_references=dict(data.get("project_references", {})),
            plugin_configuration={k: dict(v) for k, v in data.get("plugin_configuration", {}).items()},
            execution_project=cls.from_dict(execution_project) if execution_project else None,
        )
