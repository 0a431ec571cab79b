"""Reactor factories shared by the unit tests."""

from typing import Optional, Sequence

import pytest

from gwtdev.reactor.models import DEFAULT_PLUGIN_KEY, Artifact, ArtifactScope, Project

_UNSET = object()


def build_artifact(
    artifact_id: str,
    group_id: str = "com.example",
    version: str = "1.0",
    scope: ArtifactScope = ArtifactScope.COMPILE,
    type: str = "jar",
    classifier: Optional[str] = None,
    added_to_classpath: bool = True,
    file=_UNSET,
) -> Artifact:
    """Create an Artifact resolved under /repo unless `file` is given."""
    if file is _UNSET:
        suffix = f"-{classifier}" if classifier else ""
        file = f"/repo/{group_id}/{artifact_id}-{version}{suffix}.jar"
    return Artifact(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        scope=scope,
        type=type,
        classifier=classifier,
        added_to_classpath=added_to_classpath,
        file=file,
    )


def build_project(
    artifact_id: str,
    group_id: str = "com.example",
    packaging: str = "jar",
    sources: Optional[Sequence[str]] = None,
    dependencies: Sequence[Artifact] = (),
    artifacts: Optional[Sequence[Artifact]] = None,
    siblings: Sequence[Project] = (),
    module_name: Optional[str] = None,
    execution_project: Optional[Project] = None,
) -> Project:
    """Create a Project laid out under /ws/<artifact_id>.

    Args:
        dependencies: Direct dependency artifacts
        artifacts: Resolved artifacts (defaults to the direct dependencies)
        siblings: Projects the direct dependencies resolve to, by key
        module_name: moduleName stored in the GWT plugin configuration
    """
    if sources is None:
        sources = [f"/ws/{artifact_id}/src/main/java"]
    plugin_configuration = {}
    if module_name is not None:
        plugin_configuration[DEFAULT_PLUGIN_KEY] = {"moduleName": module_name}
    return Project(
        group_id=group_id,
        artifact_id=artifact_id,
        version="1.0",
        packaging=packaging,
        compile_source_roots=tuple(sources),
        output_directory=f"/ws/{artifact_id}/target/classes",
        build_directory=f"/ws/{artifact_id}/target",
        dependency_artifacts=tuple(dependencies),
        artifacts=tuple(artifacts if artifacts is not None else dependencies),
        project_references={s.key: s.key for s in siblings},
        plugin_configuration=plugin_configuration,
        execution_project=execution_project,
    )


def artifact_of(project: Project, type: str = "gwt-lib", classifier: Optional[str] = None, **kwargs) -> Artifact:
    """Create the artifact another project depends on to reach `project`."""
    return build_artifact(project.artifact_id, group_id=project.group_id, type=type, classifier=classifier, **kwargs)


@pytest.fixture
def make_artifact():
    return build_artifact


@pytest.fixture
def make_project():
    return build_project


@pytest.fixture
def dependency_on():
    return artifact_of
