"""Reactor model: projects, artifacts, scopes and the project graph."""

from .graph import ProjectGraph, load_reactor
from .models import (
    DEFAULT_PLUGIN_KEY,
    GWT_APP_PACKAGING,
    GWT_LIB_PACKAGING,
    Artifact,
    ArtifactScope,
    Project,
)
from .scopes import DEFAULT_CLASSPATH_SCOPE, ScopeFilter

__all__ = [
    "Artifact",
    "ArtifactScope",
    "DEFAULT_CLASSPATH_SCOPE",
    "DEFAULT_PLUGIN_KEY",
    "GWT_APP_PACKAGING",
    "GWT_LIB_PACKAGING",
    "Project",
    "ProjectGraph",
    "ScopeFilter",
    "load_reactor",
]
