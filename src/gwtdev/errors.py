"""Exception hierarchy for gwtdev.

Every failure of the resolve-and-launch pass is fatal and surfaces as one of
these exceptions. The CLI converts them to exit codes; library callers can
catch GwtDevError to handle all of them at once.
"""

from typing import Optional


class GwtDevError(Exception):
    """Base class for all gwtdev errors."""

    pass


class ConfigError(GwtDevError):
    """Raised for invalid configuration or an unreadable reactor file."""

    pass


class SelectionError(GwtDevError):
    """Raised when the reactor projects to run cannot be selected."""

    pass


class NoProjectError(SelectionError):
    """Raised when the selection produced zero projects."""

    def __init__(self, message: str = "No project found"):
        super().__init__(message)


class AmbiguousProjectError(SelectionError):
    """Raised when a project identifier matches several reactor projects."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Ambiguous project identifier, there are several matching projects in the reactor: {token}")


class ProjectNotFoundError(SelectionError):
    """Raised when a project identifier matches no reactor project."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Could not find the selected project in the reactor: {token}")


class NoModuleError(GwtDevError):
    """Raised when no GWT module could be determined."""

    def __init__(self, message: str = "No module found"):
        super().__init__(message)


class UnresolvedArtifactError(GwtDevError):
    """Raised when a classpath artifact has no resolved file."""

    def __init__(self, artifact_id: str):
        self.artifact_id = artifact_id
        super().__init__(f"Artifact has not been resolved to a file: {artifact_id}")


class IOFailure(GwtDevError):
    """Raised when a directory cannot be created or the process cannot start."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class LaunchError(GwtDevError):
    """Raised when the GWT process exits with a non-zero status."""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"GWT exited with status {status}")
