"""
Launch orchestration shared by the GWT DevMode and CodeServer launchers.

This module resolves the selection, assembles the GWT command line and
runs it through a ProcessRunner. Concrete launchers supply the main class,
the work directory, their own arguments and any extra directories.
"""

import logging
import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import ConfigError, IOFailure, LaunchError
from ..output import LOGGER_NAME
from ..reactor.graph import ProjectGraph
from ..resolve.selection import ResolvedSelection, resolve_selection
from ..subprocess_utils import CommandLine, ProcessRunner, StreamingProcessRunner
from .options import LaunchConfig, LogLevel

# Module-level logger; also receives the GWT process output
logger = logging.getLogger(__name__)

CLASSPATH_ENV = "CLASSPATH"


def find_java_executable(configured: Optional[str] = None) -> str:
    """Locate the java binary.

    Priority: configured path > $JAVA_HOME/bin/java > java on PATH.
    """
    if configured:
        return configured
    java_home = os.environ.get("JAVA_HOME")
    if java_home:
        return str(Path(java_home) / "bin" / "java")
    return shutil.which("java") or "java"


class DevModeLauncher(ABC):
    """
    Base class for launchers of the GWT development tools.

    Subclasses implement the extension points:
        get_main_class, get_work_dir, get_specific_arguments, force_mkdirs
    and may override prepend_sources_to_classpath (False by default).
    """

    def __init__(self, graph: ProjectGraph, config: LaunchConfig, runner: Optional[ProcessRunner] = None):
        """
        Initialize the launcher.

        Args:
            graph: Reactor project graph
            config: Launch options
            runner: Process-execution collaborator (defaults to StreamingProcessRunner)
        """
        self.graph = graph
        self.config = config
        self.runner: ProcessRunner = runner if runner is not None else StreamingProcessRunner()

    @abstractmethod
    def get_main_class(self) -> str:
        """Fully qualified name of the GWT entry point."""

    @abstractmethod
    def get_work_dir(self) -> Path:
        """Directory passed as -workDir."""

    @abstractmethod
    def get_specific_arguments(self, sources: Sequence[str]) -> List[str]:
        """Launcher-specific arguments, placed before the module names."""

    @abstractmethod
    def force_mkdirs(self) -> None:
        """Create launcher-specific directories.

        Raises:
            OSError: If a directory cannot be created.
        """

    def prepend_sources_to_classpath(self) -> bool:
        return False

    @property
    def build_directory(self) -> Path:
        """Build directory of the root project; the process runs there."""
        build_directory = self.graph.root.build_directory
        if not build_directory:
            raise ConfigError(f"Project {self.graph.root.key} has no build directory")
        return Path(build_directory)

    def resolve(self) -> ResolvedSelection:
        """Resolve projects, modules, sources and classpath for this launch."""
        return resolve_selection(
            self.graph,
            self.config.scope_filter,
            projects=self.config.projects,
            modules=self.config.modules,
            prepend_sources=self.prepend_sources_to_classpath(),
            plugin_key=self.config.plugin_key,
        )

    def get_log_level(self) -> LogLevel:
        if self.config.log_level is not None:
            return self.config.log_level
        return LogLevel.from_logger(logging.getLogger(LOGGER_NAME))

    def build_arguments(self, selection: ResolvedSelection) -> List[str]:
        """Assemble the JVM and GWT arguments for a resolved selection."""
        args: List[str] = list(self.config.jvm_args)
        for key, value in self.config.system_properties.items():
            args.append(f"-D{key}={value}")

        args.append(self.get_main_class())
        args.extend(["-logLevel", self.get_log_level().value])
        args.extend(["-workDir", str(self.get_work_dir().absolute())])
        if self.config.source_level is not None:
            args.extend(["-sourceLevel", self.config.source_level])
        args.extend(self.get_specific_arguments(selection.sources))
        args.extend(selection.modules)
        return args

    def build_environment(self, classpath: Sequence[str]) -> dict[str, str]:
        """Current environment with CLASSPATH set to the joined classpath."""
        env = os.environ.copy()
        env[CLASSPATH_ENV] = os.pathsep.join(classpath)
        return env

    def create_directories(self) -> None:
        """Create the build, work and launcher-specific directories.

        Raises:
            IOFailure: If a directory cannot be created.
        """
        try:
            self.build_directory.mkdir(parents=True, exist_ok=True)
            self.get_work_dir().mkdir(parents=True, exist_ok=True)
            self.force_mkdirs()
        except OSError as e:
            raise IOFailure(str(e), e) from e

    def launch(self, selection: Optional[ResolvedSelection] = None) -> int:
        """Run GWT until it exits.

        Args:
            selection: Previously resolved selection; resolved here when None

        Returns:
            The exit status (always 0; failures raise)

        Raises:
            GwtDevError: If resolution fails
            IOFailure: If a directory cannot be created or the process cannot start
            LaunchError: If the process exits with a non-zero status
        """
        if selection is None:
            selection = self.resolve()
        args = self.build_arguments(selection)
        env = self.build_environment(selection.classpath)

        self.create_directories()

        command = CommandLine(
            executable=find_java_executable(self.config.java_executable),
            arguments=tuple(args),
            working_directory=self.build_directory,
            environment=env,
        )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Arguments: {' '.join(command.arguments)}")
            logger.debug(f"Classpath: {env[CLASSPATH_ENV]}")

        try:
            status = self.runner.run(command, logger.info, logger.warning)
        except OSError as e:
            raise IOFailure(f"Could not start {command.executable}: {e}", e) from e

        if status != 0:
            raise LaunchError(status)
        return status
