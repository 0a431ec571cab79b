"""Launcher for the GWT Super Dev Mode CodeServer."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ..reactor.graph import ProjectGraph
from ..subprocess_utils import ProcessRunner
from .launcher import DevModeLauncher
from .options import LaunchConfig

CODESERVER_MAIN_CLASS = "com.google.gwt.dev.codeserver.CodeServer"


@dataclass
class CodeServerOptions:
    """CodeServer-specific options.

    Attributes:
        work_dir: -workDir; defaults to <build dir>/gwt/codeserver
        launcher_dir: -launcherDir, where the CodeServer writes the module's nocache.js
        codeserver_args: Extra arguments placed first
    """

    work_dir: Optional[Path] = None
    launcher_dir: Optional[Path] = None
    codeserver_args: List[str] = field(default_factory=list)


class CodeServerRunner(DevModeLauncher):
    """Runs com.google.gwt.dev.codeserver.CodeServer.

    The CodeServer takes source directories as -src arguments instead of
    reading them from the classpath.
    """

    def __init__(
        self,
        graph: ProjectGraph,
        config: LaunchConfig,
        options: Optional[CodeServerOptions] = None,
        runner: Optional[ProcessRunner] = None,
    ):
        super().__init__(graph, config, runner)
        self.options = options if options is not None else CodeServerOptions()

    def get_main_class(self) -> str:
        return CODESERVER_MAIN_CLASS

    def get_work_dir(self) -> Path:
        if self.options.work_dir is not None:
            return self.options.work_dir
        return self.build_directory / "gwt" / "codeserver"

    def get_specific_arguments(self, sources: Sequence[str]) -> List[str]:
        args = list(self.options.codeserver_args)
        if self.options.launcher_dir is not None:
            args.extend(["-launcherDir", str(self.options.launcher_dir.absolute())])
        for source in sources:
            args.extend(["-src", source])
        return args

    def force_mkdirs(self) -> None:
        if self.options.launcher_dir is not None:
            self.options.launcher_dir.mkdir(parents=True, exist_ok=True)
