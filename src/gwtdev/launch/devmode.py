"""Launcher for classic GWT DevMode."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ..reactor.graph import ProjectGraph
from ..subprocess_utils import ProcessRunner
from .launcher import DevModeLauncher
from .options import LaunchConfig

DEVMODE_MAIN_CLASS = "com.google.gwt.dev.DevMode"


@dataclass
class DevModeOptions:
    """DevMode-specific options.

    Attributes:
        work_dir: -workDir; defaults to <build dir>/gwt/devmode/work
        war_dir: -war; defaults to <build dir>/gwt/devmode/war
        startup_urls: Each passed as -startupUrl
        devmode_args: Extra arguments placed before -war
    """

    work_dir: Optional[Path] = None
    war_dir: Optional[Path] = None
    startup_urls: List[str] = field(default_factory=list)
    devmode_args: List[str] = field(default_factory=list)


class DevModeRunner(DevModeLauncher):
    """Runs com.google.gwt.dev.DevMode.

    DevMode loads module sources from the classpath, so source directories
    are prepended to it.
    """

    def __init__(
        self,
        graph: ProjectGraph,
        config: LaunchConfig,
        options: Optional[DevModeOptions] = None,
        runner: Optional[ProcessRunner] = None,
    ):
        super().__init__(graph, config, runner)
        self.options = options if options is not None else DevModeOptions()

    def get_main_class(self) -> str:
        return DEVMODE_MAIN_CLASS

    def get_work_dir(self) -> Path:
        if self.options.work_dir is not None:
            return self.options.work_dir
        return self.build_directory / "gwt" / "devmode" / "work"

    def get_war_dir(self) -> Path:
        if self.options.war_dir is not None:
            return self.options.war_dir
        return self.build_directory / "gwt" / "devmode" / "war"

    def get_specific_arguments(self, sources: Sequence[str]) -> List[str]:
        args = list(self.options.devmode_args)
        args.extend(["-war", str(self.get_war_dir().absolute())])
        for url in self.options.startup_urls:
            args.extend(["-startupUrl", url])
        return args

    def prepend_sources_to_classpath(self) -> bool:
        return True

    def force_mkdirs(self) -> None:
        self.get_war_dir().mkdir(parents=True, exist_ok=True)
