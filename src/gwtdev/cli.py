"""
Command-line interface for gwtdev.

This module provides the `gwtdev` CLI tool for running the GWT development
tools against a multi-module build:

    gwtdev codeserver     Run the Super Dev Mode CodeServer
    gwtdev devmode        Run classic DevMode
    gwtdev resolve        Show the projects, modules, sources and classpath
"""

import argparse
import logging
import shlex
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, List, Optional

from gwtdev import __version__
from gwtdev.errors import GwtDevError, LaunchError
from gwtdev.launch.codeserver import CodeServerOptions, CodeServerRunner
from gwtdev.launch.devmode import DevModeOptions, DevModeRunner
from gwtdev.launch.launcher import DevModeLauncher
from gwtdev.launch.options import INI_FILENAME, LaunchConfig, LogLevel, load_ini_config, parse_system_property
from gwtdev.output import configure_logging, log, log_detail, log_error, log_header
from gwtdev.reactor.graph import load_reactor
from gwtdev.reactor.scopes import ScopeFilter
from gwtdev.report import print_selection

DEFAULT_REACTOR_FILE = "reactor.json"


@dataclass
class CommonArgs:
    """Arguments shared by every command."""

    reactor: Path
    config_file: Optional[Path] = None
    projects: Optional[str] = None
    modules: Optional[str] = None
    log_level: Optional[str] = None
    classpath_scope: Optional[str] = None
    source_level: Optional[str] = None
    jvm_args: Optional[str] = None
    system_properties: List[str] = field(default_factory=list)
    java: Optional[str] = None
    verbose: bool = False
    quiet: bool = False


@dataclass
class DevModeArgs:
    """Arguments for the devmode command."""

    common: CommonArgs
    war_dir: Optional[Path] = None
    work_dir: Optional[Path] = None
    startup_urls: List[str] = field(default_factory=list)
    devmode_args: Optional[str] = None


@dataclass
class CodeServerArgs:
    """Arguments for the codeserver command."""

    common: CommonArgs
    launcher_dir: Optional[Path] = None
    work_dir: Optional[Path] = None
    codeserver_args: Optional[str] = None


def _logging_level(args: CommonArgs) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO


def build_launch_config(args: CommonArgs) -> LaunchConfig:
    """Layer defaults, the INI file and command-line flags into a LaunchConfig.

    The INI file is the one given with --config, else gwtdev.ini next to the
    reactor file when it exists.
    """
    config = LaunchConfig()
    config_file = args.config_file
    if config_file is None:
        candidate = args.reactor.parent / INI_FILENAME
        if candidate.is_file():
            config_file = candidate
    if config_file is not None:
        config = load_ini_config(config_file, config)

    updates: dict = {}
    if args.projects is not None:
        updates["projects"] = args.projects
    if args.modules is not None:
        updates["modules"] = args.modules
    if args.log_level is not None:
        updates["log_level"] = LogLevel.parse(args.log_level)
    if args.classpath_scope is not None:
        updates["classpath_scope"] = args.classpath_scope
    if args.source_level is not None:
        updates["source_level"] = args.source_level
    if args.jvm_args is not None:
        updates["jvm_args"] = shlex.split(args.jvm_args)
    if args.java is not None:
        updates["java_executable"] = args.java
    if args.system_properties:
        properties = dict(config.system_properties)
        for definition in args.system_properties:
            key, value = parse_system_property(definition)
            properties[key] = value
        updates["system_properties"] = properties
    config = replace(config, **updates)

    # Fail early on an unknown scope
    ScopeFilter.from_name(config.classpath_scope)
    return config


def _run_launcher(launcher: DevModeLauncher, args: CommonArgs) -> int:
    log(f"Launching {launcher.get_main_class()}...")
    selection = launcher.resolve()
    if args.verbose:
        print_selection(selection)
    launcher.launch(selection)
    log("GWT exited normally")
    return 0


def exit_code_for_status(status: int) -> int:
    """Map a child exit status to our exit code.

    A child killed by signal N reports -N; report it the way a shell does, 128 + N.
    """
    if status < 0:
        return 128 - status
    return status


def _guarded(command_name: str, action: Callable[[], int]) -> int:
    """Run a command body, mapping gwtdev errors to exit codes."""
    try:
        return action()
    except LaunchError as e:
        log_error(str(e))
        return exit_code_for_status(e.status)
    except GwtDevError as e:
        log_error(f"{command_name} failed: {e}")
        return 1
    except KeyboardInterrupt:
        log_error(f"{command_name} interrupted")
        return 130


def devmode_command(args: DevModeArgs) -> int:
    """Run classic GWT DevMode.

    Examples:
        gwtdev devmode                                  # gwt-app projects of ./reactor.json
        gwtdev devmode --startup-url index.html         # open a page on start
        gwtdev devmode --projects :app --modules com.example.App
    """
    common = args.common
    configure_logging(_logging_level(common))
    log_header("gwtdev", __version__)

    def action() -> int:
        graph = load_reactor(common.reactor)
        options = DevModeOptions(
            work_dir=args.work_dir,
            war_dir=args.war_dir,
            startup_urls=list(args.startup_urls),
            devmode_args=shlex.split(args.devmode_args) if args.devmode_args else [],
        )
        return _run_launcher(DevModeRunner(graph, build_launch_config(common), options), common)

    return _guarded("devmode", action)


def codeserver_command(args: CodeServerArgs) -> int:
    """Run the Super Dev Mode CodeServer.

    Examples:
        gwtdev codeserver                               # gwt-app projects of ./reactor.json
        gwtdev codeserver --launcher-dir target/war     # write nocache.js for a server
        gwtdev codeserver -r build/reactor.json -D gwt.compiler.enableClosureFormat=true
    """
    common = args.common
    configure_logging(_logging_level(common))
    log_header("gwtdev", __version__)

    def action() -> int:
        graph = load_reactor(common.reactor)
        options = CodeServerOptions(
            work_dir=args.work_dir,
            launcher_dir=args.launcher_dir,
            codeserver_args=shlex.split(args.codeserver_args) if args.codeserver_args else [],
        )
        return _run_launcher(CodeServerRunner(graph, build_launch_config(common), options), common)

    return _guarded("codeserver", action)


def resolve_command(args: CommonArgs) -> int:
    """Show what a CodeServer launch would use, without launching it."""
    configure_logging(_logging_level(args))

    def action() -> int:
        graph = load_reactor(args.reactor)
        launcher = CodeServerRunner(graph, build_launch_config(args))
        selection = launcher.resolve()
        print_selection(selection, title=f"Reactor: {args.reactor}")
        log_detail(f"Arguments: {' '.join(launcher.build_arguments(selection))}", indent=0)
        return 0

    return _guarded("resolve", action)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-r",
        "--reactor",
        type=Path,
        default=Path(DEFAULT_REACTOR_FILE),
        help=f"Reactor file describing the build's projects (default: {DEFAULT_REACTOR_FILE})",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        type=Path,
        default=None,
        help=f"INI file with a [gwt] section (default: {INI_FILENAME} next to the reactor file)",
    )
    parser.add_argument("--projects", default=None, help="Comma-delimited reactor projects to run")
    parser.add_argument("--modules", default=None, help="Comma-delimited GWT modules to run")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="GWT log level (default: follows --verbose/--quiet)",
    )
    parser.add_argument(
        "--classpath-scope",
        default=None,
        help="Dependency scope of the classpath: compile, runtime, compile+runtime, runtime+system, test",
    )
    parser.add_argument("--source-level", default=None, help="Java source level")
    parser.add_argument(
        "--jvm-args",
        default=None,
        help="Arguments for the forked JVM, shell-quoted (e.g. --jvm-args='-Xmx2g -ea')",
    )
    parser.add_argument(
        "-D",
        dest="system_properties",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="System property to pass to GWT (repeatable)",
    )
    parser.add_argument("--java", default=None, help="Java executable (default: $JAVA_HOME/bin/java)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")


def _common_from_namespace(ns: argparse.Namespace) -> CommonArgs:
    return CommonArgs(
        reactor=ns.reactor,
        config_file=ns.config_file,
        projects=ns.projects,
        modules=ns.modules,
        log_level=ns.log_level,
        classpath_scope=ns.classpath_scope,
        source_level=ns.source_level,
        jvm_args=ns.jvm_args,
        system_properties=list(ns.system_properties),
        java=ns.java,
        verbose=ns.verbose,
        quiet=ns.quiet,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gwtdev",
        description="gwtdev - Run GWT DevMode and CodeServer for multi-module builds",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"gwtdev {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    devmode_parser = subparsers.add_parser("devmode", help="Run classic GWT DevMode")
    _add_common_arguments(devmode_parser)
    devmode_parser.add_argument("--war-dir", type=Path, default=None, help="DevMode -war directory")
    devmode_parser.add_argument("--work-dir", type=Path, default=None, help="DevMode -workDir directory")
    devmode_parser.add_argument(
        "--startup-url",
        dest="startup_urls",
        action="append",
        default=[],
        help="URL to open on start (repeatable)",
    )
    devmode_parser.add_argument("--devmode-args", default=None, help="Extra DevMode arguments, shell-quoted")

    codeserver_parser = subparsers.add_parser("codeserver", help="Run the Super Dev Mode CodeServer")
    _add_common_arguments(codeserver_parser)
    codeserver_parser.add_argument("--launcher-dir", type=Path, default=None, help="CodeServer -launcherDir directory")
    codeserver_parser.add_argument("--work-dir", type=Path, default=None, help="CodeServer -workDir directory")
    codeserver_parser.add_argument("--codeserver-args", default=None, help="Extra CodeServer arguments, shell-quoted")

    resolve_parser = subparsers.add_parser("resolve", help="Show projects, modules, sources and classpath")
    _add_common_arguments(resolve_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """gwtdev - Run the GWT development tools for multi-module builds."""
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    common = _common_from_namespace(parsed_args)
    if parsed_args.command == "devmode":
        code = devmode_command(
            DevModeArgs(
                common=common,
                war_dir=parsed_args.war_dir,
                work_dir=parsed_args.work_dir,
                startup_urls=list(parsed_args.startup_urls),
                devmode_args=parsed_args.devmode_args,
            )
        )
    elif parsed_args.command == "codeserver":
        code = codeserver_command(
            CodeServerArgs(
                common=common,
                launcher_dir=parsed_args.launcher_dir,
                work_dir=parsed_args.work_dir,
                codeserver_args=parsed_args.codeserver_args,
            )
        )
    else:
        code = resolve_command(common)
    sys.exit(code)


if __name__ == "__main__":
    main()
