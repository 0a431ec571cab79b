"""Launchers for the GWT development tools."""

from .codeserver import CodeServerOptions, CodeServerRunner
from .devmode import DevModeOptions, DevModeRunner
from .launcher import DevModeLauncher, find_java_executable
from .options import LaunchConfig, LogLevel, load_ini_config

__all__ = [
    "CodeServerOptions",
    "CodeServerRunner",
    "DevModeLauncher",
    "DevModeOptions",
    "DevModeRunner",
    "LaunchConfig",
    "LogLevel",
    "find_java_executable",
    "load_ini_config",
]
