"""Launch configuration.

This module defines:
- LogLevel: GWT's -logLevel values
- LaunchConfig: Options shared by every launcher
- load_ini_config: Reads a LaunchConfig from the [gwt] section of an INI file

Design:
    The CLI builds a LaunchConfig from defaults, then the INI file, then its
    own flags (each layer overriding the previous one) and hands it to a
    launcher. Library callers construct LaunchConfig directly.
"""

import configparser
import logging
import shlex
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from ..errors import ConfigError
from ..reactor.models import DEFAULT_PLUGIN_KEY
from ..reactor.scopes import DEFAULT_CLASSPATH_SCOPE, ScopeFilter

INI_FILENAME = "gwtdev.ini"
INI_SECTION = "gwt"
INI_SYSTEM_PROPERTIES_SECTION = "gwt.systemProperties"


class LogLevel(Enum):
    """Log levels understood by the GWT tools."""

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    SPAM = "SPAM"
    ALL = "ALL"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Parse a level name, case-insensitively.

        Raises:
            ConfigError: If the name is not a GWT log level.
        """
        try:
            return cls(value.strip().upper())
        except ValueError as e:
            known = ", ".join(level.value for level in cls)
            raise ConfigError(f"Invalid log level: {value} (expected one of: {known})") from e

    @classmethod
    def from_logger(cls, logger: logging.Logger) -> "LogLevel":
        """Derive the GWT level from the effective verbosity of a logger."""
        if logger.isEnabledFor(logging.DEBUG):
            return cls.DEBUG
        if logger.isEnabledFor(logging.INFO):
            return cls.INFO
        if logger.isEnabledFor(logging.WARNING):
            return cls.WARN
        return cls.ERROR


@dataclass
class LaunchConfig:
    """Options shared by the DevMode and CodeServer launchers.

    Attributes:
        log_level: GWT log level; derived from the logging verbosity when None
        modules: Comma-delimited GWT modules; discovered from projects when None
        projects: Comma-delimited reactor projects; gwt-app projects when None
        classpath_scope: Scope filter name for the classpath
        source_level: Java source level passed as -sourceLevel
        jvm_args: Arguments for the forked JVM (e.g. -Xmx1g)
        system_properties: System properties passed as -D<key>=<value>, in order
        plugin_key: Plugin whose configuration declares module names
        java_executable: Java binary; JAVA_HOME or PATH lookup when None
    """

    log_level: Optional[LogLevel] = None
    modules: Optional[str] = None
    projects: Optional[str] = None
    classpath_scope: str = DEFAULT_CLASSPATH_SCOPE
    source_level: Optional[str] = None
    jvm_args: List[str] = field(default_factory=list)
    system_properties: Dict[str, str] = field(default_factory=dict)
    plugin_key: str = DEFAULT_PLUGIN_KEY
    java_executable: Optional[str] = None

    @property
    def scope_filter(self) -> ScopeFilter:
        return ScopeFilter.from_name(self.classpath_scope)


def parse_system_property(value: str) -> tuple[str, str]:
    """Split a `key=value` system property definition.

    A definition without '=' sets the property to an empty string.

    Raises:
        ConfigError: If the key is empty.
    """
    key, _, prop_value = value.partition("=")
    key = key.strip()
    if not key:
        raise ConfigError(f"Invalid system property definition: {value!r}")
    return key, prop_value


def load_ini_config(ini_path: Path, base: Optional[LaunchConfig] = None) -> LaunchConfig:
    """Apply the [gwt] and [gwt.systemProperties] sections of an INI file.

    Example:
        [gwt]
        modules = com.example.App
        classpathScope = compile+runtime
        jvmArgs = -Xmx2g -Dfile.encoding=UTF-8

        [gwt.systemProperties]
        gwt.persistentunitcachedir = target/gwt-unitcache

    Args:
        ini_path: Path to the INI file
        base: Configuration to override (defaults to LaunchConfig())

    Returns:
        A new LaunchConfig with the file's values applied

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    config = base if base is not None else LaunchConfig()
    parser = configparser.ConfigParser(interpolation=None)
    # Keys are case-sensitive (system property names, camelCase options)
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    try:
        with open(ini_path, encoding="utf-8") as f:
            parser.read_file(f)
    except OSError as e:
        raise ConfigError(f"Cannot read {ini_path}: {e}") from e
    except configparser.Error as e:
        raise ConfigError(f"Invalid configuration file {ini_path}: {e}") from e

    if parser.has_section(INI_SECTION):
        section = parser[INI_SECTION]
        updates: Dict[str, object] = {}
        if "logLevel" in section:
            updates["log_level"] = LogLevel.parse(section["logLevel"])
        if "modules" in section:
            updates["modules"] = section["modules"]
        if "projects" in section:
            updates["projects"] = section["projects"]
        if "classpathScope" in section:
            updates["classpath_scope"] = section["classpathScope"].strip()
        if "sourceLevel" in section:
            updates["source_level"] = section["sourceLevel"].strip()
        if "jvmArgs" in section:
            updates["jvm_args"] = shlex.split(section["jvmArgs"])
        if "pluginKey" in section:
            updates["plugin_key"] = section["pluginKey"].strip()
        if "javaExecutable" in section:
            updates["java_executable"] = section["javaExecutable"].strip()
        config = replace(config, **updates)  # type: ignore[arg-type]

    if parser.has_section(INI_SYSTEM_PROPERTIES_SECTION):
        properties = dict(config.system_properties)
        properties.update(parser[INI_SYSTEM_PROPERTIES_SECTION])
        config = replace(config, system_properties=properties)

    # Validate eagerly so a bad scope is reported against the file
    ScopeFilter.from_name(config.classpath_scope)
    return config
