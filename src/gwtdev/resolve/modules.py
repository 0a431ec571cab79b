"""GWT module discovery."""

import logging
from typing import List, Optional, Sequence

from ..errors import NoModuleError
from ..reactor.models import DEFAULT_PLUGIN_KEY, MODULE_NAME_KEY, Project
from .selector import is_blank, split_comma_list

logger = logging.getLogger(__name__)


def discover_modules(
    projects: Sequence[Project],
    explicit_modules: Optional[str] = None,
    plugin_key: str = DEFAULT_PLUGIN_KEY,
) -> List[str]:
    """Determine the GWT modules to run.

    An explicit comma-delimited list is used as given, duplicates included.
    Otherwise each project contributes the moduleName declared in its plugin
    configuration; projects without one are skipped and reported in a single
    warning.

    Raises:
        NoModuleError: If no module was given or discovered.
    """
    modules: List[str] = []
    if is_blank(explicit_modules):
        non_gwt_projects: List[str] = []
        for project in projects:
            configuration = project.get_plugin_configuration(plugin_key)
            module_name = configuration.get(MODULE_NAME_KEY) if configuration is not None else None
            if is_blank(module_name):
                non_gwt_projects.append(project.key)
            else:
                assert module_name is not None
                modules.append(module_name.strip())
        if non_gwt_projects:
            logger.warning(
                "Found projects without the gwt-maven-plugin's moduleName when discovering GWT modules; "
                f"they've been ignored: {', '.join(non_gwt_projects)}"
            )
    else:
        assert explicit_modules is not None
        modules.extend(split_comma_list(explicit_modules))

    if not modules:
        raise NoModuleError()
    return modules
