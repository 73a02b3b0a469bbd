"""Resolution of module relative data files to absolute paths.

A source configuration names one or more modules (``module_file_modules``) and
one or more files (``urls``) relative to each module's ``migration_data``
directory. With a single module every file is loaded from it. With several
modules each file is paired with the module at the same index.
"""

import logging
import os
from collections import Counter
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

from module_file.errors import ConfigError, ResolutionError
from module_file.module_file_resolution import ModuleFileResolution
from module_file.module_registry import ModuleRegistry
from module_file.validate_file_prefix import validate_file_prefix

logger = logging.getLogger(__name__)

# Relative to the module base directory, e.g. foo/migration_data
DATA_DIRECTORY_NAME = "migration_data"

MODULES_KEY = "module_file_modules"
URLS_KEY = "urls"
REQUIRED_CONFIG_KEYS = (MODULES_KEY, URLS_KEY)


def _as_tuple(key: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    msg = f"'{key}' configuration value must be a string or a list of strings"
    raise ConfigError(msg, key)


class ModuleFileResolver:
    """Maps relative data file names onto files inside module data directories."""

    def __init__(
        self, configuration: Mapping[str, Any], registry: ModuleRegistry
    ) -> None:
        """Validate the source configuration; raise ConfigError if it is unusable."""
        self.registry = registry
        self.modules, self.urls = self._validate_config(configuration)

    @staticmethod
    def _validate_config(
        configuration: Mapping[str, Any],
    ) -> tuple[tuple[str, ...], tuple[str, ...]]:
        for key in REQUIRED_CONFIG_KEYS:
            if not configuration.get(key):
                msg = f"Missing '{key}' configuration key/value"
                raise ConfigError(msg, key)

        modules = _as_tuple(MODULES_KEY, configuration[MODULES_KEY])
        urls = _as_tuple(URLS_KEY, configuration[URLS_KEY])

        # A single module prefixes every file, otherwise pairing is positional.
        if len(modules) > 1 and len(modules) != len(urls):
            msg = (
                "Number of modules should match the number of urls when more "
                "than one module name provided"
            )
            raise ConfigError(msg, modules)

        # Files with the same name in different modules cannot be told apart
        # when one of them is requested.
        if len(urls) > 1:
            duplicates = sorted(name for name, n in Counter(urls).items() if n > 1)
            if duplicates:
                msg = (
                    f"Duplicate file names: {', '.join(duplicates)}. Work around "
                    "this by moving the file to a sub-directory of "
                    f"'{DATA_DIRECTORY_NAME}' named after the module, or, by "
                    "adding a suffix to the file name"
                )
                raise ConfigError(msg, duplicates)

        return modules, urls

    def url_index(self, file_name: str) -> int:
        """Return the position of ``file_name`` in the configured urls.

        Unlisted files fall back to index 0.
        """
        try:
            return self.urls.index(file_name)
        except ValueError:
            return 0

    def module_name_for(self, url_index: int) -> str:
        """Return the module whose data directory holds the url at ``url_index``."""
        if len(self.modules) > 1:
            return self.modules[url_index]
        return self.modules[0]

    def determine(self, file_name: str) -> ModuleFileResolution:
        """Validate ``file_name`` and work out which module file it refers to.

        The data file must be a regular file; a directory of the same name is
        rejected.
        """
        if not isinstance(file_name, str):
            msg = f"Data file name must be a string, got {file_name!r}"
            raise ResolutionError(msg, file_name)
        try:
            validate_file_prefix(file_name)
        except ResolutionError:
            logger.debug("Rejected data file %r", file_name)
            raise

        index = self.url_index(file_name)
        resolution = ModuleFileResolution(
            file_name=file_name,
            url_index=index,
            module_name=self.module_name_for(index),
        )

        if not self.registry.module_exists(resolution.module_name):
            logger.debug("Module %s is not available", resolution.module_name)
            msg = f"Invalid module name provided: {resolution.module_name}"
            raise ResolutionError(msg, resolution.module_name)

        file_path = os.path.join(
            self.registry.module_path(resolution.module_name),
            DATA_DIRECTORY_NAME,
            file_name,
        )
        resolution = replace(resolution, file_path=file_path)

        if not Path(file_path).is_file():
            logger.debug("Data source file %s is missing", file_path)
            msg = f"Data source file path {file_path} does not exist"
            raise ResolutionError(msg, file_path)

        return resolution

    def resolve(self, file_name: str) -> str:
        """Return the absolute path of ``file_name`` within its module."""
        resolution = self.determine(file_name)
        logger.debug(
            "Resolved %s (url %d) to %s in module %s",
            file_name,
            resolution.url_index,
            resolution.file_path,
            resolution.module_name,
        )
        return resolution.file_path
