"""Exception types raised while resolving and fetching module data files."""

from typing import Any


class ModuleFileError(Exception):
    """Base class for module file failures.

    The offending value (a configuration key, prefix, module name or path) is
    kept on ``value`` for diagnostics.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class ConfigError(ModuleFileError):
    """The source configuration is structurally invalid."""


class ResolutionError(ModuleFileError):
    """A single relative file could not be resolved to a data file."""


class FetchError(ModuleFileError):
    """The bytes of a resolved data file could not be read."""
