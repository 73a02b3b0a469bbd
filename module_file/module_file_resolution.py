"""Data model for a single module data file resolution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModuleFileResolution:
    """Represents the outcome of resolving one relative file to a module."""

    file_name: str
    url_index: int
    module_name: str
    file_path: str = ""  # Set once the module directory is known
