"""Lookup of installed modules and their directories."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

import yaml

logger = logging.getLogger(__name__)

INFO_FILE_SUFFIX = ".info.yml"


class ModuleRegistry(Protocol):
    """Capability used by the resolver to find modules."""

    def module_exists(self, module_name: str) -> bool:
        """Return True if the named module is present and enabled."""
        ...

    def module_path(self, module_name: str) -> str:
        """Return the module's directory, or an empty string if unknown."""
        ...


class DirectoryModuleRegistry:
    """Discovers modules under a root directory by their ``<name>.info.yml`` files.

    Modules may sit at any depth, e.g. ``modules/custom/foo/foo.info.yml``.
    Info files declaring a ``type`` other than ``module`` (themes, profiles)
    are ignored.
    """

    def __init__(self, root: str | Path, enabled: Iterable[str] | None = None) -> None:
        """Scan ``root`` once; ``enabled`` restricts which modules exist."""
        self.root = Path(root).resolve()
        self.enabled = set(enabled) if enabled is not None else None
        self.modules: dict[str, Path] = self._discover()
        logger.info("Discovered %d modules under %s", len(self.modules), self.root)

    def _discover(self) -> dict[str, Path]:
        modules: dict[str, Path] = {}
        if not self.root.is_dir():
            logger.warning("Modules root %s is not a directory", self.root)
            return modules

        for info_file in sorted(self.root.rglob(f"*{INFO_FILE_SUFFIX}")):
            name = info_file.name[: -len(INFO_FILE_SUFFIX)]
            try:
                info = yaml.safe_load(info_file.read_text(encoding="utf-8")) or {}
            except (OSError, yaml.YAMLError):
                logger.exception("Error reading module info file %s", info_file)
                continue

            if not isinstance(info, dict) or info.get("type", "module") != "module":
                continue
            if name in modules:
                # First one wins, in sorted path order
                logger.warning("Duplicate module %s at %s", name, info_file.parent)
                continue
            modules[name] = info_file.parent
        return modules

    def module_exists(self, module_name: str) -> bool:
        if module_name not in self.modules:
            return False
        return self.enabled is None or module_name in self.enabled

    def module_path(self, module_name: str) -> str:
        path = self.modules.get(module_name)
        return str(path) if path else ""
