"""Fetching of data files bundled inside modules."""

from collections.abc import Callable, Mapping
from typing import Any

from module_file.file_fetcher import FileFetcher
from module_file.module_file_resolver import ModuleFileResolver
from module_file.module_registry import ModuleRegistry


class ModuleFileFetcher:
    """Loads source data from a module's ``migration_data`` directory.

    Requests are resolved by a ModuleFileResolver and the resulting absolute
    path is handed to ``fetch_content``.
    """

    def __init__(
        self,
        configuration: Mapping[str, Any],
        registry: ModuleRegistry,
        fetch_content: Callable[[str], bytes] | None = None,
    ) -> None:
        self.resolver = ModuleFileResolver(configuration, registry)
        self.fetch_content = fetch_content or FileFetcher().fetch_content

    @property
    def urls(self) -> tuple[str, ...]:
        return self.resolver.urls

    def get_response_content(self, url: str) -> bytes:
        """Return the bytes of the module data file named by ``url``."""
        return self.fetch_content(self.resolver.resolve(url))
