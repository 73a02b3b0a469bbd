"""Reading of local data files by absolute path."""

import logging
from pathlib import Path

from module_file.errors import FetchError

logger = logging.getLogger(__name__)


class FileFetcher:
    """Loads the raw bytes of a file on disk."""

    def fetch_content(self, path: str) -> bytes:
        """Return the whole content of ``path``."""
        try:
            content = Path(path).read_bytes()
        except OSError as e:
            msg = f"File fetcher could not retrieve data from {path}"
            raise FetchError(msg, path) from e
        logger.debug("Read %d bytes from %s", len(content), path)
        return content
