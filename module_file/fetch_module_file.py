"""Fetch source data files declared by a migration from module directories."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from module_file.errors import ModuleFileError
from module_file.load_migration import load_migration, source_configuration
from module_file.module_file_fetcher import ModuleFileFetcher
from module_file.module_registry import DirectoryModuleRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def run_fetch(args: argparse.Namespace) -> int:
    """Write the content of each requested data file to stdout."""
    source = source_configuration(load_migration(args.migration))
    registry = DirectoryModuleRegistry(args.modules_root, enabled=args.enable)
    fetcher = ModuleFileFetcher(source, registry)

    urls = [args.url] if args.url else list(fetcher.urls)
    for url in urls:
        content = fetcher.get_response_content(url)
        logger.info("Fetched %s (%d bytes)", url, len(content))
        sys.stdout.buffer.write(content)
    sys.stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the fetch."""
    ap = argparse.ArgumentParser(
        description="Print migration source data files bundled in modules.",
    )
    ap.add_argument(
        "migration",
        type=Path,
        help="Migration YAML whose 'source' uses the module_file data fetcher",
    )
    ap.add_argument(
        "--modules-root",
        type=Path,
        default=Path("modules"),
        help="Directory searched for <module>.info.yml files (default: modules)",
    )
    ap.add_argument(
        "--enable",
        action="append",
        metavar="MODULE",
        help="Treat only these modules as enabled (repeatable; default: all)",
    )
    ap.add_argument(
        "--url",
        help="Fetch only this configured url instead of all of them",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run_fetch(args)
    except ModuleFileError as e:
        raise SystemExit(f"Error: {e}") from e


if __name__ == "__main__":
    raise SystemExit(main())
