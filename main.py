"""Entry point for fetching module bundled migration source data."""

from module_file.fetch_module_file import main

if __name__ == "__main__":
    raise SystemExit(main())
