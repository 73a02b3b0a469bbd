"""Reject relative data file paths that could escape the data directory."""

from module_file.errors import ResolutionError

# Literal leading substrings, checked against the raw path.
ILLEGAL_FILE_PREFIXES = ("..", "/", "./", "~", "-")


def get_illegal_file_prefixes() -> tuple[str, ...]:
    """Return the prefixes a relative data file may not begin with."""
    return ILLEGAL_FILE_PREFIXES


def validate_file_prefix(path: str) -> None:
    """Raise ResolutionError if ``path`` starts with an illegal prefix.

    Only plain ``filename.json`` or ``sub-directory/filename.xml`` style
    values pass. The check is not path normalized, so ``foo/../bar`` is
    accepted.
    """
    for prefix in ILLEGAL_FILE_PREFIXES:
        if path.startswith(prefix):
            msg = f"Illegal file path prefix detected: {prefix}"
            raise ResolutionError(msg, prefix)
