"""Whole-file binary reading."""

from pathlib import Path

from .errors import BadFileError


def read_file(path):
    """Return the full contents of ``path`` as bytes."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise BadFileError() from exc