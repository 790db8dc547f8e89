#!/usr/bin/env python3

import os
from pathlib import Path

from samtofastq.core.exceptions import ResourceError


def assert_file_is_readable(path: Path | str) -> None:
    """Raise ResourceError unless ``path`` is an existing, readable regular file.

    Args:
        path: Input file to check.
    """
    path = Path(path)
    if not path.exists():
        raise ResourceError(f"Cannot read non-existent file: {path}")
    if path.is_dir():
        raise ResourceError(f"Cannot read file because it's a directory: {path}")
    if not os.access(path, os.R_OK):
        raise ResourceError(f"File exists but is not readable: {path}")


def assert_file_is_writable(path: Path | str) -> None:
    """Raise ResourceError unless ``path`` can be created or overwritten.

    An existing file must be writable. A new file needs an existing,
    writable parent directory.

    Args:
        path: Output file to check.
    """
    path = Path(path)
    if path.exists():
        if path.is_dir():
            raise ResourceError(f"Cannot write file because it's a directory: {path}")
        if not os.access(path, os.W_OK):
            raise ResourceError(f"File exists but is not writable: {path}")
        return

    parent = path.absolute().parent
    if not parent.is_dir():
        raise ResourceError(f"Cannot write file, parent directory does not exist: {path}")
    if not os.access(parent, os.W_OK):
        raise ResourceError(f"Cannot write file, parent directory is not writable: {path}")
