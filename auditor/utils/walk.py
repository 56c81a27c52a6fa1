"""Source tree walking helpers."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Generator, Iterable, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_EXCLUDE_DIRS = ("node_modules", ".git", "dist", "build", ".next")
DEFAULT_TARGET = "src"


class DirectoryNotFoundError(FileNotFoundError):
    """Raised when the scan target is not an existing directory."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Error: directory '{directory}' not found")
        self.directory = directory


def resolve_target(directory: Optional[str] = None) -> Path:
    """Return the directory to scan, defaulting to ``src`` when present, else ``.``."""

    if directory is None:
        directory = DEFAULT_TARGET if Path(DEFAULT_TARGET).is_dir() else "."
    target = Path(directory)
    if not target.is_dir():
        raise DirectoryNotFoundError(str(directory))
    return target


def iter_source_files(
    root: Path,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    extensions: Optional[Iterable[str]] = None,
    exclude_files: Iterable[str] = (),
) -> Generator[Path, None, None]:
    """Yield regular files beneath ``root`` in sorted order.

    Directories named in ``exclude_dirs`` are pruned before descent, so none
    of their contents are ever visited.
    """

    excluded = set(exclude_dirs)
    suffixes = tuple(extensions) if extensions else None
    file_globs = tuple(exclude_files)

    for current, dirnames, filenames in os.walk(root):
        pruned = [name for name in dirnames if name in excluded]
        if pruned:
            LOGGER.debug("Pruning %s under %s", ", ".join(pruned), current)
        dirnames[:] = sorted(name for name in dirnames if name not in excluded)
        for filename in sorted(filenames):
            if suffixes is not None and not filename.endswith(suffixes):
                continue
            if any(fnmatch.fnmatch(filename, pattern) for pattern in file_globs):
                continue
            path = Path(current) / filename
            if path.is_file():
                yield path
