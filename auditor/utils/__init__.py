"""Utility helpers for the auditor."""

from .fileio import read_text_file, read_yaml_file
from .walk import DEFAULT_EXCLUDE_DIRS, DirectoryNotFoundError, iter_source_files, resolve_target

__all__ = [
    "DEFAULT_EXCLUDE_DIRS",
    "DirectoryNotFoundError",
    "iter_source_files",
    "read_text_file",
    "read_yaml_file",
    "resolve_target",
]
