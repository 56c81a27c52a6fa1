"""Basic file IO helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

LOGGER = logging.getLogger(__name__)


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_text_file(path: Path) -> Optional[str]:
    """Return the file contents as text, or ``None`` if it cannot be read.

    Undecodable bytes are replaced rather than rejected, and line endings are
    left untouched so line numbering follows the raw ``\\n`` separators.
    """

    try:
        return path.read_bytes().decode("utf-8", errors="replace")
    except OSError as exc:
        LOGGER.warning("Skipping unreadable file %s: %s", path, exc)
        return None
