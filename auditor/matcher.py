"""Line-level matching of probes against walked files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator, Iterable, List

from .probes import Probe
from .result import MatchResult
from .utils import read_text_file

LOGGER = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, as grep does, dropping a trailing ``\\r`` per line."""

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def match_probe(probe: Probe, files: Iterable[Path]) -> Generator[MatchResult, None, None]:
    """Yield one ``MatchResult`` per matching line, in file then line order.

    Unreadable and binary files are skipped; the remaining files are still
    scanned.
    """

    for path in files:
        if not probe.accepts(path):
            continue
        text = read_text_file(path)
        if text is None:
            continue
        if "\x00" in text:
            LOGGER.debug("Skipping binary file %s", path)
            continue
        for line_number, line in enumerate(split_lines(text), start=1):
            if probe.matches(line):
                yield MatchResult(
                    probe_id=probe.id,
                    path=str(path),
                    line_number=line_number,
                    matched_text=line,
                    severity=probe.severity,
                )
