"""Probe registry for the auditor."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional, Pattern, Tuple

from auditor.severity import Severity
from auditor.utils.walk import DEFAULT_EXCLUDE_DIRS

JS_TS_EXTENSIONS = (".tsx", ".jsx", ".ts", ".js")


class RegistryError(ValueError):
    """Raised for malformed probe or registry definitions."""


@lru_cache(maxsize=None)
def compile_pattern(source: str) -> Pattern[str]:
    try:
        return re.compile(source)
    except re.error as exc:
        raise RegistryError(f"Invalid pattern {source!r}: {exc}") from exc


@dataclass(frozen=True)
class Probe:
    """A named detection rule applied line by line during a scan."""

    id: str
    label: str
    pattern: str
    severity: Severity
    description: str
    remediation: str = ""
    exclude: Optional[str] = None
    extensions: Optional[Tuple[str, ...]] = None
    pass_message: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise RegistryError("Probe id must not be empty")
        if not self.pattern:
            raise RegistryError(f"Probe {self.id} has an empty pattern")
        compile_pattern(self.pattern)
        if self.exclude:
            compile_pattern(self.exclude)

    @property
    def regex(self) -> Pattern[str]:
        return compile_pattern(self.pattern)

    @property
    def exclude_regex(self) -> Optional[Pattern[str]]:
        return compile_pattern(self.exclude) if self.exclude else None

    def accepts(self, path: Path) -> bool:
        if self.extensions is None:
            return True
        return path.name.endswith(self.extensions)

    def matches(self, line: str) -> bool:
        if not self.regex.search(line):
            return False
        exclude = self.exclude_regex
        return exclude is None or not exclude.search(line)

    @property
    def ok_message(self) -> str:
        return self.pass_message or f"No {self.label} found"

    @property
    def hint(self) -> str:
        if self.remediation:
            return f"{self.description} -> {self.remediation}"
        return self.description


@dataclass(frozen=True)
class ProbeRegistry:
    """An ordered set of probes sharing one file filter."""

    id: str
    title: str
    probes: Tuple[Probe, ...]
    extensions: Optional[Tuple[str, ...]] = None
    exclude_dirs: Tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    exclude_files: Tuple[str, ...] = ()
    clean_message: str = "No issues detected"
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.probes:
            raise RegistryError(f"Registry {self.id} defines no probes")
        seen = set()
        for probe in self.probes:
            if probe.id in seen:
                raise RegistryError(f"Registry {self.id} repeats probe id {probe.id}")
            seen.add(probe.id)

    def probe(self, probe_id: str) -> Probe:
        for probe in self.probes:
            if probe.id == probe_id:
                return probe
        raise KeyError(probe_id)
