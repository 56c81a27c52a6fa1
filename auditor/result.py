"""Core result data structures for the auditor."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Dict, List

from .severity import Severity

_COUNTER_FOR = {
    Severity.ERROR: "errors",
    Severity.WARN: "warnings",
    Severity.INFO: "infos",
}


@dataclass(frozen=True)
class MatchResult:
    """One occurrence of a probe's pattern in one file at one line."""

    probe_id: str
    path: str
    line_number: int
    matched_text: str
    severity: Severity

    @property
    def location(self) -> str:
        return f"{self.path}:{self.line_number}:{self.matched_text}"

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass(frozen=True)
class ScanSummary:
    """Aggregate finding counts by severity.

    Instances are immutable; ``record`` and ``merge`` return new summaries so
    a scan folds its counters instead of mutating shared state.
    """

    errors: int = 0
    warnings: int = 0
    infos: int = 0

    def record(self, severity: Severity) -> "ScanSummary":
        if not severity.counted:
            return self
        attr = _COUNTER_FOR[severity]
        return replace(self, **{attr: getattr(self, attr) + 1})

    def merge(self, other: "ScanSummary") -> "ScanSummary":
        return ScanSummary(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
            infos=self.infos + other.infos,
        )

    @property
    def total(self) -> int:
        return self.errors + self.warnings + self.infos

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def results_line(self) -> str:
        return f"Results: {self.errors} error(s), {self.warnings} warning(s), {self.infos} info(s)"

    def exit_code(self, strict: bool = False) -> int:
        """Advisory scans always exit 0; strict scans fail on any error."""

        if strict and self.errors > 0:
            return 1
        return 0


@dataclass
class ScanResult:
    """Bundle the scan summary and the matches it was folded from."""

    root: str
    summary: ScanSummary = field(default_factory=ScanSummary)
    matches: List[MatchResult] = field(default_factory=list)
    registries: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.summary.errors == 0 and self.summary.warnings == 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "root": self.root,
            "registries": list(self.registries),
            "summary": self.summary.to_dict(),
            "matches": [match.to_dict() for match in self.matches],
            "passed": self.passed,
        }
