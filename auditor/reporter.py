"""Streaming console reporter."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Optional, TextIO

from .probes import Probe, ProbeRegistry
from .result import MatchResult, ScanSummary
from .severity import Severity

RULE = "=" * 43


class ReporterState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    AGGREGATING = "aggregating"
    REPORTED = "reported"


class Reporter:
    """Print findings as they are produced and close with a ``Results:`` line.

    The reporter only renders; counting happens in the engine's summary fold.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self.state = ReporterState.IDLE
        self._registries_started = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, text: str = "") -> None:
        print(text, file=self.stream, flush=True)

    def _line(self, severity: Severity, text: str) -> None:
        self._emit(f"  {severity.tag}{text}")

    def _require(self, *states: ReporterState) -> None:
        if self.state not in states:
            expected = ", ".join(state.value for state in states)
            raise RuntimeError(f"Reporter is {self.state.value}, expected {expected}")

    # ------------------------------------------------------------------
    # Scan lifecycle
    # ------------------------------------------------------------------
    def start_scan(self) -> None:
        self._require(ReporterState.IDLE)
        self.state = ReporterState.SCANNING
        self._registries_started = 0

    def start_registry(self, registry: ProbeRegistry) -> None:
        self._require(ReporterState.SCANNING)
        if self._registries_started:
            self._emit()
        self._registries_started += 1
        self._emit(f"=== {registry.title} ===")

    def start_probe(self, probe: Probe) -> None:
        self._require(ReporterState.SCANNING)
        self._emit()
        self._emit(f"--- {probe.label} ---")

    def report_match(self, match: MatchResult) -> None:
        self._require(ReporterState.SCANNING)
        self._line(match.severity, match.location)

    def report_hint(self, probe: Probe) -> None:
        self._require(ReporterState.SCANNING)
        self._line(Severity.INFO, f"  {probe.hint}")

    def report_pass(self, probe: Probe) -> None:
        self._require(ReporterState.SCANNING)
        self._line(Severity.OK, probe.ok_message)

    def end_registry(self, registry: ProbeRegistry, summary: ScanSummary) -> None:
        self._require(ReporterState.SCANNING)
        self._emit()
        self._emit("=== Summary ===")
        if summary.errors == 0 and summary.warnings == 0:
            self._line(Severity.OK, registry.clean_message)
        else:
            self._emit(f"  Found {summary.errors} error(s) and {summary.warnings} warning(s) to address")

    def finish(self, summary: ScanSummary) -> None:
        self._require(ReporterState.SCANNING)
        self.state = ReporterState.AGGREGATING
        self._emit()
        self._emit(RULE)
        self._emit(summary.results_line())
        self.state = ReporterState.REPORTED

    def reset(self) -> None:
        self._require(ReporterState.REPORTED)
        self.state = ReporterState.IDLE


class NullReporter(Reporter):
    """Reporter that renders nothing, for programmatic scans."""

    def _emit(self, text: str = "") -> None:
        return None


def list_registries(registries: Iterable[ProbeRegistry], stream: Optional[TextIO] = None) -> None:
    """Print the catalogue of registries and their probes."""

    out = stream if stream is not None else sys.stdout
    for registry in registries:
        print(f"{registry.id}: {registry.description or registry.title}", file=out)
        for probe in registry.probes:
            print(f"  {probe.severity.tag}{probe.id}  {probe.label}", file=out)
