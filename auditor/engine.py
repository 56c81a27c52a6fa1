"""Scan orchestration: walk, match, report and fold counters."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Set, Tuple

from .matcher import match_probe
from .probes import ProbeRegistry
from .reporter import Reporter
from .result import ScanResult, ScanSummary
from .severity import Severity
from .utils import iter_source_files, resolve_target

LOGGER = logging.getLogger(__name__)


def run_scan(
    directory: Optional[str],
    registries: Sequence[ProbeRegistry],
    reporter: Optional[Reporter] = None,
    extra_exclude_dirs: Iterable[str] = (),
    disabled_probes: Iterable[str] = (),
) -> ScanResult:
    """Run every enabled probe of ``registries`` over ``directory``.

    Raises ``DirectoryNotFoundError`` before any probe runs when the target
    is missing. Everything found afterwards is returned as data.
    """

    root = resolve_target(directory)
    reporter = reporter or Reporter()
    extra_excludes = tuple(extra_exclude_dirs)
    disabled = set(disabled_probes)

    result = ScanResult(root=str(root))
    reporter.start_scan()
    for registry in registries:
        result.registries.append(registry.id)
        registry_summary = _scan_registry(root, registry, reporter, result, extra_excludes, disabled)
        result.summary = result.summary.merge(registry_summary)
    reporter.finish(result.summary)
    reporter.reset()
    LOGGER.debug("Scan of %s finished: %s", root, result.summary)
    return result


def _scan_registry(
    root: Path,
    registry: ProbeRegistry,
    reporter: Reporter,
    result: ScanResult,
    extra_excludes: Tuple[str, ...],
    disabled: Set[str],
) -> ScanSummary:
    files = list(
        iter_source_files(
            root,
            exclude_dirs=registry.exclude_dirs + extra_excludes,
            extensions=registry.extensions,
            exclude_files=registry.exclude_files,
        )
    )
    LOGGER.debug("Registry %s: %d candidate file(s)", registry.id, len(files))

    summary = ScanSummary()
    reporter.start_registry(registry)
    for probe in registry.probes:
        if probe.id in disabled:
            LOGGER.debug("Probe %s disabled by configuration", probe.id)
            continue
        reporter.start_probe(probe)
        found = 0
        for match in match_probe(probe, files):
            reporter.report_match(match)
            result.matches.append(match)
            summary = summary.record(match.severity)
            found += 1
        if found:
            reporter.report_hint(probe)
            summary = summary.record(Severity.INFO)
        else:
            reporter.report_pass(probe)
    reporter.end_registry(registry, summary)
    return summary
