import io

import pytest

from auditor.probes import node
from auditor.reporter import Reporter, ReporterState, list_registries
from auditor.result import MatchResult, ScanSummary
from auditor.severity import Severity

BUFFER = node.DEPRECATED_APIS.probe("node.buffer-constructor")


def test_full_lifecycle_output():
    stream = io.StringIO()
    reporter = Reporter(stream)
    match = MatchResult(
        probe_id=BUFFER.id,
        path="src/app.js",
        line_number=4,
        matched_text="new Buffer(10)",
        severity=Severity.WARN,
    )

    reporter.start_scan()
    reporter.start_registry(node.DEPRECATED_APIS)
    reporter.start_probe(BUFFER)
    reporter.report_match(match)
    reporter.report_hint(BUFFER)
    reporter.end_registry(node.DEPRECATED_APIS, ScanSummary(warnings=1, infos=1))
    reporter.finish(ScanSummary(warnings=1, infos=1))

    assert stream.getvalue().splitlines() == [
        "=== Deprecated APIs Found ===",
        "",
        "--- Buffer ---",
        "  [WARN]  src/app.js:4:new Buffer(10)",
        "  [INFO]    new Buffer() is deprecated -> use Buffer.from() or Buffer.alloc()",
        "",
        "=== Summary ===",
        "  Found 0 error(s) and 1 warning(s) to address",
        "",
        "===========================================",
        "Results: 0 error(s), 1 warning(s), 1 info(s)",
    ]
    assert reporter.state is ReporterState.REPORTED


def test_clean_registry_summary_is_ok_line():
    stream = io.StringIO()
    reporter = Reporter(stream)

    reporter.start_scan()
    reporter.start_registry(node.DEPRECATED_APIS)
    reporter.start_probe(BUFFER)
    reporter.report_pass(BUFFER)
    reporter.end_registry(node.DEPRECATED_APIS, ScanSummary())

    lines = stream.getvalue().splitlines()
    assert "  [OK]    No new Buffer() usage found" in lines
    assert lines[-1] == "  [OK]    No deprecated API usage detected"


def test_out_of_order_calls_are_rejected():
    reporter = Reporter(io.StringIO())

    with pytest.raises(RuntimeError):
        reporter.start_probe(BUFFER)

    reporter.start_scan()
    with pytest.raises(RuntimeError):
        reporter.start_scan()

    reporter.finish(ScanSummary())
    with pytest.raises(RuntimeError):
        reporter.report_pass(BUFFER)

    reporter.reset()
    assert reporter.state is ReporterState.IDLE


def test_list_registries():
    stream = io.StringIO()

    list_registries([node.DEPRECATED_APIS], stream)

    lines = stream.getvalue().splitlines()
    assert lines[0] == "node-deprecated-apis: Deprecated Node.js core API usage."
    assert "  [WARN]  node.buffer-constructor  Buffer" in lines
