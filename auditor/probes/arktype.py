"""ArkType API usage inventory."""

from __future__ import annotations

from auditor.severity import Severity

from . import Probe, ProbeRegistry

ARKTYPE_EXTENSIONS = (".ts", ".tsx", ".js", ".mjs")


def _usage_probe(probe_id: str, label: str, pattern: str) -> Probe:
    return Probe(
        id=f"arktype.{probe_id}",
        label=label,
        pattern=pattern,
        severity=Severity.INFO,
        description=f"{label} usage",
        pass_message=f"No {label} found",
    )


USAGE = ProbeRegistry(
    id="arktype-usage",
    title="ArkType API Usage",
    description="Inventory of ArkType API calls.",
    extensions=ARKTYPE_EXTENSIONS,
    clean_message="No ArkType usage found",
    probes=(
        _usage_probe("type", "type() calls", r"[^a-zA-Z_.]type\("),
        _usage_probe("scope", "scope() calls", r"[^a-zA-Z_.]scope\("),
        _usage_probe("match", "match() calls", r"[^a-zA-Z_.]match\("),
        _usage_probe("module", "type.module() calls", r"type\.module\("),
        _usage_probe("declare", "type.declare() calls", r"type\.declare\("),
        _usage_probe("configure", "configure() calls", r"configure\("),
        _usage_probe("arkenv", "arkenv() calls", r"arkenv\("),
    ),
)

REGISTRIES = (USAGE,)
