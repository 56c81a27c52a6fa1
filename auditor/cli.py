"""Command-line entry point for the pattern auditor."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import AuditConfig, ConfigError, load_config, load_registry_file
from .engine import run_scan
from .probes import ProbeRegistry
from .probes import arktype, liftkit, node, react
from .reporter import list_registries
from .result import ScanResult
from .utils import DirectoryNotFoundError

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pattern-audit",
        description="Static pattern auditor for JavaScript/TypeScript source trees",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to scan (defaults to ./src when present, else the current directory).",
    )
    parser.add_argument(
        "--check",
        "-c",
        dest="checks",
        action="append",
        default=[],
        help="Registry id to run (repeatable; defaults to every registry). See --list.",
    )
    parser.add_argument(
        "--probes",
        dest="probe_files",
        action="append",
        default=[],
        help="YAML file defining an additional probe registry (repeatable).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Configuration file (defaults to ./.pattern-audit.yaml when present).",
    )
    parser.add_argument(
        "--exclude-dir",
        dest="exclude_dirs",
        action="append",
        default=[],
        help="Additional directory name to skip (repeatable).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when any error-severity finding is reported.",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Also render a JSON report after the console output when set to json.",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the JSON report (e.g., artifacts/audit.json).",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available registries and probes, then exit.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def load_registries() -> List[ProbeRegistry]:
    return [
        *node.REGISTRIES,
        *react.REGISTRIES,
        *liftkit.REGISTRIES,
        *arktype.REGISTRIES,
    ]


def collect_registries(config: AuditConfig, probe_files: Iterable[str]) -> List[ProbeRegistry]:
    registries = load_registries()
    known = {registry.id for registry in registries}
    for path in [*config.probe_files, *(Path(entry) for entry in probe_files)]:
        registry = load_registry_file(path)
        if registry.id in known:
            raise ConfigError(f"{path}: registry id '{registry.id}' is already defined")
        known.add(registry.id)
        registries.append(registry)
    return registries


def unknown_checks(registries: Sequence[ProbeRegistry], checks: Sequence[str]) -> List[str]:
    known = {registry.id for registry in registries}
    return [check for check in checks if check not in known]


def select_registries(registries: Sequence[ProbeRegistry], checks: Sequence[str]) -> List[ProbeRegistry]:
    if not checks:
        return list(registries)
    unknown = unknown_checks(registries, checks)
    if unknown:
        raise ValueError(f"unknown check(s): {', '.join(unknown)}")
    by_id = {registry.id: registry for registry in registries}
    return [by_id[check] for check in dict.fromkeys(checks)]


def write_output(result: ScanResult, output_path: str | None, report_format: str) -> None:
    if output_path is None and report_format != "json":
        return

    payload = json.dumps(result.to_dict(), indent=2)
    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        print(f"\nReport written to {output_path}")
    else:
        print("\nJSON Report")
        print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(Path(args.config) if args.config else None)
        registries = collect_registries(config, args.probe_files)
    except ConfigError as exc:
        print(f"Error: {exc}")
        return 1

    if args.list:
        list_registries(registries)
        return 0

    unknown = unknown_checks(registries, args.checks)
    if unknown:
        parser.error(f"unknown check(s): {', '.join(unknown)} (see --list)")
    selected = select_registries(registries, args.checks)

    try:
        result = run_scan(
            args.directory,
            selected,
            extra_exclude_dirs=[*config.exclude_dirs, *args.exclude_dirs],
            disabled_probes=config.disabled_probes,
        )
    except DirectoryNotFoundError as exc:
        print(exc)
        return 1

    write_output(result, args.output_path, args.format)
    return result.summary.exit_code(strict=args.strict or config.strict)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
