"""Project configuration and custom probe registries loaded from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .probes import Probe, ProbeRegistry, RegistryError
from .severity import Severity
from .utils import DEFAULT_EXCLUDE_DIRS, read_yaml_file

LOGGER = logging.getLogger(__name__)

CONFIG_FILENAME = ".pattern-audit.yaml"
CONFIG_KEYS = {"exclude_dirs", "disabled_probes", "strict", "probes"}
REGISTRY_KEYS = {"id", "title", "description", "extensions", "exclude_dirs", "exclude_files", "clean_message", "probes"}
PROBE_KEYS = {"id", "label", "pattern", "severity", "description", "remediation", "exclude", "extensions", "pass_message"}
PROBE_REQUIRED = ("id", "label", "pattern", "severity", "description")


class ConfigError(ValueError):
    pass


@dataclass
class AuditConfig:
    """Settings read from ``.pattern-audit.yaml``."""

    exclude_dirs: List[str] = field(default_factory=list)
    disabled_probes: List[str] = field(default_factory=list)
    strict: bool = False
    probe_files: List[Path] = field(default_factory=list)


def _load_mapping(path: Path) -> Dict[str, Any]:
    try:
        data = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        if not path.exists():
            raise ConfigError(f"File not found: {path}")
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return data


def _string_list(value: Any, key: str, path: Path) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{path}: '{key}' must be a list of strings")
    return list(value)


def load_config(path: Optional[Path] = None) -> AuditConfig:
    """Load ``path``, or ``.pattern-audit.yaml`` from the working directory if present."""

    if path is None:
        default = Path(CONFIG_FILENAME)
        if not default.is_file():
            return AuditConfig()
        path = default

    data = _load_mapping(path)
    unknown = set(data) - CONFIG_KEYS
    if unknown:
        raise ConfigError(f"{path}: unknown key(s) {', '.join(sorted(unknown))}")

    strict = data.get("strict", False)
    if not isinstance(strict, bool):
        raise ConfigError(f"{path}: 'strict' must be true or false")

    base = path.parent
    config = AuditConfig(
        exclude_dirs=_string_list(data.get("exclude_dirs"), "exclude_dirs", path),
        disabled_probes=_string_list(data.get("disabled_probes"), "disabled_probes", path),
        strict=strict,
        probe_files=[base / entry for entry in _string_list(data.get("probes"), "probes", path)],
    )
    LOGGER.debug("Loaded configuration from %s", path)
    return config


def _extensions(value: Any, key: str, path: Path) -> Optional[Tuple[str, ...]]:
    items = _string_list(value, key, path)
    if not items:
        return None
    return tuple(item if item.startswith(".") else f".{item}" for item in items)


def _optional_string(item: Dict[str, Any], key: str, path: Path) -> Optional[str]:
    value = item.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{path}: probe {item['id']} has non-string '{key}' {value!r}")
    return value


def _build_probe(item: Any, path: Path) -> Probe:
    if not isinstance(item, dict):
        raise ConfigError(f"{path}: each probe must be a mapping")
    for key in PROBE_REQUIRED:
        if key not in item:
            raise ConfigError(f"{path}: probe missing key: {key}")
    unknown = set(item) - PROBE_KEYS
    if unknown:
        raise ConfigError(f"{path}: probe {item['id']} has unknown key(s) {', '.join(sorted(unknown))}")
    try:
        severity = Severity.parse(item["severity"])
    except ValueError as exc:
        raise ConfigError(f"{path}: probe {item['id']} has invalid severity {item['severity']!r}") from exc
    return Probe(
        id=str(item["id"]),
        label=str(item["label"]),
        pattern=str(item["pattern"]),
        severity=severity,
        description=str(item["description"]),
        remediation=str(item.get("remediation") or ""),
        exclude=_optional_string(item, "exclude", path),
        extensions=_extensions(item.get("extensions"), "extensions", path),
        pass_message=_optional_string(item, "pass_message", path),
    )


def load_registry_file(path: Path) -> ProbeRegistry:
    """Build a ``ProbeRegistry`` from a YAML definition."""

    data = _load_mapping(path)
    unknown = set(data) - REGISTRY_KEYS
    if unknown:
        raise ConfigError(f"{path}: unknown key(s) {', '.join(sorted(unknown))}")
    if "id" not in data:
        raise ConfigError(f"{path}: registry missing key: id")
    items = data.get("probes")
    if not isinstance(items, list) or not items:
        raise ConfigError(f"{path}: 'probes' must be a non-empty list")

    exclude_dirs = _string_list(data.get("exclude_dirs"), "exclude_dirs", path)
    try:
        return ProbeRegistry(
            id=str(data["id"]),
            title=str(data.get("title") or data["id"]),
            description=str(data.get("description") or ""),
            probes=tuple(_build_probe(item, path) for item in items),
            extensions=_extensions(data.get("extensions"), "extensions", path),
            exclude_dirs=DEFAULT_EXCLUDE_DIRS + tuple(exclude_dirs),
            exclude_files=tuple(_string_list(data.get("exclude_files"), "exclude_files", path)),
            clean_message=str(data.get("clean_message") or "No issues detected"),
        )
    except RegistryError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
