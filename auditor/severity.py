"""Severity definitions for audit findings."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for findings."""

    OK = "OK"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def tag(self) -> str:
        """Return the padded console prefix, e.g. ``[WARN]  ``."""

        return f"[{self.value}]".ljust(8)

    @property
    def counted(self) -> bool:
        return self is not Severity.OK

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Resolve ``value`` case-insensitively, accepting ``WARNING`` for ``WARN``."""

        normalized = str(value).strip().upper()
        if normalized == "WARNING":
            normalized = "WARN"
        return cls(normalized)
