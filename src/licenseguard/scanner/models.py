"""Scanner data models — dependencies and scan results."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Dependency:
    """A single declared third-party dependency."""

    ecosystem: str
    name: str | None
    version: str | None
    license: str = UNKNOWN
    source_file: str = ""

    def __post_init__(self) -> None:
        if not self.license:
            object.__setattr__(self, "license", UNKNOWN)

    @property
    def coordinate(self) -> str:
        """Identity key used for policy and exception matching.

        Only absent (``None``) fields take the defaults; an empty Maven
        ``<version>`` stays empty, giving ``group:artifact:``.
        """
        name = UNKNOWN if self.name is None else self.name
        version = "0" if self.version is None else self.version
        return f"{name}:{version}"

    def to_dict(self) -> dict:
        return {
            "ecosystem": self.ecosystem,
            "name": self.name,
            "version": self.version,
            "license": self.license,
            "source_file": self.source_file,
            "coordinate": self.coordinate,
        }


@dataclass(frozen=True)
class ParseFailure:
    """A parser that raised for one file."""

    file_path: str
    parser: str
    error: str

    def to_dict(self) -> dict:
        return {"file_path": self.file_path, "parser": self.parser, "error": self.error}


@dataclass
class ScanResult:
    """Aggregate result of a manifest scan."""

    root: str
    dependencies: list[Dependency] = field(default_factory=list)
    failures: list[ParseFailure] = field(default_factory=list)
    files_scanned: int = 0
    duration: float = 0.0
    timestamp: float = field(default_factory=time.time)

    @property
    def root_label(self) -> str:
        """Final path segment of the scan root, for display."""
        return Path(self.root).name or self.root

    def to_dict(self) -> dict:
        return {
            "root": self.root,
            "dependencies": [d.to_dict() for d in self.dependencies],
            "failures": [f.to_dict() for f in self.failures],
            "files_scanned": self.files_scanned,
            "duration": round(self.duration, 4),
            "timestamp": self.timestamp,
        }
