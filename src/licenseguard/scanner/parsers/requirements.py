"""pip requirements / Pipfile line parser."""

from __future__ import annotations

from pathlib import Path

from licenseguard.scanner.models import UNKNOWN, Dependency
from licenseguard.scanner.parsers.base import read_lines

_FILENAMES = {"requirements.txt", "pipfile"}


class RequirementsParser:
    """One dependency per non-comment line; ``name==version`` pins the version."""

    name = "pip"

    def supports(self, path: Path) -> bool:
        return path.name.lower() in _FILENAMES

    def parse(self, path: Path) -> list[Dependency]:
        source = str(path.resolve())
        deps: list[Dependency] = []
        for line in read_lines(path):
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            name, version = text, UNKNOWN
            if "==" in text:
                name, version = (part.strip() for part in text.split("==", 1))
            deps.append(
                Dependency(
                    ecosystem="pip",
                    name=name,
                    version=version,
                    source_file=source,
                )
            )
        return deps
