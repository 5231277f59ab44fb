"""Go module (go.mod) parser."""

from __future__ import annotations

from pathlib import Path

from licenseguard.scanner.models import Dependency
from licenseguard.scanner.parsers.base import read_lines


class GoModParser:
    """Reads single-line ``require <module> <version>`` directives."""

    name = "gomod"

    def supports(self, path: Path) -> bool:
        return path.name == "go.mod"

    def parse(self, path: Path) -> list[Dependency]:
        source = str(path.resolve())
        deps: list[Dependency] = []
        for line in read_lines(path):
            text = line.strip()
            if not text.startswith("require "):
                continue
            parts = text[len("require ") :].split()
            if len(parts) < 2:
                continue
            deps.append(
                Dependency(
                    ecosystem="gomod",
                    name=parts[0],
                    version=parts[1],
                    source_file=source,
                )
            )
        return deps
