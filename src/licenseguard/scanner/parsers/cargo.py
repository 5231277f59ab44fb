"""Cargo.toml parser — line scan of the [dependencies] section."""

from __future__ import annotations

import re
from pathlib import Path

from licenseguard.scanner.models import UNKNOWN, Dependency
from licenseguard.scanner.parsers.base import read_lines

_STRIP = re.compile(r"[\"'\s]")


def _extract_version(line: str) -> str:
    idx = line.find("version")
    if idx < 0:
        return UNKNOWN
    _, sep, rest = line[idx:].partition("=")
    if not sep:
        return UNKNOWN
    # Inline tables: stop at the next key or the closing brace
    value = re.split(r"[,}]", rest, maxsplit=1)[0]
    return _STRIP.sub("", value) or UNKNOWN


class CargoParser:
    """Reads ``name = ...`` entries under [dependencies]."""

    name = "cargo"

    def supports(self, path: Path) -> bool:
        return path.name.lower() == "cargo.toml"

    def parse(self, path: Path) -> list[Dependency]:
        source = str(path.resolve())
        deps: list[Dependency] = []
        in_deps = False
        for line in read_lines(path):
            text = line.strip()
            if text.startswith("[dependencies]"):
                in_deps = True
                continue
            if text.startswith("["):
                in_deps = False
            if not in_deps or not text or text.startswith("#") or "=" not in text:
                continue
            deps.append(
                Dependency(
                    ecosystem="cargo",
                    name=text.split("=", 1)[0].strip(),
                    version=_extract_version(text),
                    source_file=source,
                )
            )
        return deps
