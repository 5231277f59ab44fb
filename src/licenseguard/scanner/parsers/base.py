"""ManifestParser protocol — every ecosystem parser must satisfy this."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from licenseguard.scanner.models import Dependency

logger = logging.getLogger(__name__)


class ManifestParseError(ValueError):
    """A manifest file could not be parsed."""


@runtime_checkable
class ManifestParser(Protocol):
    """Protocol for ecosystem manifest parsers."""

    name: str

    def supports(self, path: Path) -> bool:
        """Whether this parser handles the given file."""
        ...

    def parse(self, path: Path) -> list[Dependency]:
        """Extract declared dependencies from the file."""
        ...


def read_lines(path: Path) -> list[str]:
    """Read a text manifest, returning [] when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as e:
        logger.debug("Could not read %s: %s", path, e)
        return []
