"""Manifest parser registry."""

from __future__ import annotations

from licenseguard.scanner.parsers.base import ManifestParseError, ManifestParser
from licenseguard.scanner.parsers.cargo import CargoParser
from licenseguard.scanner.parsers.gomod import GoModParser
from licenseguard.scanner.parsers.maven import MavenParser
from licenseguard.scanner.parsers.requirements import RequirementsParser

# Registration order is the order parser results are concatenated per file
DEFAULT_PARSERS: tuple[ManifestParser, ...] = (
    MavenParser(),
    RequirementsParser(),
    GoModParser(),
    CargoParser(),
)

__all__ = [
    "DEFAULT_PARSERS",
    "CargoParser",
    "GoModParser",
    "ManifestParseError",
    "ManifestParser",
    "MavenParser",
    "RequirementsParser",
]
