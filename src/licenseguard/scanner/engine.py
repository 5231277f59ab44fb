"""Scan engine — walks a tree and dispatches manifests to parsers."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path

from licenseguard.license.detector import KNOWN_LICENSES, classify
from licenseguard.scanner.models import UNKNOWN, Dependency, ParseFailure, ScanResult
from licenseguard.scanner.parsers import DEFAULT_PARSERS, ManifestParser

logger = logging.getLogger(__name__)

# Directories that never hold project manifests
_SKIP_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "__pycache__",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".tox",
}


class ScanError(RuntimeError):
    """The scan root could not be traversed."""


class ScanEngine:
    """Discovers declared dependencies across a directory tree."""

    def __init__(
        self,
        parsers: Sequence[ManifestParser] | None = None,
        exclude_patterns: list[str] | None = None,
        workers: int = 1,
    ) -> None:
        self._parsers = tuple(parsers) if parsers is not None else DEFAULT_PARSERS
        self._exclude = set(exclude_patterns or [])
        self._workers = max(1, workers)

    @property
    def parsers(self) -> tuple[ManifestParser, ...]:
        return self._parsers

    def scan(self, root: str | Path) -> ScanResult:
        """Scan a directory and return every dependency found, in path order."""
        root = Path(root).resolve()
        if not root.is_dir():
            raise ScanError(f"Scan root is not a readable directory: {root}")
        if not os.access(root, os.R_OK | os.X_OK):
            raise ScanError(f"Permission denied: {root}")

        start = time.time()
        files = sorted(self._walk(root))
        result = ScanResult(root=str(root), files_scanned=len(files))

        if self._workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self._workers) as pool:
                outcomes = list(pool.map(self._parse_file, files))
        else:
            outcomes = [self._parse_file(f) for f in files]

        for deps, failures in outcomes:
            result.dependencies.extend(deps)
            result.failures.extend(failures)

        result.duration = time.time() - start
        logger.debug(
            "Scanned %d files under %s: %d dependencies, %d failures",
            result.files_scanned,
            root,
            len(result.dependencies),
            len(result.failures),
        )
        return result

    def _walk(self, root: Path) -> Iterator[Path]:
        """Yield every regular file below root, pruning skipped directories."""

        def _on_error(err: OSError) -> None:
            raise ScanError(f"Failed to walk {err.filename}: {err.strerror}") from err

        for dirpath, dirs, files in os.walk(root, onerror=_on_error):
            dirs[:] = [d for d in dirs if d not in _SKIP_DIRS and d not in self._exclude]
            for name in files:
                if name in self._exclude:
                    continue
                path = Path(dirpath) / name
                if path.is_file():
                    yield path

    def _parse_file(
        self, path: Path
    ) -> tuple[list[Dependency], list[ParseFailure]]:
        """Run every claiming parser on one file, isolating failures."""
        deps: list[Dependency] = []
        failures: list[ParseFailure] = []
        for parser in self._parsers:
            try:
                if parser.supports(path):
                    deps.extend(_normalize(d) for d in parser.parse(path))
            except Exception as e:  # noqa: BLE001
                logger.warning("Parser %s failed on %s: %s", parser.name, path, e)
                failures.append(
                    ParseFailure(file_path=str(path), parser=parser.name, error=str(e))
                )
        return deps, failures


def _normalize(dep: Dependency) -> Dependency:
    """Map a parser-supplied license onto the closed vocabulary."""
    if dep.license in KNOWN_LICENSES or dep.license == UNKNOWN:
        return dep
    return replace(dep, license=classify(dep.license))
