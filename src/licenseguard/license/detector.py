"""License normalizer — maps free-form license strings to SPDX identifiers."""

from __future__ import annotations

from licenseguard.scanner.models import UNKNOWN, ScanResult

# Ordered (required substrings, SPDX id). First match wins. AGPL is its own
# class and precedes the bare GPL check since "AGPL" contains "GPL".
_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("APACHE", "2"), "Apache-2.0"),
    (("MIT",), "MIT"),
    (("BSD",), "BSD-3-Clause"),
    (("AGPL",), "AGPL-3.0"),
    (("GPL", "3"), "GPL-3.0"),
    (("ISC",), "ISC"),
)

KNOWN_LICENSES: frozenset[str] = frozenset(spdx for _, spdx in _RULES)


def classify(candidate: str | None) -> str:
    """Return the SPDX identifier for a license string, or ``UNKNOWN``."""
    if not candidate:
        return UNKNOWN
    text = candidate.upper()
    for needles, spdx in _RULES:
        if all(n in text for n in needles):
            return spdx
    return UNKNOWN


def summarize(scan: ScanResult) -> list[str]:
    """One ``ecosystem::coordinate::license`` line per dependency."""
    return [
        f"{d.ecosystem}::{d.coordinate}::{d.license or UNKNOWN}"
        for d in scan.dependencies
    ]
