"""Maven POM parser."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from licenseguard.scanner.models import UNKNOWN, Dependency
from licenseguard.scanner.parsers.base import ManifestParseError


def _local(tag: str) -> str:
    # "{http://maven.apache.org/POM/4.0.0}dependency" -> "dependency"
    return tag.rsplit("}", 1)[-1]


def _child_text(elem: ET.Element, name: str) -> str:
    for child in elem.iter():
        if child is not elem and _local(child.tag) == name:
            return (child.text or "").strip()
    return ""


class MavenParser:
    """Reads every <dependency> element from a pom.xml."""

    name = "maven"

    def supports(self, path: Path) -> bool:
        return path.name == "pom.xml"

    def parse(self, path: Path) -> list[Dependency]:
        try:
            tree = ET.parse(path)
        except (ET.ParseError, OSError) as e:
            raise ManifestParseError(f"Failed parsing pom.xml: {path}: {e}") from e

        deps: list[Dependency] = []
        for elem in tree.getroot().iter():
            if _local(elem.tag) != "dependency":
                continue
            group_id = _child_text(elem, "groupId")
            artifact_id = _child_text(elem, "artifactId")
            deps.append(
                Dependency(
                    ecosystem="maven",
                    name=f"{group_id}:{artifact_id}",
                    version=_child_text(elem, "version"),
                    license=UNKNOWN,
                    source_file=str(path.resolve()),
                )
            )
        return deps
