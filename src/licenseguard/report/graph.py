"""Graphviz DOT rendering of a scan's dependencies."""

from __future__ import annotations

from licenseguard.scanner.models import UNKNOWN, ScanResult


def _quote(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def to_dot(scan: ScanResult) -> str:
    """Render a star graph: the project root pointing at every dependency."""
    lines = ["digraph G {", "  rankdir=LR;"]
    seen: set[str] = set()

    for dep in scan.dependencies:
        node = _quote(dep.coordinate)
        if node not in seen:
            seen.add(node)
            label = f"{node}\\n{_quote(dep.license or UNKNOWN)}"
            lines.append(f'  "{node}" [label="{label}"];')
        lines.append(f'  "ROOT" -> "{node}";')

    lines.append(
        f'  "ROOT" [shape=box, style=filled, label="{_quote(scan.root_label)}"];'
    )
    lines.append("}")
    return "\n".join(lines) + "\n"
