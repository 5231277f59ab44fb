"""HTML compliance report rendered with Jinja2."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from jinja2 import Environment, PackageLoader, select_autoescape

from licenseguard.license.detector import summarize
from licenseguard.policy.models import PolicyResult
from licenseguard.scanner.models import ScanResult

logger = logging.getLogger(__name__)

_env = Environment(
    loader=PackageLoader("licenseguard.report", "templates"),
    autoescape=select_autoescape(["html", "xml", "j2"]),
)


def render_html(
    scan: ScanResult,
    result: PolicyResult,
    summary: list[str] | None = None,
) -> str:
    """Render the compliance report for a scan and its policy evaluation."""
    template = _env.get_template("report.html.j2")
    return template.render(
        scan=scan,
        result=result,
        summary=summary if summary is not None else summarize(scan),
    )


def write_report(scan: ScanResult, result: PolicyResult, out_dir: str | Path) -> Path:
    """Write the report to ``out_dir`` and return the file path."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out = out_dir / f"licenseguard-report-{int(time.time() * 1000)}.html"
    out.write_text(render_html(scan, result), encoding="utf-8")
    logger.info("Report written to %s", out)
    return out
