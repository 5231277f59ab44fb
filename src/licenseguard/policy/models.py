"""Policy data models — allow/deny sets, exceptions and evaluation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from licenseguard.scanner.models import Dependency


@dataclass(frozen=True)
class PolicyException:
    """A time-bounded waiver for one dependency coordinate and license."""

    artifact: str
    license: str
    expires: str | None = None
    owner: str = ""

    def expiry_date(self) -> date | None:
        """Parsed expiry, ``None`` when unbounded. Raises ValueError if unparsable."""
        if self.expires is None or not self.expires.strip():
            return None
        return date.fromisoformat(self.expires.strip())

    def to_dict(self) -> dict:
        return {
            "artifact": self.artifact,
            "spdx": self.license,
            "expires": self.expires,
            "owner": self.owner,
        }


@dataclass(frozen=True)
class Policy:
    """A complete license policy."""

    name: str
    allowed: frozenset[str] = frozenset()
    denied: frozenset[str] = frozenset()
    exceptions: tuple[PolicyException, ...] = ()
    description: str = ""
    inherit: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "allowed": sorted(self.allowed),
            "denied": sorted(self.denied),
            "exceptions": [e.to_dict() for e in self.exceptions],
            "inherit": list(self.inherit),
        }


@dataclass
class PolicyResult:
    """Outcome of evaluating a scan against a policy."""

    compliant: bool = True
    violations: list[str] = field(default_factory=list)
    flagged: list[Dependency] = field(default_factory=list)
    waived: list[Dependency] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "compliant": self.compliant,
            "violations": list(self.violations),
            "flagged": [d.to_dict() for d in self.flagged],
            "waived": [d.to_dict() for d in self.waived],
        }
