"""Policy evaluator — checks every dependency's license against a policy."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from licenseguard.policy.models import Policy, PolicyException, PolicyResult
from licenseguard.scanner.models import UNKNOWN, Dependency, ScanResult

logger = logging.getLogger(__name__)


class PolicyEvaluator:
    """Evaluates scan results against allow/deny sets and exceptions.

    A denied license flips compliance unless an effective exception waives
    it. A license that is neither allowed nor denied is reported but does not
    affect compliance. ``UNKNOWN`` licenses are never reported.

    Exception expiry dates that cannot be parsed keep the exception effective
    unless ``strict_expiry`` is set.
    """

    def __init__(
        self,
        policy: Policy,
        today: date | Callable[[], date] | None = None,
        strict_expiry: bool = False,
    ) -> None:
        self.policy = policy
        self._today = today
        self._strict_expiry = strict_expiry

    def evaluate(self, scan: ScanResult) -> PolicyResult:
        """Evaluate every dependency. Never short-circuits."""
        result = PolicyResult()
        today = self._current_date()

        for dep in scan.dependencies:
            spdx = dep.license or UNKNOWN
            if spdx in self.policy.denied:
                if self.is_exception_effective(dep, spdx, today=today):
                    logger.info("Denied license %s on %s waived", spdx, dep.coordinate)
                    result.waived.append(dep)
                    continue
                result.compliant = False
                result.flagged.append(dep)
                result.violations.append(f"Denied license {spdx} on {dep.coordinate}")
            elif spdx not in self.policy.allowed and spdx != UNKNOWN:
                result.violations.append(
                    f"Unapproved license {spdx} on {dep.coordinate}"
                )

        return result

    def is_exception_effective(
        self,
        dep: Dependency,
        spdx: str,
        today: date | None = None,
    ) -> bool:
        """Whether an exception waives ``spdx`` for this dependency today."""
        exception = self._find_exception(dep.coordinate, spdx)
        if exception is None:
            return False

        try:
            expires = exception.expiry_date()
        except ValueError:
            if self._strict_expiry:
                logger.warning(
                    "Ignoring exception for %s: unparsable expiry %r",
                    exception.artifact,
                    exception.expires,
                )
                return False
            logger.warning(
                "Exception for %s has unparsable expiry %r; treating as unbounded",
                exception.artifact,
                exception.expires,
            )
            return True

        if expires is None:
            return True
        return (today or self._current_date()) <= expires

    def _find_exception(self, coordinate: str, spdx: str) -> PolicyException | None:
        # First matching exception decides
        for exception in self.policy.exceptions:
            if exception.artifact == coordinate and exception.license == spdx:
                return exception
        return None

    def _current_date(self) -> date:
        if self._today is None:
            return date.today()
        if callable(self._today):
            return self._today()
        return self._today
