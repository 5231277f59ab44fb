"""Tests for the policy evaluator — allow/deny rules and exception expiry."""

import copy
from datetime import date

from licenseguard.policy.evaluator import PolicyEvaluator
from licenseguard.policy.models import Policy
from licenseguard.scanner.models import Dependency, ScanResult


def _scan(*deps: Dependency) -> ScanResult:
    return ScanResult(root="/tmp/project", dependencies=list(deps))


def test_denied_license_without_exception(simple_policy: Policy, gpl_dep: Dependency):
    result = PolicyEvaluator(simple_policy).evaluate(_scan(gpl_dep))

    assert not result.compliant
    assert result.flagged == [gpl_dep]
    assert len(result.violations) == 1
    assert "GPL-3.0" in result.violations[0]
    assert "org.ex:gplib:1.0" in result.violations[0]


def test_unexpired_exception_waives(simple_policy, gpl_dep, make_exception, today):
    policy = Policy(
        name="waived",
        allowed=simple_policy.allowed,
        denied=simple_policy.denied,
        exceptions=(make_exception("2099-01-01"),),
    )
    result = PolicyEvaluator(policy, today=today).evaluate(_scan(gpl_dep))

    assert result.compliant
    assert result.flagged == []
    assert result.violations == []
    assert result.waived == [gpl_dep]


def test_expired_exception_does_not_waive(simple_policy, gpl_dep, make_exception, today):
    policy = Policy(
        name="expired",
        allowed=simple_policy.allowed,
        denied=simple_policy.denied,
        exceptions=(make_exception("2020-01-01"),),
    )
    result = PolicyEvaluator(policy, today=today).evaluate(_scan(gpl_dep))

    assert not result.compliant
    assert result.flagged == [gpl_dep]


def test_exception_effective_on_expiry_day(simple_policy, gpl_dep, make_exception):
    policy = Policy(
        name="edge",
        denied=simple_policy.denied,
        exceptions=(make_exception("2025-06-01"),),
    )
    evaluator = PolicyEvaluator(policy, today=date(2025, 6, 1))
    assert evaluator.evaluate(_scan(gpl_dep)).compliant

    evaluator = PolicyEvaluator(policy, today=date(2025, 6, 2))
    assert not evaluator.evaluate(_scan(gpl_dep)).compliant


def test_unbounded_exception(simple_policy, gpl_dep, make_exception):
    policy = Policy(
        name="forever",
        denied=simple_policy.denied,
        exceptions=(make_exception(None),),
    )
    assert PolicyEvaluator(policy).evaluate(_scan(gpl_dep)).compliant


def test_unparsable_expiry_fails_open(simple_policy, gpl_dep, make_exception, caplog):
    policy = Policy(
        name="garbled",
        denied=simple_policy.denied,
        exceptions=(make_exception("someday"),),
    )
    with caplog.at_level("WARNING"):
        result = PolicyEvaluator(policy).evaluate(_scan(gpl_dep))

    assert result.compliant
    assert "someday" in caplog.text


def test_unparsable_expiry_strict(simple_policy, gpl_dep, make_exception):
    policy = Policy(
        name="garbled",
        denied=simple_policy.denied,
        exceptions=(make_exception("someday"),),
    )
    result = PolicyEvaluator(policy, strict_expiry=True).evaluate(_scan(gpl_dep))
    assert not result.compliant
    assert result.flagged == [gpl_dep]


def test_exception_requires_matching_license(make_exception, today):
    dep = Dependency("maven", "org.ex:gplib", "1.0", "AGPL-3.0", "pom.xml")
    policy = Policy(
        name="wrong-license",
        denied=frozenset({"AGPL-3.0"}),
        exceptions=(make_exception("2099-01-01"),),
    )
    result = PolicyEvaluator(policy, today=today).evaluate(_scan(dep))
    assert not result.compliant


def test_exception_requires_matching_coordinate(simple_policy, make_exception, today):
    dep = Dependency("maven", "org.ex:gplib", "2.0", "GPL-3.0", "pom.xml")
    policy = Policy(
        name="wrong-version",
        denied=simple_policy.denied,
        exceptions=(make_exception("2099-01-01"),),
    )
    result = PolicyEvaluator(policy, today=today).evaluate(_scan(dep))
    assert not result.compliant


def test_unapproved_license_is_informational(simple_policy: Policy):
    dep = Dependency("cargo", "isc-crate", "0.3", "ISC", "Cargo.toml")
    result = PolicyEvaluator(simple_policy).evaluate(_scan(dep))

    assert result.compliant
    assert result.flagged == []
    assert result.violations == ["Unapproved license ISC on isc-crate:0.3"]


def test_unknown_license_is_silent(simple_policy: Policy):
    dep = Dependency("pip", "torch", "2.1.0")
    result = PolicyEvaluator(simple_policy).evaluate(_scan(dep))

    assert result.compliant
    assert result.violations == []


def test_all_allowed_is_clean():
    policy = Policy(name="ok", allowed=frozenset({"MIT", "ISC"}), denied=frozenset({"GPL-3.0"}))
    scan = _scan(
        Dependency("pip", "a", "1", "MIT"),
        Dependency("cargo", "b", "2", "ISC"),
    )
    result = PolicyEvaluator(policy).evaluate(scan)
    assert result.compliant
    assert result.violations == []
    assert result.flagged == []


def test_evaluation_continues_after_violation(simple_policy: Policy, mixed_scan: ScanResult):
    second_gpl = Dependency("pip", "other-gpl", "3.0", "GPL-3.0", "requirements.txt")
    mixed_scan.dependencies.append(second_gpl)

    result = PolicyEvaluator(simple_policy).evaluate(mixed_scan)

    assert not result.compliant
    assert [d.name for d in result.flagged] == ["org.ex:gplib", "other-gpl"]
    assert result.violations == [
        "Denied license GPL-3.0 on org.ex:gplib:1.0",
        "Unapproved license ISC on isc-crate:0.3",
        "Denied license GPL-3.0 on other-gpl:3.0",
    ]


def test_flagged_subset_of_dependencies(simple_policy: Policy, mixed_scan: ScanResult):
    result = PolicyEvaluator(simple_policy).evaluate(mixed_scan)
    assert all(d in mixed_scan.dependencies for d in result.flagged)


def test_evaluation_is_idempotent_and_pure(simple_policy: Policy, mixed_scan: ScanResult):
    before = copy.deepcopy(mixed_scan)
    evaluator = PolicyEvaluator(simple_policy)

    first = evaluator.evaluate(mixed_scan)
    second = evaluator.evaluate(mixed_scan)

    assert first == second
    assert mixed_scan == before


def test_coordinate_collision_shares_exception(make_exception, today):
    # Exceptions are keyed on name:version only, so any ecosystem matches
    maven_dep = Dependency("maven", "org.ex:gplib", "1.0", "GPL-3.0")
    pip_dep = Dependency("pip", "org.ex:gplib", "1.0", "GPL-3.0")
    policy = Policy(
        name="collide",
        denied=frozenset({"GPL-3.0"}),
        exceptions=(make_exception("2099-01-01"),),
    )
    result = PolicyEvaluator(policy, today=today).evaluate(_scan(maven_dep, pip_dep))
    assert result.compliant
    assert result.waived == [maven_dep, pip_dep]


def test_today_callable(simple_policy, gpl_dep, make_exception):
    policy = Policy(
        name="clock",
        denied=simple_policy.denied,
        exceptions=(make_exception("2025-01-01"),),
    )
    evaluator = PolicyEvaluator(policy, today=lambda: date(2024, 12, 31))
    assert evaluator.evaluate(_scan(gpl_dep)).compliant
