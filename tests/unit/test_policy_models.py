"""Tests for policy and dependency data models."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from licenseguard.policy.models import Policy, PolicyException, PolicyResult
from licenseguard.scanner.models import UNKNOWN, Dependency


def test_dependency_frozen():
    dep = Dependency("pip", "torch", "2.1.0")
    with pytest.raises(FrozenInstanceError):
        dep.name = "other"  # type: ignore[misc]


def test_dependency_license_defaults_to_unknown():
    assert Dependency("pip", "torch", "2.1.0").license == UNKNOWN
    assert Dependency("pip", "torch", "2.1.0", license="").license == UNKNOWN


def test_coordinate_defaults():
    assert Dependency("pip", "torch", "2.1.0").coordinate == "torch:2.1.0"
    assert Dependency("maven", "g:a", None).coordinate == "g:a:0"
    assert Dependency("pip", None, "1").coordinate == "UNKNOWN:1"


def test_empty_coordinate_fields_are_kept():
    assert Dependency("maven", "g:a", "").coordinate == "g:a:"
    assert Dependency("pip", "", "1").coordinate == ":1"


def test_coordinate_collides_across_ecosystems():
    pip_dep = Dependency("pip", "shared", "1.0")
    cargo_dep = Dependency("cargo", "shared", "1.0")
    assert pip_dep.coordinate == cargo_dep.coordinate
    assert pip_dep != cargo_dep


def test_exception_expiry_date():
    assert PolicyException("a:1", "GPL-3.0", "2099-01-01").expiry_date() == date(2099, 1, 1)
    assert PolicyException("a:1", "GPL-3.0", None).expiry_date() is None
    assert PolicyException("a:1", "GPL-3.0", "  ").expiry_date() is None


def test_exception_unparsable_expiry_raises():
    with pytest.raises(ValueError):
        PolicyException("a:1", "GPL-3.0", "next year").expiry_date()


def test_policy_defaults():
    policy = Policy(name="empty")
    assert policy.allowed == frozenset()
    assert policy.denied == frozenset()
    assert policy.exceptions == ()


def test_policy_result_starts_compliant():
    result = PolicyResult()
    assert result.compliant
    assert result.violations == []
    assert result.flagged == []


def test_policy_to_dict_sorted():
    policy = Policy(name="p", allowed=frozenset({"MIT", "ISC"}))
    assert policy.to_dict()["allowed"] == ["ISC", "MIT"]
