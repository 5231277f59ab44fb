"""Shared test fixtures."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from licenseguard.policy.models import Policy, PolicyException
from licenseguard.scanner.models import Dependency, ScanResult


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def policy_json_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "policy.json"


@pytest.fixture
def today() -> date:
    return date(2025, 6, 1)


@pytest.fixture
def simple_policy() -> Policy:
    return Policy(
        name="test",
        allowed=frozenset({"MIT"}),
        denied=frozenset({"GPL-3.0"}),
    )


@pytest.fixture
def gpl_dep() -> Dependency:
    return Dependency(
        ecosystem="maven",
        name="org.ex:gplib",
        version="1.0",
        license="GPL-3.0",
        source_file="pom.xml",
    )


@pytest.fixture
def mixed_scan(gpl_dep: Dependency) -> ScanResult:
    return ScanResult(
        root="/tmp/project",
        dependencies=[
            gpl_dep,
            Dependency("pip", "mitlib", "2.0", "MIT", "requirements.txt"),
            Dependency("cargo", "isc-crate", "0.3", "ISC", "Cargo.toml"),
            Dependency("gomod", "example.com/mystery", "v1.0.0", "UNKNOWN", "go.mod"),
        ],
    )


@pytest.fixture
def make_exception():
    def _make(expires: str | None, artifact: str = "org.ex:gplib:1.0") -> PolicyException:
        return PolicyException(
            artifact=artifact,
            license="GPL-3.0",
            expires=expires,
            owner="Legal-OSPO",
        )

    return _make
