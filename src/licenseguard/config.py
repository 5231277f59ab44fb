"""Global configuration — XDG paths, env vars, policy resolution."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from licenseguard.policy.loader import load_policy, load_preset
from licenseguard.policy.models import Policy

logger = logging.getLogger(__name__)

# Project-relative policy files checked before the user config dir
_LOCAL_POLICY_FILES = ("policy/policy.json", "policy/policy.yaml")


def _default_data_dir() -> Path:
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "licenseguard"
    return Path.home() / ".local" / "share" / "licenseguard"


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "licenseguard"
    return Path.home() / ".config" / "licenseguard"


class ConfigError(ValueError):
    """An environment setting has an invalid value."""


def _env_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class LicenseGuardConfig:
    """Application-wide configuration."""

    data_dir: Path = field(default_factory=_default_data_dir)
    config_dir: Path = field(default_factory=_default_config_dir)
    policy_path: Path | None = None
    workers: int = 1
    strict_expiry: bool = False
    report_dir: Path = Path("reports")
    graph_dir: Path = Path("graph")
    web_host: str = "127.0.0.1"  # loopback only
    web_port: int = 8471

    @classmethod
    def load(cls) -> LicenseGuardConfig:
        """Load config from environment variables with XDG defaults."""
        config = cls()

        env_policy = os.environ.get("LICENSEGUARD_POLICY")
        if env_policy:
            config.policy_path = Path(env_policy)

        env_workers = os.environ.get("LICENSEGUARD_WORKERS")
        if env_workers:
            config.workers = max(1, _env_int("LICENSEGUARD_WORKERS", env_workers))

        env_strict = os.environ.get("LICENSEGUARD_STRICT_EXPIRY")
        if env_strict:
            config.strict_expiry = _env_flag(env_strict)

        env_port = os.environ.get("LICENSEGUARD_WEB_PORT")
        if env_port:
            config.web_port = _env_int("LICENSEGUARD_WEB_PORT", env_port)

        return config


def resolve_policy(config: LicenseGuardConfig, cwd: str | Path | None = None) -> Policy:
    """Find and load the policy for this invocation.

    Order: explicit ``policy_path``, ``policy/policy.json`` and
    ``policy/policy.yaml`` under ``cwd``, ``policy.yaml`` in the config dir,
    then the packaged ``default`` preset.
    """
    if config.policy_path is not None:
        logger.debug("Using policy %s", config.policy_path)
        return load_policy(config.policy_path)

    base = Path(cwd) if cwd is not None else Path.cwd()
    candidates = [base / rel for rel in _LOCAL_POLICY_FILES]
    candidates.append(config.config_dir / "policy.yaml")
    for candidate in candidates:
        if candidate.is_file():
            logger.debug("Using policy %s", candidate)
            return load_policy(candidate)

    logger.debug("No policy file found, using packaged default")
    return load_preset("default")
