"""Load and resolve Policy objects from JSON or YAML documents."""

from __future__ import annotations

import importlib.resources
import json
from datetime import date
from pathlib import Path

import yaml

from licenseguard.policy.models import Policy, PolicyException

_PRESET_PREFIX = "preset:"

# Preferred key first, then the legacy alias
_ALLOWED_KEYS = ("allowed", "allowed_spdx")
_DENIED_KEYS = ("denied", "deny_spdx")


class PolicyError(ValueError):
    """The policy document is missing or malformed."""


def load_policy(path: str | Path, _resolved: set[str] | None = None) -> Policy:
    """Load a policy from a JSON or YAML file path."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PolicyError(f"Cannot read policy file {path}: {e}") from e
    data = _parse(text, source=str(path), is_json=path.suffix.lower() == ".json")
    return _build_policy(
        data,
        key=str(path.resolve()),
        _resolved=_resolved if _resolved is not None else set(),
    )


def load_policy_from_string(text: str) -> Policy:
    """Parse a JSON or YAML string into a Policy, resolving inheritance."""
    return _build_policy(_parse(text, source="<string>"), key="<string>", _resolved=set())


def load_preset(name: str) -> Policy:
    """Load a policy shipped with the package."""
    return _load_preset(name, _resolved=set())


def _parse(text: str, source: str, is_json: bool = False) -> dict:
    # PyYAML rejects some valid JSON, tab indentation for one
    data = None
    if is_json or text.lstrip().startswith(("{", "[")):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            if is_json:
                raise PolicyError(f"Invalid policy document {source}: {e}") from e
    if data is None:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise PolicyError(f"Invalid policy document {source}: {e}") from e
    if not isinstance(data, dict):
        raise PolicyError("Policy document must be a mapping")
    return data


def _build_policy(data: dict, key: str, _resolved: set[str]) -> Policy:
    """Build a Policy, merging parents; ``key`` identifies the document."""
    if key in _resolved:
        raise PolicyError(f"Circular policy inheritance detected: {key}")
    _resolved.add(key)

    allowed = set(_string_list(data, _ALLOWED_KEYS))
    denied = set(_string_list(data, _DENIED_KEYS))
    exceptions = _parse_exceptions(data.get("exceptions"))

    inherit_list = data.get("inherit", [])
    if isinstance(inherit_list, str):
        inherit_list = [inherit_list]
    if not isinstance(inherit_list, list):
        raise PolicyError("'inherit' must be a list")

    # Own exceptions first, inherited after
    for ref in inherit_list:
        parent = _load_ref(str(ref), _resolved)
        allowed |= parent.allowed
        denied |= parent.denied
        exceptions.extend(parent.exceptions)
    # Only the current inheritance chain counts, so diamonds stay legal
    _resolved.discard(key)

    return Policy(
        name=str(data.get("name", "unnamed")),
        allowed=frozenset(allowed),
        denied=frozenset(denied),
        exceptions=tuple(exceptions),
        description=str(data.get("description", "")),
        inherit=tuple(str(r) for r in inherit_list),
    )


def _string_list(data: dict, keys: tuple[str, ...]) -> list[str]:
    for key in keys:
        if key not in data:
            continue
        value = data[key]
        if value is None:
            return []
        if not isinstance(value, list):
            raise PolicyError(f"'{key}' must be a list of license identifiers")
        return [str(v) for v in value]
    return []


def _parse_exceptions(raw: object) -> list[PolicyException]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise PolicyError("'exceptions' must be a list")

    exceptions: list[PolicyException] = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise PolicyError(f"Exception #{i} must be a mapping")
        try:
            artifact = entry["artifact"]
            spdx = entry["spdx"]
        except KeyError as e:
            raise PolicyError(f"Exception #{i} is missing {e.args[0]!r}") from e

        expires = entry.get("expires")
        if isinstance(expires, date):
            # Unquoted YAML dates arrive as date objects
            expires = expires.isoformat()
        elif expires is not None:
            expires = str(expires)

        exceptions.append(
            PolicyException(
                artifact=str(artifact),
                license=str(spdx),
                expires=expires,
                owner=str(entry.get("owner") or ""),
            )
        )
    return exceptions


def _load_ref(ref: str, _resolved: set[str]) -> Policy:
    if ref.startswith(_PRESET_PREFIX):
        return _load_preset(ref[len(_PRESET_PREFIX) :], _resolved)
    return load_policy(ref, _resolved=_resolved)


def _load_preset(name: str, _resolved: set[str]) -> Policy:
    resource = importlib.resources.files("licenseguard.policy.presets").joinpath(
        f"{name}.yaml"
    )
    try:
        text = resource.read_text(encoding="utf-8")
    except OSError as e:
        raise PolicyError(f"Unknown policy preset: {name}") from e
    return _build_policy(
        _parse(text, source=f"preset:{name}"), key=f"{_PRESET_PREFIX}{name}", _resolved=_resolved
    )
