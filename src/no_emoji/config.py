"""YAML/dict config loader for no-emoji.

Supports loading from a YAML file or a plain dict (for embedding in a
larger lint config).

Example YAML:

    no_emoji:
      enabled: true
      legacy_mode: false     # true = replace emoji with a single space
      allow_list:
        - "✅"
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .rule import EmojiRule, RuleConfig

_DEFAULTS: dict[str, Any] = {
    "enabled": True,
    "legacy_mode": False,
    "allow_list": [],
}


class _NoopRule:
    """Pass-through rule when the check is disabled."""
    def iter_diagnostics(self, text: str):
        return iter(())
    def check(self, text: str) -> list:
        return []
    def fix(self, text: str) -> str:
        return text
    def lint_node(self, node, get_source, report) -> int:
        return 0


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError(f"config must be a mapping, got {type(data).__name__}")
    # Support nested under "no_emoji" key or flat
    if "no_emoji" in data:
        data = data["no_emoji"] or {}
        if not isinstance(data, dict):
            raise ConfigError("'no_emoji' section must be a mapping")

    unknown = set(data) - set(_DEFAULTS)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")

    cfg = {**_DEFAULTS, **data}
    for key in ("enabled", "legacy_mode"):
        if not isinstance(cfg[key], bool):
            raise ConfigError(f"'{key}' must be true or false")
    allow = cfg["allow_list"]
    if not isinstance(allow, (list, tuple, set)) or not all(isinstance(a, str) for a in allow):
        raise ConfigError("'allow_list' must be a list of strings")

    return {
        "enabled": cfg["enabled"],
        "legacy_mode": cfg["legacy_mode"],
        "allow_list": set(allow),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse {path}: {e}") from e
    return load_config(data)


def create_rule(config: dict[str, Any]) -> EmojiRule | _NoopRule:
    """Create a configured rule from a raw or normalized config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        return _NoopRule()

    return EmojiRule(RuleConfig(
        legacy_mode=cfg["legacy_mode"],
        allow_list=cfg["allow_list"],
    ))
