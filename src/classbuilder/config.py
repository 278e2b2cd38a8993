"""
Builder configuration.

A BuilderConfig controls the parts of class assembly that are a matter of
policy rather than semantics:

    strict_descriptors:
        True  -> malformed method descriptors raise MalformedDescriptorError
        False -> they produce a UserWarning and a non-callable slot

    extra_reserved_names:
        Names rejected in addition to RESERVED_NAMES

Configs can be loaded from plain dicts or YAML documents, e.g.:

    strict_descriptors: false
    extra_reserved_names: [new]
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import yaml

from classbuilder.errors import ConfigError


RESERVED_NAMES: Tuple[str, ...] = (
    "static",
    "private",
    "methods",
    "modifiers",
    "properties",
    "name",
    "call",
)


@dataclass(frozen=True)
class BuilderConfig:
    strict_descriptors: bool = True
    extra_reserved_names: Tuple[str, ...] = ()

    @property
    def reserved_names(self) -> Tuple[str, ...]:
        return RESERVED_NAMES + tuple(self.extra_reserved_names)


_KNOWN_KEYS = {"strict_descriptors", "extra_reserved_names"}


def config_to_dict(config: BuilderConfig) -> Dict[str, Any]:
    return {
        "strict_descriptors": config.strict_descriptors,
        "extra_reserved_names": list(config.extra_reserved_names),
    }


def config_from_dict(d: Dict[str, Any] | None) -> BuilderConfig:
    if d is None:
        return BuilderConfig()
    if not isinstance(d, dict):
        raise ConfigError(f"Config must be a mapping, got {type(d).__name__}")

    unknown = sorted(set(d) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    strict = d.get("strict_descriptors", True)
    if not isinstance(strict, bool):
        raise ConfigError(f"strict_descriptors must be a bool, got {strict!r}")

    extra = d.get("extra_reserved_names") or []
    if not isinstance(extra, (list, tuple)) or not all(isinstance(n, str) for n in extra):
        raise ConfigError(f"extra_reserved_names must be a list of strings, got {extra!r}")

    return BuilderConfig(strict_descriptors=strict, extra_reserved_names=tuple(extra))


def config_from_yaml(s: str) -> BuilderConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML config: {e}") from e
    return config_from_dict(d)


def config_to_yaml(config: BuilderConfig) -> str:
    return yaml.safe_dump(config_to_dict(config))


def load_config(filepath: str) -> BuilderConfig:
    """
    Load a BuilderConfig from a YAML file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigError: If the content is not a valid config
    """
    with open(filepath, "r", encoding="utf-8") as f:
        content = f.read()
    return config_from_yaml(content)
