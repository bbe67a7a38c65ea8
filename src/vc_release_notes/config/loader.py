"""
Configuration loader for vc_release_notes.

The changelog configuration is a JSON or YAML document with the keys
``template``, ``groups``, ``skips`` and ``excludeTypes``::

    template: "## Changes\\n\\n$changes"
    groups:
      - title: Features
        icon: ":sparkles:"
        types: [feat, feature]
    skips: [skip-ci]
    excludeTypes: []

Files ending in ``.json`` are parsed as JSON, everything else as YAML.
When no path is given the built-in :data:`DEFAULT_CONFIG` is used. If the
file is missing, malformed, or fails validation, a :class:`ConfigError`
is raised and the pipeline must not run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

import yaml

from vc_release_notes.config.defaults import DEFAULT_CONFIG
from vc_release_notes.config.model import ChangelogConfig, GroupConfig


logger = logging.getLogger(__name__)
# Attach a null handler so library use without logging configured stays
# quiet. The CLI reconfigures the root logger when it runs.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False

KNOWN_KEYS = {"template", "groups", "skips", "excludeTypes", "scopes"}


class ConfigError(Exception):
    """Raised when the changelog configuration is missing or invalid."""

    pass


def _string_set(data: Dict[str, Any], key: str) -> FrozenSet[str]:
    value = data.get(key)
    if value is None:
        return frozenset()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return frozenset(value)


def _parse_group(index: int, raw: Any) -> GroupConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"Group #{index + 1} must be a mapping")
    title = raw.get("title")
    if not isinstance(title, str) or not title:
        raise ConfigError(f"Group #{index + 1}: 'title' must be a non-empty string")
    types = raw.get("types")
    if not isinstance(types, list) or not types or not all(isinstance(t, str) for t in types):
        raise ConfigError(f"Group '{title}': 'types' must be a non-empty list of strings")
    icon = raw.get("icon")
    if icon is not None and not isinstance(icon, str):
        raise ConfigError(f"Group '{title}': 'icon' must be a string")
    return GroupConfig(title=title, types=frozenset(types), icon=icon or None)


def config_from_dict(data: Dict[str, Any]) -> ChangelogConfig:
    """Validate a configuration document and build a :class:`ChangelogConfig`.

    A commit type may belong to one group only; a type listed in several
    groups is rejected so that every commit lands in exactly one section.

    Raises
    ------
    ConfigError
        If a key is missing or has the wrong type, or a type is listed in
        more than one group.
    """
    if not isinstance(data, dict):
        raise ConfigError("Configuration document must be a mapping")

    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        logger.debug("Ignoring unknown configuration keys: %s", unknown)

    raw_groups = data.get("groups")
    if raw_groups is None:
        raise ConfigError("Missing required configuration keys: groups")
    if not isinstance(raw_groups, list):
        raise ConfigError("'groups' must be a list")
    groups: List[GroupConfig] = [_parse_group(idx, raw) for idx, raw in enumerate(raw_groups)]

    owners: Dict[str, str] = {}
    for group in groups:
        for commit_type in sorted(group.types):
            if commit_type in owners:
                raise ConfigError(
                    f"Commit type '{commit_type}' is listed in both "
                    f"'{owners[commit_type]}' and '{group.title}'"
                )
            owners[commit_type] = group.title

    template = data.get("template")
    if template is not None and not isinstance(template, str):
        raise ConfigError("'template' must be a string")

    return ChangelogConfig(
        groups=tuple(groups),
        template=template,
        skip_markers=_string_set(data, "skips"),
        exclude_types=_string_set(data, "excludeTypes"),
    )


def load_config(config_path: Optional[Path] = None) -> ChangelogConfig:
    """Load the changelog configuration and return it.

    Args:
        config_path: Path to a JSON or YAML document. ``None`` selects the
            built-in default configuration.

    Returns:
        The validated :class:`ChangelogConfig`.

    Raises:
        ConfigError: If the file is missing, cannot be parsed, or is invalid.
    """
    if config_path is None:
        logger.debug("No configuration path given, using built-in defaults")
        return config_from_dict(DEFAULT_CONFIG)

    config_path = Path(config_path)
    if not config_path.exists():
        logger.error("Configuration file '%s' does not exist", config_path)
        raise ConfigError(f"Missing changelog configuration file: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
        if config_path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid configuration in {config_path.name}: {exc}") from exc

    config = config_from_dict(data)
    logger.debug("Loaded changelog configuration from: %s", config_path)
    return config
