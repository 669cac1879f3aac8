# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""YAML helpers for the screening configuration files.

Report text and the accessibility catalog live in YAML. Files are
parsed with yaml.safe_load and must hold a mapping at the top level;
what they contain is layered over built-in defaults with deep_merge.

Example:
    >>> from pathlib import Path
    >>> from levixia_screening.core.config.yaml_loader import deep_merge, load_yaml
    >>> data = load_yaml(Path("levixia_screening/config/screening/recommendations.yaml"))
    >>> merged = deep_merge({"disclaimer": {"en": "..."}}, data)
"""

from pathlib import Path
from typing import Any

import yaml


class YAMLLoadError(Exception):
    """Raised when a configuration file is missing or unusable.

    Attributes:
        path: File that failed to load.
        reason: What went wrong.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load '{path}': {reason}")


def load_yaml(path: Path) -> dict[str, Any]:
    """Parse a YAML file into a dictionary.

    An empty file yields an empty dictionary.

    Args:
        path: File to read.

    Returns:
        Parsed top-level mapping.

    Raises:
        YAMLLoadError: If the file is missing, unreadable, malformed or
            does not hold a mapping.
    """
    if not path.is_file():
        raise YAMLLoadError(path, "not a file")

    try:
        with path.open(encoding="utf-8") as stream:
            data = yaml.safe_load(stream)
    except OSError as e:
        raise YAMLLoadError(path, f"unreadable: {e}") from e
    except yaml.YAMLError as e:
        raise YAMLLoadError(path, f"malformed YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise YAMLLoadError(path, f"expected a mapping, found {type(data).__name__}")
    return data


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Layer one mapping over another.

    Mappings present on both sides are merged key by key; any other
    value from ``override`` (lists included) replaces the base value.
    Neither argument is modified.

    Example:
        >>> deep_merge({"disclaimer": {"en": "a", "tr": "b"}}, {"disclaimer": {"en": "c"}})
        {'disclaimer': {'en': 'c', 'tr': 'b'}}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged
