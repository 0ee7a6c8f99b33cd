"""Loader settings: defaults, overlay merge and dot-path lookup. Callers supply already-parsed mappings."""

import copy
from typing import Any

_DEFAULTS: dict[str, Any] = {
    "extensions": {
        "autodetection": {
            "enabled": False,
            # Gate used when a manifest does not name one: "static" or "dynamic"
            "gate": "static",
            "entry_point_group": "autoext.extensions",
        },
    },
}


def _merged(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """New mapping: overlay on top of base, nested mappings merged, None overlay values skipped."""
    result = dict(base)
    for key, value in overlay.items():
        if value is None:
            continue
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = _merged(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def get_default_settings() -> dict[str, Any]:
    """Return a deep copy of default settings."""
    return copy.deepcopy(_DEFAULTS)


def merge_settings(overlay: dict[str, Any] | None = None) -> dict[str, Any]:
    """Defaults with overlay applied. None values in overlay keep the default."""
    return _merged(get_default_settings(), overlay or {})


def get_setting(settings: dict[str, Any], path: str, default: Any = None) -> Any:
    """Value at a dot path (e.g. 'extensions.autodetection.enabled'), or default when any step is missing."""
    node: Any = settings
    for key in path.split("."):
        try:
            node = node[key]
        except (KeyError, TypeError):
            return default
    return node
