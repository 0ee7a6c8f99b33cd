"""Extension manifest: Pydantic model and YAML loader.

Capabilities are determined by protocols the class implements, not by a manifest field.
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, field_validator


class ExtensionManifest(BaseModel):
    """Manifest schema for <extensions_dir>/<id>/manifest.yaml."""

    id: str
    name: str
    version: str = "1.0.0"
    entrypoint: str  # module:ClassName, module file lives next to the manifest
    description: str = ""
    enabled: bool = True
    # Gate wrapping this extension; None uses extensions.autodetection.gate
    gate: Literal["static", "dynamic"] | None = None

    @field_validator("entrypoint")
    @classmethod
    def _validate_entrypoint(cls, value: str) -> str:
        module_name, sep, class_name = value.partition(":")
        if not sep or not module_name.strip() or not class_name.strip():
            raise ValueError(f"entrypoint must be 'module:ClassName', got {value!r}")
        return value


def load_manifest(path: Path) -> ExtensionManifest:
    """Read and validate manifest.yaml. Raises on invalid YAML or validation error."""
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Manifest must be a YAML object: {path}")
    return ExtensionManifest.model_validate(data)
