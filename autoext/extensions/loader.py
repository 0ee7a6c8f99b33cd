"""Loader: discover, load and gate auto-detected extensions.

Extensions come from manifest.yaml directories and from package entry points. Each one is
wrapped in an admission gate so include/exclude patterns scope where it applies.
"""

import importlib
import importlib.util
import logging
import sys
from enum import Enum
from importlib.metadata import entry_points
from pathlib import Path
from types import ModuleType
from typing import Any

from autoext.extensions.gate import AutoDetectedExtension
from autoext.extensions.manifest import ExtensionManifest, load_manifest
from autoext.extensions.proxy import AutoDetectedExtensionProxy
from autoext.settings import get_setting, merge_settings

logger = logging.getLogger(__name__)


class GateStrategy(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


def wrap_extension(
    extension: Any, strategy: GateStrategy | str = GateStrategy.STATIC
) -> AutoDetectedExtension | AutoDetectedExtensionProxy:
    """Wrap extension in the gate for strategy. Raises ValueError on unknown strategy."""
    if GateStrategy(strategy) is GateStrategy.DYNAMIC:
        return AutoDetectedExtensionProxy(extension)
    return AutoDetectedExtension(extension)


class Loader:
    """Auto-detection: discover -> load -> gate."""

    def __init__(
        self,
        extensions_dir: Path | None = None,
        settings: dict[str, Any] | None = None,
    ) -> None:
        self._extensions_dir = extensions_dir
        self._settings = merge_settings(settings)
        self._manifests: list[ExtensionManifest] = []
        self._extensions: dict[str, Any] = {}

    @property
    def enabled(self) -> bool:
        return bool(get_setting(self._settings, "extensions.autodetection.enabled", False))

    @property
    def default_gate(self) -> GateStrategy:
        return GateStrategy(get_setting(self._settings, "extensions.autodetection.gate", "static"))

    @property
    def entry_point_group(self) -> str:
        return get_setting(
            self._settings, "extensions.autodetection.entry_point_group", "autoext.extensions"
        )

    @property
    def manifests(self) -> list[ExtensionManifest]:
        return list(self._manifests)

    @property
    def extension_ids(self) -> list[str]:
        return list(self._extensions)

    def discover(self) -> None:
        """Collect enabled manifests from <extensions_dir>/*/manifest.yaml, in directory order."""
        self._manifests = []
        if self._extensions_dir is None or not self._extensions_dir.is_dir():
            return
        for manifest_path in sorted(self._extensions_dir.glob("*/manifest.yaml")):
            try:
                manifest = load_manifest(manifest_path)
            except Exception as e:
                logger.exception("Invalid manifest %s: %s", manifest_path, e)
                continue
            if manifest.enabled:
                self._manifests.append(manifest)
            else:
                logger.debug("Extension %s disabled in manifest", manifest.id)

    def load_all(self) -> None:
        """Instantiate discovered extensions and entry points, each behind a gate.

        Does nothing unless extensions.autodetection.enabled is set. A failing
        extension is logged and skipped.
        """
        self._extensions = {}
        if not self.enabled:
            logger.debug("Extension auto-detection disabled")
            return
        for manifest in self._manifests:
            try:
                self._register(manifest.id, self._load_one(manifest))
            except Exception as e:
                logger.exception("Failed to load extension %s: %s", manifest.id, e)
        for ep in entry_points(group=self.entry_point_group):
            try:
                cls = ep.load()
                self._register(ep.name, wrap_extension(cls(), self.default_gate))
            except Exception as e:
                logger.exception("Failed to load entry point %s: %s", ep.name, e)

    def _register(self, ext_id: str, gated: Any) -> None:
        if ext_id in self._extensions:
            logger.warning("Duplicate extension id %s, keeping the first one", ext_id)
            return
        self._extensions[ext_id] = gated
        logger.debug("Auto-detected extension %s: %r", ext_id, gated)

    def _load_one(self, manifest: ExtensionManifest) -> Any:
        """Instantiate the manifest's entrypoint class behind the manifest's (or default) gate."""
        module_name, class_name = manifest.entrypoint.split(":", 1)
        cls = getattr(self._import_entrypoint_module(manifest.id, module_name), class_name)
        return wrap_extension(cls(), manifest.gate or self.default_gate)

    def _import_entrypoint_module(self, ext_id: str, module_name: str) -> ModuleType:
        """<module>.py next to the manifest, else an importable (installed) module."""
        py_path = None
        if self._extensions_dir is not None:
            py_path = self._extensions_dir / ext_id / f"{module_name}.py"
        if py_path is None or not py_path.is_file():
            return importlib.import_module(module_name)
        spec = importlib.util.spec_from_file_location(f"autoext_ext_{ext_id}_{module_name}", py_path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load {py_path}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[spec.name] = module
        spec.loader.exec_module(module)
        return module

    def get(self, ext_id: str) -> Any:
        """Gated extension by id, or None."""
        return self._extensions.get(ext_id)

    def get_extensions(self) -> list[Any]:
        """All gated extensions."""
        return list(self._extensions.values())
