"""Extension system: contract, admission, gates, context, manifest, loader."""

from autoext.extensions.admission import (
    EXCLUDE_PROPERTY_NAME,
    INCLUDE_PROPERTY_NAME,
    FilterConfig,
    admits,
    find_execution_context,
    is_admitted,
)
from autoext.extensions.context import SimpleExecutionContext
from autoext.extensions.contract import (
    GUARDED_METHODS,
    AfterAllCallback,
    AfterEachCallback,
    AfterTestExecutionCallback,
    BeforeAllCallback,
    BeforeEachCallback,
    BeforeTestExecutionCallback,
    Capability,
    ExecutionContext,
    ParameterContext,
    ParameterResolver,
    detect_capabilities,
)
from autoext.extensions.gate import AutoDetectedExtension
from autoext.extensions.loader import GateStrategy, Loader, wrap_extension
from autoext.extensions.manifest import ExtensionManifest, load_manifest
from autoext.extensions.proxy import AutoDetectedExtensionProxy

__all__ = [
    "AfterAllCallback",
    "AfterEachCallback",
    "AfterTestExecutionCallback",
    "AutoDetectedExtension",
    "AutoDetectedExtensionProxy",
    "BeforeAllCallback",
    "BeforeEachCallback",
    "BeforeTestExecutionCallback",
    "Capability",
    "EXCLUDE_PROPERTY_NAME",
    "ExecutionContext",
    "ExtensionManifest",
    "FilterConfig",
    "GUARDED_METHODS",
    "GateStrategy",
    "INCLUDE_PROPERTY_NAME",
    "Loader",
    "ParameterContext",
    "ParameterResolver",
    "SimpleExecutionContext",
    "admits",
    "detect_capabilities",
    "find_execution_context",
    "is_admitted",
    "load_manifest",
    "wrap_extension",
]
