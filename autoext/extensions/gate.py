"""Static admission gate: declares every guarded capability, forwards only what the extension implements."""

from typing import Any

from autoext.extensions.admission import admits
from autoext.extensions.contract import (
    Capability,
    ExecutionContext,
    ParameterContext,
    detect_capabilities,
)


class AutoDetectedExtension:
    """Wraps an auto-detected extension behind all lifecycle callbacks and ParameterResolver.

    Capabilities are detected once at construction. A call is forwarded when the wrapped
    extension has the capability and the execution context admits it; otherwise the
    neutral result is returned (None, or False for supports_parameter).
    """

    def __init__(self, extension: Any) -> None:
        self._extension = extension
        self._capabilities = detect_capabilities(extension)

    @property
    def original_extension(self) -> Any:
        return self._extension

    @property
    def capabilities(self) -> frozenset[Capability]:
        return self._capabilities

    def has_capability(self, capability: Capability) -> bool:
        return capability in self._capabilities

    def _forwards(self, capability: Capability, context: ExecutionContext | None) -> bool:
        return capability in self._capabilities and admits(context)

    def before_all(self, context: ExecutionContext) -> None:
        if self._forwards(Capability.BEFORE_ALL, context):
            self._extension.before_all(context)

    def before_each(self, context: ExecutionContext) -> None:
        if self._forwards(Capability.BEFORE_EACH, context):
            self._extension.before_each(context)

    def before_test_execution(self, context: ExecutionContext) -> None:
        if self._forwards(Capability.BEFORE_TEST_EXECUTION, context):
            self._extension.before_test_execution(context)

    def after_all(self, context: ExecutionContext) -> None:
        if self._forwards(Capability.AFTER_ALL, context):
            self._extension.after_all(context)

    def after_each(self, context: ExecutionContext) -> None:
        if self._forwards(Capability.AFTER_EACH, context):
            self._extension.after_each(context)

    def after_test_execution(self, context: ExecutionContext) -> None:
        if self._forwards(Capability.AFTER_TEST_EXECUTION, context):
            self._extension.after_test_execution(context)

    def supports_parameter(
        self, parameter_context: ParameterContext, extension_context: ExecutionContext
    ) -> bool:
        if self._forwards(Capability.PARAMETER_RESOLUTION, extension_context):
            return self._extension.supports_parameter(parameter_context, extension_context)
        return False

    def resolve_parameter(
        self, parameter_context: ParameterContext, extension_context: ExecutionContext
    ) -> Any:
        if self._forwards(Capability.PARAMETER_RESOLUTION, extension_context):
            return self._extension.resolve_parameter(parameter_context, extension_context)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._extension!r})"
