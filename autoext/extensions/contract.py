"""Extension protocols: lifecycle callbacks, parameter resolution and the execution context.

Capabilities are detected via isinstance(ext, Protocol). An extension may implement any subset.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class ExecutionContext(Protocol):
    """Per-invocation view of the running test, supplied by the host framework."""

    def get_test_class(self) -> type | None:
        """Class of the currently executing test; None for root or container-level invocations."""

    def get_configuration_parameter(self, key: str) -> str | None:
        """Configuration value for key, or None when unset."""


@dataclass(frozen=True)
class ParameterContext:
    """Describes a parameter the host framework wants resolved."""

    name: str
    annotation: Any = None
    index: int = 0
    declaring_callable: Callable[..., Any] | None = None


@runtime_checkable
class BeforeAllCallback(Protocol):
    def before_all(self, context: ExecutionContext) -> None:
        """Called once before all tests of a container."""


@runtime_checkable
class BeforeEachCallback(Protocol):
    def before_each(self, context: ExecutionContext) -> None:
        """Called before each test, before its setup methods."""


@runtime_checkable
class BeforeTestExecutionCallback(Protocol):
    def before_test_execution(self, context: ExecutionContext) -> None:
        """Called immediately before the test body runs."""


@runtime_checkable
class AfterAllCallback(Protocol):
    def after_all(self, context: ExecutionContext) -> None:
        """Called once after all tests of a container."""


@runtime_checkable
class AfterEachCallback(Protocol):
    def after_each(self, context: ExecutionContext) -> None:
        """Called after each test, after its teardown methods."""


@runtime_checkable
class AfterTestExecutionCallback(Protocol):
    def after_test_execution(self, context: ExecutionContext) -> None:
        """Called immediately after the test body runs."""


@runtime_checkable
class ParameterResolver(Protocol):
    """Resolves test parameters. supports_parameter is always asked before resolve_parameter."""

    def supports_parameter(
        self, parameter_context: ParameterContext, extension_context: ExecutionContext
    ) -> bool:
        """True if this resolver can supply the parameter."""

    def resolve_parameter(
        self, parameter_context: ParameterContext, extension_context: ExecutionContext
    ) -> Any:
        """Value for the parameter."""


class Capability(Enum):
    BEFORE_ALL = "before_all"
    BEFORE_EACH = "before_each"
    BEFORE_TEST_EXECUTION = "before_test_execution"
    AFTER_ALL = "after_all"
    AFTER_EACH = "after_each"
    AFTER_TEST_EXECUTION = "after_test_execution"
    PARAMETER_RESOLUTION = "parameter_resolution"

    @property
    def protocol(self) -> type:
        return _CAPABILITY_PROTOCOLS[self]


_CAPABILITY_PROTOCOLS: dict[Capability, type] = {
    Capability.BEFORE_ALL: BeforeAllCallback,
    Capability.BEFORE_EACH: BeforeEachCallback,
    Capability.BEFORE_TEST_EXECUTION: BeforeTestExecutionCallback,
    Capability.AFTER_ALL: AfterAllCallback,
    Capability.AFTER_EACH: AfterEachCallback,
    Capability.AFTER_TEST_EXECUTION: AfterTestExecutionCallback,
    Capability.PARAMETER_RESOLUTION: ParameterResolver,
}

# Every capability method that receives an ExecutionContext.
GUARDED_METHODS: frozenset[str] = frozenset(
    {
        "after_all",
        "after_each",
        "after_test_execution",
        "before_all",
        "before_each",
        "before_test_execution",
        "supports_parameter",
        "resolve_parameter",
    }
)


def detect_capabilities(extension: Any) -> frozenset[Capability]:
    """Capabilities the extension implements."""
    return frozenset(c for c in Capability if isinstance(extension, c.protocol))
