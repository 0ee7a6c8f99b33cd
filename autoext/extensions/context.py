"""SimpleExecutionContext: in-memory ExecutionContext for hosts without their own context type."""

from typing import Any

from autoext.settings import get_setting


def _as_parameter(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


class SimpleExecutionContext:
    """Hierarchical context: root -> class -> method.

    Test class and configuration parameters fall back to the parent context, so a method
    context reports its class and a class context can override the root configuration.
    """

    def __init__(
        self,
        test_class: type | None = None,
        config: dict[str, Any] | None = None,
        parent: "SimpleExecutionContext | None" = None,
        display_name: str = "",
    ) -> None:
        self._test_class = test_class
        self.config: dict[str, Any] = config or {}
        self.parent = parent
        self.display_name = display_name or (test_class.__name__ if test_class else "")

    def get_test_class(self) -> type | None:
        if self._test_class is not None:
            return self._test_class
        return self.parent.get_test_class() if self.parent else None

    def get_configuration_parameter(self, key: str) -> str | None:
        """Flat key first (e.g. 'a.b.c': 'x'), then nested path ({'a': {'b': {'c': 'x'}}}), then parent."""
        value = self.config.get(key)
        if value is None:
            value = get_setting(self.config, key)
        if value is None or isinstance(value, dict):
            return self.parent.get_configuration_parameter(key) if self.parent else None
        return _as_parameter(value)

    def child(
        self,
        test_class: type | None = None,
        config: dict[str, Any] | None = None,
        display_name: str = "",
    ) -> "SimpleExecutionContext":
        """Nested context (class under root, method under class)."""
        return SimpleExecutionContext(
            test_class=test_class, config=config, parent=self, display_name=display_name
        )

    def __repr__(self) -> str:
        return f"SimpleExecutionContext({self.display_name!r})"
