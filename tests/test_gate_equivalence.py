"""Both gate forms make the same admission decision for the same extension, context and config."""

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from autoext.extensions.admission import EXCLUDE_PROPERTY_NAME, INCLUDE_PROPERTY_NAME
from autoext.extensions.context import SimpleExecutionContext
from autoext.extensions.contract import GUARDED_METHODS, ParameterContext
from autoext.extensions.loader import wrap_extension

_MODULES = ["pkg", "pkg.sub", "other", "com.example"]
_NAMES = ["Foo", "Bar", "Excluded", "SlowTests"]
_PATTERNS = [None, "", "*", "pkg.*", "pkg.Excluded", "*Tests", "other.*,com.example.*", "pkg.sub.*"]

_LIFECYCLE = sorted(GUARDED_METHODS - {"supports_parameter", "resolve_parameter"})


class CountingExtension:
    """Implements every capability and counts calls per method."""

    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def _hit(self, method: str) -> None:
        self.counts[method] = self.counts.get(method, 0) + 1

    def before_all(self, context: Any) -> None:
        self._hit("before_all")

    def before_each(self, context: Any) -> None:
        self._hit("before_each")

    def before_test_execution(self, context: Any) -> None:
        self._hit("before_test_execution")

    def after_all(self, context: Any) -> None:
        self._hit("after_all")

    def after_each(self, context: Any) -> None:
        self._hit("after_each")

    def after_test_execution(self, context: Any) -> None:
        self._hit("after_test_execution")

    def supports_parameter(self, parameter_context: Any, extension_context: Any) -> bool:
        self._hit("supports_parameter")
        return True

    def resolve_parameter(self, parameter_context: Any, extension_context: Any) -> Any:
        self._hit("resolve_parameter")
        return "value"


def _context(module: str, name: str, include: str | None, exclude: str | None) -> SimpleExecutionContext:
    config: dict = {}
    if include is not None:
        config[INCLUDE_PROPERTY_NAME] = include
    if exclude is not None:
        config[EXCLUDE_PROPERTY_NAME] = exclude
    test_class = type(name, (), {"__module__": module})
    return SimpleExecutionContext(test_class=test_class, config=config)


class TestGateEquivalence:
    @pytest.mark.property
    @given(
        module=st.sampled_from(_MODULES),
        name=st.sampled_from(_NAMES),
        include=st.sampled_from(_PATTERNS),
        exclude=st.sampled_from(_PATTERNS),
        method=st.sampled_from(_LIFECYCLE),
    )
    def test_lifecycle_decisions_agree(
        self, module: str, name: str, include: str | None, exclude: str | None, method: str
    ) -> None:
        ctx = _context(module, name, include, exclude)
        static_ext, dynamic_ext = CountingExtension(), CountingExtension()
        getattr(wrap_extension(static_ext, "static"), method)(ctx)
        getattr(wrap_extension(dynamic_ext, "dynamic"), method)(ctx)
        assert static_ext.counts == dynamic_ext.counts

    @pytest.mark.property
    @given(
        module=st.sampled_from(_MODULES),
        name=st.sampled_from(_NAMES),
        include=st.sampled_from(_PATTERNS),
        exclude=st.sampled_from(_PATTERNS),
    )
    def test_parameter_resolution_results_agree(
        self, module: str, name: str, include: str | None, exclude: str | None
    ) -> None:
        ctx = _context(module, name, include, exclude)
        param = ParameterContext("p")
        static_ext, dynamic_ext = CountingExtension(), CountingExtension()
        static_gate = wrap_extension(static_ext, "static")
        dynamic_gate = wrap_extension(dynamic_ext, "dynamic")
        assert static_gate.supports_parameter(param, ctx) == dynamic_gate.supports_parameter(param, ctx)
        assert static_gate.resolve_parameter(param, ctx) == dynamic_gate.resolve_parameter(param, ctx)
        assert static_ext.counts == dynamic_ext.counts
