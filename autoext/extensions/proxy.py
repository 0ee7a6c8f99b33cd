"""Dynamic admission gate: forwards any attribute of the wrapped extension, filtering guarded calls."""

import functools
from typing import Any, Callable

from autoext.extensions.admission import admits, find_execution_context
from autoext.extensions.contract import GUARDED_METHODS

# Result of a suppressed guarded call; methods not listed here return None.
_NEUTRAL_RESULTS: dict[str, Any] = {"supports_parameter": False}


class AutoDetectedExtensionProxy:
    """Exposes exactly the capability surface of the wrapped extension.

    Guarded methods the extension has are wrapped once, at construction, and stored on the
    instance, so each name always yields the same callable and isinstance checks against
    the capability protocols see them. A rejected call returns the neutral result without
    touching the extension. Everything else, including capabilities the extension lacks
    (AttributeError), resolves on the extension itself.
    """

    def __init__(self, extension: Any) -> None:
        self._extension = extension
        for name in GUARDED_METHODS:
            if callable(getattr(extension, name, None)):
                self.__dict__[name] = self._guard(name, getattr(extension, name))

    @property
    def original_extension(self) -> Any:
        return self._extension

    def __getattr__(self, name: str) -> Any:
        if name == "_extension":
            raise AttributeError(name)
        return getattr(self._extension, name)

    @staticmethod
    def _guard(name: str, method: Callable[..., Any]) -> Callable[..., Any]:
        neutral = _NEUTRAL_RESULTS.get(name)

        @functools.wraps(method)
        def guarded(*args: Any, **kwargs: Any) -> Any:
            if not admits(find_execution_context(args, kwargs)):
                return neutral
            return method(*args, **kwargs)

        return guarded

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._extension!r})"
