"""Admission decision shared by both gates: forward a guarded call or suppress it.

Include/exclude pattern lists are read from the execution context on every call,
since the effective configuration can differ per test class.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from autoext.extensions.contract import ExecutionContext
from autoext.patterns import MATCH_ALL, class_name_of, matches_class_name

logger = logging.getLogger(__name__)

INCLUDE_PROPERTY_NAME = "autoext.extensions.autodetection.include"
EXCLUDE_PROPERTY_NAME = "autoext.extensions.autodetection.exclude"


@dataclass(frozen=True)
class FilterConfig:
    """Resolved include/exclude lists. Unset include matches everything; unset exclude matches nothing."""

    include: str = MATCH_ALL
    exclude: str | None = None

    @classmethod
    def from_context(cls, context: ExecutionContext) -> "FilterConfig":
        include = context.get_configuration_parameter(INCLUDE_PROPERTY_NAME)
        exclude = context.get_configuration_parameter(EXCLUDE_PROPERTY_NAME)
        return cls(
            include=MATCH_ALL if include is None else include,
            exclude=exclude,
        )


def is_admitted(test_class_name: str, config: FilterConfig) -> bool:
    """True if the class is included and not excluded."""
    if not matches_class_name(test_class_name, config.include):
        logger.debug("%s not included by %r", test_class_name, config.include)
        return False
    if config.exclude is not None and matches_class_name(test_class_name, config.exclude):
        logger.debug("%s excluded by %r", test_class_name, config.exclude)
        return False
    return True


def find_execution_context(
    args: Iterable[Any], kwargs: dict[str, Any] | None = None
) -> ExecutionContext | None:
    """First ExecutionContext among positional, then keyword arguments."""
    for arg in args:
        if isinstance(arg, ExecutionContext):
            return arg
    for arg in (kwargs or {}).values():
        if isinstance(arg, ExecutionContext):
            return arg
    return None


def admits(context: ExecutionContext | None) -> bool:
    """Admission for one invocation. Calls without a context or test class are never filtered."""
    if context is None:
        return True
    test_class = context.get_test_class()
    if test_class is None:
        return True
    return is_admitted(class_name_of(test_class), FilterConfig.from_context(context))
