"""Class-name pattern lists: comma-separated entries, `*` matches any substring."""

import re
from functools import lru_cache

MATCH_ALL = "*"
PATTERN_DELIMITER = ","


def class_name_of(cls: type) -> str:
    """Fully-qualified name used for matching, e.g. 'pkg.tests.TestFoo.Nested'."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _to_regex(pattern: str) -> re.Pattern[str]:
    parts = [re.escape(p) for p in pattern.split(MATCH_ALL)]
    return re.compile(".*".join(parts))


@lru_cache(maxsize=256)
def compile_patterns(patterns: str) -> tuple[re.Pattern[str], ...]:
    """Compile a pattern list. Blank entries are dropped."""
    return tuple(
        _to_regex(p.strip())
        for p in patterns.split(PATTERN_DELIMITER)
        if p.strip()
    )


def matches_class_name(name: str, patterns: str | None) -> bool:
    """True if name fully matches any entry of the list. None or an empty list matches nothing."""
    if patterns is None:
        return False
    if patterns.strip() == MATCH_ALL:
        return True
    return any(p.fullmatch(name) for p in compile_patterns(patterns))
