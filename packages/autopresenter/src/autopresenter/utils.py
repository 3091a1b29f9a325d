# autopresenter/utils.py
"""
Attribute-name helpers for presenters (framework-agnostic).

Presentation functions may be declared under any casing convention, so a
template asking for `fullName` can be served by a `full_name` presenter and
vice versa. Both converters are memoized: the set of attribute names a
project uses is small and stable, and lookups happen on every attribute read.
"""

import re
from functools import lru_cache

__all__ = ["snake", "camel", "name_candidates"]

_CAMEL_WORD_RE = re.compile(r"(.)([A-Z][a-z]+)")
_CAMEL_TAIL_RE = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATOR_RE = re.compile(r"[\s_\-]+")


@lru_cache(maxsize=1024)
def snake(s: str) -> str:
    """Convert CamelCase or mixedCase to snake_case."""
    s1 = _CAMEL_WORD_RE.sub(r"\1_\2", s)
    return _CAMEL_TAIL_RE.sub(r"\1_\2", s1).lower()


@lru_cache(maxsize=1024)
def camel(s: str) -> str:
    """Convert snake_case, kebab-case or spaced words to camelCase.

    Names without separators keep their casing apart from the first letter,
    so `fullName` stays `fullName`.
    """
    words = [w for w in _SEPARATOR_RE.split(s) if w]
    if not words:
        return ""
    head, *rest = words
    return head[:1].lower() + head[1:] + "".join(w[:1].upper() + w[1:] for w in rest)


def name_candidates(key: str) -> tuple[str, ...]:
    """Return the lookup order for a presentation name: exact, snake, camel.

    Duplicates are dropped so single-word keys resolve once.
    """
    out: list[str] = []
    for candidate in (key, snake(key), camel(key)):
        if candidate and candidate not in out:
            out.append(candidate)
    return tuple(out)
