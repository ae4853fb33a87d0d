"""Tolerances used to treat near zero results predictably."""

from __future__ import annotations

from typing import Any

_NAMED = {
    "float": 1e-5,
    "double": 1e-12,
    "long double": 1e-15,
}


def epsilon(kind: Any = float) -> Any:
    """Return the tolerance for a numeric kind.

    ``kind`` is either one of the precision names ``"float"``, ``"double"``
    or ``"long double"``, or a numeric type. Python's ``float`` uses the
    double precision tolerance; any other type gets its zero value.
    """
    if isinstance(kind, str):
        try:
            return _NAMED[kind]
        except KeyError:
            raise ValueError(f"Unknown precision {kind!r}") from None
    if kind is float:
        return _NAMED["double"]
    return kind()