"""Annotate a type with extra information carried alongside it.

A ray emitted by a camera may need to carry extra data, such as a frame
number or a reflection depth, that later parts of the renderer use. A
mixin type is a subclass of both the original type and a small class
holding that extra data.
"""

from __future__ import annotations

import copy
import functools
from datetime import datetime, timezone
from typing import Any


def _copy_state(target: Any, source: Any) -> None:
    """Copy every instance attribute of ``source`` onto ``target``."""
    state = getattr(source, "__dict__", None)
    if state:
        target.__dict__.update(state)
    for klass in type(source).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if hasattr(source, name):
                object.__setattr__(target, name, getattr(source, name))


@functools.lru_cache(maxsize=None)
def mixin(base: type, extra: type) -> type:
    """Return a type that is both a ``base`` and an ``extra``.

    Construction arguments go to ``base``; constructing from a single
    ``base`` instance copies its state. The ``extra`` part always starts
    fresh. Multiplication is done by ``base`` and keeps the extra data.
    The same pair of types always gives the same mixed type.
    """

    class Mixed(base, extra):  # type: ignore[valid-type, misc]
        def __init__(self, *args: Any, **kwargs: Any) -> None:
            if len(args) == 1 and not kwargs and isinstance(args[0], base):
                _copy_state(self, args[0])
            else:
                base.__init__(self, *args, **kwargs)
            extra.__init__(self, *args, **kwargs)

        if hasattr(base, "__mul__"):

            def __mul__(self, by: Any) -> Any:
                product = base.__mul__(self, by)
                if product is NotImplemented:
                    return product
                result = copy.copy(self)
                _copy_state(result, product)
                return result

    name = f"{base.__name__}With{extra.__name__}"
    Mixed.__name__ = name
    Mixed.__qualname__ = name
    Mixed.__module__ = base.__module__
    return Mixed


class DepthCounted:
    """Tracks how many rays deep a ray is, e.g. through reflections."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.depth_count = 0

    def add_count(self, other: Any) -> None:
        """Count one more level, plus the depth already reached by ``other``."""
        if isinstance(other, DepthCounted):
            self.depth_count = self.depth_count + 1 + other.depth_count
        else:
            self.depth_count = self.depth_count + 1


class AtFrame:
    """Records the animation frame number a ray belongs to."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.frame = 0


_EPOCH = datetime.fromtimestamp(0, timezone.utc)


class AtTime:
    """Records a time stamp, starting at the clock's epoch."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.time = _EPOCH


def _with(cls: type, extra: type) -> type:
    if issubclass(cls, extra):
        return cls
    return mixin(cls, extra)


def with_depth_count(cls: type) -> type:
    """Return ``cls`` with a depth count, or ``cls`` itself if it has one."""
    return _with(cls, DepthCounted)


def with_frame(cls: type) -> type:
    """Return ``cls`` with a frame number, or ``cls`` itself if it has one."""
    return _with(cls, AtFrame)


def with_time(cls: type) -> type:
    """Return ``cls`` with a time stamp, or ``cls`` itself if it has one."""
    return _with(cls, AtTime)