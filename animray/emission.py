"""Light emitted by the surface a ray strikes."""

from __future__ import annotations

from typing import Any


def emission(colour_type: Any, observer: Any, intersection: Any, scene: Any) -> Any:
    """Return the light emitted where ``observer`` struck ``intersection``.

    An intersection that knows how to emit light provides an
    ``emission(colour_type, observer, scene)`` method. Any other surface is
    non-emissive and gives the zero value of ``colour_type``.
    """
    emit = getattr(intersection, "emission", None)
    if emit is None or not callable(emit):
        return colour_type()
    return emit(colour_type, observer, scene)