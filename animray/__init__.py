"""Films, extents, scenes, geometry and surface materials for a small ray tracer."""

__version__ = "0.1.0"