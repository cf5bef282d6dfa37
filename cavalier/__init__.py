"""2D polyline geometry: vectors, line and arc segments, and a static spatial index."""

__version__ = "0.1.0"
__all__ = ["vector", "vector2", "lineseg_intersect", "spatial_index", "segment"]