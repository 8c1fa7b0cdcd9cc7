"""
Shared geometry utilities for gesture capture and path measurement.

This module provides the point and surface value types used across the
tracker, the pitch curve generator and the touchscreen listener, plus the
path metrics computation that every finalized gesture carries.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in surface-local pixel coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class PathMetrics:
    """Total path length and the distance travelled up to each point."""
    path_length: float
    cumulative_distances: Tuple[float, ...]


@dataclass(frozen=True)
class SurfaceGeometry:
    """
    Bounding rectangle of a drawing surface.
    
    ``origin_x``/``origin_y`` are the surface's top-left corner in client
    coordinates; ``width``/``height`` bound the surface-local space.
    """
    width: float
    height: float
    origin_x: float = 0.0
    origin_y: float = 0.0
    
    def to_local(self, client_x: float, client_y: float) -> Point:
        """Convert client coordinates to surface-local coordinates."""
        return Point(client_x - self.origin_x, client_y - self.origin_y)
    
    def clamp(self, point: Point) -> Point:
        """Clamp a surface-local point to the surface rectangle."""
        return Point(
            max(0.0, min(point.x, self.width)),
            max(0.0, min(point.y, self.height))
        )
    
    def contains(self, point: Point) -> bool:
        """Check whether a surface-local point lies on the surface."""
        return 0 <= point.x <= self.width and 0 <= point.y <= self.height


class GeometryUtils:
    """Utility class for geometric calculations."""
    
    @staticmethod
    def calculate_distance(p1: Point, p2: Point) -> float:
        """Calculate Euclidean distance between two points."""
        return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)


def calculate_path_metrics(path: Sequence[Point]) -> PathMetrics:
    """
    Calculate the total length of a path and its cumulative distances.
    
    Args:
        path: Ordered points of the path (not modified)
        
    Returns:
        PathMetrics where cumulative_distances[i] is the length travelled
        from path[0] to path[i]. An empty path has no cumulative distances;
        a single point has [0.0].
        
    Example:
        >>> m = calculate_path_metrics([Point(0, 0), Point(30, 40), Point(30, 140)])
        >>> m.path_length, m.cumulative_distances
        (150.0, (0.0, 50.0, 150.0))
    """
    if not path:
        return PathMetrics(0.0, ())
    
    cumulative: List[float] = [0.0]
    total = 0.0
    for i in range(1, len(path)):
        total += GeometryUtils.calculate_distance(path[i-1], path[i])
        cumulative.append(total)
    
    return PathMetrics(total, tuple(cumulative))
