"""
Utilities package for gesture geometry and logging.

This package provides the shared point, surface and path measurement
helpers used by the tracker, the mappers and the listener.
"""

from .gesture_utils import (
    Point,
    PathMetrics,
    SurfaceGeometry,
    GeometryUtils,
    calculate_path_metrics
)

__all__ = [
    'Point',
    'PathMetrics',
    'SurfaceGeometry',
    'GeometryUtils',
    'calculate_path_metrics'
]
