"""
Gesture Pitch Package
Maps freehand gestures on a drawing surface to audio playback parameters.
"""

from .gestures.gesture_tracker import GestureTracker, GestureData, PointerEvent
from .mapping.playback_mapper import (
    calculate_duration_rate,
    calculate_pitch_rate,
    calculate_pitch_from_y,
    build_playback_params
)
from .mapping.pitch_curve import generate_pitch_curve
from .utils.gesture_utils import Point, SurfaceGeometry, calculate_path_metrics

__version__ = "1.0.0"
__all__ = [
    "GestureTracker",
    "GestureData",
    "PointerEvent",
    "Point",
    "SurfaceGeometry",
    "calculate_path_metrics",
    "calculate_duration_rate",
    "calculate_pitch_rate",
    "calculate_pitch_from_y",
    "generate_pitch_curve",
    "build_playback_params"
]
