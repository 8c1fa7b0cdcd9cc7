"""
Gesture capture for drawing surfaces.

This module provides single-pointer tracking that turns pointer events
into finalized gesture records.
"""

from .gesture_tracker import (
    GestureTracker,
    GestureData,
    GestureParams,
    PointerEvent,
    calculate_gesture_params
)

__all__ = [
    'GestureTracker',
    'GestureData',
    'GestureParams',
    'PointerEvent',
    'calculate_gesture_params'
]
