"""
Mapping of gesture geometry to audio playback parameters.

Two pitch conventions coexist here. calculate_pitch_rate is the exponential
mapping of a normalized Y in [-1, 1] onto [0.25, 4.0], used by static
playback. calculate_pitch_from_y is the linear mapping of an absolute Y onto
[1.0, 5.0], used by the pitch curve generator. Neither replaces the other.
"""

import math
from dataclasses import dataclass

import numpy as np

from ..config.settings import PlaybackConfig
from ..gestures.gesture_tracker import GestureData, calculate_gesture_params


@dataclass(frozen=True)
class PlaybackParams:
    """Parameters for playback at a single, constant rate."""
    is_reverse: bool
    duration_rate: float
    pitch_rate: float


@dataclass(frozen=True)
class DynamicPlaybackParams:
    """Parameters for playback with a time-varying pitch curve."""
    duration_rate: float
    pitch_curve: np.ndarray
    duration: float


def calculate_duration_rate(path_length: float, surface_width: float,
                            default_width: float = PlaybackConfig.DEFAULT_SURFACE_WIDTH) -> float:
    """
    Convert a path length to a playback duration multiplier.

    Half the surface width plays at the original duration (1.0); the result
    is linear in path_length and unbounded above.
    """
    if surface_width <= 0:
        surface_width = default_width
    
    base_distance = surface_width / 2
    return path_length / base_distance


def calculate_pitch_rate(normalized_y: float,
                         min_rate: float = PlaybackConfig.LEGACY_MIN_PITCH_RATE,
                         max_rate: float = PlaybackConfig.LEGACY_MAX_PITCH_RATE) -> float:
    """
    Convert a normalized Y (-1 top .. 1 bottom) to a pitch multiplier.
    
    -1 -> 0.25, 0 -> 1.0, 1 -> 4.0 (two octaves either way).
    """
    clamped_y = max(-1.0, min(1.0, normalized_y))
    rate = math.pow(2, clamped_y * 2)
    return max(min_rate, min(max_rate, rate))


def map_y_to_pitch(y, surface_height: float,
                   min_pitch: float = PlaybackConfig.MIN_PITCH,
                   max_pitch: float = PlaybackConfig.MAX_PITCH,
                   default_height: float = PlaybackConfig.DEFAULT_SURFACE_HEIGHT):
    """Vectorised linear Y-to-pitch mapping; accepts scalars or arrays."""
    if surface_height <= 0:
        surface_height = default_height
    
    normalized = np.clip(np.asarray(y, dtype=float) / surface_height, 0.0, 1.0)
    return max_pitch - normalized * (max_pitch - min_pitch)


def calculate_pitch_from_y(y: float, surface_height: float,
                           min_pitch: float = PlaybackConfig.MIN_PITCH,
                           max_pitch: float = PlaybackConfig.MAX_PITCH) -> float:
    """
    Convert an absolute Y coordinate to a pitch multiplier.
    
    y = 0 (top) gives max_pitch, y = surface_height (bottom) gives min_pitch.
    Coordinates outside the surface are clamped to its edges.
    """
    return float(map_y_to_pitch(y, surface_height, min_pitch, max_pitch))


def is_reverse_playback(x_delta: float) -> bool:
    """Leftward gestures play in reverse."""
    return x_delta < 0


def calculate_effective_rate(pitch_rate: float, duration_rate: float,
                             min_rate: float = PlaybackConfig.MIN_PLAYBACK_RATE) -> float:
    """
    Combine pitch and duration into a single playback rate.
    
    Longer durations slow playback down and higher pitches speed it up, so
    the rate is pitch_rate / duration_rate, floored at min_rate.
    """
    if duration_rate <= 0:
        return min_rate
    
    rate = pitch_rate / duration_rate
    if not math.isfinite(rate) or rate <= 0:
        return min_rate
    return rate


def build_static_playback_params(gesture: GestureData, surface_width: float,
                                 surface_height: float) -> PlaybackParams:
    """Derive constant-rate playback parameters from a gesture's endpoints."""
    params = calculate_gesture_params(gesture.start_point, gesture.end_point, surface_height)
    
    return PlaybackParams(
        is_reverse=is_reverse_playback(gesture.end_point.x - gesture.start_point.x),
        duration_rate=calculate_duration_rate(params.distance, surface_width),
        pitch_rate=calculate_pitch_rate(params.normalized_y)
    )


def build_playback_params(gesture: GestureData, reference_duration: float,
                          surface_width: float, surface_height: float,
                          sample_count: int = PlaybackConfig.SAMPLE_COUNT) -> DynamicPlaybackParams:
    """
    Derive time-varying playback parameters from a completed gesture.
    
    Args:
        gesture: Completed gesture from a GestureTracker
        reference_duration: Length of the source audio in seconds
        surface_width: Width of the drawing surface in pixels
        surface_height: Height of the drawing surface in pixels
        sample_count: Number of pitch curve control points
        
    Returns:
        DynamicPlaybackParams with duration = duration_rate * reference_duration
    """
    # Imported here: pitch_curve depends on this module's Y mapping
    from .pitch_curve import generate_pitch_curve
    
    duration_rate = calculate_duration_rate(gesture.path_length, surface_width)
    pitch_curve = generate_pitch_curve(gesture.path, surface_height, sample_count)
    
    return DynamicPlaybackParams(
        duration_rate=duration_rate,
        pitch_curve=pitch_curve,
        duration=duration_rate * reference_duration
    )
