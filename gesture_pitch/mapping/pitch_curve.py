"""
Pitch curve generation from a drawn path.

The path is resampled at equal arc-length steps and each sample's height is
mapped to a pitch multiplier, yielding a fixed number of control points for
a time-varying playback-rate control.
"""

from typing import Sequence

import numpy as np

from ..config.settings import PlaybackConfig
from ..utils.gesture_utils import Point, calculate_path_metrics
from .playback_mapper import map_y_to_pitch


def generate_pitch_curve(path: Sequence[Point], surface_height: float,
                         sample_count: int = PlaybackConfig.SAMPLE_COUNT,
                         min_pitch: float = PlaybackConfig.MIN_PITCH,
                         max_pitch: float = PlaybackConfig.MAX_PITCH) -> np.ndarray:
    """
    Generate a pitch curve of sample_count values along a path.
    
    Args:
        path: Ordered points of the gesture
        surface_height: Height of the drawing surface; <= 0 uses the default
        sample_count: Number of control points to produce
        min_pitch: Pitch at the bottom of the surface
        max_pitch: Pitch at the top of the surface
        
    Returns:
        Array of length sample_count with every value in [min_pitch, max_pitch].
        An empty path yields the midpoint pitch; a single point yields that
        point's pitch throughout.
    """
    sample_count = max(0, int(sample_count))
    
    if not path:
        return np.full(sample_count, (min_pitch + max_pitch) / 2)
    
    if len(path) == 1:
        pitch = map_y_to_pitch(path[0].y, surface_height, min_pitch, max_pitch)
        return np.full(sample_count, float(pitch))
    
    ys = np.array([p.y for p in path], dtype=float)
    metrics = calculate_path_metrics(path)
    cumulative = np.array(metrics.cumulative_distances)
    
    targets = np.linspace(0.0, metrics.path_length, sample_count)
    
    # Segment j covers cumulative[j]..cumulative[j+1]; at a shared boundary the later segment wins
    segments = np.searchsorted(cumulative, targets, side='right') - 1
    segments = np.clip(segments, 0, len(path) - 2)
    
    seg_start = cumulative[segments]
    seg_length = cumulative[segments + 1] - seg_start
    ratio = np.divide(targets - seg_start, seg_length,
                      out=np.zeros_like(targets), where=seg_length > 0)
    
    y = ys[segments] + ratio * (ys[segments + 1] - ys[segments])
    return map_y_to_pitch(y, surface_height, min_pitch, max_pitch)
