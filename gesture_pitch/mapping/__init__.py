"""
Gesture-to-playback parameter mapping.

This package converts completed gestures into duration rates, pitch rates
and pitch curves for an external audio engine.
"""

from .playback_mapper import (
    PlaybackParams,
    DynamicPlaybackParams,
    calculate_duration_rate,
    calculate_pitch_rate,
    calculate_pitch_from_y,
    calculate_effective_rate,
    is_reverse_playback,
    build_playback_params,
    build_static_playback_params
)
from .pitch_curve import generate_pitch_curve

__all__ = [
    'PlaybackParams',
    'DynamicPlaybackParams',
    'calculate_duration_rate',
    'calculate_pitch_rate',
    'calculate_pitch_from_y',
    'calculate_effective_rate',
    'is_reverse_playback',
    'build_playback_params',
    'build_static_playback_params',
    'generate_pitch_curve'
]
