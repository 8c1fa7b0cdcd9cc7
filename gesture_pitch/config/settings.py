"""
Configuration settings for gesture-to-playback mapping.
"""

class PlaybackConfig:
    """Configuration constants for gesture capture and playback mapping."""
    
    # Pitch curve resolution (control points per gesture)
    SAMPLE_COUNT = 100
    
    # Fallback surface dimensions (in pixels) when the surface reports none
    DEFAULT_SURFACE_WIDTH = 800
    DEFAULT_SURFACE_HEIGHT = 600
    
    # Linear pitch range: top of surface -> MAX_PITCH, bottom -> MIN_PITCH
    MIN_PITCH = 1.0
    MAX_PITCH = 5.0
    
    # Exponential pitch range for normalized Y in [-1, 1]
    LEGACY_MIN_PITCH_RATE = 0.25
    LEGACY_MAX_PITCH_RATE = 4.0
    
    # Floor for pitch_rate / duration_rate
    MIN_PLAYBACK_RATE = 0.01
    
    # Optional debug log file for completed gestures
    LOG_FILE = None
