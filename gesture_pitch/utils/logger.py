"""
Logging utilities for completed gestures and their playback parameters.
"""

import datetime
import logging
from typing import Optional

from ..config.settings import PlaybackConfig

logger = logging.getLogger(__name__)


class GestureLogger:
    """Handles logging of completed gestures and playback parameters."""
    
    def __init__(self, debug_file: Optional[str] = PlaybackConfig.LOG_FILE):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")
    
    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]
    
    def log_gesture(self, gesture):
        """Log a completed gesture."""
        timestamp = self._timestamp()
        start, end = gesture.start_point, gesture.end_point
        
        print(f"[{timestamp}] ✏️ GESTURE: {len(gesture.path)} point(s)")
        print(f"   Start: ({int(start.x)}, {int(start.y)})  End: ({int(end.x)}, {int(end.y)})")
        print(f"   Distance: {gesture.distance:.1f}px, Path length: {gesture.path_length:.1f}px")
        
        self._write(f"[{timestamp}] {gesture}\n")
    
    def log_playback(self, params):
        """Log playback parameters derived from a gesture."""
        timestamp = self._timestamp()
        curve = params.pitch_curve
        
        print(f"[{timestamp}] 🔊 PLAYBACK: duration rate {params.duration_rate:.2f}x "
              f"({params.duration:.2f}s)")
        if len(curve):
            print(f"   Pitch curve: {len(curve)} points, "
                  f"start {curve[0]:.2f}, end {curve[-1]:.2f}, "
                  f"range {curve.min():.2f}-{curve.max():.2f}")
        
        self._write(f"[{timestamp}] duration_rate={params.duration_rate} "
                    f"duration={params.duration} pitch_curve={list(curve)}\n")
    
    def _write(self, message: str):
        if not self.debug_file:
            return
        try:
            self.debug_file.write(message)
            self.debug_file.flush()
        except OSError as e:
            logger.warning(f"Could not write debug file: {e}")
    
    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
