#!/usr/bin/env python3
"""
Gesture Pitch - Main Entry Point
Draw on a touchscreen to generate audio playback parameters.
"""

import logging
import time
from gesture_pitch.core.listener import GestureListener

def main():
    """Main entry point for the gesture listener."""
    logging.basicConfig(level=logging.INFO)
    listener = GestureListener(reference_duration=5.0)
    
    if not listener.start():
        return
    
    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()

if __name__ == "__main__":
    main()
