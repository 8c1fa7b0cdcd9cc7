"""
Touchscreen discovery and drawing-surface sizing.
"""

import evdev
from evdev import ecodes
import logging
from typing import Optional

from ..config.settings import PlaybackConfig
from ..utils.gesture_utils import SurfaceGeometry

logger = logging.getLogger(__name__)

class DeviceManager:
    """Locates a multitouch device and reports its coordinate space as a surface."""

    def __init__(self):
        self.device = None
        self.geometry: Optional[SurfaceGeometry] = None

    def find_device(self):
        """Select the first device with multitouch slots; None if there is none."""
        for path in evdev.list_devices():
            device = evdev.InputDevice(path)
            abs_info = dict(device.capabilities().get(ecodes.EV_ABS, []))

            if ecodes.ABS_MT_SLOT not in abs_info:
                continue

            self.device = device
            self.geometry = SurfaceGeometry(
                self._axis_size(abs_info, ecodes.ABS_MT_POSITION_X, PlaybackConfig.DEFAULT_SURFACE_WIDTH),
                self._axis_size(abs_info, ecodes.ABS_MT_POSITION_Y, PlaybackConfig.DEFAULT_SURFACE_HEIGHT)
            )
            logger.info(f"Using multitouch device {device.name} "
                        f"({self.geometry.width}x{self.geometry.height})")
            return device

        logger.error("No multitouch input device available")
        return None

    @staticmethod
    def _axis_size(abs_info, code, default) -> float:
        if code not in abs_info:
            return default
        return abs_info[code].max + 1

    def get_screen_geometry(self) -> SurfaceGeometry:
        """Surface spanning the device's axes, or the default surface before discovery."""
        if self.geometry is not None:
            return self.geometry
        return SurfaceGeometry(PlaybackConfig.DEFAULT_SURFACE_WIDTH,
                               PlaybackConfig.DEFAULT_SURFACE_HEIGHT)
