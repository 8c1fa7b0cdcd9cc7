"""
Touchscreen listener that feeds multitouch contacts into a gesture tracker.
"""

import threading
import logging
from typing import Callable, Dict, Optional
from evdev import ecodes

from ..config.settings import PlaybackConfig
from ..device.device_manager import DeviceManager
from ..gestures.gesture_tracker import GestureTracker, GestureData, PointerEvent
from ..mapping.playback_mapper import DynamicPlaybackParams, build_playback_params
from ..utils.gesture_utils import SurfaceGeometry
from ..utils.logger import GestureLogger

logger = logging.getLogger(__name__)


class GestureListener:
    """
    Reads touchscreen events and turns completed gestures into playback parameters.

    Each multitouch contact becomes a pointer identified by its tracking id.
    Only the first contact drives the tracker; a contact that leaves the
    drawing surface completes its gesture at the surface edge.
    """

    def __init__(self, reference_duration: float = 1.0,
                 surface: Optional[SurfaceGeometry] = None,
                 on_playback: Optional[Callable[[DynamicPlaybackParams], None]] = None,
                 device_manager: Optional[DeviceManager] = None,
                 gesture_logger: Optional[GestureLogger] = None,
                 sample_count: int = PlaybackConfig.SAMPLE_COUNT):
        """
        Args:
            reference_duration: Length of the source audio in seconds
            surface: Drawing surface in screen coordinates; the whole screen if None
            on_playback: Receives the parameters of each completed gesture
            device_manager: Touchscreen discovery; a new DeviceManager if None
            gesture_logger: Gesture/playback logger; a new GestureLogger if None
            sample_count: Number of pitch curve control points
        """
        self.device_manager = device_manager or DeviceManager()
        self.logger = gesture_logger or GestureLogger()
        self.reference_duration = reference_duration
        self.surface = surface
        self.on_playback = on_playback
        self.sample_count = sample_count
        self.tracker = GestureTracker(self._get_surface)

        # State management
        self.running = False
        self.current_slot = 0
        self.slot_data: Dict[int, Dict] = {}

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def _get_surface(self) -> SurfaceGeometry:
        if self.surface is not None:
            return self.surface
        return self.device_manager.get_screen_geometry()

    def start(self) -> bool:
        """Start the touchscreen listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touchscreen found")
            return False

        self.running = True
        surface = self._get_surface()
        print(f"✅ Found: {device.name}")
        print(f"📺 Surface: {surface.width}x{surface.height} at ({surface.origin_x}, {surface.origin_y})")
        print("🎯 Ready! Draw on the surface to generate playback parameters.")

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()

        return True

    def stop(self):
        """Stop the touchscreen listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
        self.logger.close()

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []

        except KeyboardInterrupt:
            pass
        except Exception as e:
            logger.error(f"Error in event loop: {e}")
            self.running = False

    def _process_event_batch(self, event_batch):
        """Apply a batch of events, then dispatch per-slot pointer events."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)

        for data in self.slot_data.values():
            self._dispatch_slot(data)

    def _handle_abs_event(self, ev):
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
            return

        data = self.slot_data.setdefault(self.current_slot, {
            'tracking_id': None, 'x': 0, 'y': 0,
            'placed': False, 'moved': False, 'lifted': False
        })

        if ev.code == ecodes.ABS_MT_TRACKING_ID:
            if ev.value == -1:
                data['lifted'] = True
            else:
                data['tracking_id'] = ev.value
                data['placed'] = True
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            data['x'] = ev.value
            data['moved'] = True
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            data['y'] = ev.value
            data['moved'] = True

    def _dispatch_slot(self, data: Dict):
        """Translate one slot's accumulated changes into tracker transitions."""
        if data['tracking_id'] is not None:
            event = PointerEvent(data['tracking_id'], data['x'], data['y'])
            surface = self._get_surface()
            on_surface = surface.contains(surface.to_local(event.client_x, event.client_y))

            # Contacts that land off the surface never start a gesture
            if data['placed']:
                if on_surface:
                    self.tracker.pointer_down(event)
            elif data['moved']:
                if on_surface:
                    self.tracker.pointer_move(event)
                else:
                    self._handle_completed(self.tracker.pointer_leave(event))

            if data['lifted']:
                self._handle_completed(self.tracker.pointer_up(event))
                data['tracking_id'] = None

        data['placed'] = data['moved'] = data['lifted'] = False

    def _handle_completed(self, gesture: Optional[GestureData]):
        """Convert a completed gesture into playback parameters."""
        if gesture is None:
            return

        self.logger.log_gesture(gesture)

        surface = self._get_surface()
        params = build_playback_params(
            gesture,
            self.reference_duration,
            surface.width,
            surface.height,
            self.sample_count
        )

        if self.on_playback is not None:
            self.on_playback(params)
        else:
            self.logger.log_playback(params)
