import io
import unittest
from contextlib import redirect_stdout
from types import SimpleNamespace

from evdev import ecodes

from gesture_pitch.core.listener import GestureListener
from gesture_pitch.utils.gesture_utils import Point, SurfaceGeometry


class FakeDeviceManager:
    def __init__(self, width=1000, height=800, device=None):
        self.device = device
        self.width = width
        self.height = height

    def find_device(self):
        return self.device

    def get_screen_geometry(self):
        return SurfaceGeometry(self.width, self.height)


class RecordingLogger:
    def __init__(self):
        self.gestures = []
        self.playbacks = []
        self.closed = False

    def log_gesture(self, gesture):
        self.gestures.append(gesture)

    def log_playback(self, params):
        self.playbacks.append(params)

    def close(self):
        self.closed = True


def abs_event(code, value):
    return SimpleNamespace(type=ecodes.EV_ABS, code=code, value=value)


def syn():
    return SimpleNamespace(type=ecodes.EV_SYN, code=ecodes.SYN_REPORT, value=0)


def touch(slot, tracking_id, x, y):
    return [
        abs_event(ecodes.ABS_MT_SLOT, slot),
        abs_event(ecodes.ABS_MT_TRACKING_ID, tracking_id),
        abs_event(ecodes.ABS_MT_POSITION_X, x),
        abs_event(ecodes.ABS_MT_POSITION_Y, y),
        syn(),
    ]


def move(slot, x, y):
    return [
        abs_event(ecodes.ABS_MT_SLOT, slot),
        abs_event(ecodes.ABS_MT_POSITION_X, x),
        abs_event(ecodes.ABS_MT_POSITION_Y, y),
        syn(),
    ]


def lift(slot):
    return [
        abs_event(ecodes.ABS_MT_SLOT, slot),
        abs_event(ecodes.ABS_MT_TRACKING_ID, -1),
        syn(),
    ]


class TestGestureListener(unittest.TestCase):
    def setUp(self):
        self.playbacks = []
        self.logger = RecordingLogger()
        self.listener = GestureListener(
            reference_duration=5.0,
            on_playback=self.playbacks.append,
            device_manager=FakeDeviceManager(),
            gesture_logger=self.logger,
            sample_count=10,
        )

    def test_single_contact_produces_playback(self):
        self.listener._process_event_batch(touch(0, 7, 100, 100))
        self.listener._process_event_batch(move(0, 100, 500))
        self.listener._process_event_batch(lift(0))

        self.assertEqual(len(self.logger.gestures), 1)
        gesture = self.logger.gestures[0]
        self.assertEqual(gesture.start_point, Point(100, 100))
        self.assertEqual(gesture.end_point, Point(100, 500))

        self.assertEqual(len(self.playbacks), 1)
        params = self.playbacks[0]
        self.assertAlmostEqual(params.duration_rate, 0.8)
        self.assertAlmostEqual(params.duration, 4.0)
        self.assertEqual(len(params.pitch_curve), 10)
        self.assertAlmostEqual(params.pitch_curve[0], 4.5)
        self.assertAlmostEqual(params.pitch_curve[-1], 2.5)
        self.assertFalse(self.listener.tracker.is_drawing)

    def test_second_contact_is_ignored(self):
        self.listener._process_event_batch(touch(0, 7, 100, 100))
        self.listener._process_event_batch(touch(1, 8, 600, 600))
        self.listener._process_event_batch(move(1, 650, 650))
        self.listener._process_event_batch(lift(1))

        self.assertEqual(self.playbacks, [])
        self.assertEqual(self.listener.tracker.active_pointer_id, 7)
        self.assertEqual(self.listener.tracker.current_path, (Point(100, 100),))

        self.listener._process_event_batch(lift(0))
        self.assertEqual(len(self.playbacks), 1)

    def test_leaving_surface_completes_at_edge(self):
        self.listener.surface = SurfaceGeometry(400, 300, origin_x=100, origin_y=100)
        self.listener._process_event_batch(touch(0, 3, 200, 200))
        self.listener._process_event_batch(move(0, 600, 250))

        self.assertEqual(len(self.logger.gestures), 1)
        self.assertEqual(self.logger.gestures[0].end_point, Point(400, 150))
        self.assertFalse(self.listener.tracker.is_drawing)

        self.listener._process_event_batch(lift(0))
        self.assertEqual(len(self.playbacks), 1)

    def test_contact_off_surface_does_not_start_gesture(self):
        self.listener.surface = SurfaceGeometry(400, 300, origin_x=100, origin_y=100)
        self.listener._process_event_batch(touch(0, 3, 20, 20))
        self.assertFalse(self.listener.tracker.is_drawing)

    def test_playback_logged_without_callback(self):
        listener = GestureListener(
            device_manager=FakeDeviceManager(),
            gesture_logger=self.logger,
        )
        listener._process_event_batch(touch(0, 1, 10, 10))
        listener._process_event_batch(lift(0))
        self.assertEqual(len(self.logger.playbacks), 1)
        self.assertEqual(len(self.logger.playbacks[0].pitch_curve), 100)

    def test_start_without_device_returns_false(self):
        with redirect_stdout(io.StringIO()):
            self.assertFalse(self.listener.start())
        self.assertFalse(self.listener.running)

    def test_stop_closes_logger(self):
        self.listener.stop()
        self.assertTrue(self.logger.closed)


if __name__ == "__main__":
    unittest.main()
