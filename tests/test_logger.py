import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from gesture_pitch.gestures.gesture_tracker import GestureTracker, PointerEvent
from gesture_pitch.mapping.playback_mapper import build_playback_params
from gesture_pitch.utils.gesture_utils import SurfaceGeometry
from gesture_pitch.utils.logger import GestureLogger


class TestGestureLogger(unittest.TestCase):
    def setUp(self):
        tracker = GestureTracker(SurfaceGeometry(800, 600))
        tracker.pointer_down(PointerEvent(1, 0, 0))
        self.gesture = tracker.pointer_up(PointerEvent(1, 0, 600))
        self.params = build_playback_params(self.gesture, 2.0, 800, 600, sample_count=5)

    def test_console_output(self):
        gesture_logger = GestureLogger()
        out = io.StringIO()
        with redirect_stdout(out):
            gesture_logger.log_gesture(self.gesture)
            gesture_logger.log_playback(self.params)
        gesture_logger.close()

        text = out.getvalue()
        self.assertIn("GESTURE: 2 point(s)", text)
        self.assertIn("Path length: 600.0px", text)
        self.assertIn("duration rate 1.50x (3.00s)", text)
        self.assertIn("start 5.00, end 1.00", text)

    def test_debug_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "gestures.log")
            gesture_logger = GestureLogger(path)
            with redirect_stdout(io.StringIO()):
                gesture_logger.log_gesture(self.gesture)
                gesture_logger.log_playback(self.params)
            gesture_logger.close()

            with open(path) as f:
                content = f.read()
        self.assertIn("Debug logging started", content)
        self.assertIn("path_length=600.0", content)
        self.assertIn("duration_rate=1.5", content)

    def test_debug_file_keeps_exact_coordinates(self):
        tracker = GestureTracker(SurfaceGeometry(800, 600))
        tracker.pointer_down(PointerEvent(1, 10.125, 20.0625))
        gesture = tracker.pointer_up(PointerEvent(1, 30.5, 40.75))

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "gestures.log")
            gesture_logger = GestureLogger(path)
            with redirect_stdout(io.StringIO()):
                gesture_logger.log_gesture(gesture)
            gesture_logger.close()

            with open(path) as f:
                content = f.read()
        self.assertIn("Point(x=10.125, y=20.0625)", content)
        self.assertIn("Point(x=30.5, y=40.75)", content)

    def test_unwritable_debug_file_is_reported(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertLogs("gesture_pitch.utils.logger", level="WARNING"):
                gesture_logger = GestureLogger(os.path.join(tmp, "missing", "x.log"))
        self.assertIsNone(gesture_logger.debug_file)


if __name__ == "__main__":
    unittest.main()
