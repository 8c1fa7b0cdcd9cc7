"""
Single-pointer gesture tracking for a drawing surface.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Hashable, Optional, Tuple, Union

from ..config.settings import PlaybackConfig
from ..utils.gesture_utils import (
    Point, SurfaceGeometry, GeometryUtils, calculate_path_metrics
)

logger = logging.getLogger(__name__)

GeometryProvider = Union[SurfaceGeometry, Callable[[], SurfaceGeometry]]


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event in client coordinates."""
    pointer_id: Hashable
    client_x: float
    client_y: float


@dataclass(frozen=True)
class GestureData:
    """Finalized record of one completed gesture."""
    start_point: Point
    end_point: Point
    path: Tuple[Point, ...]
    distance: float
    path_length: float
    cumulative_distances: Tuple[float, ...]


@dataclass(frozen=True)
class GestureParams:
    """Straight-line parameters between two points of a gesture."""
    distance: float
    is_rightward: bool
    normalized_y: float


@dataclass(frozen=True)
class Idle:
    """No pointer is active."""


@dataclass
class Drawing:
    """A pointer is active and owns the path buffer."""
    pointer_id: Hashable
    path: list


class GestureTracker:
    """
    Tracks one active pointer from down to up/leave and finalizes its path.

    Events from any pointer other than the active one are ignored, as are
    moves and completions that arrive while idle. Completion returns a
    GestureData; every ignored event returns None.
    """

    def __init__(self, geometry: GeometryProvider, renderer=None):
        """
        Initialize the tracker.

        Args:
            geometry: SurfaceGeometry, or a callable returning the current one
            renderer: Optional object with draw_marker(point),
                      draw_segment(start, end) and clear()
        """
        self._geometry = geometry
        self.renderer = renderer
        self.state = Idle()

    @property
    def geometry(self) -> SurfaceGeometry:
        if callable(self._geometry):
            return self._geometry()
        return self._geometry

    @property
    def is_drawing(self) -> bool:
        return isinstance(self.state, Drawing)

    @property
    def active_pointer_id(self) -> Optional[Hashable]:
        if isinstance(self.state, Drawing):
            return self.state.pointer_id
        return None

    @property
    def current_path(self) -> Tuple[Point, ...]:
        if isinstance(self.state, Drawing):
            return tuple(self.state.path)
        return ()

    def get_surface_point(self, client_x: float, client_y: float) -> Point:
        """Convert client coordinates to surface-local coordinates."""
        return self.geometry.to_local(client_x, client_y)

    def pointer_down(self, event: PointerEvent) -> None:
        """Start a gesture unless another pointer is already active."""
        if isinstance(self.state, Drawing):
            logger.debug(f"Ignoring pointer {event.pointer_id} down: "
                         f"pointer {self.state.pointer_id} is active")
            return

        point = self.get_surface_point(event.client_x, event.client_y)
        self.state = Drawing(event.pointer_id, [point])

        if self.renderer is not None:
            self.renderer.draw_marker(point)

    def pointer_move(self, event: PointerEvent) -> None:
        """Append a sample for the active pointer."""
        if not self._is_active(event):
            return

        point = self.get_surface_point(event.client_x, event.client_y)
        previous = self.state.path[-1]
        self.state.path.append(point)

        if self.renderer is not None:
            self.renderer.draw_segment(previous, point)

    def pointer_up(self, event: PointerEvent) -> Optional[GestureData]:
        """Finish the gesture at the release point."""
        if not self._is_active(event):
            return None

        end_point = self.get_surface_point(event.client_x, event.client_y)
        return self._finalize(end_point)

    def pointer_leave(self, event: PointerEvent) -> Optional[GestureData]:
        """Finish the gesture at the surface boundary nearest the exit point."""
        if not self._is_active(event):
            return None

        geometry = self.geometry
        raw_point = geometry.to_local(event.client_x, event.client_y)
        return self._finalize(geometry.clamp(raw_point))

    def clear(self) -> None:
        """Reset to idle and discard any in-progress path."""
        self.state = Idle()
        if self.renderer is not None:
            self.renderer.clear()

    def _is_active(self, event: PointerEvent) -> bool:
        if not isinstance(self.state, Drawing):
            return False
        if event.pointer_id != self.state.pointer_id:
            logger.debug(f"Ignoring event from inactive pointer {event.pointer_id}")
            return False
        return True

    def _finalize(self, end_point: Point) -> GestureData:
        path = tuple(self.state.path) + (end_point,)
        start_point = path[0]
        metrics = calculate_path_metrics(path)

        gesture = GestureData(
            start_point=start_point,
            end_point=end_point,
            path=path,
            distance=GeometryUtils.calculate_distance(start_point, end_point),
            path_length=metrics.path_length,
            cumulative_distances=metrics.cumulative_distances
        )

        self.state = Idle()
        logger.debug(f"Gesture completed: {len(path)} points, "
                     f"path length {gesture.path_length:.1f}px")
        return gesture


def calculate_gesture_params(start: Point, end: Point, surface_height: float,
                             default_height: float = PlaybackConfig.DEFAULT_SURFACE_HEIGHT) -> GestureParams:
    """
    Calculate straight-line gesture parameters between two points.

    normalized_y maps the start point's height to -1 (top) .. 1 (bottom),
    measured from the vertical center of the surface.
    """
    if surface_height <= 0:
        surface_height = default_height

    dx = end.x - start.x
    center_y = surface_height / 2

    return GestureParams(
        distance=GeometryUtils.calculate_distance(start, end),
        is_rightward=dx >= 0,
        normalized_y=(start.y - center_y) / center_y
    )
