"""Interactive state: up to three points and the circle drawn through them."""

from __future__ import annotations

import random

from .geometry import circle_through, is_in_circle
from .raster import BLACK, WHITE, GrayImage

MIN_RADIUS = 1
MAX_RADIUS = 50


class CollinearPointsError(ValueError):
    """The three points lie on a line, so no circle passes through them."""


def _clamp(low: int, high: int, value: int) -> int:
    return max(low, min(high, value))


class CircleEditor:
    """Places three points on an image and draws the circle through them."""

    def __init__(
        self,
        width: int = 640,
        height: int = 480,
        point_radius: int = 10,
        line_thickness: int = 3,
    ) -> None:
        self.image = GrayImage(width, height)
        self.point_radius = point_radius
        self.line_thickness = line_thickness
        self._points: list[tuple[int, int]] = []
        self._dragging: int | None = None

    @property
    def points(self) -> list[tuple[int, int]]:
        """The placed points, in placement order."""
        return list(self._points)

    @property
    def dragging(self) -> int | None:
        """Index of the point being dragged, if any."""
        return self._dragging

    def press(self, x: int, y: int) -> None:
        """Handle a button press: grab a nearby point or place a new one."""
        if not self.image.contains(x, y):
            return
        for index, (px, py) in enumerate(self._points):
            if is_in_circle(x, y, px, py, self.point_radius * 2):
                self._dragging = index
                return
        if len(self._points) < 3:
            self._points.append((x, y))
            self.image.draw_disc(x, y, self.point_radius, BLACK)
            if len(self._points) == 3:
                self._draw_circle_across()
                self._draw_points()

    def drag(self, x: int, y: int) -> None:
        """Move the grabbed point to (x, y) and repaint."""
        if self._dragging is None:
            return
        old_x, old_y = self._points[self._dragging]
        self.image.draw_disc(old_x, old_y, self.point_radius, WHITE)
        self.image.draw_disc(x, y, self.point_radius, BLACK)
        self._points[self._dragging] = (x, y)
        if len(self._points) == 3:
            self.image.fill(WHITE)
            self._draw_circle_across()
            self._draw_points()

    def release(self) -> None:
        """Stop dragging."""
        self._dragging = None

    def reset(self) -> None:
        """Remove every point and clear the image."""
        self._points.clear()
        self._dragging = None
        self.image.fill(WHITE)

    def set_radius(self, radius: int) -> tuple[int, int]:
        """Set the point radius (1..50); return the effective radius and thickness."""
        self.point_radius = _clamp(MIN_RADIUS, MAX_RADIUS, radius)
        self.line_thickness = _clamp(1, self.point_radius, self.line_thickness)
        self.redraw()
        return self.point_radius, self.line_thickness

    def set_thickness(self, thickness: int) -> int:
        """Set the line thickness (1..point radius); return the effective value."""
        self.line_thickness = _clamp(1, self.point_radius, thickness)
        self.redraw()
        return self.line_thickness

    def randomize(self, rng: random.Random) -> None:
        """Move every point to a random position within the image bounds."""
        self._points = [
            (rng.randint(0, self.image.width), rng.randint(0, self.image.height))
            for _ in self._points
        ]
        self.redraw()

    def redraw(self) -> None:
        """Repaint the image from the current points and settings."""
        self.image.fill(WHITE)
        if len(self._points) == 3:
            self._draw_circle_across()
        self._draw_points()

    def _draw_points(self) -> None:
        for px, py in self._points:
            self.image.draw_disc(px, py, self.point_radius, BLACK)

    def _draw_circle_across(self) -> None:
        if len(self._points) < 3:
            return
        circle = circle_through(*self._points)
        limit = max(self.image.width, self.image.height) * 10
        if circle is None or circle.radius > limit:
            self.reset()
            raise CollinearPointsError("the three points are collinear; no circle can be drawn")

        radius = int(circle.radius + 0.5)
        cx = int(circle.cx + 0.5)
        cy = int(circle.cy + 0.5)
        half = self.line_thickness // 2
        inner = radius - half if self.line_thickness % 2 == 0 else radius - half - 1

        self.image.draw_disc(cx, cy, radius + half, BLACK)
        self.image.draw_disc(cx, cy, inner, WHITE)