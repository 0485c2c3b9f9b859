"""
Geometric Primitives for outline generation.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point in the 2D drawing plane (y grows downwards)."""
    x: float
    y: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class Rect:
    """
    An axis-aligned rectangle given by its top-left corner and size.
    Zero width or height is allowed.
    """
    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_bounds(cls, x0: float, y0: float, x1: float, y1: float) -> Rect:
        """Build a rectangle from two opposite corners."""
        return cls(
            left=min(x0, x1),
            top=min(y0, y1),
            width=abs(x1 - x0),
            height=abs(y1 - y0),
        )

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.top + self.height / 2.0

    def contains(self, point: Point, eps: float = 1e-9) -> bool:
        return (self.left - eps <= point.x <= self.right + eps
                and self.top - eps <= point.y <= self.bottom + eps)


class PathVerb(StrEnum):
    MOVE = "move"
    LINE = "line"
    CUBIC = "cubic"
    CLOSE = "close"


@dataclass(frozen=True)
class PathCommand:
    """
    One drawing command. MOVE and LINE carry one point, CUBIC carries
    (control1, control2, end) and CLOSE carries none.
    """
    verb: PathVerb
    points: Tuple[Point, ...] = ()

    @property
    def end(self) -> Point | None:
        return self.points[-1] if self.points else None


@dataclass(frozen=True)
class Outline:
    """
    A single closed contour made of path commands.
    Instances are never mutated once built.
    """
    commands: Tuple[PathCommand, ...]

    @property
    def start_point(self) -> Point:
        return self.commands[0].points[0]

    @property
    def last_point(self) -> Point:
        """The last explicit point, i.e. where CLOSE draws back from."""
        for command in reversed(self.commands):
            if command.end is not None:
                return command.end
        raise ValueError("Outline has no points.")

    @property
    def is_closed(self) -> bool:
        return (bool(self.commands)
                and self.commands[0].verb == PathVerb.MOVE
                and self.commands[-1].verb == PathVerb.CLOSE)

    def verb_counts(self) -> Dict[PathVerb, int]:
        counts = {verb: 0 for verb in PathVerb}
        for command in self.commands:
            counts[command.verb] += 1
        return counts

    def points(self) -> npt.NDArray[np.float64]:
        """All command coordinates (controls included) as an (N, 2) array."""
        pts = [p.to_array() for command in self.commands for p in command.points]
        if not pts:
            return np.empty((0, 2))
        return np.vstack(pts)

    def bounds(self) -> Rect:
        """Bounding box of every command coordinate."""
        pts = self.points()
        x0, y0 = pts.min(axis=0)
        x1, y1 = pts.max(axis=0)
        return Rect.from_bounds(float(x0), float(y0), float(x1), float(y1))

    def discretize(self, segments_per_curve: int = 8) -> npt.NDArray[np.float64]:
        """
        Flatten the outline into a closed (N, 2) polyline.

        Lines contribute their end point, cubic curves are sampled at
        `segments_per_curve` evenly spaced parameters. The ring is closed by
        repeating the first point.

        Args:
            segments_per_curve: Number of straight pieces per cubic segment.

        Returns:
            Array of shape (n, 2) containing the (x, y) coordinates.
        """
        segments_per_curve = max(1, segments_per_curve)
        t = np.linspace(0.0, 1.0, segments_per_curve + 1)[1:, None]

        rings: list[npt.NDArray[np.float64]] = []
        current = self.start_point.to_array()
        for command in self.commands:
            if command.verb in (PathVerb.MOVE, PathVerb.LINE):
                current = command.points[0].to_array()
                rings.append(current[None, :])
            elif command.verb == PathVerb.CUBIC:
                c1, c2, end = (p.to_array() for p in command.points)
                mt = 1.0 - t
                samples = (mt ** 3 * current + 3 * mt ** 2 * t * c1
                           + 3 * mt * t ** 2 * c2 + t ** 3 * end)
                rings.append(samples)
                current = end

        pts = np.vstack(rings)
        # close the ring
        if not np.allclose(pts[0], pts[-1]):
            pts = np.vstack((pts, pts[0]))

        return pts

    def signed_area(self, segments_per_curve: int = 16) -> float:
        """
        Shoelace area of the flattened outline. Positive when the contour runs
        clockwise on a y-down drawing surface.
        """
        pts = self.discretize(segments_per_curve)
        x, y = pts[:, 0], pts[:, 1]
        return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))
