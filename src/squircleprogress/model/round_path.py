"""
Rounded Path Generator
======================
Builds the closed outline of a rectangle whose corners are smooth,
squircle-like curves instead of circular arcs.

Every corner is described once, in its own frame:
    a = distance back along the edge that leads into the corner,
    b = distance along the edge that leaves the corner,
both expressed as multiples of the corner radius. The same profile is mapped
onto the four corners by turning the frame, so the outline is symmetric under
90 degree rotation.

The profile comes from a tuned three-segment corner. Its symmetric middle
segment is split at the diagonal, giving two mirrored cubic segments per
corner which start and end on the straight edges with horizontal/vertical
tangents.

A corner never reaches past the midline of its side: every coordinate is
clamped toward the midline on its own axis. Once the radius gets large,
neighbouring corners meet on the midlines and the outline flattens instead
of overlapping itself.

Exports:
    generate: Rect (or bounds tuple) + radius -> Outline.
    generate_from_bounds: (x0, y0, x1, y1) + radius -> Outline.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from squircleprogress.model.geometry_primitives import Outline, PathCommand, PathVerb, Point, Rect

# Where the corner starts on each straight edge, relative to the radius
RADIUS_OFFSET_RATIO: float = 128 / 100
# Control point next to each end of the corner, sitting on the straight edge
END_POINT_RATIO: float = 83 / 100
# On-curve knots of the tuned profile, (a, b) for the half next to the incoming edge
PROFILE_OUTER_KNOT: Tuple[float, float] = (51 / 100, 13 / 100)
PROFILE_INNER_KNOT: Tuple[float, float] = (34 / 100, 22 / 100)
# Lead-in knot of the tuned profile, no longer an end point: the merged first segment passes near it
PROFILE_LEAD_IN_KNOT: Tuple[float, float] = (67 / 100, 4 / 100)

Bounds = Tuple[float, float, float, float]


def coerce_at_least(value: float, minimum: float) -> float:
    """Ensure value is not smaller than minimum."""
    if value < minimum:
        return minimum
    return value


def coerce_at_most(value: float, maximum: float) -> float:
    """Ensure value is not greater than maximum."""
    if value > maximum:
        return maximum
    return value


def _corner_profile() -> Tuple[Tuple[float, float], ...]:
    """
    Returns the (a, b) ratios of one corner: the curve start followed by the
    (control1, control2, end) triples of its two cubic segments.
    """
    outer_a, outer_b = PROFILE_OUTER_KNOT
    inner_a, inner_b = PROFILE_INNER_KNOT

    # Midpoint of the tuned middle segment, which lies on the diagonal a == b
    joint = (outer_a + 3.0 * inner_a + 3.0 * inner_b + outer_b) / 8.0
    # Handle on the diagonal tangent through the joint, level with the outer knot
    handle = (outer_a, 2.0 * joint - outer_a)

    return (
        (RADIUS_OFFSET_RATIO, 0.0),
        (END_POINT_RATIO, 0.0), handle, (joint, joint),
        (handle[1], handle[0]), (0.0, END_POINT_RATIO), (0.0, RADIUS_OFFSET_RATIO),
    )


CORNER_PROFILE: Tuple[Tuple[float, float], ...] = _corner_profile()


@dataclass(frozen=True)
class _CornerFrame:
    """Orientation of one corner in clockwise traversal order."""
    name: str
    incoming: Tuple[float, float]  # unit direction of travel into the corner
    outgoing: Tuple[float, float]  # unit direction of travel out of the corner
    on_right: bool
    on_bottom: bool

    def place(self, rect: Rect, radius: float, a: float, b: float) -> Point:
        corner_x = rect.right if self.on_right else rect.left
        corner_y = rect.bottom if self.on_bottom else rect.top

        x = corner_x + radius * (b * self.outgoing[0] - a * self.incoming[0])
        y = corner_y + radius * (b * self.outgoing[1] - a * self.incoming[1])

        # Keep the corner in its own quadrant
        if self.on_right:
            x = coerce_at_least(x, rect.center_x)
        else:
            x = coerce_at_most(x, rect.center_x)
        if self.on_bottom:
            y = coerce_at_least(y, rect.center_y)
        else:
            y = coerce_at_most(y, rect.center_y)

        return Point(x, y)


# Clockwise on a y-down surface, starting after the top edge
_CORNERS: Tuple[_CornerFrame, ...] = (
    _CornerFrame("top-right", incoming=(1.0, 0.0), outgoing=(0.0, 1.0), on_right=True, on_bottom=False),
    _CornerFrame("bottom-right", incoming=(0.0, 1.0), outgoing=(-1.0, 0.0), on_right=True, on_bottom=True),
    _CornerFrame("bottom-left", incoming=(-1.0, 0.0), outgoing=(0.0, -1.0), on_right=False, on_bottom=True),
    _CornerFrame("top-left", incoming=(0.0, -1.0), outgoing=(1.0, 0.0), on_right=False, on_bottom=False),
)


def generate(rect: Union[Rect, Bounds], radius: float) -> Outline:
    """
    Generate the rounded outline of a rectangle.

    The path starts at the middle of the top edge and runs clockwise:
    top edge, top-right corner, right edge, bottom-right corner, bottom edge,
    bottom-left corner, left edge, top-left corner, close. It always holds
    1 move, 4 lines, 8 cubic segments and 1 close.

    Args:
        rect: The rectangle, or its (x0, y0, x1, y1) bounds.
        radius: Corner radius. Negative values are treated as 0.

    Returns:
        The closed outline. A zero-size rectangle gives a degenerate but
        well-formed outline.
    """
    if not isinstance(rect, Rect):
        rect = Rect.from_bounds(*rect)

    radius = max(radius, 0.0)
    start, *segments = CORNER_PROFILE

    commands: list[PathCommand] = [
        PathCommand(PathVerb.MOVE, (Point(rect.center_x, rect.top),)),
    ]
    for frame in _CORNERS:
        commands.append(PathCommand(PathVerb.LINE, (frame.place(rect, radius, *start),)))
        for i in range(0, len(segments), 3):
            commands.append(PathCommand(
                PathVerb.CUBIC,
                tuple(frame.place(rect, radius, a, b) for a, b in segments[i:i + 3]),
            ))
    commands.append(PathCommand(PathVerb.CLOSE))

    return Outline(tuple(commands))


def generate_from_bounds(x0: float, y0: float, x1: float, y1: float, radius: float) -> Outline:
    """Same as `generate`, for a rectangle given by two opposite corners."""
    return generate(Rect.from_bounds(x0, y0, x1, y1), radius)
