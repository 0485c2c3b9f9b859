from __future__ import annotations

from PySide6.QtCore import QPointF
from PySide6.QtGui import QColor, QPainterPath

from squircleprogress.model.geometry_primitives import Outline, PathVerb, Rect
from squircleprogress.model.state import Color


def to_qpainter_path(outline: Outline) -> QPainterPath:
    """Replay the outline commands on a QPainterPath."""
    path = QPainterPath()
    for command in outline.commands:
        pts = [QPointF(p.x, p.y) for p in command.points]
        if command.verb == PathVerb.MOVE:
            path.moveTo(pts[0])
        elif command.verb == PathVerb.LINE:
            path.lineTo(pts[0])
        elif command.verb == PathVerb.CUBIC:
            path.cubicTo(pts[0], pts[1], pts[2])
        elif command.verb == PathVerb.CLOSE:
            path.closeSubpath()
        else:
            raise ValueError(f"Unsupported path verb: {command.verb!r}")
    return path


def to_qcolor(color: Color) -> QColor:
    if isinstance(color, QColor):
        return color
    if isinstance(color, tuple):
        return QColor(*color)
    return QColor(color)


def rect_from_widget(width: int, height: int) -> Rect:
    return Rect(0.0, 0.0, float(width), float(height))
