from __future__ import annotations

from typing import Optional, Protocol

from squircleprogress.model import round_path
from squircleprogress.model.geometry_primitives import Outline, Rect


class ClipShapeProvider(Protocol):
    """Anything that can tell a host which outline to clip its drawing to."""
    def compute_clip_outline(self, rect: Rect) -> Outline: ...


class RoundClipProvider:
    """
    Clips to the rounded outline of the whole track.
    A provider is bound to one radius; the outline is kept until the rect changes.
    """
    def __init__(self, radius: float) -> None:
        self.radius = max(radius, 0.0)
        self._last_rect: Optional[Rect] = None
        self._last_outline: Optional[Outline] = None

    def compute_clip_outline(self, rect: Rect) -> Outline:
        if self._last_outline is None or rect != self._last_rect:
            self._last_outline = round_path.generate(rect, self.radius)
            self._last_rect = rect
        return self._last_outline
