"""
Progress Renderer
=================
Turns a ProgressState into the outlines a host has to fill on each frame.

Why is this file needed?
------------------------
1. It is the only place that knows the drawing order: track first, then the
   determinate fill or the indeterminate sweep.
2. It advances the sweep position itself and reports, through the returned
   frame, whether another frame is needed. Hosts decide how to schedule it.
3. It owns the clip provider, which is only replaced when the radius changes.
"""
from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple, Optional, Tuple

from squircleprogress.config import SWEEP_WIDTH_DIVISOR, ProgressBarConfig
from squircleprogress.model import round_path
from squircleprogress.model.clip import ClipShapeProvider, RoundClipProvider
from squircleprogress.model.geometry_primitives import Outline, Rect
from squircleprogress.model.state import Color, Mode, ProgressState

logger = logging.getLogger(__name__)

Layer = Tuple[Outline, Color]


class RenderFrame(NamedTuple):
    """Layers in paint order and whether the host should draw again."""
    layers: List[Layer]
    needs_next_frame: bool


class ProgressRenderer:
    """
    Holds the state of one horizontal progress bar and renders it.
    Setters only record the change and mark the state dirty.
    """
    def __init__(self, state: Optional[ProgressState] = None) -> None:
        self.state = state or ProgressState()
        self._listeners: list[Callable[[], None]] = []
        self.clip_provider: ClipShapeProvider = RoundClipProvider(self.state.radius)

    @classmethod
    def from_config(cls, config: ProgressBarConfig) -> ProgressRenderer:
        state = ProgressState(
            mode=Mode.INDETERMINATE if config.indeterminate else Mode.DETERMINATE,
            progress=config.progress,
            sweep_rate=config.indeterminate_rate,
            sweep_width=config.indeterminate_width,
            track_color=config.background_color,
            fill_color=config.progress_color,
        )
        renderer = cls(state)
        renderer.set_radius(config.radius)
        return renderer

    # ------------------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------------------

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Register a callable invoked whenever a setter marks the state dirty."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _mark_dirty(self) -> None:
        self.state.dirty = True
        for callback in list(self._listeners):
            callback()

    # ------------------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------------------

    def set_progress(self, progress: int) -> None:
        self.state.progress = progress
        self._mark_dirty()

    def set_mode(self, mode: Mode | str) -> None:
        mode = Mode(mode)
        if mode != self.state.mode:
            logger.debug(f"Switching progress mode: {self.state.mode} -> {mode}")
        self.state.mode = mode
        self._mark_dirty()

    def set_indeterminate(self, indeterminate: bool) -> None:
        self.set_mode(Mode.INDETERMINATE if indeterminate else Mode.DETERMINATE)

    def set_sweep_rate(self, rate: int) -> None:
        self.state.sweep_rate = rate
        self._mark_dirty()

    def set_sweep_width(self, width: float) -> None:
        """Set the sweep width. A negative width is derived from the track on the next tick."""
        self.state.sweep_width = width
        self._mark_dirty()

    def set_radius(self, radius: float) -> None:
        """Set the corner radius. Setting the current value again does nothing."""
        if radius == self.state.radius:
            return

        logger.debug(f"Corner radius changed: {self.state.radius} -> {radius}")
        self.clip_provider = RoundClipProvider(radius)
        self.state.radius = radius
        self._mark_dirty()

    def set_colors(self, track: Color, fill: Color) -> None:
        self.state.track_color = track
        self.state.fill_color = fill
        self._mark_dirty()

    def set_track_color(self, color: Color) -> None:
        self.set_colors(color, self.state.fill_color)

    def set_fill_color(self, color: Color) -> None:
        self.set_colors(self.state.track_color, color)

    # ------------------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------------------

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def indeterminate(self) -> bool:
        return self.state.indeterminate

    @property
    def progress(self) -> int:
        return self.state.progress

    @property
    def radius(self) -> float:
        return self.state.radius

    @property
    def sweep_rate(self) -> int:
        return self.state.sweep_rate

    @property
    def sweep_width(self) -> float:
        return self.state.sweep_width

    @property
    def sweep_offset(self) -> Optional[float]:
        return self.state.sweep_offset

    @property
    def track_color(self) -> Color:
        return self.state.track_color

    @property
    def fill_color(self) -> Color:
        return self.state.fill_color

    @property
    def dirty(self) -> bool:
        return self.state.dirty

    # ------------------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------------------

    def clip_outline(self, rect: Rect) -> Outline:
        """Outline the host should clip to; recomputed only on radius or size change."""
        return self.clip_provider.compute_clip_outline(rect)

    def render_tick(self, rect: Rect) -> RenderFrame:
        """
        Produce the layers for one frame.

        Args:
            rect: The drawable region of the host.

        Returns:
            RenderFrame with the track layer followed by either the sweep or the
            fill layer, and True in `needs_next_frame` while indeterminate.
        """
        state = self.state
        layers: List[Layer] = [(round_path.generate(rect, state.radius), state.track_color)]

        if state.indeterminate:
            layers.append((self._sweep_outline(rect), state.fill_color))
            needs_next_frame = True
        else:
            layers.append((self._fill_outline(rect), state.fill_color))
            needs_next_frame = False

        state.dirty = False
        return RenderFrame(layers, needs_next_frame)

    def _sweep_outline(self, rect: Rect) -> Outline:
        state = self.state

        if state.sweep_width < 0:
            state.sweep_width = rect.width / SWEEP_WIDTH_DIVISOR

        # Start fully off the left edge, again after leaving on the right
        if state.sweep_offset is None or state.sweep_offset > rect.width:
            if state.sweep_offset is not None:
                logger.debug("Sweep left the track, restarting on the left.")
            state.sweep_offset = -rect.width

        outline = round_path.generate(
            Rect(rect.left + state.sweep_offset, rect.top, state.sweep_width, rect.height),
            state.radius,
        )
        state.sweep_offset += state.sweep_rate
        return outline

    def _fill_outline(self, rect: Rect) -> Outline:
        # Out-of-range progress is kept in the state but never drawn outside the track
        width = rect.width * self.state.progress / 100
        width = min(max(width, 0.0), rect.width)
        return round_path.generate(Rect(rect.left, rect.top, width, rect.height), self.state.radius)
